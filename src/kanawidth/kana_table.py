"""Kana Table — full-width ⇄ half-width Kana mappings.

``FULL_TO_HALF`` maps a full-width codepoint to its half-width spelling, which
is one codepoint or a base plus a combining voiced (ﾞ) / semi-voiced (ﾟ) mark.

``HALF_TO_FULL`` maps every codepoint of the half-width block U+FF61–U+FF9F to
a single full-width codepoint. Marked pairs are composed with the voicing
tables below: the full-width voiced form is the unmarked form + 1, the
semi-voiced form is the unmarked form + 2.

ヷ ヸ ヹ ヺ have no Shift_JIS counterpart. They decompose on the way to
half-width but are never recomposed on the way back: ``ｦﾞ`` becomes ``ヲ゛``.

All tables are module constants and are never mutated.
"""

from __future__ import annotations

from types import MappingProxyType

VOICED_MARK = 0xFF9E
SEMI_VOICED_MARK = 0xFF9F

HALF_KANA_START = 0xFF61
HALF_KANA_END = 0xFF9F  # inclusive

_FULL_TO_HALF: dict[int, str] = {
    0x3001: "､",  # 、 ､
    0x3002: "｡",  # 。 ｡
    0x300C: "｢",  # 「 ｢
    0x300D: "｣",  # 」 ｣
    0x309B: "ﾞ",  # ゛ ﾞ
    0x309C: "ﾟ",  # ゜ ﾟ
    0x30A1: "ｧ",  # ァ ｧ
    0x30A2: "ｱ",  # ア ｱ
    0x30A3: "ｨ",  # ィ ｨ
    0x30A4: "ｲ",  # イ ｲ
    0x30A5: "ｩ",  # ゥ ｩ
    0x30A6: "ｳ",  # ウ ｳ
    0x30A7: "ｪ",  # ェ ｪ
    0x30A8: "ｴ",  # エ ｴ
    0x30A9: "ｫ",  # ォ ｫ
    0x30AA: "ｵ",  # オ ｵ
    0x30AB: "ｶ",  # カ ｶ
    0x30AC: "ｶﾞ",  # ガ ｶﾞ
    0x30AD: "ｷ",  # キ ｷ
    0x30AE: "ｷﾞ",  # ギ ｷﾞ
    0x30AF: "ｸ",  # ク ｸ
    0x30B0: "ｸﾞ",  # グ ｸﾞ
    0x30B1: "ｹ",  # ケ ｹ
    0x30B2: "ｹﾞ",  # ゲ ｹﾞ
    0x30B3: "ｺ",  # コ ｺ
    0x30B4: "ｺﾞ",  # ゴ ｺﾞ
    0x30B5: "ｻ",  # サ ｻ
    0x30B6: "ｻﾞ",  # ザ ｻﾞ
    0x30B7: "ｼ",  # シ ｼ
    0x30B8: "ｼﾞ",  # ジ ｼﾞ
    0x30B9: "ｽ",  # ス ｽ
    0x30BA: "ｽﾞ",  # ズ ｽﾞ
    0x30BB: "ｾ",  # セ ｾ
    0x30BC: "ｾﾞ",  # ゼ ｾﾞ
    0x30BD: "ｿ",  # ソ ｿ
    0x30BE: "ｿﾞ",  # ゾ ｿﾞ
    0x30BF: "ﾀ",  # タ ﾀ
    0x30C0: "ﾀﾞ",  # ダ ﾀﾞ
    0x30C1: "ﾁ",  # チ ﾁ
    0x30C2: "ﾁﾞ",  # ヂ ﾁﾞ
    0x30C3: "ｯ",  # ッ ｯ
    0x30C4: "ﾂ",  # ツ ﾂ
    0x30C5: "ﾂﾞ",  # ヅ ﾂﾞ
    0x30C6: "ﾃ",  # テ ﾃ
    0x30C7: "ﾃﾞ",  # デ ﾃﾞ
    0x30C8: "ﾄ",  # ト ﾄ
    0x30C9: "ﾄﾞ",  # ド ﾄﾞ
    0x30CA: "ﾅ",  # ナ ﾅ
    0x30CB: "ﾆ",  # ニ ﾆ
    0x30CC: "ﾇ",  # ヌ ﾇ
    0x30CD: "ﾈ",  # ネ ﾈ
    0x30CE: "ﾉ",  # ノ ﾉ
    0x30CF: "ﾊ",  # ハ ﾊ
    0x30D0: "ﾊﾞ",  # バ ﾊﾞ
    0x30D1: "ﾊﾟ",  # パ ﾊﾟ
    0x30D2: "ﾋ",  # ヒ ﾋ
    0x30D3: "ﾋﾞ",  # ビ ﾋﾞ
    0x30D4: "ﾋﾟ",  # ピ ﾋﾟ
    0x30D5: "ﾌ",  # フ ﾌ
    0x30D6: "ﾌﾞ",  # ブ ﾌﾞ
    0x30D7: "ﾌﾟ",  # プ ﾌﾟ
    0x30D8: "ﾍ",  # ヘ ﾍ
    0x30D9: "ﾍﾞ",  # ベ ﾍﾞ
    0x30DA: "ﾍﾟ",  # ペ ﾍﾟ
    0x30DB: "ﾎ",  # ホ ﾎ
    0x30DC: "ﾎﾞ",  # ボ ﾎﾞ
    0x30DD: "ﾎﾟ",  # ポ ﾎﾟ
    0x30DE: "ﾏ",  # マ ﾏ
    0x30DF: "ﾐ",  # ミ ﾐ
    0x30E0: "ﾑ",  # ム ﾑ
    0x30E1: "ﾒ",  # メ ﾒ
    0x30E2: "ﾓ",  # モ ﾓ
    0x30E3: "ｬ",  # ャ ｬ
    0x30E4: "ﾔ",  # ヤ ﾔ
    0x30E5: "ｭ",  # ュ ｭ
    0x30E6: "ﾕ",  # ユ ﾕ
    0x30E7: "ｮ",  # ョ ｮ
    0x30E8: "ﾖ",  # ヨ ﾖ
    0x30E9: "ﾗ",  # ラ ﾗ
    0x30EA: "ﾘ",  # リ ﾘ
    0x30EB: "ﾙ",  # ル ﾙ
    0x30EC: "ﾚ",  # レ ﾚ
    0x30ED: "ﾛ",  # ロ ﾛ
    0x30EE: "ﾜ",  # ヮ ﾜ
    0x30EF: "ﾜ",  # ワ ﾜ
    0x30F0: "ｲ",  # ヰ ｲ
    0x30F1: "ｴ",  # ヱ ｴ
    0x30F2: "ｦ",  # ヲ ｦ
    0x30F3: "ﾝ",  # ン ﾝ
    0x30F4: "ｳﾞ",  # ヴ ｳﾞ
    0x30F5: "ｶ",  # ヵ ｶ
    0x30F6: "ｹ",  # ヶ ｹ
    0x30F7: "ﾜﾞ",  # ヷ ﾜﾞ
    0x30F8: "ｲﾞ",  # ヸ ｲﾞ
    0x30F9: "ｴﾞ",  # ヹ ｴﾞ
    0x30FA: "ｦﾞ",  # ヺ ｦﾞ
    0x30FB: "･",  # ・ ･
    0x30FC: "ｰ",  # ー ｰ
}

_HALF_TO_FULL: dict[int, int] = {
    0xFF61: 0x3002,  # ｡ 。
    0xFF62: 0x300C,  # ｢ 「
    0xFF63: 0x300D,  # ｣ 」
    0xFF64: 0x3001,  # ､ 、
    0xFF65: 0x30FB,  # ･ ・
    0xFF66: 0x30F2,  # ｦ ヲ
    0xFF67: 0x30A1,  # ｧ ァ
    0xFF68: 0x30A3,  # ｨ ィ
    0xFF69: 0x30A5,  # ｩ ゥ
    0xFF6A: 0x30A7,  # ｪ ェ
    0xFF6B: 0x30A9,  # ｫ ォ
    0xFF6C: 0x30E3,  # ｬ ャ
    0xFF6D: 0x30E5,  # ｭ ュ
    0xFF6E: 0x30E7,  # ｮ ョ
    0xFF6F: 0x30C3,  # ｯ ッ
    0xFF70: 0x30FC,  # ｰ ー
    0xFF71: 0x30A2,  # ｱ ア
    0xFF72: 0x30A4,  # ｲ イ
    0xFF73: 0x30A6,  # ｳ ウ
    0xFF74: 0x30A8,  # ｴ エ
    0xFF75: 0x30AA,  # ｵ オ
    0xFF76: 0x30AB,  # ｶ カ
    0xFF77: 0x30AD,  # ｷ キ
    0xFF78: 0x30AF,  # ｸ ク
    0xFF79: 0x30B1,  # ｹ ケ
    0xFF7A: 0x30B3,  # ｺ コ
    0xFF7B: 0x30B5,  # ｻ サ
    0xFF7C: 0x30B7,  # ｼ シ
    0xFF7D: 0x30B9,  # ｽ ス
    0xFF7E: 0x30BB,  # ｾ セ
    0xFF7F: 0x30BD,  # ｿ ソ
    0xFF80: 0x30BF,  # ﾀ タ
    0xFF81: 0x30C1,  # ﾁ チ
    0xFF82: 0x30C4,  # ﾂ ツ
    0xFF83: 0x30C6,  # ﾃ テ
    0xFF84: 0x30C8,  # ﾄ ト
    0xFF85: 0x30CA,  # ﾅ ナ
    0xFF86: 0x30CB,  # ﾆ ニ
    0xFF87: 0x30CC,  # ﾇ ヌ
    0xFF88: 0x30CD,  # ﾈ ネ
    0xFF89: 0x30CE,  # ﾉ ノ
    0xFF8A: 0x30CF,  # ﾊ ハ
    0xFF8B: 0x30D2,  # ﾋ ヒ
    0xFF8C: 0x30D5,  # ﾌ フ
    0xFF8D: 0x30D8,  # ﾍ ヘ
    0xFF8E: 0x30DB,  # ﾎ ホ
    0xFF8F: 0x30DE,  # ﾏ マ
    0xFF90: 0x30DF,  # ﾐ ミ
    0xFF91: 0x30E0,  # ﾑ ム
    0xFF92: 0x30E1,  # ﾒ メ
    0xFF93: 0x30E2,  # ﾓ モ
    0xFF94: 0x30E4,  # ﾔ ヤ
    0xFF95: 0x30E6,  # ﾕ ユ
    0xFF96: 0x30E8,  # ﾖ ヨ
    0xFF97: 0x30E9,  # ﾗ ラ
    0xFF98: 0x30EA,  # ﾘ リ
    0xFF99: 0x30EB,  # ﾙ ル
    0xFF9A: 0x30EC,  # ﾚ レ
    0xFF9B: 0x30ED,  # ﾛ ロ
    0xFF9C: 0x30EF,  # ﾜ ワ
    0xFF9D: 0x30F3,  # ﾝ ン
    0xFF9E: 0x309B,  # ﾞ ゛
    0xFF9F: 0x309C,  # ﾟ ゜
}

FULL_TO_HALF = MappingProxyType(_FULL_TO_HALF)
HALF_TO_FULL = MappingProxyType(_HALF_TO_FULL)

# ｶ–ﾄ (ガ–ド) and ﾊ–ﾎ (バ–ボ) take the voiced mark; ﾊ–ﾎ (パ–ポ) the semi-voiced one.
VOICED_BASES = frozenset(range(0xFF76, 0xFF85)) | frozenset(range(0xFF8A, 0xFF8F))
SEMI_VOICED_BASES = frozenset(range(0xFF8A, 0xFF8F))

# ｳﾞ is the one voiced pair outside the +1 rule.
SPECIAL_VOICED = MappingProxyType({0xFF73: 0x30F4})  # ｳﾞ → ヴ

# Full-width voiced forms with no half-width base of their own.
UNMAPPED_VOICED = frozenset({0x30F7, 0x30F8, 0x30F9, 0x30FA})  # ヷ ヸ ヹ ヺ


def compose_half(base: int, mark: int) -> int | None:
    """Return the full-width codepoint for ``base`` followed by ``mark``.

    Returns None when the pair does not compose, in which case both
    codepoints are mapped independently.
    """
    if mark == VOICED_MARK:
        if base in SPECIAL_VOICED:
            return SPECIAL_VOICED[base]
        if base in VOICED_BASES:
            return HALF_TO_FULL[base] + 1
    elif mark == SEMI_VOICED_MARK:
        if base in SEMI_VOICED_BASES:
            return HALF_TO_FULL[base] + 2
    return None

"""One-to-one codepoint shifts: Hiragana/Katakana, spaces, ASCII, letters, digits.

Each transform is a fixed ``str.translate`` table; none of them combine
characters, so they are order independent within a single call.
"""

from __future__ import annotations

_WIDTH_SHIFT = 0xFEE0
_KANA_SHIFT = 0x60

_IDEOGRAPHIC_SPACE = 0x3000


def _shift_table(ranges: list[tuple[int, int]], delta: int) -> dict[int, int]:
    table: dict[int, int] = {}
    for start, end in ranges:
        for cp in range(start, end + 1):
            table[cp] = cp + delta
    return table


_TO_HIRAGANA = _shift_table([(0x30A1, 0x30F6)], -_KANA_SHIFT)
_TO_KATAKANA = _shift_table([(0x3041, 0x3096)], _KANA_SHIFT)

_TO_HALF_SPACE = {_IDEOGRAPHIC_SPACE: 0x0020}
_TO_FULL_SPACE = {0x0020: _IDEOGRAPHIC_SPACE}

_TO_HALF_ASCII = _shift_table([(0xFF01, 0xFF5E)], -_WIDTH_SHIFT)
_TO_HALF_ASCII[_IDEOGRAPHIC_SPACE] = 0x0020
_TO_HALF_ASCII.update({cp: 0x0027 for cp in range(0x2018, 0x201C)})  # ‘ ’ ‚ ‛
_TO_HALF_ASCII.update({cp: 0x0022 for cp in range(0x201C, 0x2020)})  # “ ” „ ‟

_TO_FULL_ASCII = _shift_table([(0x0021, 0x007E)], _WIDTH_SHIFT)
_TO_FULL_ASCII[0x0020] = _IDEOGRAPHIC_SPACE
_TO_FULL_ASCII[0x0022] = 0x201D  # ”
_TO_FULL_ASCII[0x0027] = 0x2019  # ’

_TO_HALF_ALPHABET = _shift_table([(0xFF21, 0xFF3A), (0xFF41, 0xFF5A)], -_WIDTH_SHIFT)
_TO_FULL_ALPHABET = _shift_table([(0x0041, 0x005A), (0x0061, 0x007A)], _WIDTH_SHIFT)

_TO_HALF_NUMBER = _shift_table([(0xFF10, 0xFF19)], -_WIDTH_SHIFT)
_TO_FULL_NUMBER = _shift_table([(0x0030, 0x0039)], _WIDTH_SHIFT)


def to_hiragana(text: str) -> str:
    """Katakana ァ–ヶ → Hiragana ぁ–ゖ."""
    return text.translate(_TO_HIRAGANA)


def to_katakana(text: str) -> str:
    """Hiragana ぁ–ゖ → Katakana ァ–ヶ."""
    return text.translate(_TO_KATAKANA)


def to_half_width_space(text: str) -> str:
    return text.translate(_TO_HALF_SPACE)


def to_full_width_space(text: str) -> str:
    return text.translate(_TO_FULL_SPACE)


def to_half_width_ascii_code(text: str) -> str:
    """Full-width ASCII symbols, letters and digits → ASCII.

    The ideographic space becomes a plain space and curly quotes become
    straight quotes.
    """
    return text.translate(_TO_HALF_ASCII)


def to_full_width_ascii_code(text: str) -> str:
    """Printable ASCII → full-width forms.

    Space, ``"`` and ``'`` map to U+3000, U+201D and U+2019 rather than to
    their U+FFxx counterparts.
    """
    return text.translate(_TO_FULL_ASCII)


def to_half_width_alphabet(text: str) -> str:
    return text.translate(_TO_HALF_ALPHABET)


def to_full_width_alphabet(text: str) -> str:
    return text.translate(_TO_FULL_ALPHABET)


def to_half_width_number(text: str) -> str:
    return text.translate(_TO_HALF_NUMBER)


def to_full_width_number(text: str) -> str:
    return text.translate(_TO_FULL_NUMBER)

"""Kana transliteration — half-width ⇄ full-width Katakana and punctuation.

Both directions are a single left-to-right pass over the codepoints.
Codepoints with no table entry are copied through unchanged, so both
functions are total over any input string.
"""

from __future__ import annotations

from .codepoints import to_codepoints
from .kana_table import (
    FULL_TO_HALF,
    HALF_KANA_END,
    HALF_KANA_START,
    HALF_TO_FULL,
    SEMI_VOICED_MARK,
    VOICED_MARK,
    compose_half,
)


def to_half_width_kana(text: str) -> str:
    """Convert full-width Katakana and Kana punctuation to half-width.

    Voiced and semi-voiced letters are split into base + mark
    (ガ → ｶﾞ, パ → ﾊﾟ). Hiragana is not converted.
    """
    out: list[str] = []
    for cp in to_codepoints(text):
        half = FULL_TO_HALF.get(cp)
        out.append(half if half is not None else chr(cp))
    return "".join(out)


def to_full_width_kana(text: str) -> str:
    """Convert half-width Katakana and Kana punctuation to full-width.

    A base followed by ﾞ or ﾟ is composed into one codepoint when the pair
    has a full-width form (ｶﾞ → ガ, ﾊﾟ → パ, ｳﾞ → ヴ). Otherwise base and
    mark are converted separately (ｦﾞ → ヲ゛).
    """
    cps = to_codepoints(text)
    out: list[str] = []
    i = 0
    n = len(cps)
    while i < n:
        cp = cps[i]
        if not HALF_KANA_START <= cp <= HALF_KANA_END:
            out.append(chr(cp))
            i += 1
            continue
        if i + 1 < n and cps[i + 1] in (VOICED_MARK, SEMI_VOICED_MARK):
            composed = compose_half(cp, cps[i + 1])
            if composed is not None:
                out.append(chr(composed))
            else:
                out.append(chr(HALF_TO_FULL[cp]))
                out.append(chr(HALF_TO_FULL[cps[i + 1]]))
            i += 2
            continue
        out.append(chr(HALF_TO_FULL[cp]))
        i += 1
    return "".join(out)

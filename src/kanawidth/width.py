"""Display-width measurement and width-aware slicing.

Half-width glyphs (ASCII and the half-width Kana block U+FF61–U+FF9F) occupy
one column; everything else occupies two. There is no East Asian Width table
lookup here: the classification is a fixed range rule.
"""

from __future__ import annotations

from enum import IntEnum

from .codepoints import from_codepoints, to_codepoints
from .kana_table import HALF_KANA_END, HALF_KANA_START

_ASCII_END = 0x0080  # exclusive

# Emitted in place of the part of a wide glyph that falls outside the window.
_PAD = 0x0020


class WidthClass(IntEnum):
    NARROW = 1
    WIDE = 2


def classify(cp: int) -> WidthClass:
    """Return the display width class of a single codepoint."""
    if cp < _ASCII_END or HALF_KANA_START <= cp <= HALF_KANA_END:
        return WidthClass.NARROW
    return WidthClass.WIDE


def get_width(text: str) -> int:
    """Return the display width of text (narrow = 1, wide = 2)."""
    return sum(classify(cp) for cp in to_codepoints(text))


def _check_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def cut_text_for_width(text: str, offset: int, size: int) -> str:
    """Cut the columns ``[offset, offset + size)`` out of text.

    A wide glyph that only partly overlaps the window is never emitted; the
    overlapping column is rendered as an ASCII space instead.

    A negative offset does not pad on the left: it shrinks ``size`` by
    ``|offset|`` and starts at column 0. Once the window is entered, the
    walk stops as soon as the remaining size drops to zero or below.
    """
    _check_int("offset", offset)
    _check_int("size", size)

    cut_size = size
    if offset < 0:
        cut_size += offset
        offset = 0
    if cut_size <= 0:
        return ""

    output: list[int] = []
    in_window = False
    position = 0
    for cp in to_codepoints(text):
        w = int(classify(cp))
        if position >= offset:
            in_window = True
            output.append(cp if cut_size >= w else _PAD)
            cut_size -= w
            if cut_size <= 0:
                break
        position += w
        # Offset points into the second column of a wide glyph.
        if position - 1 >= offset and not in_window:
            cut_size -= 1
            output.append(_PAD)
    return from_codepoints(output)


def measure_lines(lines: list[str]) -> list[dict]:
    """Return one measurement row per line (1-based ``n``)."""
    return [
        {"n": n, "text": line, "width": get_width(line), "codepoints": len(line)}
        for n, line in enumerate(lines, 1)
    ]

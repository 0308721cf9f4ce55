"""kanawidth — Japanese half-width/full-width normalization and display width.

Public API (all functions take and return ``str`` unless noted)::

    to_half_width_kana / to_full_width_kana   Kana with voiced-mark handling
    to_half_width / to_full_width             ASCII shift, then Kana
    to_hiragana / to_katakana                 script shift
    to_half_width_* / to_full_width_*         space, ascii_code, alphabet, number
    get_width(text) -> int                    narrow = 1, wide = 2
    cut_text_for_width(text, offset, size)    slice by display columns
"""

from __future__ import annotations

import logging

from .japanese import TRANSFORMS, resolve_transform, to_full_width, to_half_width
from .kana import to_full_width_kana, to_half_width_kana
from .shift import (
    to_full_width_alphabet,
    to_full_width_ascii_code,
    to_full_width_number,
    to_full_width_space,
    to_half_width_alphabet,
    to_half_width_ascii_code,
    to_half_width_number,
    to_half_width_space,
    to_hiragana,
    to_katakana,
)
from .width import WidthClass, classify, cut_text_for_width, get_width

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "TRANSFORMS",
    "WidthClass",
    "classify",
    "cut_text_for_width",
    "get_width",
    "resolve_transform",
    "to_full_width",
    "to_full_width_alphabet",
    "to_full_width_ascii_code",
    "to_full_width_kana",
    "to_full_width_number",
    "to_full_width_space",
    "to_half_width",
    "to_half_width_alphabet",
    "to_half_width_ascii_code",
    "to_half_width_kana",
    "to_half_width_number",
    "to_half_width_space",
    "to_hiragana",
    "to_katakana",
]

"""Composite width conversions and the named transform registry."""

from __future__ import annotations

from typing import Callable

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

Transform = Callable[[str], str]


def to_half_width(text: str) -> str:
    """Convert ASCII-range symbols first, then Kana, to half-width."""
    return to_half_width_kana(to_half_width_ascii_code(text))


def to_full_width(text: str) -> str:
    """Convert ASCII-range symbols first, then Kana, to full-width."""
    return to_full_width_kana(to_full_width_ascii_code(text))


TRANSFORMS: dict[str, Transform] = {
    "half": to_half_width,
    "full": to_full_width,
    "half-kana": to_half_width_kana,
    "full-kana": to_full_width_kana,
    "hiragana": to_hiragana,
    "katakana": to_katakana,
    "half-ascii": to_half_width_ascii_code,
    "full-ascii": to_full_width_ascii_code,
    "half-alphabet": to_half_width_alphabet,
    "full-alphabet": to_full_width_alphabet,
    "half-number": to_half_width_number,
    "full-number": to_full_width_number,
    "half-space": to_half_width_space,
    "full-space": to_full_width_space,
}


def resolve_transform(name: str | None) -> Transform:
    """Resolve a user-facing transform name (case and ``_`` tolerant)."""
    key = (name or "").strip().lower().replace("_", "-")
    func = TRANSFORMS.get(key)
    if func is None:
        supported = ", ".join(sorted(TRANSFORMS))
        raise ValueError(
            f"Unknown transform: {name!r}. Use one of: {supported}"
        )
    return func

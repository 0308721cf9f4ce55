"""Codepoint stream — text ⇄ sequence of Unicode scalar values.

Python strings are already sequences of scalar values, so decoding is a
plain ``ord`` per character and no surrogate pairing is needed.
"""

from __future__ import annotations

from typing import Iterable


def to_codepoints(text: str) -> list[int]:
    """Decode text into a list of codepoints."""
    return [ord(ch) for ch in text]


def from_codepoints(codepoints: Iterable[int]) -> str:
    """Re-encode a codepoint sequence into text."""
    return "".join(chr(cp) for cp in codepoints)

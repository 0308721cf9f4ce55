"""Source readers for plain text and DOCX files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .docx_paragraphs import read_docx
from .txt import SourceText, read_txt

_TEXT_SUFFIXES = frozenset({".txt", ".text", ".md", ".csv", ".tsv", ""})


def load_source(
    path: str | Path,
    run_logger: Optional[logging.Logger] = None,
) -> SourceText:
    """Read a source file, choosing the reader from its suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".docx":
        return read_docx(path, run_logger=run_logger)
    if suffix in _TEXT_SUFFIXES:
        return read_txt(path, run_logger=run_logger)
    raise ValueError(
        f"Unsupported source type {suffix!r} for {path.name}; "
        "use .docx or a plain-text file"
    )


__all__ = ["SourceText", "load_source", "read_docx", "read_txt"]

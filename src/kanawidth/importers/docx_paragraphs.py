"""DOCX source reader — every non-empty paragraph becomes one line."""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Optional

from .txt import SourceText

logger = logging.getLogger(__name__)


def read_docx(
    path: str | Path,
    run_logger: Optional[logging.Logger] = None,
) -> SourceText:
    """Read the paragraphs of a DOCX file.

    Empty paragraphs are dropped. The XML inside a DOCX is always UTF-8, so
    ``encoding`` is reported as such with method ``docx``.
    """
    try:
        import docx  # python-docx
    except ImportError as exc:
        raise ImportError("python-docx is required: pip install python-docx") from exc

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"DOCX file not found: {path}")

    log = run_logger or logger

    source_hash = hashlib.sha256(path.read_bytes()).hexdigest()
    document = docx.Document(str(path))
    lines = [p.text for p in document.paragraphs if p.text.strip()]
    log.info("Read %d paragraph(s) from %s", len(lines), path.name)

    return SourceText(
        path=str(path),
        lines=lines,
        encoding="utf-8",
        enc_method="docx",
        source_hash=source_hash,
    )

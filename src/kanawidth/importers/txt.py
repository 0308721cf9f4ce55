"""Plain-text source reader.

Encoding detection strategy:
1. BOM detection (UTF-8 BOM → utf-8-sig, UTF-16 BOM → utf-16).
2. charset-normalizer best guess.
3. Fallback: try cp1252, then latin-1 (logs a warning).

Line breaks are split with ``str.splitlines``; blank lines are kept so that
line numbers in reports match the source file.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from charset_normalizer import from_bytes

logger = logging.getLogger(__name__)


@dataclass
class SourceText:
    """Decoded contents of a source file."""

    path: str
    lines: list[str]
    encoding: str
    enc_method: str
    source_hash: str
    warnings: list[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "lines": len(self.lines),
            "encoding": self.encoding,
            "enc_method": self.enc_method,
            "source_hash": self.source_hash,
            "warnings": self.warnings,
        }


def _detect_encoding(data: bytes) -> tuple[str, str]:
    """Detect text encoding from BOM or charset-normalizer.

    Returns (encoding, method) where method is one of:
      'bom', 'charset-normalizer', 'cp1252-fallback', 'latin-1-fallback'.
    """
    if data.startswith(b"\xef\xbb\xbf"):
        return ("utf-8-sig", "bom")
    if data.startswith((b"\xff\xfe", b"\xfe\xff")):
        return ("utf-16", "bom")

    best = from_bytes(data).best()
    if best is not None:
        return (str(best.encoding), "charset-normalizer")

    try:
        data.decode("cp1252")
        return ("cp1252", "cp1252-fallback")
    except UnicodeDecodeError:
        return ("latin-1", "latin-1-fallback")


def read_txt(
    path: str | Path,
    run_logger: Optional[logging.Logger] = None,
) -> SourceText:
    """Read and decode a plain-text file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"TXT file not found: {path}")

    log = run_logger or logger

    raw_bytes = path.read_bytes()
    source_hash = hashlib.sha256(raw_bytes).hexdigest()
    encoding, enc_method = _detect_encoding(raw_bytes)

    warnings: list[str] = []
    if enc_method in ("cp1252-fallback", "latin-1-fallback"):
        msg = f"Encoding detection fell back to {encoding} for {path.name}"
        warnings.append(msg)
        log.warning(msg)

    text = raw_bytes.decode(encoding, errors="replace")
    log.info("Decoded %s as %s (method=%s)", path.name, encoding, enc_method)

    return SourceText(
        path=str(path),
        lines=text.splitlines(),
        encoding=encoding,
        enc_method=enc_method,
        source_hash=source_hash,
        warnings=warnings,
    )

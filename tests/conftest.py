"""Pytest fixtures shared across all test modules.

Source files are written into tmp_path; DOCX fixtures are generated
programmatically with python-docx.
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest


def make_docx(paragraphs: list[str]) -> bytes:
    """Create a minimal DOCX in memory from a list of paragraph strings.

    Returns the raw bytes of the DOCX file.
    """
    import docx  # python-docx

    doc = docx.Document()
    for para in paragraphs:
        doc.add_paragraph(para)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


@pytest.fixture()
def kana_txt(tmp_path: Path) -> Path:
    """A UTF-8 text file mixing half-width Kana, full-width ASCII and a blank line."""
    path = tmp_path / "kana.txt"
    path.write_text(
        "ｶﾞｷﾞｸﾞ ﾃｽﾄ\n"
        "ＡＢＣ　１２３\n"
        "\n"
        "ひらがな and ASCII\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def kana_docx(tmp_path: Path) -> Path:
    """A DOCX with two Kana paragraphs separated by an empty one."""
    path = tmp_path / "kana.docx"
    path.write_bytes(make_docx(["ﾊﾟﾋﾟﾌﾟ", "", "データ"]))
    return path


@pytest.fixture()
def steps_file(tmp_path: Path) -> Path:
    """A step file converting full-width ASCII to half-width, then Kana to full-width."""
    path = tmp_path / "steps.json"
    path.write_text(
        '["half-ascii", {"transform": "full-kana", "description": "kana to full"}]',
        encoding="utf-8",
    )
    return path

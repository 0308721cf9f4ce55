"""JSONL exporter for per-line measurement rows.

Each line is a valid JSON object (one row per source line).
Output is UTF-8 encoded with non-ASCII text kept as-is.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def export_jsonl(
    rows: list[dict],
    output_path: str | Path,
) -> Path:
    """Write rows to a JSONL file (one JSON object per line).

    Args:
        rows: List of row dicts from measure_lines().
        output_path: Destination file path (.jsonl).

    Returns:
        The resolved output path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write(json.dumps(row, ensure_ascii=False))
            f.write("\n")

    logger.info("Wrote %d row(s) to %s", len(rows), output_path)
    return output_path

"""CSV/TSV exporter for per-line measurement rows."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_MEASURE_FIELDS = ["n", "width", "codepoints", "text"]


def export_csv(
    rows: list[dict],
    output_path: str | Path,
    delimiter: str = ",",
) -> Path:
    """Write measurement rows to a CSV (or TSV) file.

    Args:
        rows: List of row dicts from measure_lines().
        output_path: Destination file path.
        delimiter: ',' for CSV, '\\t' for TSV.

    Returns:
        The resolved output path.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(
            f,
            fieldnames=_MEASURE_FIELDS,
            delimiter=delimiter,
            extrasaction="ignore",
        )
        writer.writeheader()
        writer.writerows(rows)

    logger.info("Wrote %d row(s) to %s", len(rows), output_path)
    return output_path

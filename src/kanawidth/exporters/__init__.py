"""Exporters for per-line measurement rows."""
from .csv_export import export_csv
from .jsonl_export import export_jsonl

__all__ = ["export_csv", "export_jsonl"]

"""Output formatting module."""

from jpseg.output.csv_export import CSV_HEADER, UTF8_BOM, export_csv, format_csv

__all__ = [
    "CSV_HEADER",
    "UTF8_BOM",
    "export_csv",
    "format_csv",
]

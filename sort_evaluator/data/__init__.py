"""Data ingestion for the sort evaluator."""

from sort_evaluator.data.csv_handler import (
    column_labels,
    load_csv_column,
    load_preview_data,
    resolve_column,
)

__all__ = [
    "column_labels",
    "load_csv_column",
    "load_preview_data",
    "resolve_column",
]

"""Analysis Orchestrator for the sort evaluator.

This module binds one CSV file to the two user-facing entry points: picking
a file (preview and column choices) and requesting an analysis of one
column (load, validate, time every algorithm).
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .config import DEFAULT_PREVIEW_ROWS
from .core.evaluator import evaluate_all
from .core.measurement import ResultSet
from .data.csv_handler import (
    column_labels,
    load_csv_column,
    load_preview_data,
    resolve_column,
)
from .errors import EmptyColumnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Preview:
    """The first rows of a CSV file.

    Attributes:
        headers: The header row.
        rows: Data rows following the header.
    """
    headers: list[str]
    rows: list[list[str]]

    @property
    def column_labels(self) -> list[str]:
        return column_labels(self.headers)


class AnalysisOrchestrator:
    """Runs previews and timing analyses for a single CSV file."""

    def __init__(self, csv_path: Union[str, Path], preview_rows: int = DEFAULT_PREVIEW_ROWS):
        """Initialize the Analysis Orchestrator.

        Args:
            csv_path: Path to the CSV file to analyze.
            preview_rows: Rows to read for the preview, header included.
        """
        self.csv_path = Path(csv_path)
        self.preview_rows = preview_rows
        self._preview: Optional[Preview] = None

        logger.info("Initialized AnalysisOrchestrator: file=%s, preview_rows=%d",
                    self.csv_path, preview_rows)

    def load_preview(self) -> Preview:
        """Load the preview of the file.

        Raises:
            DataSourceError: If the file cannot be read or is empty.
        """
        rows = load_preview_data(self.csv_path, self.preview_rows)
        self._preview = Preview(headers=rows[0], rows=rows[1:])
        logger.debug("Preview has %d columns and %d rows",
                     len(self._preview.headers), len(self._preview.rows))
        return self._preview

    def analyze(self, column: Union[int, str] = 0) -> ResultSet:
        """Time every sorting algorithm on one column of the file.

        Args:
            column: Column index or header name.

        Returns:
            The ResultSet of the run.

        Raises:
            InvalidColumnError: If the column does not exist.
            EmptyColumnError: If the column holds no numeric values.
            DataSourceError: If the file cannot be read.
        """
        preview = self._preview or self.load_preview()
        column_index = resolve_column(preview.headers, column)
        logger.info("Analyzing column %d (%s)", column_index, preview.headers[column_index])

        data = load_csv_column(self.csv_path, column_index)
        if not data:
            raise EmptyColumnError("No valid numeric data found in the selected column")

        return evaluate_all(data)

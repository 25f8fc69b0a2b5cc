"""CSV ingestion: file previews and integer column extraction."""

import csv
import logging
import re
from pathlib import Path
from typing import Union

from ..config import DEFAULT_PREVIEW_ROWS
from ..errors import DataSourceError, InvalidColumnError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _open_csv(csv_path: PathLike):
    path = Path(csv_path)
    if not path.is_file():
        logger.error("CSV file not found: %s", csv_path)
        raise DataSourceError(f"CSV file not found: {csv_path}")
    try:
        return open(path, "r", encoding="utf-8-sig", newline="")
    except OSError as e:
        logger.error("Failed to open CSV file %s: %s", csv_path, str(e))
        raise DataSourceError(f"Error reading file: {e}") from e


def load_preview_data(csv_path: PathLike, num_rows: int = DEFAULT_PREVIEW_ROWS) -> list[list[str]]:
    """Read the first rows of a CSV file, header included.

    Args:
        csv_path: Path to the CSV file.
        num_rows: Maximum number of rows to return, header row included.

    Returns:
        The rows as lists of raw cell strings.

    Raises:
        ValueError: If num_rows is smaller than 1.
        DataSourceError: If the file cannot be read or is empty.
    """
    if num_rows < 1:
        raise ValueError("num_rows must be >= 1")

    logger.debug("Loading %d preview rows from %s", num_rows, csv_path)

    rows = []
    try:
        with _open_csv(csv_path) as f:
            for row in csv.reader(f):
                if len(rows) >= num_rows:
                    break
                rows.append(row)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error("Failed to read CSV file %s: %s", csv_path, str(e))
        raise DataSourceError(f"Error reading file: {e}") from e

    if not rows:
        raise DataSourceError(f"CSV file is empty: {csv_path}")

    logger.info("Loaded %d preview rows from %s", len(rows), csv_path)
    return rows


def load_csv_column(csv_path: PathLike, column_index: int) -> list[int]:
    """Read one column of a CSV file as integers.

    The header row is skipped. Rows too short to contain the column are
    skipped, and so are cells that do not parse as an integer.

    Args:
        csv_path: Path to the CSV file.
        column_index: Zero-based column index.

    Returns:
        The parsed integers, in file order.

    Raises:
        InvalidColumnError: If column_index is negative.
        DataSourceError: If the file cannot be read.
    """
    if column_index < 0:
        raise InvalidColumnError(f"Column index must be non-negative, got {column_index}")

    logger.debug("Loading column %d from %s", column_index, csv_path)

    values = []
    skipped = 0
    try:
        with _open_csv(csv_path) as f:
            reader = csv.reader(f)
            next(reader, None)

            for row in reader:
                if column_index >= len(row):
                    logger.debug("Row %d has no column %d", reader.line_num, column_index)
                    continue
                cell = row[column_index].strip()
                if not INTEGER_PATTERN.fullmatch(cell):
                    skipped += 1
                    logger.warning("Skipping invalid number on line %d: %r",
                                   reader.line_num, cell)
                    continue
                values.append(int(cell))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.error("Failed to read CSV file %s: %s", csv_path, str(e))
        raise DataSourceError(f"Error reading file: {e}") from e

    logger.info("Loaded %d values from column %d (%d invalid skipped)",
                len(values), column_index, skipped)
    return values


def column_labels(headers: list[str]) -> list[str]:
    """Build the column choice labels shown to the user."""
    return [f"{header} (Column {i})" for i, header in enumerate(headers)]


def resolve_column(headers: list[str], column: Union[int, str]) -> int:
    """Turn a column index or header name into a validated index.

    Args:
        headers: The CSV header row.
        column: An index, a string of digits, or an exact header name.

    Returns:
        Zero-based column index.

    Raises:
        InvalidColumnError: If the column does not exist.
    """
    if isinstance(column, str):
        stripped = column.strip()
        if stripped in headers:
            return headers.index(stripped)
        if not stripped.isdigit():
            raise InvalidColumnError(f"No column named {column!r}")
        column = int(stripped)

    if not 0 <= column < len(headers):
        raise InvalidColumnError(
            f"Column index {column} out of range (file has {len(headers)} columns)"
        )
    return column

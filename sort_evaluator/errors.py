"""Exception hierarchy for the sort evaluator."""


class SortEvaluatorError(Exception):
    """Base class for sort evaluator specific exceptions."""


class UnknownAlgorithmError(SortEvaluatorError, ValueError):
    """Raised when an algorithm identifier is not one of the supported sorts."""


class DataSourceError(SortEvaluatorError):
    """Raised when a CSV file cannot be read or has no header row."""


class InvalidColumnError(SortEvaluatorError, ValueError):
    """Raised when a requested column does not exist in the CSV header."""


class EmptyColumnError(SortEvaluatorError):
    """Raised when the selected column yields no numeric values."""

"""
Configuration constants for the sort evaluator.
"""

import logging
import os

# CSV preview (header row included)
DEFAULT_PREVIEW_ROWS = 5
CSV_EXTENSIONS = (".csv",)

# Chart settings
CHART_FIGSIZE = (10, 5)
CHART_DPI = 150
BAR_COLOR = "tab:blue"
BEST_COLOR = "tab:green"

# Logging
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_log_level() -> int:
    """Read the log level from the LOG_LEVEL environment variable.

    Unknown values fall back to INFO.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return LOG_LEVEL_MAP.get(level_name, logging.INFO)

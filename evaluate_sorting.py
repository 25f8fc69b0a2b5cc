#!/usr/bin/env python3
"""CLI entry point for the sorting performance evaluator.

This script provides the command-line interface for timing the sorting
algorithms on a column of a CSV file. It handles argument parsing, input
validation, logging setup and results display.
"""

import argparse
import logging
import sys
from pathlib import Path

from sort_evaluator.config import CSV_EXTENSIONS, DEFAULT_PREVIEW_ROWS, get_log_level
from sort_evaluator.errors import SortEvaluatorError
from sort_evaluator.orchestrator import AnalysisOrchestrator
from sort_evaluator.reporting import format_preview, format_results, plot_results


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    GREEN = "\033[32m"
    CYAN = "\033[36m"
    BLUE = "\033[34m"
    YELLOW = "\033[33m"
    RED = "\033[31m"
    BOLD_RED = "\033[1;31m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colored output.

    Format: [datetime] [module] [severity] message
    - [datetime] [module]: green
    - [severity]: color depends on level
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.BLUE,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        level_color = self.LEVEL_COLORS.get(record.levelno, Colors.RESET)
        datetime_str = self.formatTime(record, self.datefmt)

        green_part = f"{Colors.GREEN}[{datetime_str}] [{record.name}]{Colors.RESET}"
        severity_part = f"{level_color}[{record.levelname}]{Colors.RESET}"

        message = f"{green_part} {severity_part} {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def configure_logging():
    """Configure logging from the LOG_LEVEL environment variable.

    Supports DEBUG, INFO (default), WARNING, ERROR and CRITICAL.
    """
    log_level = get_log_level()

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter(datefmt='%Y-%m-%d %H:%M:%S'))

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug("Logging configured with level: %s",
                                      logging.getLevelName(log_level))

    # turn off low-level logging
    for noisy in ["matplotlib", "PIL"]:
        logging.getLogger(noisy).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


def parse_arguments(argv=None):
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description='Sorting Algorithm Performance Evaluator - time five sorts on a CSV column',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example usage:
  python evaluate_sorting.py examples/sample_data.csv --column score
  python evaluate_sorting.py examples/sample_data.csv --column 2 --plot results/timings.png
  python evaluate_sorting.py examples/sample_data.csv --list-columns

The selected column must hold integers; other cells are skipped.
Set LOG_LEVEL=DEBUG for per-algorithm timing logs.
        """
    )

    parser.add_argument(
        'csv_file',
        type=str,
        help='Path to the CSV file to analyze (first row is the header)'
    )

    parser.add_argument(
        '--column',
        type=str,
        default='0',
        help='Column to sort, as a zero-based index or a header name (default: 0)'
    )

    parser.add_argument(
        '--preview-rows',
        type=int,
        default=DEFAULT_PREVIEW_ROWS,
        help=f'Rows to show in the preview, header included (default: {DEFAULT_PREVIEW_ROWS})'
    )

    parser.add_argument(
        '--list-columns',
        action='store_true',
        help='Show the preview and column choices, then exit without analyzing'
    )

    parser.add_argument(
        '--plot',
        type=str,
        default=None,
        help='Save a bar chart of the timings to this path'
    )

    args = parser.parse_args(argv)
    if args.preview_rows < 1:
        parser.error('--preview-rows must be at least 1')
    return args


def validate_file_exists(file_path: str, file_description: str) -> None:
    """Validate that a file exists and is readable.

    Args:
        file_path: Path to the file to validate.
        file_description: Human-readable description for error messages.

    Raises:
        SystemExit: If the file doesn't exist or isn't readable.
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("%s not found: %s", file_description, file_path)
        sys.exit(1)

    if not path.is_file():
        logger.error("%s is not a file: %s", file_description, file_path)
        sys.exit(1)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            f.read(1)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("%s is not readable: %s - %s", file_description, file_path, str(e))
        sys.exit(1)

    if path.suffix.lower() not in CSV_EXTENSIONS:
        logger.warning("%s does not have a .csv extension: %s", file_description, file_path)

    logger.debug("%s validated: %s", file_description, file_path)


def main(argv=None):
    """Main entry point for the sorting performance evaluator."""
    configure_logging()
    args = parse_arguments(argv)

    logger.info("Starting Sorting Performance Evaluation")
    validate_file_exists(args.csv_file, "CSV file")

    try:
        orchestrator = AnalysisOrchestrator(args.csv_file, preview_rows=args.preview_rows)

        preview = orchestrator.load_preview()
        print("Data Preview")
        print("=" * 60)
        print(format_preview([preview.headers] + preview.rows))
        print()
        print("Columns: " + ", ".join(preview.column_labels))
        print()

        if args.list_columns:
            sys.exit(0)

        result_set = orchestrator.analyze(args.column)

        print("Results")
        print("=" * 60)
        print(format_results(result_set))

        if args.plot:
            plot_results(result_set, args.plot)

        sys.exit(0)

    except KeyboardInterrupt:
        logger.warning("Evaluation interrupted by user")
        sys.exit(130)  # Standard exit code for SIGINT

    except SortEvaluatorError as e:
        logger.error("Error: %s", str(e))
        sys.exit(1)

    except Exception as e:
        logger.exception("Evaluation failed with error: %s", str(e))
        print("\n" + "=" * 70, file=sys.stderr)
        print("ERROR: Evaluation failed", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        print(f"\n{str(e)}\n", file=sys.stderr)
        print("Check the logs above for more details.", file=sys.stderr)
        print("=" * 70, file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()

"""
Cookie Analyzer CLI — Most Active Cookie for a Date.

Usage:
    most-active-cookie -f <filename> -d <YYYY-MM-DD>

Exactly these four tokens, in this order. Diagnostics go to stderr
(level set by COOKIE_ANALYZER_LOG_LEVEL); the report goes to stdout.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from datetime import date, datetime
from typing import Optional

from ..config import DATE_FORMAT, LOG_FORMAT, Settings, load_settings
from ..domain import InvalidArgumentError
from .output import build_output, print_centered
from .pipeline import run_analysis


logger = logging.getLogger(__name__)

USAGE = "Usage: most-active-cookie -f <filename> -d <YYYY-MM-DD>"

_HANDLER_NAME = "cookieanalyzer-stderr"

# Zero-padded only: strptime alone would take "2018-1-9"
_DATE_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}")


# =============================================================================
# LOGGING
# =============================================================================

def configure_logging(level: str) -> None:
    """
    Send package diagnostics to stderr at the given level.

    Safe to call repeatedly: the previous handler is replaced, not stacked.
    """
    package_logger = logging.getLogger("cookieanalyzer")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


# =============================================================================
# ARGUMENTS
# =============================================================================

def validate_arguments(argv: list[str]) -> bool:
    """Check for exactly: -f <filename> -d <date>."""
    is_valid = len(argv) == 4 and argv[0] == "-f" and argv[2] == "-d"
    if not is_valid:
        logger.error("Invalid arguments. Expected format: -f <filename> -d <date>")
    return is_valid


def parse_target_date(value: Optional[str]) -> date:
    """
    Parse a YYYY-MM-DD date argument.

    Raises:
        InvalidArgumentError: If the value is missing or not a valid date
    """
    if value is None or not value.strip():
        logger.error("Date not specified. Expected format: YYYY-MM-DD.")
        raise InvalidArgumentError("Missing date argument. Expected format: -d YYYY-MM-DD.")

    try:
        if not _DATE_SHAPE.fullmatch(value):
            raise ValueError(value)
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        logger.error("Invalid date format provided: %r. Expected format: YYYY-MM-DD.", value)
        raise InvalidArgumentError("Invalid date format. Please use YYYY-MM-DD.")


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser (used for help text)."""
    parser = argparse.ArgumentParser(
        prog="most-active-cookie",
        description="Find the most active cookie(s) in a cookie log for a given date.",
    )
    parser.add_argument(
        "-f",
        dest="file",
        metavar="FILENAME",
        required=True,
        help="Cookie log file (header line, then cookie,timestamp rows)",
    )
    parser.add_argument(
        "-d",
        dest="date",
        metavar="YYYY-MM-DD",
        required=True,
        help="Date to report on",
    )
    return parser


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def run(argv: list[str], settings: Settings) -> int:
    """Run the analysis for already-tokenized arguments."""
    if not validate_arguments(argv):
        print(USAGE)
        return 1

    filename = argv[1]
    try:
        target_date = parse_target_date(argv[3])
    except InvalidArgumentError as e:
        print(f"Error: {e}")
        return 1

    try:
        result = run_analysis(filename, target_date)
    except InvalidArgumentError as e:
        print(f"Error: {e}")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to process the log file: %s", filename)
        print(f"Error: Unable to process the log file. {e}")
        return 1

    if not result.has_records:
        print("Error: The log file is empty or contains no valid entries.")
        return 1

    if not result.most_active:
        print(f"No active cookies found for the specified date: {target_date.isoformat()}")
        return 0

    styled = settings.color and sys.stdout.isatty()
    output = build_output(result.most_active, target_date, styled=styled)
    print_centered(output, settings.terminal_width)
    print("\n\n")

    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    if argv is None:
        argv = sys.argv[1:]

    settings = load_settings()
    configure_logging(settings.log_level)

    if argv in (["-h"], ["--help"]):
        create_parser().print_help()
        return 0

    return run(argv, settings)


if __name__ == "__main__":
    sys.exit(main())

"""
Cookie Log Ingestion for the Cookie Analyzer.

Reads a delimited cookie log and turns each line into a CookieRecord.

Expected format (header line first, then one entry per line):

    cookie,timestamp
    AtY0laUfhglK3lC7,2018-12-09T14:19:00+00:00

Design principles:
- A bad line is skipped, never fatal: it becomes a Rejection
- Timestamps must carry an explicit UTC offset
- Timestamps are truncated to the calendar date in their own offset
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import FIELD_DELIMITER, HEADER_LINES
from ..domain import (
    CookieRecord,
    InvalidArgumentError,
    Rejection,
    RejectionError,
    RejectionRule,
)


logger = logging.getLogger(__name__)

# Extended ISO-8601 only: fromisoformat also takes a space separator and,
# from Python 3.11, the compact basic format
_TIMESTAMP_SHAPE = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}(:\d{2}(\.\d+)?)?([+-]\d{2}:\d{2}(:\d{2})?)?"
)


# =============================================================================
# LINE PARSING
# =============================================================================

def parse_timestamp(text: str, line_number: Optional[int] = None) -> datetime:
    """
    Parse an ISO-8601 timestamp with an explicit UTC offset.

    e.g. "2018-12-09T14:19:00+00:00" or "2018-12-09T14:19:00Z"

    Raises:
        RejectionError: If unparseable or missing an offset
    """
    value = text.strip()
    # fromisoformat only understands "Z" from Python 3.11 on
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    try:
        if not _TIMESTAMP_SHAPE.fullmatch(value):
            raise ValueError(value)
        timestamp = datetime.fromisoformat(value)
    except ValueError:
        raise RejectionError(
            RejectionRule.INVALID_TIMESTAMP,
            f"unparseable timestamp: {text!r}",
            line_number,
        )

    if timestamp.tzinfo is None or timestamp.utcoffset() is None:
        raise RejectionError(
            RejectionRule.INVALID_TIMESTAMP,
            f"timestamp has no UTC offset: {text!r}",
            line_number,
        )

    return timestamp


def parse_log_line(line: str, line_number: Optional[int] = None) -> CookieRecord:
    """
    Convert one log line into a CookieRecord.

    Raises:
        RejectionError: If the line is malformed or the timestamp is invalid
    """
    parts = line.rstrip("\r\n").split(FIELD_DELIMITER)
    if len(parts) != 2:
        raise RejectionError(
            RejectionRule.MALFORMED_LINE,
            f"expected 2 fields, found {len(parts)}",
            line_number,
        )

    identifier = parts[0].strip()
    timestamp = parse_timestamp(parts[1], line_number)

    # date() keeps the local date of the given offset, no UTC conversion
    return CookieRecord(identifier=identifier, date=timestamp.date())


# =============================================================================
# INGESTION
# =============================================================================

@dataclass
class IngestionResult:
    """Result of attempting to ingest a single log line."""
    success: bool
    record: Optional[CookieRecord] = None
    rejection: Optional[Rejection] = None


def ingest_log_line(line: str, line_number: int) -> IngestionResult:
    """
    Ingest one log line, turning parse failures into a Rejection.

    Every skipped line is logged as a warning.
    """
    try:
        record = parse_log_line(line, line_number)
    except RejectionError as e:
        rejection = Rejection.from_error(e, line.rstrip("\r\n"), line_number)
        logger.warning(
            "Skipping line %d (%s): %s", line_number, rejection.rule.value, rejection.raw_line
        )
        return IngestionResult(success=False, rejection=rejection)

    return IngestionResult(success=True, record=record)


@dataclass
class BatchIngestionResult:
    """Result of ingesting a whole log."""
    total_lines: int
    accepted: list[CookieRecord]
    rejected: list[Rejection]

    @property
    def acceptance_rate(self) -> float:
        if self.total_lines == 0:
            return 0.0
        return len(self.accepted) / self.total_lines


def ingest_log_lines(lines: Iterable[str]) -> BatchIngestionResult:
    """
    Ingest log lines, skipping the header.

    Line numbers are 1-based and count the header, so they match what
    an editor shows for the source file.

    Returns:
        BatchIngestionResult with records in log order and rejections
    """
    accepted: list[CookieRecord] = []
    rejected: list[Rejection] = []
    total = 0

    for line_number, line in enumerate(lines, start=1):
        if line_number <= HEADER_LINES:
            continue
        total += 1

        result = ingest_log_line(line, line_number)
        if result.success and result.record is not None:
            accepted.append(result.record)
        elif result.rejection is not None:
            rejected.append(result.rejection)

    return BatchIngestionResult(
        total_lines=total,
        accepted=accepted,
        rejected=rejected,
    )


def read_log_file(path: Union[str, Path]) -> BatchIngestionResult:
    """
    Read and ingest a cookie log file.

    Args:
        path: Location of the log file

    Raises:
        InvalidArgumentError: If path is empty
        FileNotFoundError: If the file does not exist
        PermissionError: If the file cannot be read
        UnicodeDecodeError: If the file is not UTF-8 text
        OSError: For any other I/O failure
    """
    if path is None or not str(path).strip():
        raise InvalidArgumentError("file name cannot be empty")

    log_path = Path(path)
    logger.info("Reading cookie log: %s", log_path)

    try:
        with log_path.open("r", encoding="utf-8") as fh:
            result = ingest_log_lines(fh)
    except FileNotFoundError:
        logger.error("File not found: %s", log_path)
        raise
    except PermissionError:
        logger.error("Permission denied: unable to read file at %s", log_path)
        raise
    except UnicodeDecodeError:
        logger.error("File is not valid UTF-8 text: %s", log_path)
        raise
    except OSError:
        logger.error("I/O error while reading file: %s", log_path)
        raise

    logger.info(
        "Parsed %d record(s) from %s, skipped %d line(s)",
        len(result.accepted), log_path, len(result.rejected),
    )
    return result

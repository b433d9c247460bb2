"""
Core Domain Objects for the Cookie Analyzer.

Domain Objects:
    CookieRecord — A single (identifier, calendar date) entry from the log
    Rejection    — An explicit discard of a log line with auditable reason
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


# =============================================================================
# ERRORS
# =============================================================================

class InvalidArgumentError(ValueError):
    """Raised when a caller-supplied argument (target date, file path) is unusable."""


# =============================================================================
# REJECTION SYSTEM
# =============================================================================

class RejectionRule(Enum):
    """
    Reasons a log line is skipped instead of becoming a CookieRecord.

    MALFORMED_LINE:     line does not split into exactly two fields
    INVALID_TIMESTAMP:  timestamp is unparseable or carries no UTC offset
    MISSING_IDENTIFIER: identifier field is absent
    """
    MALFORMED_LINE = "malformed_line"
    INVALID_TIMESTAMP = "invalid_timestamp"
    MISSING_IDENTIFIER = "missing_identifier"


class RejectionError(Exception):
    """Raised when a log line or record fails validation and must be skipped."""

    def __init__(self, rule: RejectionRule, reason: str, line_number: Optional[int] = None):
        self.rule = rule
        self.reason = reason
        self.line_number = line_number
        super().__init__(f"[{rule.value}] {reason}")


@dataclass(frozen=True)
class Rejection:
    """
    A skipped log line with auditable reason.

    Rejections never reach the aggregator. They are kept only so the
    caller can report how much of the log was unusable.
    """
    line_number: int
    rule: RejectionRule
    reason: str
    raw_line: str  # First 200 chars for debugging

    @classmethod
    def from_error(
        cls,
        error: RejectionError,
        raw_line: str,
        line_number: Optional[int] = None,
    ) -> Rejection:
        """Create a Rejection from a RejectionError."""
        if line_number is None:
            line_number = error.line_number if error.line_number is not None else 0

        return cls(
            line_number=line_number,
            rule=error.rule,
            reason=error.reason,
            raw_line=raw_line[:200],
        )


# =============================================================================
# COOKIE RECORD
# =============================================================================

@dataclass(frozen=True)
class CookieRecord:
    """
    One cookie occurrence from the log.

    The identifier is an opaque token: no trimming or case folding
    happens here. The date is a calendar date only; timestamps are
    truncated by the parser before a record is built.
    """
    identifier: str
    date: date

    def __post_init__(self):
        """Validate record requirements."""
        if not isinstance(self.identifier, str):
            raise RejectionError(
                RejectionRule.MISSING_IDENTIFIER,
                "identifier is required",
            )
        # datetime is a subclass of date and would never compare equal to one
        if not isinstance(self.date, date) or isinstance(self.date, datetime):
            raise RejectionError(
                RejectionRule.INVALID_TIMESTAMP,
                f"date must be a calendar date, got {self.date!r}",
            )

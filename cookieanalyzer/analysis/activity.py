"""
Activity Aggregator for the Cookie Analyzer.

Finds the cookie identifier(s) seen most often on one calendar date.

Rules:
    - Only records whose date equals the target date count (exact match)
    - Every identifier tied for the maximum is returned, never just one
    - Ties are listed in the order each identifier was first seen
      among the matching records

This module is pure: no logging, no I/O. Callers decide what to report.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, Optional

from ..domain import CookieRecord, InvalidArgumentError


# =============================================================================
# ACTIVITY SUMMARY
# =============================================================================

@dataclass(frozen=True)
class ActivitySummary:
    """
    Outcome of aggregating one date.

    most_active is empty when nothing matched the target date, in which
    case max_count and matched_records are both 0.
    """
    target_date: date
    most_active: list[str] = field(default_factory=list)
    max_count: int = 0
    matched_records: int = 0

    @property
    def has_activity(self) -> bool:
        return bool(self.most_active)


# =============================================================================
# AGGREGATION
# =============================================================================

def _require_target_date(target_date: Optional[date]) -> date:
    if target_date is None:
        raise InvalidArgumentError("target date must be specified")
    if not isinstance(target_date, date) or isinstance(target_date, datetime):
        raise InvalidArgumentError(
            f"target date must be a calendar date, got {target_date!r}"
        )
    return target_date


def build_frequency_table(
    records: Iterable[CookieRecord],
    target_date: Optional[date],
) -> Counter[str]:
    """
    Count occurrences per identifier on the target date.

    Counter keeps insertion order, so iteration order is the order in
    which identifiers were first seen on that date.

    Raises:
        InvalidArgumentError: If target_date is missing or not a date
    """
    target_date = _require_target_date(target_date)

    table: Counter[str] = Counter()
    for record in records:
        if record.date == target_date:
            table[record.identifier] += 1
    return table


def summarize_activity(
    records: Iterable[CookieRecord],
    target_date: Optional[date],
) -> ActivitySummary:
    """
    Aggregate records for one date into an ActivitySummary.

    Args:
        records: Parsed log records, in log order (may be empty)
        target_date: Calendar date to report on

    Returns:
        ActivitySummary whose most_active is the full tie set

    Raises:
        InvalidArgumentError: If target_date is missing or not a date
    """
    table = build_frequency_table(records, target_date)

    if not table:
        return ActivitySummary(target_date=target_date)

    max_count = max(table.values())
    most_active = [
        identifier
        for identifier, count in table.items()
        if count == max_count
    ]

    return ActivitySummary(
        target_date=target_date,
        most_active=most_active,
        max_count=max_count,
        matched_records=sum(table.values()),
    )


def find_most_active(
    records: Iterable[CookieRecord],
    target_date: Optional[date],
) -> list[str]:
    """
    Return every identifier tied for the highest count on target_date.

    Empty input, or no record on that date, gives an empty list.

    Raises:
        InvalidArgumentError: If target_date is missing or not a date
    """
    return summarize_activity(records, target_date).most_active

"""
Pipeline Orchestrator for the Cookie Analyzer.

Pipeline stages:
    1. Log Ingestion     — file to CookieRecords, bad lines rejected
    2. Aggregation       — most active cookie(s) on the target date

The aggregator itself is silent; this is where its outcome is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Union

from ..analysis.activity import ActivitySummary, summarize_activity
from ..domain import CookieRecord, Rejection
from ..ingestion.csv_log import read_log_file


logger = logging.getLogger(__name__)


# =============================================================================
# PIPELINE RESULT
# =============================================================================

@dataclass
class AnalysisResult:
    """
    Complete result of analyzing one log for one date.

    Exposes:
    - All parsed records
    - All rejected lines (for audit)
    - The aggregation summary
    """
    records: list[CookieRecord]
    rejections: list[Rejection]
    summary: ActivitySummary
    total_lines: int = 0
    source: str = field(default="")

    @property
    def most_active(self) -> list[str]:
        return self.summary.most_active

    @property
    def has_records(self) -> bool:
        return bool(self.records)


# =============================================================================
# PIPELINE EXECUTION
# =============================================================================

def run_analysis(path: Union[str, Path], target_date: date) -> AnalysisResult:
    """
    Read a cookie log and find the most active cookie(s) on target_date.

    Args:
        path: Location of the cookie log
        target_date: Calendar date to report on

    Returns:
        AnalysisResult with records, rejections and the summary

    Raises:
        InvalidArgumentError: If path is empty or target_date is missing
        OSError: If the log cannot be read
    """
    # ==========================================================================
    # STAGE 1: Log Ingestion
    # ==========================================================================
    ingestion = read_log_file(path)

    if ingestion.rejected:
        logger.warning(
            "Skipped %d of %d line(s) in %s",
            len(ingestion.rejected), ingestion.total_lines, path,
        )
    if not ingestion.accepted:
        logger.warning("The log file is empty or contains no valid entries: %s", path)

    # ==========================================================================
    # STAGE 2: Aggregation
    # ==========================================================================
    summary = summarize_activity(ingestion.accepted, target_date)

    if summary.has_activity:
        logger.info(
            "Found %d most active cookie(s) with frequency %d on %s.",
            len(summary.most_active), summary.max_count, target_date,
        )
    else:
        logger.info("No cookies found for the specified date: %s", target_date)

    return AnalysisResult(
        records=ingestion.accepted,
        rejections=ingestion.rejected,
        summary=summary,
        total_lines=ingestion.total_lines,
        source=str(path),
    )

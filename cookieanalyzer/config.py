"""
Configuration for the Cookie Analyzer.

Log format and display defaults are fixed module constants. The few
things that legitimately vary per terminal are read from the environment:

    COLUMNS                    — display width used to center the report
    COOKIE_ANALYZER_LOG_LEVEL  — diagnostic log level (stderr)
    NO_COLOR                   — disable ANSI styling when non-empty
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

# Log file format
FIELD_DELIMITER = ","
HEADER_LINES = 1

# Command line
DATE_FORMAT = "%Y-%m-%d"

# Display
DEFAULT_TERMINAL_WIDTH = 80

# Diagnostics
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Environment variable names
ENV_COLUMNS = "COLUMNS"
ENV_LOG_LEVEL = "COOKIE_ANALYZER_LOG_LEVEL"
ENV_NO_COLOR = "NO_COLOR"


# =============================================================================
# SETTINGS
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""
    terminal_width: int = DEFAULT_TERMINAL_WIDTH
    log_level: str = DEFAULT_LOG_LEVEL
    color: bool = True


def parse_terminal_width(value: Optional[str]) -> int:
    """
    Parse a COLUMNS value.

    Missing values fall back to the default silently; garbage falls
    back to the default with a warning.
    """
    if value is None or not value.strip():
        return DEFAULT_TERMINAL_WIDTH

    try:
        width = int(value)
    except ValueError:
        logger.warning(
            "Invalid terminal width %r. Defaulting to %d.", value, DEFAULT_TERMINAL_WIDTH
        )
        return DEFAULT_TERMINAL_WIDTH

    if width <= 0:
        logger.warning(
            "Non-positive terminal width %d. Defaulting to %d.", width, DEFAULT_TERMINAL_WIDTH
        )
        return DEFAULT_TERMINAL_WIDTH

    return width


def parse_log_level(value: Optional[str]) -> str:
    """Normalize a log level name, falling back to the default for unknown names."""
    if not value:
        return DEFAULT_LOG_LEVEL

    name = value.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Args:
        environ: Mapping to read from (defaults to os.environ)
    """
    if environ is None:
        environ = os.environ

    return Settings(
        terminal_width=parse_terminal_width(environ.get(ENV_COLUMNS)),
        log_level=parse_log_level(environ.get(ENV_LOG_LEVEL)),
        color=not environ.get(ENV_NO_COLOR),
    )

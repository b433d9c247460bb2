"""
Terminal output for the Cookie Analyzer.

Renders the most active cookies as a green, bold block centered to the
terminal width. Styling can be turned off for pipes and NO_COLOR.
"""

from __future__ import annotations

import re
import sys
from datetime import date
from typing import Optional, TextIO


GREEN = "\033[32m"
BOLD = "\033[1m"
RESET = "\033[0m"

# Blank lines above and below the report body
SPACING = "\n\n"

NO_ACTIVE_COOKIES_MESSAGE = "No active cookies found for the specified date."

_ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")


# =============================================================================
# FORMATTING
# =============================================================================

def build_output(
    most_active: list[str],
    target_date: date,
    styled: bool = True,
) -> str:
    """
    Build the report text for the most active cookies on target_date.

    An empty list yields the fixed "no active cookies" message.
    """
    prefix = f"{GREEN}{BOLD}" if styled else ""
    suffix = RESET if styled else ""

    if not most_active:
        return f"{prefix}{SPACING}{NO_ACTIVE_COOKIES_MESSAGE}{SPACING}{suffix}"

    lines = [f"{prefix}{SPACING}Most active cookies on {target_date.isoformat()}:{SPACING}"]
    for cookie in most_active:
        lines.append(f"{cookie}\n")
    lines.append(f"{SPACING}{suffix}")
    return "".join(lines)


def visible_length(text: str) -> int:
    """Length of text as shown on screen, ignoring ANSI escape codes."""
    return len(_ANSI_ESCAPE.sub("", text))


def center_lines(output: str, width: int) -> list[str]:
    """Left-pad each line of output so it sits centered in width columns."""
    centered = []
    for line in output.split("\n"):
        spaces = max((width - visible_length(line)) // 2, 0)
        centered.append(" " * spaces + line)
    return centered


def print_centered(output: str, width: int, stream: Optional[TextIO] = None) -> None:
    """Print output centered to width."""
    if stream is None:
        stream = sys.stdout
    for line in center_lines(output, width):
        print(line, file=stream)

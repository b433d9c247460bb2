"""
Tests for the domain model and configuration.

These tests verify:
1. CookieRecord is an immutable value with a calendar date
2. Rejections carry an auditable rule and reason
3. Settings are read from the environment with safe fallbacks
"""

import dataclasses
import pytest
from datetime import date, datetime

from cookieanalyzer.config import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_TERMINAL_WIDTH,
    Settings,
    load_settings,
    parse_log_level,
    parse_terminal_width,
)
from cookieanalyzer.domain import (
    CookieRecord,
    InvalidArgumentError,
    Rejection,
    RejectionError,
    RejectionRule,
)


# =============================================================================
# COOKIE RECORD
# =============================================================================

class TestCookieRecord:
    """Test CookieRecord construction and value semantics."""

    def test_valid_record(self):
        record = CookieRecord(identifier="AtY0laUfhglK3lC7", date=date(2018, 12, 9))

        assert record.identifier == "AtY0laUfhglK3lC7"
        assert record.date == date(2018, 12, 9)

    def test_value_equality(self):
        """Records with the same fields are equal and hash alike."""
        a = CookieRecord("A", date(2018, 12, 9))
        b = CookieRecord("A", date(2018, 12, 9))

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_record_is_immutable(self):
        record = CookieRecord("A", date(2018, 12, 9))

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.identifier = "B"

    def test_missing_identifier_rejected(self):
        with pytest.raises(RejectionError) as exc_info:
            CookieRecord(None, date(2018, 12, 9))

        assert exc_info.value.rule == RejectionRule.MISSING_IDENTIFIER

    def test_missing_date_rejected(self):
        with pytest.raises(RejectionError) as exc_info:
            CookieRecord("A", None)

        assert exc_info.value.rule == RejectionRule.INVALID_TIMESTAMP

    def test_datetime_rejected(self):
        """Timestamps must be truncated before a record is built."""
        with pytest.raises(RejectionError) as exc_info:
            CookieRecord("A", datetime(2018, 12, 9, 14, 19))

        assert exc_info.value.rule == RejectionRule.INVALID_TIMESTAMP

    def test_identifier_not_normalized(self):
        """Identifiers are opaque: no trimming or case folding."""
        record = CookieRecord(" Abc ", date(2018, 12, 9))

        assert record.identifier == " Abc "


# =============================================================================
# REJECTIONS
# =============================================================================

class TestRejection:
    """Test the rejection audit trail."""

    def test_error_message_includes_rule(self):
        error = RejectionError(RejectionRule.MALFORMED_LINE, "expected 2 fields, found 3", 4)

        assert str(error) == "[malformed_line] expected 2 fields, found 3"
        assert error.line_number == 4

    def test_from_error_uses_error_line_number(self):
        error = RejectionError(RejectionRule.INVALID_TIMESTAMP, "bad", 7)

        rejection = Rejection.from_error(error, "A,not-a-date")

        assert rejection.line_number == 7
        assert rejection.rule == RejectionRule.INVALID_TIMESTAMP
        assert rejection.reason == "bad"
        assert rejection.raw_line == "A,not-a-date"

    def test_from_error_explicit_line_number_wins(self):
        error = RejectionError(RejectionRule.INVALID_TIMESTAMP, "bad")

        rejection = Rejection.from_error(error, "x", line_number=3)

        assert rejection.line_number == 3

    def test_raw_line_truncated(self):
        error = RejectionError(RejectionRule.MALFORMED_LINE, "too long")

        rejection = Rejection.from_error(error, "x" * 1000, line_number=2)

        assert len(rejection.raw_line) == 200

    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgumentError, ValueError)


# =============================================================================
# CONFIGURATION
# =============================================================================

class TestSettings:
    """Test environment-derived settings."""

    def test_defaults_with_empty_environment(self):
        settings = load_settings({})

        assert settings == Settings()
        assert settings.terminal_width == DEFAULT_TERMINAL_WIDTH
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.color is True

    def test_columns_read_from_environment(self):
        assert load_settings({"COLUMNS": "120"}).terminal_width == 120

    def test_invalid_columns_fall_back(self, caplog):
        with caplog.at_level("WARNING", logger="cookieanalyzer.config"):
            width = parse_terminal_width("wide")

        assert width == DEFAULT_TERMINAL_WIDTH
        assert "Invalid terminal width" in caplog.text

    def test_non_positive_columns_fall_back(self):
        assert parse_terminal_width("0") == DEFAULT_TERMINAL_WIDTH
        assert parse_terminal_width("-5") == DEFAULT_TERMINAL_WIDTH

    def test_blank_columns_fall_back(self):
        assert parse_terminal_width("  ") == DEFAULT_TERMINAL_WIDTH

    def test_log_level_normalized(self):
        assert parse_log_level("debug") == "DEBUG"
        assert load_settings({"COOKIE_ANALYZER_LOG_LEVEL": "info"}).log_level == "INFO"

    def test_unknown_log_level_falls_back(self):
        assert parse_log_level("chatty") == DEFAULT_LOG_LEVEL

    def test_no_color(self):
        assert load_settings({"NO_COLOR": "1"}).color is False
        assert load_settings({"NO_COLOR": ""}).color is True

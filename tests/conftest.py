"""
Pytest fixtures for the journal kernel test suite.

Provides:
- Structured logging configured for the session
- LogContext isolation between tests
- A captured_logs fixture returning parsed JSON log records
- Factories for valid journal entry commands in both modes
"""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO

import pytest

from journal_kernel.domain.dtos import LineEntry
from journal_kernel.domain.journal_command import JournalEntryCommand
from journal_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)

TRANSACTION_DATE = date(2024, 1, 10)


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture journal_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, manual_command):
            manual_command.validate_for_create()
            logs = captured_logs()
            assert any(r["message"] == "validation_passed" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("journal_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Command factories
# =============================================================================


@pytest.fixture
def make_manual_command():
    """Build a valid manual-lines command; keyword overrides replace fields."""

    def _make(**overrides) -> JournalEntryCommand:
        fields = dict(
            office_id=1,
            transaction_date=TRANSACTION_DATE,
            comments="Monthly accrual",
            reference_number="JE-2024-0001",
            use_accounting_rule=False,
            credits=(LineEntry(gl_account_id=10, amount=Decimal("100.00")),),
            debits=(LineEntry(gl_account_id=20, amount=Decimal("100.00")),),
        )
        fields.update(overrides)
        return JournalEntryCommand(**fields)

    return _make


@pytest.fixture
def make_rule_command():
    """Build a valid accounting-rule command; keyword overrides replace fields."""

    def _make(**overrides) -> JournalEntryCommand:
        fields = dict(
            office_id=1,
            transaction_date=TRANSACTION_DATE,
            use_accounting_rule=True,
            accounting_rule_id=7,
            amount=Decimal("250.00"),
        )
        fields.update(overrides)
        return JournalEntryCommand(**fields)

    return _make


@pytest.fixture
def manual_command(make_manual_command):
    return make_manual_command()


@pytest.fixture
def rule_command(make_rule_command):
    return make_rule_command()

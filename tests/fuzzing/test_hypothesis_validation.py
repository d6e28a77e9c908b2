"""
Hypothesis-based property tests for journal entry validation.

Properties checked:
- Accounting-rule mode with a valid rule id and amount passes whatever the
  credits/debits hold (including None)
- Accounting-rule mode without a rule id fails with exactly one error,
  on the accountingRule path
- Empty credits and debits report under credits[0], never debits[0]
- A line with a missing account and a negative amount yields exactly
  the two line errors
- Over-long comments are reported in either mode
- Validation is deterministic across repeated calls
- Valid manual lines pass whether or not credits and debits balance
"""

from datetime import date
from decimal import Decimal

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from journal_kernel.domain.dtos import LineEntry
from journal_kernel.domain.journal_command import JournalEntryCommand
from journal_kernel.exceptions import ValidationFailedError

# =============================================================================
# Strategies
# =============================================================================

positive_ids = st.integers(min_value=1, max_value=2**31 - 1)
rule_ids = st.integers(min_value=1, max_value=2**63 - 1)
amounts = st.decimals(
    min_value=Decimal("0"),
    max_value=Decimal("999999999.99"),
    places=2,
    allow_nan=False,
    allow_infinity=False,
)
dates = st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31))
short_text = st.one_of(st.none(), st.text(max_size=100))

valid_lines = st.builds(LineEntry, gl_account_id=positive_ids, amount=amounts)
any_lines = st.builds(
    LineEntry,
    gl_account_id=st.one_of(st.none(), st.integers()),
    amount=st.one_of(st.none(), st.decimals(allow_nan=False, allow_infinity=False)),
)
line_sequences = st.one_of(st.none(), st.lists(any_lines, max_size=5))


def _fields_of(command: JournalEntryCommand) -> list[str]:
    with pytest.raises(ValidationFailedError) as exc_info:
        command.validate_for_create()
    return [e.field for e in exc_info.value.errors]


# =============================================================================
# Accounting-rule mode
# =============================================================================


class TestAccountingRuleProperties:
    @given(
        office_id=positive_ids,
        transaction_date=dates,
        rule_id=rule_ids,
        amount=amounts,
        credits=line_sequences,
        debits=line_sequences,
    )
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_valid_rule_passes_regardless_of_lines(
        self, office_id, transaction_date, rule_id, amount, credits, debits
    ):
        command = JournalEntryCommand(
            office_id=office_id,
            transaction_date=transaction_date,
            use_accounting_rule=True,
            accounting_rule_id=rule_id,
            amount=amount,
            credits=credits,
            debits=debits,
        )
        assert command.validate_for_create() is None

    @given(office_id=positive_ids, transaction_date=dates, amount=amounts, credits=line_sequences)
    @settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_missing_rule_id_single_error(self, office_id, transaction_date, amount, credits):
        command = JournalEntryCommand(
            office_id=office_id,
            transaction_date=transaction_date,
            use_accounting_rule=True,
            accounting_rule_id=None,
            amount=amount,
            credits=credits,
        )
        assert _fields_of(command) == ["accountingRule"]


# =============================================================================
# Manual-lines mode
# =============================================================================


class TestManualLinesProperties:
    @given(office_id=positive_ids, transaction_date=dates, comments=short_text)
    @settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_empty_sequences_tag_credits_path(self, office_id, transaction_date, comments):
        command = JournalEntryCommand.for_manual_lines(
            office_id, transaction_date, [], [], comments=comments
        )
        fields = _fields_of(command)
        assert set(fields) == {"credits[0].glAccountId", "credits[0].amount"}
        assert not any(f.startswith("debits[0]") for f in fields)

    @given(
        negative=st.decimals(max_value=Decimal("-0.01"), allow_nan=False, allow_infinity=False),
        debits=st.lists(valid_lines, min_size=1, max_size=5),
    )
    @settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_missing_account_and_negative_amount(self, negative, debits):
        command = JournalEntryCommand.for_manual_lines(
            1, date(2024, 1, 10), [LineEntry(gl_account_id=None, amount=negative)], debits
        )
        with pytest.raises(ValidationFailedError) as exc_info:
            command.validate_for_create()

        errors = exc_info.value.errors
        assert [e.field for e in errors] == ["credits[0].glAccountId", "credits[0].amount"]
        assert errors[0].code.endswith("cannot.be.blank")
        assert errors[1].code.endswith("not.zero.or.greater")

    @given(
        credits=st.lists(valid_lines, min_size=1, max_size=10),
        debits=st.lists(valid_lines, min_size=1, max_size=10),
    )
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_valid_lines_pass_without_balance_check(self, credits, debits):
        command = JournalEntryCommand.for_manual_lines(1, date(2024, 1, 10), credits, debits)
        assert command.validate_for_create() is None


# =============================================================================
# Mode-independent properties
# =============================================================================


class TestCommonProperties:
    @given(
        comments=st.text(min_size=501, max_size=800),
        use_rule=st.booleans(),
    )
    @settings(max_examples=50, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_long_comments_reported_in_both_modes(self, comments, use_rule):
        line = LineEntry(gl_account_id=1, amount=Decimal("1"))
        command = JournalEntryCommand(
            office_id=1,
            transaction_date=date(2024, 1, 10),
            comments=comments,
            use_accounting_rule=use_rule,
            accounting_rule_id=1,
            amount=Decimal("1"),
            credits=[line],
            debits=[line],
        )
        assert "comments" in _fields_of(command)

    @given(
        office_id=st.one_of(st.none(), st.integers()),
        use_rule=st.one_of(st.none(), st.booleans()),
        rule_id=st.one_of(st.none(), st.integers()),
        credits=line_sequences,
        debits=line_sequences,
    )
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_validation_is_deterministic(self, office_id, use_rule, rule_id, credits, debits):
        command = JournalEntryCommand(
            office_id=office_id,
            transaction_date=date(2024, 1, 10),
            use_accounting_rule=use_rule,
            accounting_rule_id=rule_id,
            amount=Decimal("1"),
            credits=credits,
            debits=debits,
        )
        first = command.validate()
        second = command.validate()
        assert first == second
        assert first.is_valid == (len(first.errors) == 0)

"""
JournalEntryCommand -- immutable request to record a journal entry.

Responsibility:
    Holds the candidate input for a new general-ledger journal entry and
    exposes ``validate_for_create()``, which runs the full rule set and
    raises a single aggregated ValidationFailedError when anything is wrong.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Built by an upstream request-parsing layer, validated here, then handed
    to the posting layer. Never persisted, never mutated.

Modes:
    - Manual lines (use_accounting_rule=False): credits and debits carry the
      monetary effect; accounting_rule_id and amount are ignored.
    - Accounting rule (use_accounting_rule=True): accounting_rule_id and
      amount carry it; credits and debits are ignored.

Non-goals:
    - Does NOT check that credits and debits balance; the posting layer
      owns that guarantee.
    - Does NOT resolve an accounting rule into lines.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from journal_kernel.domain.constraints import is_line_sequence, throw_if_errors
from journal_kernel.domain.dtos import (
    AccountingRuleRequest,
    LineEntry,
    ManualLinesRequest,
    ValidationLimits,
    ValidationResult,
)
from journal_kernel.domain.journal_validator import (
    DEFAULT_LIMITS,
    classify_request,
    validate_journal_entry,
)


def _freeze_lines(lines: Any) -> Any:
    # Anything that is not a list of lines is kept as given and reported
    # as credits/debits.not.a.list during validation.
    if is_line_sequence(lines):
        return tuple(lines)
    return lines


@dataclass(frozen=True)
class JournalEntryCommand:
    """
    Candidate input for creating a journal entry.

    Contract:
        All fields are optional at construction and the constructor never
        rejects a value; missing or malformed values are reported by
        ``validate_for_create()``. credits/debits given as a list or tuple
        are frozen into tuples. Any other value (a string, a number, a
        generator) is stored unchanged and fails validation as not.a.list.

    Guarantees:
        - Immutable after construction.
        - Validation is deterministic: repeated calls on the same command
          produce the same ordered errors.
    """

    office_id: int | None = None
    transaction_date: date | None = None
    comments: str | None = None
    reference_number: str | None = None
    use_accounting_rule: bool | None = None
    accounting_rule_id: int | None = None
    amount: Decimal | None = None
    credits: tuple[LineEntry | None, ...] | None = None
    debits: tuple[LineEntry | None, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "credits", _freeze_lines(self.credits))
        object.__setattr__(self, "debits", _freeze_lines(self.debits))

    @classmethod
    def for_accounting_rule(
        cls,
        office_id: int | None,
        transaction_date: date | None,
        accounting_rule_id: int | None,
        amount: Decimal | None,
        comments: str | None = None,
        reference_number: str | None = None,
    ) -> JournalEntryCommand:
        """Build a command whose lines come from an accounting rule."""
        return cls(
            office_id=office_id,
            transaction_date=transaction_date,
            comments=comments,
            reference_number=reference_number,
            use_accounting_rule=True,
            accounting_rule_id=accounting_rule_id,
            amount=amount,
        )

    @classmethod
    def for_manual_lines(
        cls,
        office_id: int | None,
        transaction_date: date | None,
        credits: Sequence[LineEntry | None] | None,
        debits: Sequence[LineEntry | None] | None,
        comments: str | None = None,
        reference_number: str | None = None,
    ) -> JournalEntryCommand:
        """Build a command with explicit credit and debit lines."""
        return cls(
            office_id=office_id,
            transaction_date=transaction_date,
            comments=comments,
            reference_number=reference_number,
            use_accounting_rule=False,
            credits=credits,
            debits=debits,
        )

    def to_request(self) -> ManualLinesRequest | AccountingRuleRequest | None:
        """The mode-specific view of this command, or None if the flag is absent."""
        return classify_request(self)

    def validate(self, limits: ValidationLimits | None = None) -> ValidationResult:
        """Collect every violation without raising."""
        return validate_journal_entry(self, limits)

    def validate_for_create(self, limits: ValidationLimits | None = None) -> None:
        """
        Validate the command before creating a journal entry.

        Raises:
            ValidationFailedError: one or more rules were violated. The
                exception carries every error in recording order.
        """
        limits = limits or DEFAULT_LIMITS
        result = self.validate(limits)
        throw_if_errors(result.errors, resource=limits.resource)

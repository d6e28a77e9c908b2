"""
DTOs -- Pure domain data transfer objects.

Responsibility:
    Defines the immutable data structures that flow through journal entry
    validation: LineEntry (one manual debit/credit leg), the two request
    variants (ManualLinesRequest, AccountingRuleRequest), and the
    validation outcome types (ValidationError, ValidationResult).

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Free of persistence, transport and configuration dependencies.

Invariants enforced:
    - Every DTO is a frozen dataclass; line sequences are tuples.
    - ValidationResult.is_valid is True only when errors is empty.

Failure modes:
    - None at construction. Malformed values are carried as-is so that the
      validator can report them as structured errors instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any


class RequestMode(str, Enum):
    """
    Which rule set a journal entry request is validated against.

    Contract:
        Exactly two values. A request whose mode cannot be decided (flag
        absent) has no RequestMode at all.
    """

    MANUAL_LINES = "manual_lines"
    ACCOUNTING_RULE = "accounting_rule"


@dataclass(frozen=True)
class LineEntry:
    """
    One leg of a manual double-entry posting.

    Contract:
        Identifies a GL account and a non-negative amount. Fields are
        optional at construction so that missing values surface as
        validation errors (``credits[i].glAccountId`` etc.), not as
        TypeErrors from the constructor.

    Non-goals:
        - Does NOT carry a side; the side is given by the sequence
          (credits or debits) that holds the line.
        - ``comments`` is carried through for the posting layer and is not
          validated here.
    """

    gl_account_id: int | None = None
    amount: Decimal | None = None
    comments: str | None = None


@dataclass(frozen=True)
class ManualLinesRequest:
    """Manual-lines variant: only the credit and debit sequences matter."""

    credits: tuple[LineEntry, ...] | None
    debits: tuple[LineEntry, ...] | None

    mode = RequestMode.MANUAL_LINES


@dataclass(frozen=True)
class AccountingRuleRequest:
    """Accounting-rule variant: only the rule id and the amount matter."""

    accounting_rule_id: int | None
    amount: Decimal | None

    mode = RequestMode.ACCOUNTING_RULE


@dataclass(frozen=True)
class ValidationLimits:
    """
    Resource name and string ceilings applied by the journal entry validator.

    Contract:
        The built-in defaults are the production values. The config layer
        may load replacements from YAML and pass them to the validator.

    Guarantees:
        - resource is a non-empty string
        - both ceilings are positive integers
    """

    resource: str = "GLJournalEntry"
    comments_max_length: int = 500
    reference_number_max_length: int = 100

    def __post_init__(self) -> None:
        if not isinstance(self.resource, str) or not self.resource.strip():
            raise ValueError("resource must be a non-empty string")
        for name in ("comments_max_length", "reference_number_max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


@dataclass(frozen=True)
class ValidationError:
    """
    A single validation error.

    Contract:
        Carries a machine-readable code, a default English message, the
        parameter path it applies to (``credits[2].amount``), the resource
        context (``GLJournalEntry``) and an optional details dict.

    Guarantees:
        - Immutable (frozen dataclass)
        - code is always present

    Non-goals:
        - Does NOT raise exceptions -- it IS the error representation.
        - Messages are not localized.
    """

    code: str
    message: str
    field: str | None = None
    resource: str | None = None
    details: dict[str, Any] | None = None


@dataclass(frozen=True)
class ValidationResult:
    """
    Result of validation.

    Contract:
        Aggregates zero or more ValidationErrors. is_valid is True only when
        there are no errors.

    Guarantees:
        - Immutable (frozen dataclass)
        - errors is always a tuple (never None), in recording order
        - bool(result) == result.is_valid for convenience
    """

    is_valid: bool
    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> ValidationResult:
        """Create a successful validation result."""
        return cls(is_valid=True, errors=())

    @classmethod
    def failure(cls, *errors: ValidationError) -> ValidationResult:
        """Create a failed validation result."""
        return cls(is_valid=False, errors=tuple(errors))

    @property
    def fields(self) -> tuple[str | None, ...]:
        return tuple(e.field for e in self.errors)

    def __bool__(self) -> bool:
        return self.is_valid

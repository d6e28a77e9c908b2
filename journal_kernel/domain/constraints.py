"""
Field constraints -- chainable per-field checks that accumulate errors.

Responsibility:
    Atomic predicates over a named field's value (required, non-blank,
    positive integer, zero-or-positive amount, length ceiling, boolean
    flag, list of lines). Each
    predicate records at most one ValidationError into a caller-owned list
    and never raises, so a whole command can be checked in one pass.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.

Usage::

    errors: list[ValidationError] = []
    check = DataValidatorBuilder(errors, resource="GLJournalEntry")
    check.reset().parameter("officeId").value(1).not_null().integer_greater_than_zero()
    check.reset().parameter("comments").value(None).ignore_if_null().not_exceeding_length_of(500)
    throw_if_errors(errors, resource="GLJournalEntry")

Error codes follow ``validation.msg.<resource>.<parameter>.<rule>``.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from journal_kernel.domain.dtos import ValidationError
from journal_kernel.exceptions import ValidationFailedError

INT_MAX = 2**31 - 1
LONG_MAX = 2**63 - 1


class DataValidatorBuilder:
    """
    Fluent builder that checks one field at a time.

    Contract:
        ``reset()`` starts a new field: it clears the active parameter,
        value and ignore-if-null flag but keeps the accumulated errors.
        Every predicate returns the builder for chaining.

    Guarantees:
        - Each failing predicate appends exactly one error.
        - Predicates other than ``not_null``/``not_blank`` skip a None
          value, so a missing required value yields a single error.
        - The error list is only ever appended to.
    """

    def __init__(self, errors: list[ValidationError], resource: str):
        self._errors = errors
        self._resource = resource
        self._parameter: str | None = None
        self._value: Any = None
        self._ignore_null = False

    @property
    def errors(self) -> list[ValidationError]:
        return self._errors

    def reset(self) -> DataValidatorBuilder:
        self._parameter = None
        self._value = None
        self._ignore_null = False
        return self

    def parameter(self, name: str) -> DataValidatorBuilder:
        self._parameter = name
        return self

    def value(self, value: Any) -> DataValidatorBuilder:
        self._value = value
        return self

    def ignore_if_null(self) -> DataValidatorBuilder:
        self._ignore_null = True
        return self

    # ------------------------------------------------------------------
    # Presence
    # ------------------------------------------------------------------

    def not_null(self) -> DataValidatorBuilder:
        if self._value is None and not self._ignore_null:
            self._fail("cannot.be.blank", f"The parameter {self._parameter} is mandatory.")
        return self

    def not_blank(self) -> DataValidatorBuilder:
        if self._value is None and self._ignore_null:
            return self
        if self._value is None or (isinstance(self._value, str) and not self._value.strip()):
            self._fail("cannot.be.blank", f"The parameter {self._parameter} is mandatory.")
        return self

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def integer_greater_than_zero(self) -> DataValidatorBuilder:
        return self._whole_number_greater_than_zero(INT_MAX)

    def long_greater_than_zero(self) -> DataValidatorBuilder:
        return self._whole_number_greater_than_zero(LONG_MAX)

    def zero_or_positive_amount(self) -> DataValidatorBuilder:
        if self._value is None:
            return self
        if not _is_amount(self._value):
            self._fail(
                "not.a.number",
                f"The parameter {self._parameter} must be a decimal number.",
                value=self._value,
            )
        elif self._value < 0:
            self._fail(
                "not.zero.or.greater",
                f"The parameter {self._parameter} must be greater than or equal to 0.",
                value=self._value,
            )
        return self

    # ------------------------------------------------------------------
    # Strings
    # ------------------------------------------------------------------

    def not_exceeding_length_of(self, max_length: int) -> DataValidatorBuilder:
        if self._value is None:
            return self
        length = len(str(self._value))
        if length > max_length:
            self._fail(
                "exceeds.max.length",
                f"The parameter {self._parameter} exceeds max length of {max_length}.",
                max_length=max_length,
                length=length,
            )
        return self

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def boolean(self) -> DataValidatorBuilder:
        if self._value is None:
            return self
        if not isinstance(self._value, bool):
            self._fail(
                "must.be.true.or.false",
                f"The parameter {self._parameter} must be set as true or false.",
                value=self._value,
            )
        return self

    def line_sequence(self) -> DataValidatorBuilder:
        if self._value is None:
            return self
        if not is_line_sequence(self._value):
            self._fail(
                "not.a.list",
                f"The parameter {self._parameter} must be a list of lines.",
                type=type(self._value).__name__,
            )
        return self

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _whole_number_greater_than_zero(self, upper_bound: int) -> DataValidatorBuilder:
        if self._value is None:
            return self
        # bool is an int subclass; True must not pass as id 1
        if isinstance(self._value, bool) or not isinstance(self._value, int):
            self._fail(
                "not.a.number",
                f"The parameter {self._parameter} must be a whole number.",
                value=self._value,
            )
        elif self._value < 1:
            self._fail(
                "not.greater.than.zero",
                f"The parameter {self._parameter} must be greater than 0.",
                value=self._value,
            )
        elif self._value > upper_bound:
            self._fail(
                "is.not.within.expected.range",
                f"The parameter {self._parameter} must be between 1 and {upper_bound}.",
                value=self._value,
                max=upper_bound,
            )
        return self

    def _fail(self, rule: str, message: str, **details: Any) -> None:
        self._errors.append(
            ValidationError(
                code=f"validation.msg.{self._resource}.{self._parameter}.{rule}",
                message=message,
                field=self._parameter,
                resource=self._resource,
                details=details or None,
            )
        )


def _is_amount(value: Any) -> bool:
    """Decimal or int, finite, and not a bool. Floats are never amounts."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, Decimal) and value.is_finite()


def is_line_sequence(value: Any) -> bool:
    """A list/tuple-like container of lines. Strings and bytes do not count."""
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def throw_if_errors(errors: Sequence[ValidationError], resource: str | None = None) -> None:
    """Raise one ValidationFailedError carrying every recorded error."""
    if errors:
        raise ValidationFailedError(errors, resource=resource)

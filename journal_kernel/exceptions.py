"""
Typed Exception Hierarchy for the Journal Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers that reject a journal entry request need to tell the submitter
exactly what was wrong. Parsing exception messages for that is fragile,
so every kernel error:
  1. Has a TYPED exception class (catch by type, not message)
  2. Has a CODE attribute (machine-readable, API-safe)
  3. Carries structured DATA (not just a message string)

Example - WRONG way to handle errors:
    try:
        command.validate_for_create()
    except Exception as e:
        if "Validation errors" in str(e):  # FRAGILE - message might change
            reject_request()

Example - RIGHT way (what this module enables):
    try:
        command.validate_for_create()
    except ValidationFailedError as e:
        api_response(
            code=e.global_message_code,
            errors=[(err.field, err.code) for err in e.errors],
        )

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    JournalKernelError (base)
    |
    +-- ValidationFailedError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Validation      | VALIDATION_ERRORS_EXIST     | One or more field/line rules violated
----------------|-----------------------------|-----------------------------------------

The per-violation codes (``validation.msg.GLJournalEntry.<param>.<rule>``)
live on the individual ``ValidationError`` values carried by the exception,
not on the exception class.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from journal_kernel.domain.dtos import ValidationError


class JournalKernelError(Exception):
    """
    Base exception for all journal kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "JOURNAL_KERNEL_ERROR"


# Validation exceptions


class ValidationFailedError(JournalKernelError):
    """
    A journal entry command violated one or more validation rules.

    Raised exactly once per validation pass, after every rule has run.
    ``errors`` holds every violation in the order the rules recorded them.
    """

    code: str = "VALIDATION_ERRORS_EXIST"

    GLOBAL_MESSAGE_CODE = "validation.msg.validation.errors.exist"
    DEFAULT_MESSAGE = "Validation errors exist."

    def __init__(
        self,
        errors: Iterable[ValidationError],
        resource: str | None = None,
        global_message_code: str = GLOBAL_MESSAGE_CODE,
        default_message: str = DEFAULT_MESSAGE,
    ):
        self.errors = tuple(errors)
        self.resource = resource
        self.global_message_code = global_message_code
        self.default_message = default_message
        super().__init__(f"{default_message} ({len(self.errors)} error(s))")

    @property
    def fields(self) -> tuple[str | None, ...]:
        """Parameter paths of the carried errors, in order."""
        return tuple(error.field for error in self.errors)

"""
Pure domain layer.

This module contains pure data transfer objects and validation logic
with NO dependencies on:
- Persistence
- Transport
- Configuration files
- I/O

All domain objects are immutable and deterministic.
"""

from journal_kernel.domain.constraints import DataValidatorBuilder, throw_if_errors
from journal_kernel.domain.dtos import (
    AccountingRuleRequest,
    LineEntry,
    ManualLinesRequest,
    RequestMode,
    ValidationError,
    ValidationLimits,
    ValidationResult,
)
from journal_kernel.domain.journal_command import JournalEntryCommand
from journal_kernel.domain.journal_validator import (
    classify_request,
    validate_journal_entry,
)

__all__ = [
    # Commands
    "JournalEntryCommand",
    "LineEntry",
    # Request variants
    "AccountingRuleRequest",
    "ManualLinesRequest",
    "RequestMode",
    # Validation
    "DataValidatorBuilder",
    "ValidationError",
    "ValidationLimits",
    "ValidationResult",
    "classify_request",
    "throw_if_errors",
    "validate_journal_entry",
]

"""JournalValidator -- Pure journal entry command validation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from journal_kernel.domain.constraints import DataValidatorBuilder, is_line_sequence
from journal_kernel.domain.dtos import (
    AccountingRuleRequest,
    LineEntry,
    ManualLinesRequest,
    ValidationError,
    ValidationLimits,
    ValidationResult,
)
from journal_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.journal_validator")

if TYPE_CHECKING:
    from journal_kernel.domain.journal_command import JournalEntryCommand


DEFAULT_LIMITS = ValidationLimits()

CREDITS = "credits"
DEBITS = "debits"

# An empty debits sequence reports its required-field errors under
# credits[0]. Downstream consumers match on this exact path.
EMPTY_DEBITS_PATH = CREDITS


def classify_request(
    command: JournalEntryCommand,
) -> ManualLinesRequest | AccountingRuleRequest | None:
    """
    Decide once which rule set applies to the command.

    Only the booleans True and False select a mode. Returns None when
    use_accounting_rule is absent or not a bool; the common checks report
    that, and neither mode-specific rule set runs.
    """
    if command.use_accounting_rule is True:
        return AccountingRuleRequest(
            accounting_rule_id=command.accounting_rule_id,
            amount=command.amount,
        )
    if command.use_accounting_rule is False:
        return ManualLinesRequest(credits=command.credits, debits=command.debits)
    return None


def validate_journal_entry(
    command: JournalEntryCommand,
    limits: ValidationLimits | None = None,
) -> ValidationResult:
    """Run every applicable rule against the command and collect all errors."""
    limits = limits or DEFAULT_LIMITS
    with LogContext.bind(office_id=command.office_id, resource=limits.resource):
        return _run_rules(command, limits)


def _run_rules(command: JournalEntryCommand, limits: ValidationLimits) -> ValidationResult:
    errors: list[ValidationError] = []
    check = DataValidatorBuilder(errors, resource=limits.resource)
    request = classify_request(command)

    logger.debug(
        "validation_started",
        extra={
            "mode": request.mode.value if request is not None else None,
            "credit_count": _count(command.credits),
            "debit_count": _count(command.debits),
        },
    )

    validate_common_fields(check, command, limits)

    if isinstance(request, ManualLinesRequest):
        validate_manual_lines(check, request)
    elif isinstance(request, AccountingRuleRequest):
        validate_accounting_rule(check, request)

    if errors:
        logger.warning(
            "validation_failed",
            extra={
                "error_count": len(errors),
                "error_codes": [e.code for e in errors],
            },
        )
        return ValidationResult.failure(*errors)

    logger.info("validation_passed", extra={"mode": request.mode.value})
    return ValidationResult.success()


def validate_common_fields(
    check: DataValidatorBuilder,
    command: JournalEntryCommand,
    limits: ValidationLimits,
) -> None:
    """Checks that apply regardless of mode."""
    check.reset().parameter("transactionDate").value(command.transaction_date).not_blank()
    check.reset().parameter("officeId").value(command.office_id).not_null().integer_greater_than_zero()
    check.reset().parameter("comments").value(command.comments).ignore_if_null().not_exceeding_length_of(
        limits.comments_max_length
    )
    check.reset().parameter("useAccountingRule").value(command.use_accounting_rule).not_null().boolean()
    check.reset().parameter("referenceNumber").value(command.reference_number).ignore_if_null().not_exceeding_length_of(
        limits.reference_number_max_length
    )


def validate_manual_lines(check: DataValidatorBuilder, request: ManualLinesRequest) -> None:
    check.reset().parameter(CREDITS).value(request.credits).not_null().line_sequence()
    check.reset().parameter(DEBITS).value(request.debits).not_null().line_sequence()

    _validate_lines(check, request.credits, CREDITS, empty_path=CREDITS)
    _validate_lines(check, request.debits, DEBITS, empty_path=EMPTY_DEBITS_PATH)


def validate_accounting_rule(check: DataValidatorBuilder, request: AccountingRuleRequest) -> None:
    # credits/debits are not inspected in this mode, even when supplied
    check.reset().parameter("accountingRule").value(request.accounting_rule_id).not_null().long_greater_than_zero()
    check.reset().parameter("amount").value(request.amount).not_null().zero_or_positive_amount()


def validate_line(
    check: DataValidatorBuilder,
    path: str,
    index: int,
    line: LineEntry | None,
) -> None:
    """
    Validate one debit/credit leg under ``<path>[<index>]``.

    None, or anything else that is not a LineEntry, counts as a line with
    neither field supplied.
    """
    if not isinstance(line, LineEntry):
        _require_line_fields(check, path, index)
        return
    check.reset().parameter(f"{path}[{index}].glAccountId").value(line.gl_account_id).not_null().integer_greater_than_zero()
    check.reset().parameter(f"{path}[{index}].amount").value(line.amount).not_null().zero_or_positive_amount()


def _validate_lines(
    check: DataValidatorBuilder,
    lines: Sequence[LineEntry | None] | object,
    path: str,
    empty_path: str,
) -> None:
    # None and non-sequence values are reported on the field itself
    if not is_line_sequence(lines):
        return
    if len(lines) == 0:
        # An empty sequence is rejected with field-level errors at index 0
        _require_line_fields(check, empty_path, 0)
        return
    for index, line in enumerate(lines):
        validate_line(check, path, index, line)


def _require_line_fields(check: DataValidatorBuilder, path: str, index: int) -> None:
    check.reset().parameter(f"{path}[{index}].glAccountId").not_null()
    check.reset().parameter(f"{path}[{index}].amount").not_null()


def _count(lines: object) -> int | None:
    return len(lines) if is_line_sequence(lines) else None

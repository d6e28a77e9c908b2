"""
journal_config -- single public entrypoint for validation configuration.

Responsibility:
    Provides the runtime way to obtain the journal entry validation limits
    through ``get_validation_limits()``.  YAML loading lives in
    ``journal_config.loader``.

Architecture position:
    Configuration -- sits above ``journal_kernel``.  The kernel MUST NEVER
    import from ``journal_config``; callers pass the returned
    ``ValidationLimits`` to ``JournalEntryCommand.validate_for_create()``.

Failure modes:
    - ``FileNotFoundError`` -- the requested limits file does not exist.
    - ``KeyError`` / ``ValueError`` -- missing or invalid limit values.
    - ``yaml.YAMLError`` -- malformed YAML.

Audit relevance:
    Every successful ``get_validation_limits()`` call emits a
    ``JOURNAL_CONFIG_TRACE`` log entry with the source path and checksum,
    tying a validation decision to the exact limits that governed it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from journal_config.loader import (
    DEFAULTS_PATH,
    compute_checksum,
    load_validation_limits,
)
from journal_kernel.domain.dtos import ValidationLimits

_logger = logging.getLogger("journal_kernel.config")


def get_validation_limits(config_path: Path | None = None) -> ValidationLimits:
    """The public configuration entrypoint.

    Non-goals:
        This function does NOT cache; callers hold the returned limits for
        as long as they need them.

    Args:
        config_path: Override path to a limits YAML file.
            Defaults to journal_config/defaults.yaml.

    Raises:
        FileNotFoundError: If the file does not exist.
        KeyError: If a required key is missing.
        ValueError: If a value is invalid.
    """
    path = config_path or DEFAULTS_PATH
    limits = load_validation_limits(path)

    _logger.info(
        "JOURNAL_CONFIG_TRACE",
        extra={
            "trace_type": "JOURNAL_CONFIG_TRACE",
            "config_path": str(path),
            "checksum": compute_checksum(limits),
            "resource": limits.resource,
            "comments_max_length": limits.comments_max_length,
            "reference_number_max_length": limits.reference_number_max_length,
        },
    )
    return limits


__all__ = [
    "ValidationLimits",
    "get_validation_limits",
]

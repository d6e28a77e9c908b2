"""
Configuration Loader (``journal_config.loader``).

Responsibility
--------------
Loads a YAML limits file and parses it into the kernel's frozen
``ValidationLimits`` dataclass.  Runtime callers go through
``journal_config.get_validation_limits()``; the functions here are the
building blocks it uses and are exposed for tests and tooling.

Architecture position
---------------------
**Config layer** -- sits above ``journal_kernel``.  The kernel never
imports from this package; the loader translates YAML into a kernel DTO.

Invariants enforced
-------------------
* All parse errors raise ``ValueError`` or ``KeyError`` with descriptive
  messages; no silent defaults for required keys.
* ``compute_checksum`` produces a deterministic SHA-256 hash for
  configuration identity and change detection.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Non-positive ceilings or blank resource  -> ``ValueError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from journal_kernel.domain.dtos import ValidationLimits

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"

_REQUIRED_KEYS = ("resource", "comments_max_length", "reference_number_max_length")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Preconditions:
        - ``path`` must point to an existing, readable YAML file.
    Postconditions:
        - Returns a ``dict`` (possibly empty if the YAML is empty).
    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the document is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping in {path}, got {type(data).__name__}")
    return data


def parse_validation_limits(data: dict[str, Any]) -> ValidationLimits:
    """
    Parse ``ValidationLimits`` from a dict.

    Raises:
        KeyError: if a required key is missing.
        ValueError: if a value is out of range (see ValidationLimits).
    """
    missing = [key for key in _REQUIRED_KEYS if key not in data]
    if missing:
        raise KeyError(f"Missing validation limit keys: {', '.join(missing)}")
    return ValidationLimits(
        resource=data["resource"],
        comments_max_length=data["comments_max_length"],
        reference_number_max_length=data["reference_number_max_length"],
    )


def load_validation_limits(path: Path | None = None) -> ValidationLimits:
    """Load limits from ``path``, or from the bundled defaults file."""
    return parse_validation_limits(load_yaml_file(path or DEFAULTS_PATH))


def compute_checksum(limits: ValidationLimits) -> str:
    """
    Compute SHA-256 checksum of the canonical JSON serialization.

    Postconditions:
        - Identical limits always produce identical checksums.
    """
    canonical = json.dumps(asdict(limits), sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()

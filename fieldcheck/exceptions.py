# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for fieldcheck.

Validators report invalid input through :class:`ValidationResult` values and
never raise for it. These exceptions cover misconfiguration and the opt-in
``raise_for_violation`` conversion.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .validation.base import ValidationViolation


class FieldcheckError(Exception):
    """Base class for every error raised by fieldcheck."""


class ConfigurationError(FieldcheckError):
    """Raised when options or environment settings cannot be interpreted."""


class FieldValidationError(FieldcheckError):
    """Raised by ``ValidationResult.raise_for_violation`` for a failed check."""

    def __init__(self, violation: "ValidationViolation"):
        self.violation = violation
        super().__init__(violation.message)

    @property
    def kind(self):
        return self.violation.kind


__all__ = [
    "FieldcheckError",
    "ConfigurationError",
    "FieldValidationError",
]

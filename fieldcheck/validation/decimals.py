# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Arbitrary-precision decimal validation."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..config import BoundMode
from ..exceptions import ConfigurationError
from .base import (
    BaseOptions,
    ErrorKind,
    ValidationResult,
    ValidationViolation,
    above_maximum,
    below_minimum,
    bound_is_set,
    run_protocol,
)

@dataclass(frozen=True)
class DecimalOptions(BaseOptions):
    """Constraints for a :class:`~decimal.Decimal` subject.

    Legacy bound mode enforces a bound only when it is greater than
    ``Decimal(0)``. NaN and infinite bounds are rejected.
    """

    min: Optional[Decimal] = None
    max: Optional[Decimal] = None
    bound_mode: Optional[BoundMode] = None

    def __post_init__(self):
        for name in ("min", "max"):
            bound = getattr(self, name)
            if bound is not None and not bound.is_finite():
                raise ConfigurationError(f"Decimal {name} bound must be finite, got {bound}")


def validate_decimal(value: Optional[Decimal], options: Optional[DecimalOptions]) -> ValidationResult:
    """Validate *value* against *options*.

    NaN and infinite subjects fail with ``FORMAT`` before any bound is compared.
    """

    def check_bounds(subject: Decimal) -> Optional[ValidationViolation]:
        if not subject.is_finite():
            return ValidationViolation(ErrorKind.FORMAT, "is not a finite decimal")
        if bound_is_set(options.min, options.bound_mode) and subject < options.min:
            return below_minimum(f"is lesser than {options.min} minimum value", options.min)
        if bound_is_set(options.max, options.bound_mode) and subject > options.max:
            return above_maximum(f"is greater than {options.max} maximum value", options.max)
        return None

    return run_protocol(
        "decimal",
        value,
        options,
        is_empty=lambda subject: subject.is_zero(),
        check_bounds=check_bounds,
    )


__all__ = ["DecimalOptions", "validate_decimal"]

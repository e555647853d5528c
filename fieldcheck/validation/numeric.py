# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Numeric validation generic over any ordered, zero-comparable type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from ..config import BoundMode
from .base import (
    BaseOptions,
    ValidationResult,
    ValidationViolation,
    above_maximum,
    below_minimum,
    bound_is_set,
    run_protocol,
)

N = TypeVar("N")


@dataclass(frozen=True)
class NumericOptions(BaseOptions, Generic[N]):
    """Constraints for an int, float or other ordered numeric subject.

    Under the legacy bound mode only positive bounds are enforced: a ``min`` of
    ``-10`` or ``0`` is ignored. Use ``BoundMode.STRICT`` to enforce them.
    """

    min: Optional[N] = None
    max: Optional[N] = None
    bound_mode: Optional[BoundMode] = None


def validate_numeric(value: Optional[N], options: Optional[NumericOptions[N]]) -> ValidationResult:
    """Validate *value* against *options*."""

    def check_bounds(subject: N) -> Optional[ValidationViolation]:
        if bound_is_set(options.min, options.bound_mode) and subject < options.min:
            return below_minimum(f"is lesser than {options.min} minimum value", options.min)
        if bound_is_set(options.max, options.bound_mode) and subject > options.max:
            return above_maximum(f"is greater than {options.max} maximum value", options.max)
        return None

    return run_protocol(
        "numeric",
        value,
        options,
        is_empty=lambda subject: subject == 0,
        check_bounds=check_bounds,
    )


__all__ = ["NumericOptions", "validate_numeric"]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""String validation: length bounds in code points plus whitespace exclusion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import BoundMode
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
class StringOptions(BaseOptions):
    """Constraints for a text subject.

    ``min`` and ``max`` are lengths counted in Unicode code points. With the
    legacy bound mode a length bound of ``0`` means "no bound".
    """

    min: Optional[int] = None
    max: Optional[int] = None
    no_spaces: bool = False
    bound_mode: Optional[BoundMode] = None


def validate_string(value: Optional[str], options: Optional[StringOptions]) -> ValidationResult:
    """Validate *value* against *options*."""

    def check_bounds(subject: str) -> Optional[ValidationViolation]:
        length = len(subject)
        if bound_is_set(options.min, options.bound_mode) and length < options.min:
            return below_minimum(f"is shorter than {options.min} characters", options.min)
        if bound_is_set(options.max, options.bound_mode) and length > options.max:
            return above_maximum(f"is longer than {options.max} characters", options.max)
        if options.no_spaces and " " in subject:
            return ValidationViolation(ErrorKind.FORMAT, "contains spaces")
        return None

    return run_protocol(
        "string",
        value,
        options,
        is_empty=lambda subject: subject == "",
        check_bounds=check_bounds,
    )


__all__ = ["StringOptions", "validate_string"]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Timestamp validation with optional day-granularity comparison.

``date_only`` truncates the subject and both bounds to midnight in their own
offsets before comparing. Truncation works on local copies: neither the
caller's datetime nor the bounds stored on :class:`TimeOptions` change, so a
single options record can be shared across threads.

Naive and aware datetimes cannot be ordered against each other; mixing them
raises ``TypeError`` from the comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .base import (
    BaseOptions,
    ValidationResult,
    ValidationViolation,
    above_maximum,
    below_minimum,
    run_protocol,
)

ZERO_TIME = datetime.min
_ZERO_TIME_UTC = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class TimeOptions(BaseOptions):
    """Constraints for a timestamp subject. Both bounds are inclusive."""

    min: Optional[datetime] = None
    max: Optional[datetime] = None
    date_only: bool = False


def is_zero_time(value: datetime) -> bool:
    """True for the zero instant, 0001-01-01 00:00:00 (UTC when aware)."""

    if value.utcoffset() is None:
        return value == ZERO_TIME
    return value == _ZERO_TIME_UTC


def truncate_to_date(value: datetime) -> datetime:
    """Return *value* at midnight of the same day, keeping its tzinfo."""

    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def validate_time(value: Optional[datetime], options: Optional[TimeOptions]) -> ValidationResult:
    """Validate *value* against *options*."""

    def prepare(subject: datetime) -> datetime:
        return truncate_to_date(subject) if options.date_only else subject

    def check_bounds(subject: datetime) -> Optional[ValidationViolation]:
        lower, upper = options.min, options.max
        if options.date_only:
            lower = truncate_to_date(lower) if lower is not None else None
            upper = truncate_to_date(upper) if upper is not None else None

        if lower is not None and subject < lower:
            return below_minimum(f"is earlier than {lower.isoformat()} minimum time", lower)
        if upper is not None and subject > upper:
            return above_maximum(f"is later than {upper.isoformat()} maximum time", upper)
        return None

    return run_protocol(
        "time",
        value,
        options,
        is_empty=is_zero_time,
        check_bounds=check_bounds,
        prepare=prepare,
    )


__all__ = [
    "TimeOptions",
    "ZERO_TIME",
    "is_zero_time",
    "truncate_to_date",
    "validate_time",
]

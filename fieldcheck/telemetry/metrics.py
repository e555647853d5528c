# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for fieldcheck."""

from __future__ import annotations

from .runtime import meter

validation_total = meter.create_counter(
    name="fieldcheck.validation.total",
    description="Counts validation calls partitioned by subject kind and outcome.",
    unit="1",
)


def record_validation(kind: str, result) -> None:
    """Record one validation outcome.

    ``outcome`` is ``"allowed"`` for a passing result, otherwise the value of
    the violation's error kind (``required``, ``out_of_range``, ...). Kinds
    returned by extensions need not be :class:`ErrorKind`; they are recorded
    as given.
    """

    if result.allowed:
        outcome = "allowed"
    else:
        error_kind = result.violation.kind
        outcome = getattr(error_kind, "value", error_kind)
    validation_total.add(1, {"kind": kind, "outcome": outcome})


__all__ = [
    "record_validation",
    "validation_total",
]

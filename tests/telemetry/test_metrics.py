# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from datetime import datetime
from decimal import Decimal

from fieldcheck.telemetry.metrics import validation_total
from fieldcheck.validation import (
    DecimalOptions,
    NumericOptions,
    StringOptions,
    TimeOptions,
    validate_decimal,
    validate_email,
    validate_numeric,
    validate_string,
    validate_time,
)


def test_real_counter_accepts_increments():
    # The OpenTelemetry API hands out a no-op instrument when no SDK is set up.
    validation_total.add(1, {"kind": "string", "outcome": "allowed"})


def test_each_call_records_exactly_one_outcome(recorded_metrics):
    validate_string("abc", StringOptions())
    validate_time(None, TimeOptions())
    validate_numeric(11, NumericOptions(max=10))
    validate_decimal(Decimal("1"), DecimalOptions(extensions=[lambda v: "nope"]))
    validate_email("not-an-email")

    assert recorded_metrics.calls == [
        (1, {"kind": "string", "outcome": "allowed"}),
        (1, {"kind": "time", "outcome": "required"}),
        (1, {"kind": "numeric", "outcome": "out_of_range"}),
        (1, {"kind": "decimal", "outcome": "extension"}),
        (1, {"kind": "email", "outcome": "format"}),
    ]


def test_missing_options_still_counted(recorded_metrics):
    validate_time(datetime(2024, 1, 1), None)

    assert recorded_metrics.calls == [(1, {"kind": "time", "outcome": "allowed"})]

# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Validators hold no shared state, so one options record can be used from many
threads at once. The date-only time check is the interesting case: it
truncates on local copies, so a shared TimeOptions never changes underneath
concurrent callers.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timedelta
from decimal import Decimal

from fieldcheck.validation import (
    DecimalOptions,
    NumericOptions,
    StringOptions,
    TimeOptions,
    validate_decimal,
    validate_numeric,
    validate_string,
    validate_time,
)


class TestSharedOptionsAcrossThreads:
    def test_date_only_options_shared_by_many_threads(self):
        lower = datetime(2024, 1, 10, 18, 0)
        upper = datetime(2024, 1, 20, 6, 0)
        options = TimeOptions(date_only=True, min=lower, max=upper)
        start = datetime(2024, 1, 5, 23, 0)

        def check(offset_days):
            value = start + timedelta(days=offset_days)
            result = validate_time(value, options)
            expected = datetime(2024, 1, 10) <= value <= datetime(2024, 1, 20, 23, 59, 59)
            return result.allowed == expected

        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(check, range(-8, 24)))

        assert all(outcomes)
        assert options.min == lower
        assert options.max == upper

    def test_pure_validators_agree_under_concurrency(self):
        string_options = StringOptions(min=2, max=6, no_spaces=True)
        numeric_options = NumericOptions(min=1, max=100)
        decimal_options = DecimalOptions(min=Decimal("0.5"), max=Decimal("9.5"))

        def run(i):
            return (
                validate_string("x" * (i % 9), string_options).allowed,
                validate_numeric(i, numeric_options).allowed,
                validate_decimal(Decimal(i) / 4, decimal_options).allowed,
            )

        serial = [run(i) for i in range(1, 200)]
        with ThreadPoolExecutor(max_workers=16) as pool:
            parallel = list(pool.map(run, range(1, 200)))

        assert parallel == serial

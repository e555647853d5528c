# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

from decimal import Decimal

import pytest

from fieldcheck import BoundMode, ConfigurationError
from fieldcheck.validation import DecimalOptions, Direction, ErrorKind, validate_decimal


def test_below_minimum():
    result = validate_decimal(Decimal("9.99"), DecimalOptions(min=Decimal("10.00")))

    assert result.kind is ErrorKind.OUT_OF_RANGE
    assert result.violation.direction is Direction.BELOW_MINIMUM
    assert result.violation.bound == Decimal("10.00")
    assert result.message == "is lesser than 10.00 minimum value"


def test_above_maximum():
    result = validate_decimal(Decimal("100.01"), DecimalOptions(max=Decimal("100")))

    assert result.violation.direction is Direction.ABOVE_MAXIMUM
    assert result.message == "is greater than 100 maximum value"


def test_precision_beyond_float_is_respected():
    bound = Decimal("0.30000000000000000001")
    assert validate_decimal(Decimal("0.3"), DecimalOptions(min=bound)).allowed is False
    assert validate_decimal(bound, DecimalOptions(min=bound, max=bound)).allowed is True


def test_non_positive_bounds_are_ignored_in_legacy_mode():
    assert validate_decimal(Decimal("-5"), DecimalOptions(min=Decimal("-10"))).allowed is True
    assert validate_decimal(Decimal("-50"), DecimalOptions(min=Decimal("-10"))).allowed is True
    assert validate_decimal(Decimal("5"), DecimalOptions(max=Decimal("0"))).allowed is True


def test_strict_mode_enforces_non_positive_bounds():
    options = DecimalOptions(min=Decimal("-10"), max=Decimal("0"), bound_mode=BoundMode.STRICT)

    assert validate_decimal(Decimal("-50"), options).violation.direction is Direction.BELOW_MINIMUM
    assert validate_decimal(Decimal("0.01"), options).violation.direction is Direction.ABOVE_MAXIMUM
    assert validate_decimal(Decimal("-3.5"), options).allowed is True


@pytest.mark.parametrize("zero", [Decimal(0), Decimal("0.000"), Decimal("-0"), Decimal("0E+5")])
def test_every_zero_representation_is_empty(zero):
    assert validate_decimal(zero, DecimalOptions()).kind is ErrorKind.REQUIRED
    assert validate_decimal(zero, DecimalOptions(allow_empty=True)).allowed is True


def test_allowed_zero_is_checked_against_bounds():
    result = validate_decimal(Decimal(0), DecimalOptions(allow_empty=True, min=Decimal("0.5")))
    assert result.violation.direction is Direction.BELOW_MINIMUM


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), Decimal("-Infinity")])
def test_non_finite_subject_is_a_format_error(value):
    for options in (DecimalOptions(), DecimalOptions(min=Decimal("1"), max=Decimal("10"))):
        result = validate_decimal(value, options)

        assert result.kind is ErrorKind.FORMAT
        assert result.message == "is not a finite decimal"


@pytest.mark.parametrize("bound", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity")])
def test_non_finite_bounds_are_rejected_on_construction(bound):
    with pytest.raises(ConfigurationError, match="finite"):
        DecimalOptions(min=bound)
    with pytest.raises(ConfigurationError, match="finite"):
        DecimalOptions(max=bound)

"""Validation package - fail-fast field checks per subject kind.

Every validator returns a :class:`ValidationResult` and never raises for
invalid input. String, time, numeric and decimal validators share one check
sequence (see :mod:`fieldcheck.validation.base`); the e-mail check is a
standalone format rule.
"""

from .base import (
    BaseOptions,
    Direction,
    ErrorKind,
    Extension,
    ValidationResult,
    ValidationViolation,
)
from .decimals import DecimalOptions, validate_decimal
from .email import EMAIL_PATTERN, validate_email
from .loader import options_from_mapping
from .numeric import NumericOptions, validate_numeric
from .strings import StringOptions, validate_string
from .temporal import TimeOptions, truncate_to_date, validate_time

__all__ = [
    "BaseOptions",
    "DecimalOptions",
    "Direction",
    "EMAIL_PATTERN",
    "ErrorKind",
    "Extension",
    "NumericOptions",
    "StringOptions",
    "TimeOptions",
    "ValidationResult",
    "ValidationViolation",
    "options_from_mapping",
    "truncate_to_date",
    "validate_decimal",
    "validate_email",
    "validate_numeric",
    "validate_string",
    "validate_time",
]

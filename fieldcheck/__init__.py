# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""fieldcheck - declarative, fail-fast field validation.

.. code-block:: python

    from fieldcheck import StringOptions, validate_string

    result = validate_string("ab", StringOptions(min=3))
    assert not result.allowed
    print(result.message)  # "is shorter than 3 characters"
"""

from .config import BoundMode, get_default_bound_mode, set_default_bound_mode
from .exceptions import ConfigurationError, FieldcheckError, FieldValidationError
from .validation import (
    DecimalOptions,
    Direction,
    ErrorKind,
    NumericOptions,
    StringOptions,
    TimeOptions,
    ValidationResult,
    ValidationViolation,
    options_from_mapping,
    validate_decimal,
    validate_email,
    validate_numeric,
    validate_string,
    validate_time,
)

__all__ = [
    "BoundMode",
    "ConfigurationError",
    "DecimalOptions",
    "Direction",
    "ErrorKind",
    "FieldValidationError",
    "FieldcheckError",
    "NumericOptions",
    "StringOptions",
    "TimeOptions",
    "ValidationResult",
    "ValidationViolation",
    "get_default_bound_mode",
    "options_from_mapping",
    "set_default_bound_mode",
    "validate_decimal",
    "validate_email",
    "validate_numeric",
    "validate_string",
    "validate_time",
]

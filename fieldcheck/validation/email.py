# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""E-mail address format check. Takes no options."""

from __future__ import annotations

import re
from typing import Final, Optional

from ..telemetry.metrics import record_validation
from .base import ErrorKind, ValidationResult, ValidationViolation, required

EMAIL_PATTERN: Final[str] = (
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9]"
    r"(?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$"
)

_EMAIL_RE: Final[re.Pattern[str]] = re.compile(EMAIL_PATTERN)


def validate_email(value: Optional[str]) -> ValidationResult:
    """Validate an e-mail address.

    A missing address fails with ``REQUIRED``. An empty string, or anything
    else that does not match :data:`EMAIL_PATTERN`, fails with ``FORMAT``.
    """

    if value is None:
        result = ValidationResult.deny(required("nil"))
    elif _EMAIL_RE.fullmatch(value) is None:
        result = ValidationResult.deny(
            ValidationViolation(ErrorKind.FORMAT, "is an invalid email address")
        )
    else:
        result = ValidationResult()

    record_validation("email", result)
    return result


__all__ = ["EMAIL_PATTERN", "validate_email"]

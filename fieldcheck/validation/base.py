# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Shared validation protocol used by every subject kind.

Each kind-specific validator feeds its subject through the same ordered
sequence of checks:

1. No options record -> pass.
2. Absent subject -> ``REQUIRED`` unless ``allow_absent``; an allowed absent
   subject passes immediately.
3. Zero-valued subject -> ``REQUIRED`` unless ``allow_empty``; an allowed zero
   value keeps going and is still checked against the bounds.
4. Lower bound, then upper bound (kind-specific) -> ``OUT_OF_RANGE``.
5. Extensions in declaration order; the first failure is returned verbatim.

Checks are fail-fast: a result carries at most one violation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from ..config import BoundMode, resolve_bound_mode
from ..exceptions import FieldValidationError
from ..telemetry.metrics import record_validation


class ErrorKind(str, Enum):
    """Category of a validation failure."""

    REQUIRED = "required"
    OUT_OF_RANGE = "out_of_range"
    FORMAT = "format"
    EXTENSION = "extension"


class Direction(str, Enum):
    """Which bound an ``OUT_OF_RANGE`` violation crossed."""

    BELOW_MINIMUM = "below_minimum"
    ABOVE_MAXIMUM = "above_maximum"


@dataclass(frozen=True)
class ValidationViolation:
    """Single failed constraint."""

    kind: Union[ErrorKind, str]
    message: str
    direction: Optional[Direction] = None
    bound: Any = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one validation call."""

    allowed: bool = True
    violation: Optional[ValidationViolation] = None

    @classmethod
    def deny(cls, violation: ValidationViolation) -> "ValidationResult":
        return cls(allowed=False, violation=violation)

    @property
    def kind(self) -> Optional[ErrorKind]:
        return self.violation.kind if self.violation else None

    @property
    def message(self) -> Optional[str]:
        return self.violation.message if self.violation else None

    def __bool__(self) -> bool:
        return self.allowed

    def raise_for_violation(self) -> None:
        """Raise :class:`FieldValidationError` if this result is a failure."""

        if self.violation is not None:
            raise FieldValidationError(self.violation)


ExtensionOutcome = Union[None, str, ValidationViolation]
Extension = Callable[[Any], ExtensionOutcome]


@dataclass(frozen=True)
class BaseOptions:
    """Fields common to every options record.

    ``extensions`` run only after every built-in check passes. Each one is
    called with the subject (date-truncated for ``date_only`` time checks) and
    returns ``None`` to pass, a :class:`ValidationViolation` to fail with that
    exact violation, or a string to fail with an ``EXTENSION`` violation. Any
    other return value (``True``, ``False``, ...) raises ``TypeError``. A
    violation's ``kind`` is usually an :class:`ErrorKind` but may be any value.
    """

    allow_absent: bool = False
    allow_empty: bool = False
    extensions: Sequence[Extension] = field(default_factory=tuple)


def required(reason: str) -> ValidationViolation:
    return ValidationViolation(ErrorKind.REQUIRED, f"must be provided ({reason})")


def below_minimum(message: str, bound: Any) -> ValidationViolation:
    return ValidationViolation(
        ErrorKind.OUT_OF_RANGE, message, direction=Direction.BELOW_MINIMUM, bound=bound
    )


def above_maximum(message: str, bound: Any) -> ValidationViolation:
    return ValidationViolation(
        ErrorKind.OUT_OF_RANGE, message, direction=Direction.ABOVE_MAXIMUM, bound=bound
    )


def bound_is_set(bound: Any, mode: Optional[BoundMode]) -> bool:
    """Return True when *bound* should be enforced under *mode*.

    Legacy mode treats zero and negative bounds as unset.
    """

    if bound is None:
        return False
    if resolve_bound_mode(mode) is BoundMode.STRICT:
        return True
    return bound > 0


def run_extensions(extensions: Sequence[Extension], subject: Any) -> Optional[ValidationViolation]:
    for extension in extensions:
        outcome = extension(subject)
        if outcome is None:
            continue
        if isinstance(outcome, ValidationViolation):
            return outcome
        if isinstance(outcome, str):
            return ValidationViolation(ErrorKind.EXTENSION, outcome)
        raise TypeError(
            f"extension {extension!r} returned {type(outcome).__name__}; "
            "expected None, str or ValidationViolation"
        )
    return None


def run_protocol(
    kind: str,
    value: Any,
    options: Optional[BaseOptions],
    *,
    is_empty: Callable[[Any], bool],
    check_bounds: Callable[[Any], Optional[ValidationViolation]],
    prepare: Optional[Callable[[Any], Any]] = None,
) -> ValidationResult:
    """Apply the shared check sequence and record the outcome.

    ``prepare`` maps the subject to the value the bound checks and the
    extensions see. It must not mutate its argument.
    """

    result = _evaluate(value, options, is_empty, check_bounds, prepare)
    record_validation(kind, result)
    return result


def _evaluate(value, options, is_empty, check_bounds, prepare) -> ValidationResult:
    if options is None:
        return ValidationResult()

    if value is None:
        if not options.allow_absent:
            return ValidationResult.deny(required("nil"))
        return ValidationResult()

    if is_empty(value) and not options.allow_empty:
        return ValidationResult.deny(required("empty"))

    subject = prepare(value) if prepare is not None else value

    violation = check_bounds(subject)
    if violation is None:
        violation = run_extensions(options.extensions, subject)
    if violation is not None:
        return ValidationResult.deny(violation)
    return ValidationResult()


__all__ = [
    "BaseOptions",
    "Direction",
    "ErrorKind",
    "Extension",
    "ExtensionOutcome",
    "ValidationResult",
    "ValidationViolation",
    "above_maximum",
    "below_minimum",
    "bound_is_set",
    "required",
    "run_extensions",
    "run_protocol",
]

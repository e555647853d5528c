# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Build options records from declarative mappings.

One mapping describes the constraints of one field, using the same operator
names as policy conditions::

    options_from_mapping("string", {"required": True, "minLength": 3, "noSpaces": True})

Unknown operators are rejected with :class:`ConfigurationError` rather than
silently ignored, so a typo such as ``"maximum"`` never weakens a check.
"""

from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from ..config import BoundMode
from ..exceptions import ConfigurationError
from .base import BaseOptions
from .decimals import DecimalOptions
from .numeric import NumericOptions
from .strings import StringOptions
from .temporal import TimeOptions

logger = logging.getLogger(__name__)

_COMMON_OPERATORS = {"required", "allowEmpty", "min", "max", "extensions"}

_KIND_OPERATORS: Dict[str, set] = {
    "string": _COMMON_OPERATORS | {"minLength", "maxLength", "noSpaces", "boundMode"},
    "time": _COMMON_OPERATORS | {"dateOnly"},
    "numeric": _COMMON_OPERATORS | {"boundMode"},
    "decimal": _COMMON_OPERATORS | {"boundMode"},
}

_OPTION_TYPES: Dict[str, type] = {
    "string": StringOptions,
    "time": TimeOptions,
    "numeric": NumericOptions,
    "decimal": DecimalOptions,
}


def _describe(field: Optional[str]) -> str:
    return f"field '{field}'" if field else "options"


def _as_bool(name: str, value: Any, field: Optional[str]) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be a boolean, got {value!r}"
        )
    return value


def _as_length(name: str, value: Any, field: Optional[str]) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be an integer length, got {value!r}"
        )
    return value


def _as_number(name: str, value: Any, field: Optional[str]) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be a number, got {value!r}"
        )
    return value


def _as_decimal(name: str, value: Any, field: Optional[str]) -> Decimal:
    if isinstance(value, bool):
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be a decimal, got {value!r}"
        )
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be a decimal, got {value!r}"
        ) from exc
    if not result.is_finite():
        raise ConfigurationError(
            f"Operator '{name}' for {_describe(field)} must be a finite decimal, got {value!r}"
        )
    return result


def _as_datetime(name: str, value: Any, field: Optional[str]) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise ConfigurationError(
                f"Operator '{name}' for {_describe(field)} is not an ISO-8601 timestamp: {value!r}"
            ) from exc
    raise ConfigurationError(
        f"Operator '{name}' for {_describe(field)} must be a datetime or ISO-8601 string, got {value!r}"
    )


def _as_bound_mode(value: Any, field: Optional[str]) -> BoundMode:
    if isinstance(value, BoundMode):
        return value
    try:
        return BoundMode(str(value).lower())
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in BoundMode)
        raise ConfigurationError(
            f"Operator 'boundMode' for {_describe(field)} must be one of: {allowed}; got {value!r}"
        ) from exc


def _as_extensions(value: Any, field: Optional[str]) -> Tuple[Callable[[Any], Any], ...]:
    if callable(value):
        return (value,)
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise ConfigurationError(
            f"Operator 'extensions' for {_describe(field)} must be a sequence of callables"
        )
    extensions = tuple(value)
    if not all(callable(item) for item in extensions):
        raise ConfigurationError(
            f"Operator 'extensions' for {_describe(field)} must be a sequence of callables"
        )
    return extensions


_BOUND_COERCERS: Dict[str, Callable[[str, Any, Optional[str]], Any]] = {
    "string": _as_length,
    "time": _as_datetime,
    "numeric": _as_number,
    "decimal": _as_decimal,
}


def options_from_mapping(
    kind: str,
    rules: Mapping[str, Any],
    *,
    field: Optional[str] = None,
) -> BaseOptions:
    """Return the options record for *kind* described by *rules*.

    Args:
        kind: One of ``"string"``, ``"time"``, ``"numeric"``, ``"decimal"``.
        rules: Operator mapping, e.g. ``{"required": False, "max": 10}``.
        field: Optional field name used in error messages.

    Raises:
        ConfigurationError: On an unknown kind, unknown operators (all of them
            are reported), conflicting aliases, or values of the wrong type.
    """

    if kind not in _KIND_OPERATORS:
        raise ConfigurationError(
            f"Unknown subject kind '{kind}'. Valid kinds: {', '.join(sorted(_KIND_OPERATORS))}"
        )
    if not isinstance(rules, Mapping):
        raise ConfigurationError(f"Rules for {_describe(field)} must be a mapping, got {rules!r}")

    unknown = sorted(set(rules) - _KIND_OPERATORS[kind])
    if unknown:
        raise ConfigurationError(
            f"Unknown operator(s) for {_describe(field)}: {', '.join(unknown)}. "
            f"Valid {kind} operators: {', '.join(sorted(_KIND_OPERATORS[kind]))}"
        )

    for alias, canonical in (("minLength", "min"), ("maxLength", "max")):
        if alias in rules and canonical in rules:
            raise ConfigurationError(
                f"Operators '{alias}' and '{canonical}' for {_describe(field)} are aliases; use one"
            )

    kwargs: Dict[str, Any] = {}
    if "required" in rules:
        kwargs["allow_absent"] = not _as_bool("required", rules["required"], field)
    if "allowEmpty" in rules:
        kwargs["allow_empty"] = _as_bool("allowEmpty", rules["allowEmpty"], field)
    if "extensions" in rules:
        kwargs["extensions"] = _as_extensions(rules["extensions"], field)

    coerce = _BOUND_COERCERS[kind]
    for name, target in (("min", "min"), ("minLength", "min"), ("max", "max"), ("maxLength", "max")):
        if name in rules and rules[name] is not None:
            kwargs[target] = coerce(name, rules[name], field)

    if "noSpaces" in rules:
        kwargs["no_spaces"] = _as_bool("noSpaces", rules["noSpaces"], field)
    if "dateOnly" in rules:
        kwargs["date_only"] = _as_bool("dateOnly", rules["dateOnly"], field)
    if "boundMode" in rules:
        kwargs["bound_mode"] = _as_bound_mode(rules["boundMode"], field)

    logger.debug("Built %s options for %s: %s", kind, _describe(field), kwargs)
    return _OPTION_TYPES[kind](**kwargs)


__all__ = ["options_from_mapping"]

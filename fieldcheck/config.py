# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Process-wide settings for fieldcheck.

The only global knob is the default :class:`BoundMode`. It is read from the
``FIELDCHECK_BOUND_MODE`` environment variable unless a caller pins it with
:func:`set_default_bound_mode`.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

ENV_BOUND_MODE = "FIELDCHECK_BOUND_MODE"


class BoundMode(str, Enum):
    """How string, numeric and decimal bounds decide whether they are set.

    ``LEGACY`` only enforces a bound that is greater than zero, so a bound of
    zero or below is ignored. ``STRICT`` enforces any bound that is not ``None``.
    """

    LEGACY = "legacy"
    STRICT = "strict"


_override: Optional[BoundMode] = None


def get_default_bound_mode() -> BoundMode:
    """Return the bound mode used by options records that leave it unset."""

    if _override is not None:
        return _override

    raw = os.getenv(ENV_BOUND_MODE, "")
    if not raw.strip():
        return BoundMode.LEGACY

    try:
        return BoundMode(raw.strip().lower())
    except ValueError:
        logger.warning("Ignoring malformed %s value: %r", ENV_BOUND_MODE, raw)
        return BoundMode.LEGACY


def set_default_bound_mode(mode: Optional[BoundMode]) -> None:
    """Pin the process default. ``None`` restores the environment lookup."""

    global _override
    if mode is not None and not isinstance(mode, BoundMode):
        mode = BoundMode(str(mode).lower())
    _override = mode
    logger.debug("Default bound mode set to %s", mode.value if mode else "environment")


def resolve_bound_mode(mode: Optional[BoundMode]) -> BoundMode:
    return mode if mode is not None else get_default_bound_mode()


__all__ = [
    "BoundMode",
    "ENV_BOUND_MODE",
    "get_default_bound_mode",
    "resolve_bound_mode",
    "set_default_bound_mode",
]

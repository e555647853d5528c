"""Telemetry package - OpenTelemetry metrics for validation outcomes."""

from .metrics import record_validation, validation_total
from .runtime import meter

__all__ = [
    "meter",
    "record_validation",
    "validation_total",
]

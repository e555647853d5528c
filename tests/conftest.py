"""Shared pytest fixtures for the fieldcheck test-suite."""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

from fieldcheck import config as fc_config
from fieldcheck.telemetry import metrics as fc_metrics


class _RecordingCounter:
    """Stands in for the OpenTelemetry counter and keeps every ``add`` call."""

    def __init__(self):
        self.calls: List[Tuple[int, Dict[str, Any]]] = []

    def add(self, amount, attributes=None):
        self.calls.append((amount, dict(attributes or {})))


@pytest.fixture(autouse=True)
def _isolate_bound_mode(monkeypatch):
    """Every test starts from the environment default (legacy)."""
    monkeypatch.delenv(fc_config.ENV_BOUND_MODE, raising=False)
    fc_config.set_default_bound_mode(None)
    yield
    fc_config.set_default_bound_mode(None)


@pytest.fixture()
def recorded_metrics(monkeypatch) -> _RecordingCounter:
    counter = _RecordingCounter()
    monkeypatch.setattr(fc_metrics, "validation_total", counter)
    return counter


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield

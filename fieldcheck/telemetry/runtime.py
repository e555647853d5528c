# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry handles shared by fieldcheck instruments."""

from __future__ import annotations

from opentelemetry import metrics

meter = metrics.get_meter("fieldcheck")

__all__ = ["meter"]

"""Prometheus metrics definitions for stringmask."""

from __future__ import annotations

from prometheus_client import Counter

MASK_SCANS = Counter(
    "stringmask_scans_total",
    "Number of mask scans executed by direction and outcome",
    ["direction", "valid"],
)

__all__ = ["MASK_SCANS"]

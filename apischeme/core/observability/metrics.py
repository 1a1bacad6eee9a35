from __future__ import annotations

from prometheus_client import REGISTRY, Counter

CODEC_OPERATIONS_TOTAL = Counter(
    "apischeme_codec_operations_total",
    "Encode/decode calls by outcome",
    ["operation", "version", "outcome"],
)


def record_codec(operation: str, version: str, outcome: str) -> None:
    CODEC_OPERATIONS_TOTAL.labels(operation=operation, version=version, outcome=outcome).inc()


def codec_count(operation: str, version: str, outcome: str) -> float:
    """Test helper: current value of one codec counter series (0.0 if never touched)."""
    v = REGISTRY.get_sample_value(
        "apischeme_codec_operations_total",
        {"operation": operation, "version": version, "outcome": outcome},
    )
    return v or 0.0

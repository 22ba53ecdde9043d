# Utils module
from .logging import setup_logging
from .observability import (
    Logger,
    MetricsRegistry,
    initialize_observability,
    get_metrics,
    metrics_enabled,
)

__all__ = [
    "setup_logging",
    "Logger",
    "MetricsRegistry",
    "initialize_observability",
    "get_metrics",
    "metrics_enabled",
]

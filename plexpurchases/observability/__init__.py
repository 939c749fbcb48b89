"""
Observability module - Logging and Metrics.
"""

from plexpurchases.observability.logging import LogSink, get_logger, setup_logging
from plexpurchases.observability.metrics import metrics

__all__ = [
    "LogSink",
    "get_logger",
    "setup_logging",
    "metrics",
]

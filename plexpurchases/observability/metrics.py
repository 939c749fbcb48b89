"""
Metrics Collection with Prometheus.

Exposes purchase catalog load outcomes for monitoring.
"""

from prometheus_client import Counter, Gauge, Histogram, Info

from plexpurchases.config import settings


class PurchaseMetrics:
    """
    Centralized metrics for the purchase catalog.

    Covers:
    - Load passes (count, duration)
    - Files parsed, rejected and accepted
    - Current catalog size
    """

    def __init__(self) -> None:
        """Initialize all Prometheus metrics."""

        self.service_info = Info(
            "plexpurchases_service",
            "Service information",
        )
        self.service_info.info(
            {
                "version": settings.plugin_version,
                "service_name": settings.service_name,
            }
        )

        self.load_passes_total = Counter(
            "plexpurchases_load_passes_total",
            "Total purchase load passes",
            ["outcome"],
        )

        self.load_duration_seconds = Histogram(
            "plexpurchases_load_duration_seconds",
            "Duration of a purchase load pass in seconds",
            buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
        )

        self.purchases_loaded_total = Counter(
            "plexpurchases_purchases_loaded_total",
            "Purchase definitions accepted into the catalog",
        )

        self.files_rejected_total = Counter(
            "plexpurchases_files_rejected_total",
            "Purchase files skipped during load",
            ["reason"],
        )

        self.catalog_size = Gauge(
            "plexpurchases_catalog_size",
            "Number of purchases currently in the catalog",
        )

    def record_load_pass(self, outcome: str, duration: float, catalog_size: int) -> None:
        """Record the end of a load pass and the catalog size it left behind."""
        self.load_passes_total.labels(outcome=outcome).inc()
        self.load_duration_seconds.observe(duration)
        self.catalog_size.set(catalog_size)

    def record_accepted(self, catalog_size: int) -> None:
        """Record a purchase entering the catalog."""
        self.purchases_loaded_total.inc()
        self.catalog_size.set(catalog_size)

    def record_rejected(self, reason: str) -> None:
        """Record a purchase file kept out of the catalog."""
        self.files_rejected_total.labels(reason=reason).inc()


# Global metrics instance
metrics = PurchaseMetrics()

"""
Plugin entry point - Lifecycle hooks called by the host server.
"""

from prometheus_client import start_http_server

from plexpurchases.config import Settings, get_settings
from plexpurchases.observability import LogSink, get_logger, setup_logging
from plexpurchases.services.purchase_holder import PurchaseConfigHolder


class PlexPurchasesPlugin:
    """
    Wires settings, logging and the purchase catalog together.

    The host calls on_enable once at startup, on_disable at shutdown and
    on_player_join for each joining player. None of the hooks raise.
    """

    def __init__(self, settings: Settings | None = None, logger: LogSink | None = None) -> None:
        self.settings = settings or get_settings()
        self._logger = logger
        self._purchases_holder: PurchaseConfigHolder | None = None

    @property
    def logger(self) -> LogSink:
        if self._logger is None:
            self._logger = get_logger(__name__)
        return self._logger

    @property
    def purchases_holder(self) -> PurchaseConfigHolder | None:
        return self._purchases_holder

    def on_enable(self) -> None:
        """Set up logging and load the purchase catalog."""
        if self._logger is None:
            setup_logging(self.settings)

        self.logger.info(
            "plugin_starting",
            plugin=self.settings.plugin_name,
            version=self.settings.plugin_version,
            layout=self.settings.purchases_layout.value,
        )

        if self.settings.metrics_enabled:
            try:
                start_http_server(self.settings.metrics_port)
                self.logger.info("metrics_server_started", port=self.settings.metrics_port)
            except OSError as e:
                self.logger.error(
                    "metrics_server_failed", port=self.settings.metrics_port, error=str(e)
                )

        try:
            self._purchases_holder = PurchaseConfigHolder(self.settings, logger=self.logger)
            self._purchases_holder.load_purchases()

            self.logger.info("plugin_enabled", outcome="success")
        except Exception as e:
            self.logger.error("plugin_enable_failed", error=str(e), exc_info=True)

    def on_disable(self) -> None:
        """Shut down. The catalog is plain memory, so there is nothing to release."""
        self.logger.warning("plugin_shutdown_started")
        self.logger.info("plugin_disabled")

    def on_player_join(self, player_name: str) -> None:
        """Log a joining player together with the catalog size."""
        self.logger.info("player_joined", player=player_name)

        if self._purchases_holder is not None:
            self.logger.debug(
                "player_joined_catalog_size",
                player=player_name,
                purchases=self._purchases_holder.get_configured_purchase_count(),
            )

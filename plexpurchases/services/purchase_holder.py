"""
Purchase Configuration Holder - Owns the in-memory purchase catalog.

Loads one purchase per YAML file from the purchases directory, validates
each one and serves lookups to the rest of the plugin. Loading is best
effort: every failure is logged where it happens and never raised.
"""

import time
from pathlib import Path

from plexpurchases.config import Settings, get_settings
from plexpurchases.exceptions import PurchaseDirectoryError
from plexpurchases.models.purchase import PurchaseConfig
from plexpurchases.models.results import RejectionReason
from plexpurchases.observability.logging import LogSink, get_logger
from plexpurchases.observability.metrics import metrics
from plexpurchases.services.purchase_paths import locate_purchases_dir
from plexpurchases.services.purchase_validation import validate_purchase
from plexpurchases.services.yaml_mapper import YamlMapper

YAML_SUFFIXES = (".yml", ".yaml")


def find_yaml_files(directory: Path) -> list[Path]:
    """
    List every regular .yml/.yaml file below a directory.

    Extensions match case-insensitively. Paths are sorted so a load pass
    always sees files in the same order.

    Raises:
        OSError: If the directory tree cannot be scanned
    """
    return sorted(
        path
        for path in directory.rglob("*")
        if path.suffix.lower() in YAML_SUFFIXES and path.is_file()
    )


class PurchaseConfigHolder:
    """Loads and stores the configured purchases."""

    def __init__(
        self,
        settings: Settings | None = None,
        mapper: YamlMapper[PurchaseConfig] | None = None,
        logger: LogSink | None = None,
    ) -> None:
        """Initialize an empty, unloaded catalog."""
        self.settings = settings or get_settings()
        self.logger = logger or get_logger(__name__)
        self.mapper = mapper or YamlMapper(PurchaseConfig, logger=self.logger)
        self._purchases: list[PurchaseConfig] = []
        self._loaded = False

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def load_purchases(self) -> None:
        """
        Load every purchase definition from the purchases directory.

        A missing directory leaves the catalog empty. Files that fail to parse
        or validate are skipped. Purchases whose productId is already in the
        catalog are skipped as well, so calling this twice does not duplicate
        entries.
        """
        self.logger.info("purchases_load_started")
        started = time.perf_counter()

        try:
            purchases_dir = locate_purchases_dir(self.settings, self.logger)
        except PurchaseDirectoryError as e:
            self.logger.warning(
                "purchases_directory_missing",
                path=str(e.path),
                detail=e.message,
                hint="this plugin is useless without purchase definitions",
            )
            self._loaded = True
            metrics.record_load_pass(
                "missing_directory", time.perf_counter() - started, len(self._purchases)
            )
            return

        outcome = self._load_purchase_files(purchases_dir)
        self._loaded = True
        metrics.record_load_pass(outcome, time.perf_counter() - started, len(self._purchases))

        self.logger.info(
            "purchases_loaded",
            outcome="success",
            count=len(self._purchases),
            path=str(purchases_dir),
        )

    def reload_purchases(self) -> None:
        """Drop the current catalog and load it again from disk."""
        self._purchases.clear()
        self._loaded = False
        self.load_purchases()

    def _load_purchase_files(self, purchases_dir: Path) -> str:
        try:
            yaml_files = find_yaml_files(purchases_dir)
        except OSError as e:
            self.logger.error(
                "purchases_directory_scan_failed", path=str(purchases_dir), error=str(e)
            )
            return "scan_failed"

        self.logger.info("purchase_files_found", count=len(yaml_files), path=str(purchases_dir))

        for yaml_file in yaml_files:
            self._load_purchase_file(yaml_file)

        return "loaded"

    def _load_purchase_file(self, yaml_file: Path) -> None:
        self.logger.debug("purchase_file_loading", file=yaml_file.name)

        result = self.mapper.parse_file(yaml_file)
        if not result.ok or result.value is None:
            self.logger.warning(
                "purchase_file_parse_failed",
                file=yaml_file.name,
                reason=result.reason.value if result.reason else None,
            )
            metrics.record_rejected(result.reason.value if result.reason else "unknown")
            return

        purchase = result.value
        validation = validate_purchase(purchase, self.logger)
        if not validation.accepted:
            self.logger.warning(
                "purchase_file_invalid",
                file=yaml_file.name,
                reason=validation.reason.value if validation.reason else None,
            )
            metrics.record_rejected(validation.reason.value if validation.reason else "unknown")
            return

        if self.get_config_by_id(purchase.product_id or "") is not None:
            self.logger.warning(
                "purchase_duplicate_product_id",
                file=yaml_file.name,
                product_id=purchase.product_id,
            )
            metrics.record_rejected(RejectionReason.DUPLICATE_PRODUCT_ID.value)
            return

        self._purchases.append(purchase)
        metrics.record_accepted(len(self._purchases))
        self.logger.debug(
            "purchase_loaded",
            product_name=purchase.product_name,
            product_id=purchase.product_id,
            file=yaml_file.name,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_configured_purchases(self) -> list[PurchaseConfig]:
        """Get a copy of all loaded purchases in load order."""
        return list(self._purchases)

    def get_config_by_id(self, product_id: str) -> PurchaseConfig | None:
        """
        Get a purchase by its product ID.

        Args:
            product_id: Exact productId to look for

        Returns:
            The first matching purchase, or None if there is none
        """
        return next((p for p in self._purchases if p.product_id == product_id), None)

    def get_configured_purchase_count(self) -> int:
        """Get the number of loaded purchases."""
        return len(self._purchases)

    def export_purchases(self, target_dir: Path) -> int:
        """
        Write every loaded purchase to its own YAML file.

        Files are named after the subscription ID for subscriptions and the
        product ID otherwise. Names containing a path separator, and names
        already written in this export, are skipped.

        Returns:
            Number of files written
        """
        written = 0
        taken: set[str] = set()
        for purchase in self._purchases:
            filename = purchase.export_filename
            if "/" in filename or "\\" in filename:
                self.logger.warning(
                    "purchase_export_unsafe_filename",
                    product_id=purchase.product_id,
                    file=filename,
                )
                continue
            if filename in taken:
                self.logger.warning(
                    "purchase_export_filename_taken",
                    product_id=purchase.product_id,
                    file=filename,
                )
                continue

            taken.add(filename)
            if self.mapper.write(target_dir / filename, purchase):
                written += 1

        self.logger.info(
            "purchases_exported", count=written, total=len(self._purchases), path=str(target_dir)
        )
        return written

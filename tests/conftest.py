"""
Pytest Configuration and Centralized Fixtures.

Provides reusable fixtures for testing:
- Capturing structlog logger injected into mapper and holder
- Settings pointing at a temporary plugin data folder
- Helpers for writing purchase YAML files
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml
from structlog.testing import LogCapture

from plexpurchases.config import PurchasesLayout, Settings
from plexpurchases.models.purchase import PurchaseConfig
from plexpurchases.services.purchase_holder import PurchaseConfigHolder
from plexpurchases.services.yaml_mapper import YamlMapper

# ============================================================================
# Logging Fixtures
# ============================================================================


def make_capturing_logger(capture: LogCapture) -> Any:
    """Build a logger whose entries end up in capture.entries."""
    return structlog.wrap_logger(
        None,
        processors=[capture],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )


@pytest.fixture
def log_capture() -> LogCapture:
    """Captured log entries (dicts with 'event' and 'log_level')."""
    return LogCapture()


@pytest.fixture
def capture_logger(log_capture: LogCapture) -> Any:
    """Logger to inject into components under test."""
    return make_capturing_logger(log_capture)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def data_folder(tmp_path: Path) -> Path:
    """Plugin data folder laid out like a server: <root>/plugins/PlexPurchases."""
    folder = tmp_path / "server" / "plugins" / "PlexPurchases"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def assets_settings(data_folder: Path) -> Settings:
    """Settings for the assets layout."""
    return Settings(data_folder=data_folder, purchases_layout=PurchasesLayout.ASSETS)


@pytest.fixture
def game_config_settings(data_folder: Path) -> Settings:
    """Settings for the shared game-config layout."""
    return Settings(data_folder=data_folder, purchases_layout=PurchasesLayout.GAME_CONFIG)


@pytest.fixture
def purchases_dir(data_folder: Path) -> Path:
    """Existing assets/purchases directory."""
    directory = data_folder / "assets" / "purchases"
    directory.mkdir(parents=True)
    return directory


# ============================================================================
# Purchase Fixtures
# ============================================================================


SWORD_PURCHASE: dict[str, Any] = {
    "productId": "sword",
    "productName": "Sword",
    "productDescription": "A sharp diamond sword",
    "price": 100,
    "callbackDelivery": "ONLY_WHEN_PLAYER_ONLINE",
    "repeatablePurchase": True,
    "actions": {
        "success": ["give <player> diamond_sword 1"],
        "expire": [],
        "renew": [],
    },
    "displayItem": "DIAMOND_SWORD",
    "amount": 1,
    "permission": "plex.purchases.sword",
}


@pytest.fixture
def write_purchase() -> Callable[..., Path]:
    """Write a purchase mapping (or raw text) as a YAML file."""

    def _write(directory: Path, name: str, content: dict[str, Any] | str) -> Path:
        path = directory / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sword() -> PurchaseConfig:
    """Fully populated purchase."""
    return PurchaseConfig.model_validate(SWORD_PURCHASE)


@pytest.fixture
def mapper(capture_logger: Any) -> YamlMapper[PurchaseConfig]:
    """Purchase mapper logging into log_capture."""
    return YamlMapper(PurchaseConfig, logger=capture_logger)


@pytest.fixture
def holder(assets_settings: Settings, capture_logger: Any) -> PurchaseConfigHolder:
    """Unloaded holder on the assets layout."""
    return PurchaseConfigHolder(assets_settings, logger=capture_logger)

"""
Purchase directory resolution for the two supported layouts.

assets:      <data_folder>/assets/purchases, created on first start
game_config: <plugins>/../game-config/purchases, shared with the game server
             and never created by the plugin
"""

from pathlib import Path

from plexpurchases.config import PurchasesLayout, Settings
from plexpurchases.exceptions import PurchaseDirectoryError
from plexpurchases.observability.logging import LogSink

ASSETS_SUBDIR = Path("assets") / "purchases"
GAME_CONFIG_DIR = "game-config"
PURCHASES_DIR = "purchases"


def resolve_purchases_dir(settings: Settings) -> Path:
    """Return where purchase definitions are expected for the configured layout."""
    if settings.purchases_layout == PurchasesLayout.GAME_CONFIG:
        return settings.plugins_root.parent / GAME_CONFIG_DIR / PURCHASES_DIR
    return settings.data_folder / ASSETS_SUBDIR


def locate_purchases_dir(settings: Settings, logger: LogSink) -> Path:
    """
    Find the purchases directory, preparing it where the layout allows.

    Raises:
        PurchaseDirectoryError: If the directory (or, for game_config, its
            game-config parent) does not exist. In the assets layout the
            directory is created before raising, so the next start finds it.
    """
    purchases_dir = resolve_purchases_dir(settings)

    if settings.purchases_layout == PurchasesLayout.GAME_CONFIG:
        game_config_dir = purchases_dir.parent
        if not game_config_dir.is_dir():
            raise PurchaseDirectoryError(game_config_dir, "game-config directory not found")
        if not purchases_dir.is_dir():
            raise PurchaseDirectoryError(purchases_dir, "purchases directory not found")
        return purchases_dir

    if not purchases_dir.is_dir():
        try:
            purchases_dir.mkdir(parents=True, exist_ok=True)
            logger.info("purchases_directory_created", path=str(purchases_dir))
        except OSError as e:
            logger.error(
                "purchases_directory_create_failed", path=str(purchases_dir), error=str(e)
            )
        raise PurchaseDirectoryError(purchases_dir, "purchases directory was empty")

    return purchases_dir

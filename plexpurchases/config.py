"""
Plugin Configuration - Pydantic Settings for type-safe config.

NO DICTIONARIES - All configuration is strongly typed.
FAIL FAST - Invalid config is rejected when the plugin is enabled.
"""

import logging
import sys
from enum import Enum
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when critical configuration is missing or invalid."""

    pass


class PurchasesLayout(str, Enum):
    """Where purchase definitions live relative to the plugin data folder."""

    ASSETS = "assets"  # <data_folder>/assets/purchases
    GAME_CONFIG = "game_config"  # <plugins>/../game-config/purchases


class Settings(BaseSettings):
    """Plugin settings loaded from environment variables."""

    # Plugin
    plugin_name: str = "PlexPurchases"
    plugin_version: str = "1.0.0"
    data_folder: Path = Path("plugins/PlexPurchases")

    # Purchase definitions
    purchases_layout: PurchasesLayout = PurchasesLayout.ASSETS

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # json or console

    # Observability - Metrics
    metrics_enabled: bool = False
    metrics_port: int = 9090
    service_name: str = "plex-purchases"

    model_config = SettingsConfigDict(
        env_prefix="PLEX_PURCHASES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_critical_config(self) -> "Settings":
        """
        FAIL FAST: Validate configuration before anything is loaded.

        A typo in the log level or format would otherwise silently hide
        every load diagnostic the operator relies on.
        """
        errors: list[str] = []

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"LOG_LEVEL must be a logging level name, got: {self.log_level}")

        if self.log_format not in ("json", "console"):
            errors.append(f"LOG_FORMAT must be 'json' or 'console', got: {self.log_format}")

        if errors:
            error_msg = "\n".join(
                [
                    "",
                    "=" * 60,
                    "CRITICAL CONFIGURATION ERROR - PLUGIN CANNOT START",
                    "=" * 60,
                    *[f"  ✗ {e}" for e in errors],
                    "=" * 60,
                    "",
                ]
            )
            print(error_msg, file=sys.stderr)
            raise ConfigurationError(error_msg)

        return self

    @property
    def plugins_root(self) -> Path:
        """Directory that contains every plugin's data folder."""
        return self.data_folder.parent


# Global settings instance - validates at import time
settings = Settings()


def get_settings() -> Settings:
    """Get plugin settings instance."""
    return settings

"""
Tests for structlog setup.
"""

import json
import logging

import structlog

from plexpurchases.config import Settings
from plexpurchases.observability.logging import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def teardown_method(self):
        structlog.reset_defaults()

    def test_json_entries_carry_app_context(self, caplog):
        caplog.set_level(logging.INFO)
        setup_logging(
            Settings(
                _env_file=None, log_format="json", service_name="plex-test", plugin_version="9.9"
            )
        )

        get_logger("plexpurchases.test").info("purchases_loaded", count=3)

        entry = json.loads(caplog.records[-1].getMessage())
        assert entry["event"] == "purchases_loaded"
        assert entry["count"] == 3
        assert entry["level"] == "info"
        assert entry["logger"] == "plexpurchases.test"
        assert entry["service"] == "plex-test"
        assert entry["version"] == "9.9"
        assert "timestamp" in entry

    def test_console_renderer_by_default(self):
        setup_logging(Settings(_env_file=None))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_debug_level_renders_exceptions(self):
        setup_logging(Settings(_env_file=None, log_level="DEBUG", log_format="json"))

        processors = structlog.get_config()["processors"]
        assert any(isinstance(p, structlog.processors.ExceptionRenderer) for p in processors)

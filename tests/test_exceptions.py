"""
Tests for exception classes.

Covers all exception types and their string representations.
"""

from pathlib import Path

import pytest

from plexpurchases.config import ConfigurationError
from plexpurchases.exceptions import (
    PurchaseConfigError,
    PurchaseDirectoryError,
    PurchaseParseError,
    PurchaseValidationError,
)
from plexpurchases.models.results import ParseFailure, ParseFailureReason, RejectionReason


class TestPurchaseConfigError:
    """Tests for base PurchaseConfigError."""

    def test_is_exception(self):
        """PurchaseConfigError is a subclass of Exception."""
        assert issubclass(PurchaseConfigError, Exception)

    def test_can_be_raised(self):
        """PurchaseConfigError can be raised and caught."""
        with pytest.raises(PurchaseConfigError):
            raise PurchaseConfigError("test error")


class TestPurchaseParseError:
    """Tests for PurchaseParseError."""

    def test_attributes(self):
        """Exception keeps the failure it was built from."""
        failure = ParseFailure(
            reason=ParseFailureReason.YAML_SYNTAX, source="sword.yml", detail="bad indent"
        )
        exc = PurchaseParseError(failure)
        assert exc.failure is failure

    def test_message_format(self):
        """Message names the source, reason and detail."""
        failure = ParseFailure(
            reason=ParseFailureReason.SCHEMA_MISMATCH, source="<string>", detail="price"
        )
        message = str(PurchaseParseError(failure))
        assert "<string>" in message
        assert "schema_mismatch" in message
        assert "price" in message

    def test_is_purchase_config_error(self):
        failure = ParseFailure(ParseFailureReason.IO_ERROR, "<stream>", "closed")
        assert isinstance(PurchaseParseError(failure), PurchaseConfigError)


class TestPurchaseValidationError:
    """Tests for PurchaseValidationError."""

    def test_attributes(self):
        exc = PurchaseValidationError(RejectionReason.INVALID_PRICE, "sword")
        assert exc.reason is RejectionReason.INVALID_PRICE
        assert exc.product_id == "sword"

    def test_message_format(self):
        exc = PurchaseValidationError(RejectionReason.MISSING_PRODUCT_NAME, "sword")
        assert "'sword'" in str(exc)
        assert "missing_product_name" in str(exc)

    def test_missing_product_id(self):
        exc = PurchaseValidationError(RejectionReason.MISSING_PRODUCT_ID, None)
        assert "None" in str(exc)


class TestPurchaseDirectoryError:
    """Tests for PurchaseDirectoryError."""

    def test_attributes(self):
        exc = PurchaseDirectoryError(Path("/srv/game-config"), "not found")
        assert exc.path == Path("/srv/game-config")
        assert exc.message == "not found"

    def test_message_format(self):
        exc = PurchaseDirectoryError(Path("/srv/game-config"), "not found")
        assert str(exc) == "Purchases directory /srv/game-config: not found"


class TestConfigurationError:
    """ConfigurationError stays outside the purchase hierarchy."""

    def test_not_a_purchase_config_error(self):
        assert not issubclass(ConfigurationError, PurchaseConfigError)

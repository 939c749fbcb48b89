"""
Exception Classes - Strongly typed exception hierarchy.

NO DICTIONARIES - All exceptions have typed attributes.
"""

from pathlib import Path

from plexpurchases.models.results import ParseFailure, RejectionReason


class PurchaseConfigError(Exception):
    """Base exception for all purchase configuration errors."""

    pass


class PurchaseParseError(PurchaseConfigError):
    """Raised when a YAML document cannot be turned into a record."""

    def __init__(self, failure: ParseFailure) -> None:
        self.failure = failure
        super().__init__(
            f"Failed to parse {failure.source} ({failure.reason.value}): {failure.detail}"
        )


class PurchaseValidationError(PurchaseConfigError):
    """Raised when a parsed record breaks a catalog invariant."""

    def __init__(self, reason: RejectionReason, product_id: str | None) -> None:
        self.reason = reason
        self.product_id = product_id
        super().__init__(f"Invalid purchase {product_id!r}: {reason.value}")


class PurchaseDirectoryError(PurchaseConfigError):
    """Raised when the purchases directory is missing or cannot be scanned."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Purchases directory {path}: {message}")

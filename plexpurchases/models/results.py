"""
Result Models - Explicit outcomes for parsing and validation.

Loading never raises; callers inspect these results to learn why a
document or record was skipped.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar, cast

T = TypeVar("T")


class ParseFailureReason(str, Enum):
    """Why a YAML document could not be mapped to a record."""

    FILE_NOT_FOUND = "file_not_found"
    IO_ERROR = "io_error"
    YAML_SYNTAX = "yaml_syntax"
    NOT_A_MAPPING = "not_a_mapping"
    SCHEMA_MISMATCH = "schema_mismatch"


class RejectionReason(str, Enum):
    """Why a parsed purchase was kept out of the catalog."""

    MISSING_PRODUCT_ID = "missing_product_id"
    MISSING_PRODUCT_NAME = "missing_product_name"
    INVALID_PRICE = "invalid_price"
    DUPLICATE_PRODUCT_ID = "duplicate_product_id"


@dataclass(frozen=True)
class ParseFailure:
    """Description of a failed parse."""

    reason: ParseFailureReason
    source: str  # file path, "<string>" or "<stream>"
    detail: str


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Either a fully populated record or the failure that prevented it."""

    value: T | None = None
    failure: ParseFailure | None = None

    def __post_init__(self) -> None:
        """Exactly one of value and failure must be set."""
        if (self.value is None) == (self.failure is None):
            raise ValueError("ParseResult needs exactly one of value or failure")

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def reason(self) -> ParseFailureReason | None:
        return self.failure.reason if self.failure else None

    def unwrap(self) -> T:
        """Return the record, raising PurchaseParseError on failure."""
        from plexpurchases.exceptions import PurchaseParseError

        if self.failure is not None:
            raise PurchaseParseError(self.failure)
        return cast(T, self.value)

    @classmethod
    def success(cls, value: T) -> "ParseResult[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, reason: ParseFailureReason, source: str, detail: str) -> "ParseResult[T]":
        return cls(failure=ParseFailure(reason=reason, source=source, detail=detail))


@dataclass(frozen=True)
class PurchaseValidation:
    """Outcome of validating one purchase record."""

    reason: RejectionReason | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def missing_actions(self) -> bool:
        return "missing_actions" in self.warnings

    def raise_for_rejection(self, product_id: str | None) -> None:
        """Raise PurchaseValidationError if the record was rejected."""
        from plexpurchases.exceptions import PurchaseValidationError

        if self.reason is not None:
            raise PurchaseValidationError(self.reason, product_id)

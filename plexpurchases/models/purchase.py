"""
Purchase Models - Pydantic models for purchase definitions read from YAML.

One YAML file describes one purchase. Keys are lower camel case
(``productId``, ``callbackDelivery``); attributes are snake case.
Unknown keys are ignored and absent keys fall back to zero values.
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from plexpurchases.models.materials import is_known_material

PURCHASE_TIMES_PLACEHOLDER = "<purchase_times>"
MATERIAL_NAME_PATTERN = re.compile(r"^[A-Z0-9_]+$")


class DeliveryType(str, Enum):
    """When the fulfillment system may deliver a purchase."""

    ONLY_WHEN_PLAYER_ONLINE = "ONLY_WHEN_PLAYER_ONLINE"
    ALLOW_OFFLINE_DELIVERY = "ALLOW_OFFLINE_DELIVERY"


class SubscriptionFrequency(str, Enum):
    """Billing frequency of a subscription product."""

    MONTHLY = "MONTHLY"
    QUARTERLY = "QUARTERLY"
    SEMI_YEARLY = "SEMI_YEARLY"
    YEARLY = "YEARLY"


_YAML_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
    frozen=True,
    coerce_numbers_to_str=True,
)


class PurchaseActions(BaseModel):
    """Command templates run by the fulfillment system, in order."""

    model_config = _YAML_MODEL_CONFIG

    success: list[str] | None = None
    expire: list[str] | None = None
    renew: list[str] | None = None


class PurchaseConfig(BaseModel):
    """A single purchasable product or subscription."""

    model_config = _YAML_MODEL_CONFIG

    # Product options
    product_id: str | None = None
    product_name: str | None = None
    product_description: str | None = None
    price: int = 0
    callback_delivery: DeliveryType | None = None
    repeatable_purchase: bool = False

    # Subscription options
    subscription_id: str | None = None
    subscription_name: str | None = None
    subscription_description: str | None = None
    subscription_basis: SubscriptionFrequency | None = None

    # Plugin options
    actions: PurchaseActions | None = None
    dependency: str | None = None
    dependency_amount: int = 0
    hide_if_no_permission: bool = False
    display_item: str | None = None
    amount: int = 0
    permission: str | None = None

    @field_validator("price", "dependency_amount", "amount", mode="before")
    @classmethod
    def null_int_to_zero(cls, v: Any) -> Any:
        """An explicit YAML null on a number means zero."""
        return 0 if v is None else v

    @field_validator("repeatable_purchase", "hide_if_no_permission", mode="before")
    @classmethod
    def null_bool_to_false(cls, v: Any) -> Any:
        """An explicit YAML null on a flag means false."""
        return False if v is None else v

    @field_validator("display_item", mode="before")
    @classmethod
    def normalize_display_item(cls, v: Any) -> Any:
        """Accept material names in any case; blank means no display item."""
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    @field_validator("display_item")
    @classmethod
    def check_material_name(cls, v: str | None) -> str | None:
        if v is not None and not MATERIAL_NAME_PATTERN.match(v):
            raise ValueError(f"not a material name: {v!r}")
        return v

    @property
    def is_limited_by_times(self) -> bool:
        """True if the permission node counts how often the purchase was bought."""
        return self.permission is not None and PURCHASE_TIMES_PLACEHOLDER in self.permission

    @property
    def has_known_display_item(self) -> bool:
        """True if the display item is one the configuration picker offers."""
        return self.display_item is not None and is_known_material(self.display_item)

    @property
    def is_subscription(self) -> bool:
        return bool(self.subscription_id and self.subscription_id.strip())

    @property
    def export_filename(self) -> str:
        """File name used when writing this purchase back to disk."""
        key = self.subscription_id if self.is_subscription else self.product_id
        return f"{key}.yml"

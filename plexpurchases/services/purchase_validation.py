"""
Purchase validation - Decides whether a parsed purchase may enter the catalog.
"""

from plexpurchases.models.purchase import PurchaseConfig
from plexpurchases.models.results import PurchaseValidation, RejectionReason
from plexpurchases.observability.logging import LogSink


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_purchase(purchase: PurchaseConfig, logger: LogSink) -> PurchaseValidation:
    """
    Validate the required fields of a purchase.

    Checks run in order and stop at the first failure. A purchase without
    actions is accepted with a warning, since another plugin may fulfil it
    by listening for the purchase itself.

    Args:
        purchase: Parsed purchase record
        logger: Sink for the diagnostic of a rejection or warning

    Returns:
        PurchaseValidation with the rejection reason, if any
    """
    if _is_blank(purchase.product_id):
        logger.warning("purchase_missing_required_field", field="productId")
        return PurchaseValidation(reason=RejectionReason.MISSING_PRODUCT_ID)

    if _is_blank(purchase.product_name):
        logger.warning(
            "purchase_missing_required_field",
            field="productName",
            product_id=purchase.product_id,
        )
        return PurchaseValidation(reason=RejectionReason.MISSING_PRODUCT_NAME)

    if purchase.price <= 0:
        logger.warning(
            "purchase_invalid_price",
            product_id=purchase.product_id,
            price=purchase.price,
        )
        return PurchaseValidation(reason=RejectionReason.INVALID_PRICE)

    if purchase.actions is None:
        logger.warning(
            "purchase_missing_actions",
            product_id=purchase.product_id,
            hint="you'll have to listen for this purchase in your plugin",
        )
        return PurchaseValidation(warnings=("missing_actions",))

    return PurchaseValidation()

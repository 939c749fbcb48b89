"""
Hypothesis Property-Based Tests for purchase loading.

Uses Hypothesis to generate purchases and verify:
- YAML round-trip stability through the mapper
- Validation invariants (price, productId, productName)
- The <purchase_times> permission predicate
"""

import logging

import structlog
from hypothesis import given
from hypothesis import strategies as st
from structlog.testing import LogCapture

from plexpurchases.models.materials import DisplayItem
from plexpurchases.models.purchase import (
    PURCHASE_TIMES_PLACEHOLDER,
    DeliveryType,
    PurchaseActions,
    PurchaseConfig,
    SubscriptionFrequency,
)
from plexpurchases.models.results import RejectionReason
from plexpurchases.services.purchase_validation import validate_purchase
from plexpurchases.services.yaml_mapper import YamlMapper

# ============================================================================
# Hypothesis Strategies - Reusable data generators
# ============================================================================


# Printable single-line text
texts = st.text(
    alphabet=st.characters(exclude_categories=("Cs", "Cc", "Cn", "Cf", "Zl", "Zp")),
    max_size=40,
)

non_blank_texts = texts.filter(lambda x: x.strip())

blank_texts = st.one_of(st.none(), st.sampled_from(["", " ", "   ", "\t"]))

positive_prices = st.integers(min_value=1, max_value=10_000_000)

non_positive_prices = st.integers(min_value=-10_000_000, max_value=0)

optional_texts = st.one_of(st.none(), texts)

action_lists = st.one_of(st.none(), st.lists(texts, max_size=5))


@st.composite
def purchase_actions(draw):
    """Generate optional PurchaseActions."""
    if draw(st.booleans()):
        return None
    return PurchaseActions(
        success=draw(action_lists),
        expire=draw(action_lists),
        renew=draw(action_lists),
    )


@st.composite
def purchases(
    draw, product_id=non_blank_texts, product_name=non_blank_texts, price=positive_prices
):
    """Generate PurchaseConfig objects."""
    return PurchaseConfig(
        product_id=draw(product_id),
        product_name=draw(product_name),
        product_description=draw(optional_texts),
        price=draw(price),
        callback_delivery=draw(st.one_of(st.none(), st.sampled_from(list(DeliveryType)))),
        repeatable_purchase=draw(st.booleans()),
        subscription_id=draw(optional_texts),
        subscription_name=draw(optional_texts),
        subscription_description=draw(optional_texts),
        subscription_basis=draw(
            st.one_of(st.none(), st.sampled_from(list(SubscriptionFrequency)))
        ),
        actions=draw(purchase_actions()),
        dependency=draw(optional_texts),
        dependency_amount=draw(st.integers(min_value=0, max_value=1000)),
        hide_if_no_permission=draw(st.booleans()),
        display_item=draw(
            st.one_of(st.none(), st.sampled_from([item.value for item in DisplayItem]))
        ),
        amount=draw(st.integers(min_value=0, max_value=1000)),
        permission=draw(optional_texts),
    )


def _quiet_logger(capture: LogCapture | None = None):
    return structlog.wrap_logger(
        None,
        processors=[capture or LogCapture()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
    )


# ============================================================================
# Round trip
# ============================================================================


class TestYamlRoundTrip:
    """Serializing then parsing yields the same record."""

    @given(purchase=purchases())
    def test_serialize_parse_round_trip(self, purchase):
        mapper = YamlMapper(PurchaseConfig, logger=_quiet_logger())

        text = mapper.serialize(purchase)
        assert text is not None

        reparsed = mapper.parse_string(text)
        assert reparsed.ok
        assert reparsed.value == purchase

    @given(purchase=purchases())
    def test_round_trip_is_stable(self, purchase):
        """A second pass produces the same YAML text."""
        mapper = YamlMapper(PurchaseConfig, logger=_quiet_logger())

        first = mapper.serialize(purchase)
        second = mapper.serialize(mapper.parse_string(first).unwrap())

        assert first == second


# ============================================================================
# Validation invariants
# ============================================================================


class TestValidationProperties:
    """Validation rules hold for any combination of other fields."""

    @given(purchase=purchases(price=non_positive_prices))
    def test_non_positive_price_always_rejected(self, purchase):
        validation = validate_purchase(purchase, _quiet_logger())
        assert validation.reason is RejectionReason.INVALID_PRICE

    @given(purchase=purchases(product_id=blank_texts))
    def test_blank_product_id_always_rejected(self, purchase):
        validation = validate_purchase(purchase, _quiet_logger())
        assert validation.reason is RejectionReason.MISSING_PRODUCT_ID

    @given(purchase=purchases(product_name=blank_texts))
    def test_blank_product_name_always_rejected(self, purchase):
        validation = validate_purchase(purchase, _quiet_logger())
        assert validation.reason is RejectionReason.MISSING_PRODUCT_NAME

    @given(purchase=purchases())
    def test_missing_actions_warns_but_accepts(self, purchase):
        capture = LogCapture()
        validation = validate_purchase(purchase, _quiet_logger(capture))

        assert validation.accepted is True
        warned = any(e["event"] == "purchase_missing_actions" for e in capture.entries)
        assert warned is (purchase.actions is None)


# ============================================================================
# Permission predicate
# ============================================================================


class TestLimitedByTimesProperties:
    """is_limited_by_times mirrors a substring check on permission."""

    @given(prefix=texts, suffix=texts)
    def test_placeholder_anywhere(self, prefix, suffix):
        purchase = PurchaseConfig(permission=f"{prefix}{PURCHASE_TIMES_PLACEHOLDER}{suffix}")
        assert purchase.is_limited_by_times is True

    @given(permission=optional_texts)
    def test_matches_substring_check(self, permission):
        purchase = PurchaseConfig(permission=permission)
        expected = permission is not None and PURCHASE_TIMES_PLACEHOLDER in permission
        assert purchase.is_limited_by_times is expected

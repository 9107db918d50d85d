"""Pricing resolution and revenue.

Both pricing representations are resolved once into ``LineItem`` tuples so
the downstream calculators never see which one a program uses.
"""

from collections.abc import Iterable, Sequence

from bookkeeping.domain.errors import InvalidInputError, UnknownPricingOptionError
from bookkeeping.domain.models import (
    FlexiblePricing,
    LegacyPricing,
    LegacyRegistrationCounts,
    LineItem,
    Pricing,
    RegistrationCounts,
    RegistrationEntry,
)

FULL_PRICE_LABEL = "Full Price"
HALF_PRICE_LABEL = "Half Price"
SUBSCRIPTION_LABEL = "Subscription"


def resolve_line_items(
    pricing: Pricing,
    counts: RegistrationCounts,
    active_only: bool = True,
) -> tuple[LineItem, ...]:
    """Turn a program's pricing plus registration counts into line items.

    Raises:
        UnknownPricingOptionError: If an entry with a quantity references an
            option that does not exist, or is inactive while ``active_only``.
        InvalidInputError: If the pricing and counts shapes do not match.
    """
    if isinstance(pricing, FlexiblePricing):
        if isinstance(counts, LegacyRegistrationCounts):
            raise InvalidInputError("counts", "flexible pricing needs registration entries")
        return _resolve_flexible(pricing, counts, active_only)
    if isinstance(pricing, LegacyPricing):
        if not isinstance(counts, LegacyRegistrationCounts):
            raise InvalidInputError("counts", "legacy pricing needs legacy registration counts")
        return _resolve_legacy(pricing, counts)
    raise InvalidInputError("pricing", f"unsupported pricing type {type(pricing).__name__}")


def _resolve_flexible(
    pricing: FlexiblePricing,
    entries: Sequence[RegistrationEntry],
    active_only: bool,
) -> tuple[LineItem, ...]:
    resolved = []
    for entry in entries:
        if entry.quantity == 0:
            continue
        option = pricing.find(entry.pricing_option_id)
        if option is None:
            raise UnknownPricingOptionError(entry.pricing_option_id)
        if active_only and not option.is_active:
            raise UnknownPricingOptionError(entry.pricing_option_id, inactive=True)
        resolved.append((option.order, LineItem(entry.quantity, option.price, option.name)))

    # sorted() is stable, so entries sharing an order keep their input order
    return tuple(item for _, item in sorted(resolved, key=lambda pair: pair[0]))


def _resolve_legacy(
    pricing: LegacyPricing,
    counts: LegacyRegistrationCounts,
) -> tuple[LineItem, ...]:
    items = []
    if counts.full > 0:
        items.append(LineItem(counts.full, pricing.full_price, FULL_PRICE_LABEL))
    # Half-price registrations without a half price contribute nothing.
    if counts.half > 0 and pricing.half_price is not None:
        items.append(LineItem(counts.half, pricing.half_price, HALF_PRICE_LABEL))
    if counts.subscription > 0:
        price = pricing.subscription_price
        if price is None:
            price = pricing.full_price
        items.append(LineItem(counts.subscription, price, SUBSCRIPTION_LABEL))
    return tuple(items)


def calculate_revenue(line_items: Iterable[LineItem]) -> int:
    """Sum of quantity times unit price over all line items."""
    total = 0
    for item in line_items:
        if not isinstance(item, LineItem):
            raise InvalidInputError("line_items", "expected LineItem values")
        total += item.subtotal
    return total


def calculate_legacy_revenue(
    counts: LegacyRegistrationCounts,
    pricing: LegacyPricing,
) -> int:
    """Revenue of a legacy-priced registration."""
    return calculate_revenue(resolve_line_items(pricing, counts))

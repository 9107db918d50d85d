"""Unit tests for pricing resolution and revenue.

Run with: pytest tests/test_pricing.py -v
"""

import pytest

from bookkeeping.domain import (
    InvalidInputError,
    LegacyPricing,
    LegacyRegistrationCounts,
    LineItem,
    RegistrationEntry,
    UnknownPricingOptionError,
    calculate_legacy_revenue,
    calculate_revenue,
    resolve_line_items,
)


class TestLegacyRevenue:
    """Revenue for programs on fixed full/half/subscription prices."""

    def test_full_registrations_only(self):
        """Full registrations at the full price."""
        counts = LegacyRegistrationCounts(full=10, half=0, subscription=0)
        pricing = LegacyPricing(full_price=50000)

        assert calculate_legacy_revenue(counts, pricing) == 500000

    def test_mixed_registration_types(self):
        """Full, half and subscription registrations are all priced."""
        counts = LegacyRegistrationCounts(full=13, half=1, subscription=3)
        pricing = LegacyPricing(full_price=50000, half_price=25000, subscription_price=61500)

        # 13 * 50000 + 1 * 25000 + 3 * 61500
        assert calculate_legacy_revenue(counts, pricing) == 859500

    def test_subscription_falls_back_to_full_price(self):
        """Subscriptions without their own price use the full price."""
        counts = LegacyRegistrationCounts(full=5, half=0, subscription=2)
        pricing = LegacyPricing(full_price=45000)

        assert calculate_legacy_revenue(counts, pricing) == 315000

    def test_half_registrations_without_half_price_contribute_nothing(self):
        """No half price means no half line item."""
        counts = LegacyRegistrationCounts(full=1, half=4)
        pricing = LegacyPricing(full_price=10000)

        items = resolve_line_items(pricing, counts)

        assert items == (LineItem(1, 10000, "Full Price"),)

    def test_zero_counts_give_no_line_items(self):
        """Zero counts produce no line items."""
        items = resolve_line_items(LegacyPricing(full_price=10000), LegacyRegistrationCounts())
        assert items == ()


class TestFlexibleResolution:
    """Line items from named pricing options."""

    def test_entries_priced_by_option_and_ordered(self, flexible_program):
        """Entries take their option price and follow option order."""
        entries = (
            RegistrationEntry("student", 1),
            RegistrationEntry("full", 13),
        )

        items = resolve_line_items(flexible_program.pricing, entries)

        assert items == (
            LineItem(13, 50000, "Full Season"),
            LineItem(1, 25000, "Student Rate"),
        )
        assert calculate_revenue(items) == 675000

    def test_zero_quantity_entries_are_skipped(self, flexible_program):
        """Zero-quantity entries are skipped, even for unknown options."""
        entries = (RegistrationEntry("full", 0), RegistrationEntry("ghost", 0))
        assert resolve_line_items(flexible_program.pricing, entries) == ()

    def test_unknown_option_fails_whole_resolution(self, flexible_program):
        """An unknown option raises UnknownPricingOptionError."""
        entries = (RegistrationEntry("full", 3), RegistrationEntry("ghost", 1))

        with pytest.raises(UnknownPricingOptionError) as exc_info:
            resolve_line_items(flexible_program.pricing, entries)

        assert exc_info.value.pricing_option_id == "ghost"
        assert not exc_info.value.inactive

    def test_inactive_option_rejected_when_active_only(self, flexible_program):
        """An inactive option is rejected by default."""
        entries = (RegistrationEntry("old", 2),)

        with pytest.raises(UnknownPricingOptionError) as exc_info:
            resolve_line_items(flexible_program.pricing, entries)

        assert exc_info.value.inactive

    def test_inactive_option_allowed_when_not_active_only(self, flexible_program):
        """Inactive options price normally when active_only is off."""
        entries = (RegistrationEntry("old", 2),)

        items = resolve_line_items(flexible_program.pricing, entries, active_only=False)

        assert calculate_revenue(items) == 80000

    def test_mismatched_shapes_rejected(self, flexible_program):
        """Pricing and counts of different kinds raise InvalidInputError."""
        with pytest.raises(InvalidInputError):
            resolve_line_items(flexible_program.pricing, LegacyRegistrationCounts(full=1))
        with pytest.raises(InvalidInputError):
            resolve_line_items(LegacyPricing(full_price=1), (RegistrationEntry("full", 1),))


class TestCalculateRevenue:
    """Tests for calculate_revenue."""

    def test_empty_is_zero(self):
        """No line items give zero revenue."""
        assert calculate_revenue([]) == 0

    @pytest.mark.parametrize("quantity,price", [(0, 0), (1, 0), (7, 1234), (250, 99000)])
    def test_single_item_is_product(self, quantity, price):
        """One line item is quantity times unit price."""
        assert calculate_revenue([LineItem(quantity, price)]) == quantity * price

    def test_same_input_same_output(self):
        """Revenue is deterministic."""
        items = [LineItem(3, 1000), LineItem(2, 500)]
        assert calculate_revenue(items) == calculate_revenue(items) == 4000

    def test_rejects_non_line_items(self):
        """Anything but a LineItem raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            calculate_revenue([(3, 1000)])

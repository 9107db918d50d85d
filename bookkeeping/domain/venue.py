"""Venue revenue split and payment reconciliation."""

from collections.abc import Iterable
from decimal import Decimal

from bookkeeping.domain.errors import InvalidInputError
from bookkeeping.domain.models import Period, SeasonPeriod, VenueBalance, VenuePayment
from bookkeeping.domain.value_objects import (
    MonthPeriod,
    SplitPercent,
    require_non_negative_int,
    round_half_up,
    to_decimal,
)


def venue_share(revenue: int | Decimal, split_percent: SplitPercent) -> Decimal:
    """Unrounded venue share of a revenue figure."""
    return to_decimal(revenue, "revenue") * split_percent.value / Decimal(100)


def calculate_venue_costs(
    revenue: int,
    split_percent: SplitPercent | int | float | Decimal,
) -> int:
    """Venue share of revenue, rounded half up to a whole minor unit.

    Raises:
        InvalidInputError: If revenue is negative or the split is outside [0, 100].
    """
    require_non_negative_int(revenue, "revenue")
    if not isinstance(split_percent, SplitPercent):
        split_percent = SplitPercent.of(split_percent)
    return round_half_up(venue_share(revenue, split_percent))


def payments_for_period(
    payments: Iterable[VenuePayment],
    period: Period,
) -> tuple[VenuePayment, ...]:
    """Payments recorded against the given month or season."""
    if isinstance(period, MonthPeriod):
        return tuple(p for p in payments if p.month == period.month)
    if isinstance(period, SeasonPeriod):
        return tuple(p for p in payments if p.season_id == period.season.id)
    raise InvalidInputError("period", f"unsupported period type {type(period).__name__}")


def reconcile_venue_payments(owed: int, payments: Iterable[VenuePayment]) -> VenueBalance:
    """Compare what the venue is owed with what has been paid to it."""
    require_non_negative_int(owed, "owed")
    return VenueBalance(owed=owed, paid=sum(p.amount for p in payments))

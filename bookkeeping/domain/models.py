"""Domain models supplied by the data-access layer and produced by the calculators.

These are pure domain objects. Records arrive already loaded; the
calculators only read them and return new values.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bookkeeping.domain.errors import DomainError, InvalidInputError
from bookkeeping.domain.value_objects import (
    MonthPeriod,
    SessionHours,
    SplitPercent,
    WorkDays,
    require_non_negative_int,
)


@dataclass(frozen=True)
class PricingOption:
    """One purchasable price tier of a program."""

    id: str
    name: str
    price: int
    order: int = 0
    is_active: bool = True

    def __post_init__(self) -> None:
        require_non_negative_int(self.price, "price")


@dataclass(frozen=True)
class RegistrationEntry:
    """N registrants who bought one pricing option."""

    pricing_option_id: str
    quantity: int

    def __post_init__(self) -> None:
        require_non_negative_int(self.quantity, "quantity")


@dataclass(frozen=True)
class FlexiblePricing:
    """Named, ordered pricing options."""

    options: tuple[PricingOption, ...] = ()

    def __post_init__(self) -> None:
        ids = [option.id for option in self.options]
        if len(ids) != len(set(ids)):
            raise InvalidInputError("pricing_options", "option ids must be unique")

    def find(self, pricing_option_id: str) -> PricingOption | None:
        for option in self.options:
            if option.id == pricing_option_id:
                return option
        return None


@dataclass(frozen=True)
class LegacyPricing:
    """Fixed full/half/subscription prices used by older programs."""

    full_price: int
    half_price: int | None = None
    subscription_price: int | None = None

    def __post_init__(self) -> None:
        require_non_negative_int(self.full_price, "full_price")
        if self.half_price is not None:
            require_non_negative_int(self.half_price, "half_price")
        if self.subscription_price is not None:
            require_non_negative_int(self.subscription_price, "subscription_price")


@dataclass(frozen=True)
class LegacyRegistrationCounts:
    """Registration counts for a legacy-priced program."""

    full: int = 0
    half: int = 0
    subscription: int = 0

    def __post_init__(self) -> None:
        require_non_negative_int(self.full, "full_registrations")
        require_non_negative_int(self.half, "half_registrations")
        require_non_negative_int(self.subscription, "subscription_registrations")


Pricing = FlexiblePricing | LegacyPricing
RegistrationCounts = tuple[RegistrationEntry, ...] | LegacyRegistrationCounts


@dataclass(frozen=True)
class LineItem:
    """A resolved (quantity, unit price) pair."""

    quantity: int
    unit_price: int
    label: str = ""

    def __post_init__(self) -> None:
        require_non_negative_int(self.quantity, "quantity")
        require_non_negative_int(self.unit_price, "price")

    @property
    def subtotal(self) -> int:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class Season:
    """A named date range used as the billing period of seasonal programs."""

    id: str
    name: str
    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        if self.start_date > self.end_date:
            raise InvalidInputError("season", "start_date must not be after end_date")

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class SeasonPeriod:
    """A whole season as a billing period."""

    season: Season


Period = MonthPeriod | SeasonPeriod


@dataclass(frozen=True)
class Program:
    """A program offering as seen by the calculators."""

    id: str
    name: str
    venue_split_percent: SplitPercent
    is_monthly: bool
    session_duration: SessionHours
    pricing: Pricing


@dataclass(frozen=True)
class Registration:
    """Registrations of one program for one month or one season."""

    id: str
    program_id: str
    counts: RegistrationCounts
    month: int | None = None
    season_id: str | None = None

    def __post_init__(self) -> None:
        if (self.month is None) == (self.season_id is None):
            raise InvalidInputError(
                "registration", "exactly one of month or season_id must be set"
            )
        if self.month is not None and not 1 <= self.month <= 12:
            raise InvalidInputError("month", "must be between 1 and 12")


@dataclass(frozen=True)
class InstructorAssignment:
    """An instructor assigned to a program, optionally scoped to a season."""

    hourly_wage: int
    work_days: WorkDays
    instructor_id: str = ""
    instructor_name: str = ""
    season_id: str | None = None

    def __post_init__(self) -> None:
        require_non_negative_int(self.hourly_wage, "hourly_wage")

    def applies_to(self, season_id: str | None) -> bool:
        return self.season_id is None or self.season_id == season_id


@dataclass(frozen=True)
class InstructorHours:
    """Pre-computed hours worked by one instructor."""

    hourly_wage: int
    total_hours: Decimal | int | float

    def __post_init__(self) -> None:
        require_non_negative_int(self.hourly_wage, "hourly_wage")
        if self.total_hours < 0:
            raise InvalidInputError("total_hours", "cannot be negative")


@dataclass(frozen=True)
class VenuePayment:
    """A payment made to the venue for a month or a season."""

    id: str
    amount: int
    paid_date: date
    month: int | None = None
    season_id: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        require_non_negative_int(self.amount, "amount")
        if self.amount == 0:
            raise InvalidInputError("amount", "must be positive")
        if (self.month is None) == (self.season_id is None):
            raise InvalidInputError(
                "venue_payment", "exactly one of month or season_id must be set"
            )


@dataclass(frozen=True)
class SessionCount:
    total_sessions: int
    total_hours: Decimal


@dataclass(frozen=True)
class FinancialSummary:
    """Revenue, costs and margin for one program or one rollup."""

    revenue: int
    venue_costs: int
    instructor_wages: int
    net_profit: int
    margin_percent: float


@dataclass(frozen=True)
class ProgramBreakdown:
    """One program's contribution to a monthly rollup.

    ``share`` is the fraction of the period figures attributed to the month:
    1 for monthly programs, 1 / months spanned for seasonal ones.
    ``line_items`` are the full-period line items before the share is applied.
    """

    program_id: str
    program_name: str
    revenue: int
    venue_costs: int
    instructor_wages: int
    net_profit: int
    line_items: tuple[LineItem, ...]
    share: Decimal = Decimal(1)


@dataclass(frozen=True)
class ProgramError:
    program_id: str
    program_name: str
    error: DomainError


@dataclass(frozen=True)
class MonthlyRollup:
    total: FinancialSummary
    per_program: tuple[ProgramBreakdown, ...] = ()
    errors: tuple[ProgramError, ...] = ()


@dataclass(frozen=True)
class VenueBalance:
    owed: int
    paid: int

    @property
    def outstanding(self) -> int:
        return self.owed - self.paid


@dataclass(frozen=True)
class InstructorPayLine:
    """Hours and pay of one instructor on one program for a period."""

    instructor_id: str
    instructor_name: str
    program_id: str
    sessions: Decimal
    hours: Decimal
    base_wage: int
    loaded_wage: int

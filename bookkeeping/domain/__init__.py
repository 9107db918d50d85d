from bookkeeping.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidInputError,
    ProgramNotFoundError,
    SeasonNotFoundError,
    UnknownPricingOptionError,
)
from bookkeeping.domain.models import (
    FinancialSummary,
    FlexiblePricing,
    InstructorAssignment,
    InstructorHours,
    InstructorPayLine,
    LegacyPricing,
    LegacyRegistrationCounts,
    LineItem,
    MonthlyRollup,
    PricingOption,
    Program,
    ProgramBreakdown,
    ProgramError,
    Registration,
    RegistrationEntry,
    Season,
    SeasonPeriod,
    SessionCount,
    VenueBalance,
    VenuePayment,
)
from bookkeeping.domain.payroll import (
    assignments_for_period,
    calculate_assignment_wages,
    calculate_instructor_wages,
    instructor_pay_lines,
)
from bookkeeping.domain.pricing import (
    calculate_legacy_revenue,
    calculate_revenue,
    resolve_line_items,
)
from bookkeeping.domain.scheduling import (
    count_sessions,
    count_sessions_in_month,
    find_season_for_month,
    months_spanned,
)
from bookkeeping.domain.summary import (
    calculate_financial_summary,
    calculate_margin_percent,
    calculate_monthly_rollup,
    calculate_net_profit,
    period_line_items,
    summarize_program,
)
from bookkeeping.domain.value_objects import (
    MonthPeriod,
    SessionHours,
    SplitPercent,
    Weekday,
    WorkDays,
)
from bookkeeping.domain.venue import (
    calculate_venue_costs,
    payments_for_period,
    reconcile_venue_payments,
)

__all__ = [
    "DomainError",
    "ErrorCode",
    "InvalidInputError",
    "ProgramNotFoundError",
    "SeasonNotFoundError",
    "UnknownPricingOptionError",
    "FinancialSummary",
    "FlexiblePricing",
    "InstructorAssignment",
    "InstructorHours",
    "InstructorPayLine",
    "LegacyPricing",
    "LegacyRegistrationCounts",
    "LineItem",
    "MonthlyRollup",
    "PricingOption",
    "Program",
    "ProgramBreakdown",
    "ProgramError",
    "Registration",
    "RegistrationEntry",
    "Season",
    "SeasonPeriod",
    "SessionCount",
    "VenueBalance",
    "VenuePayment",
    "MonthPeriod",
    "SessionHours",
    "SplitPercent",
    "Weekday",
    "WorkDays",
    "assignments_for_period",
    "calculate_assignment_wages",
    "calculate_instructor_wages",
    "instructor_pay_lines",
    "calculate_legacy_revenue",
    "calculate_revenue",
    "resolve_line_items",
    "count_sessions",
    "count_sessions_in_month",
    "find_season_for_month",
    "months_spanned",
    "calculate_financial_summary",
    "calculate_margin_percent",
    "calculate_monthly_rollup",
    "calculate_net_profit",
    "period_line_items",
    "summarize_program",
    "calculate_venue_costs",
    "payments_for_period",
    "reconcile_venue_payments",
]

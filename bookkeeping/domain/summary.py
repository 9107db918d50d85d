"""Financial summaries for one program and monthly rollups across programs."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from bookkeeping.domain.errors import DomainError, InvalidInputError
from bookkeeping.domain.models import (
    FinancialSummary,
    InstructorAssignment,
    LineItem,
    MonthlyRollup,
    Period,
    Program,
    ProgramBreakdown,
    ProgramError,
    Registration,
    Season,
    SeasonPeriod,
)
from bookkeeping.domain.payroll import (
    assignment_wage,
    assignments_for_period,
    calculate_assignment_wages,
)
from bookkeeping.domain.pricing import calculate_revenue, resolve_line_items
from bookkeeping.domain.scheduling import months_spanned
from bookkeeping.domain.value_objects import MonthPeriod, SplitPercent, round_half_up
from bookkeeping.domain.venue import calculate_venue_costs

logger = logging.getLogger(__name__)

RollupEntry = tuple[Program, Sequence[Registration], Sequence[InstructorAssignment]]


def calculate_net_profit(revenue: int, venue_costs: int, instructor_wages: int) -> int:
    return revenue - venue_costs - instructor_wages


def calculate_margin_percent(net_profit: int, revenue: int) -> float:
    """Net profit as a percentage of revenue, to 2 decimals; 0 when there is no revenue."""
    if revenue <= 0:
        return 0.0
    margin = Decimal(net_profit) * 100 / Decimal(revenue)
    return float(margin.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def _summary(revenue: int, venue_costs: int, instructor_wages: int) -> FinancialSummary:
    net_profit = calculate_net_profit(revenue, venue_costs, instructor_wages)
    return FinancialSummary(
        revenue=revenue,
        venue_costs=venue_costs,
        instructor_wages=instructor_wages,
        net_profit=net_profit,
        margin_percent=calculate_margin_percent(net_profit, revenue),
    )


def calculate_financial_summary(
    line_items: Iterable[LineItem],
    venue_split_percent: SplitPercent | int | float | Decimal,
    instructor_wages: int = 0,
) -> FinancialSummary:
    """Revenue, venue cost, wages, profit and margin for one set of line items."""
    if isinstance(instructor_wages, bool) or not isinstance(instructor_wages, int):
        raise InvalidInputError("instructor_wages", "must be an integer")
    if instructor_wages < 0:
        raise InvalidInputError("instructor_wages", "cannot be negative")
    revenue = calculate_revenue(line_items)
    venue_costs = calculate_venue_costs(revenue, venue_split_percent)
    return _summary(revenue, venue_costs, instructor_wages)


def find_registrations(
    program: Program,
    registrations: Iterable[Registration],
    period: Period,
) -> list[Registration]:
    """Registrations of the program for the period's month or season."""
    found = []
    for registration in registrations:
        if registration.program_id != program.id:
            continue
        if program.is_monthly and isinstance(period, MonthPeriod):
            if registration.month == period.month:
                found.append(registration)
        elif not program.is_monthly and isinstance(period, SeasonPeriod):
            if registration.season_id == period.season.id:
                found.append(registration)
    return found


def period_line_items(
    program: Program,
    registrations: Iterable[Registration],
    period: Period,
) -> tuple[LineItem, ...]:
    """Line items of every registration of the program for the period."""
    items: list[LineItem] = []
    for registration in find_registrations(program, registrations, period):
        items.extend(resolve_line_items(program.pricing, registration.counts))
    return tuple(items)


def _check_cadence(program: Program, period: Period) -> None:
    if program.is_monthly and not isinstance(period, MonthPeriod):
        raise InvalidInputError("period", f"monthly program {program.id} needs a month")
    if not program.is_monthly and not isinstance(period, SeasonPeriod):
        raise InvalidInputError("period", f"seasonal program {program.id} needs a season")


def summarize_program(
    program: Program,
    registrations: Sequence[Registration],
    assignments: Sequence[InstructorAssignment],
    period: Period,
    employer_overhead_rate: Decimal | float | str,
) -> FinancialSummary:
    """Full financial summary of one program for its own billing period.

    Raises:
        InvalidInputError: If the period does not match the program's cadence.
        UnknownPricingOptionError: If a registration entry cannot be priced.
    """
    _check_cadence(program, period)
    line_items = period_line_items(program, registrations, period)
    wages = calculate_assignment_wages(
        assignments_for_period(assignments, period),
        period,
        program.session_duration,
        employer_overhead_rate,
    )
    return calculate_financial_summary(line_items, program.venue_split_percent, wages)


@dataclass(frozen=True)
class _Contribution:
    line_items: tuple[LineItem, ...]
    revenue: Decimal
    venue_costs: Decimal
    instructor_wages: Decimal
    months: int


def _contribution(
    program: Program,
    registrations: Sequence[Registration],
    assignments: Sequence[InstructorAssignment],
    month: MonthPeriod,
    season: Season | None,
    employer_overhead_rate: Decimal | float | str,
) -> _Contribution | None:
    if program.is_monthly:
        period, months = month, 1
    elif season is not None:
        period, months = SeasonPeriod(season), months_spanned(season)
    else:
        return None

    line_items = period_line_items(program, registrations, period)
    revenue = calculate_revenue(line_items)
    venue_costs = calculate_venue_costs(revenue, program.venue_split_percent)
    wages = sum(
        (
            assignment_wage(a, period, program.session_duration, employer_overhead_rate)
            for a in assignments_for_period(assignments, period)
        ),
        Decimal(0),
    )
    divisor = Decimal(months)
    return _Contribution(
        line_items=line_items,
        revenue=Decimal(revenue) / divisor,
        venue_costs=Decimal(venue_costs) / divisor,
        instructor_wages=wages / divisor,
        months=months,
    )


def calculate_monthly_rollup(
    entries: Iterable[RollupEntry],
    period: MonthPeriod,
    employer_overhead_rate: Decimal | float | str,
    season: Season | None = None,
    strict: bool = False,
) -> MonthlyRollup:
    """Dashboard totals for one month across many programs.

    Monthly programs contribute their figures for the month. Seasonal
    programs contribute their full-season figures divided evenly by the
    number of calendar months the season spans, and nothing when no season
    covers the month. Totals are rounded once, after summing.

    A program whose figures cannot be computed is left out of the totals and
    reported in ``errors``; with ``strict`` the error is raised instead.
    """
    revenue = venue_costs = wages = Decimal(0)
    per_program: list[ProgramBreakdown] = []
    errors: list[ProgramError] = []

    for program, registrations, assignments in entries:
        try:
            contribution = _contribution(
                program, registrations, assignments, period, season, employer_overhead_rate
            )
        except DomainError as exc:
            if strict:
                raise
            logger.warning(
                "Program %s left out of %d-%02d rollup: %s",
                program.id,
                period.year,
                period.month,
                exc,
            )
            errors.append(ProgramError(program.id, program.name, exc))
            continue
        if contribution is None:
            continue

        revenue += contribution.revenue
        venue_costs += contribution.venue_costs
        wages += contribution.instructor_wages

        program_revenue = round_half_up(contribution.revenue)
        program_venue = round_half_up(contribution.venue_costs)
        program_wages = round_half_up(contribution.instructor_wages)
        per_program.append(
            ProgramBreakdown(
                program_id=program.id,
                program_name=program.name,
                revenue=program_revenue,
                venue_costs=program_venue,
                instructor_wages=program_wages,
                net_profit=calculate_net_profit(program_revenue, program_venue, program_wages),
                line_items=contribution.line_items,
                share=Decimal(1) / Decimal(contribution.months),
            )
        )

    total = _summary(round_half_up(revenue), round_half_up(venue_costs), round_half_up(wages))
    logger.debug(
        "Rollup %d-%02d: %d programs, %d errors, revenue %d",
        period.year,
        period.month,
        len(per_program),
        len(errors),
        total.revenue,
    )
    return MonthlyRollup(total=total, per_program=tuple(per_program), errors=tuple(errors))

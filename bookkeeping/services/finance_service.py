"""Finance service - orchestration between the store and the calculators.

Services:
- Depend only on interfaces (stores)
- Resolve configuration for the pure calculators
- Return domain models or raise domain errors
"""

import logging

from bookkeeping.conf import BookkeepingSettings, get_settings
from bookkeeping.domain import (
    FinancialSummary,
    InstructorPayLine,
    MonthlyRollup,
    MonthPeriod,
    Program,
    ProgramNotFoundError,
    SeasonNotFoundError,
    SeasonPeriod,
    VenueBalance,
    assignments_for_period,
    calculate_monthly_rollup,
    calculate_revenue,
    calculate_venue_costs,
    find_season_for_month,
    instructor_pay_lines,
    months_spanned,
    payments_for_period,
    period_line_items,
    reconcile_venue_payments,
    summarize_program,
)
from bookkeeping.domain.models import Period
from bookkeeping.stores.interfaces import FinanceStore

logger = logging.getLogger(__name__)


class FinanceService:
    """Service for program summaries, dashboards and payroll reports."""

    def __init__(self, store: FinanceStore, settings: BookkeepingSettings | None = None) -> None:
        self._store = store
        self._settings = settings

    @property
    def settings(self) -> BookkeepingSettings:
        return self._settings if self._settings is not None else get_settings()

    def get_program(self, program_id: str) -> Program:
        """Return a program by ID.

        Raises:
            ProgramNotFoundError: If the program does not exist.
        """
        program = self._store.get_program(program_id)
        if program is None:
            raise ProgramNotFoundError(program_id)
        return program

    def season_period(self, season_id: str) -> SeasonPeriod:
        """Return the billing period of a season.

        Raises:
            SeasonNotFoundError: If the season does not exist.
        """
        season = self._store.get_season(season_id)
        if season is None:
            raise SeasonNotFoundError(season_id)
        return SeasonPeriod(season)

    def program_summary(self, program_id: str, period: Period) -> FinancialSummary:
        """Return the financial summary of one program for one period."""
        program = self.get_program(program_id)
        summary = summarize_program(
            program,
            self._store.list_registrations(program.id),
            self._store.list_assignments(program.id),
            period,
            self.settings.employer_overhead_rate,
        )
        logger.info(
            "Summarized program %s: revenue=%d net_profit=%d",
            program.id,
            summary.revenue,
            summary.net_profit,
        )
        return summary

    def monthly_dashboard(self, year: int, month: int, strict: bool = False) -> MonthlyRollup:
        """Return the rollup of every program of the year for one month."""
        period = MonthPeriod(year, month)
        season = find_season_for_month(self._store.list_seasons(year), year, month)
        entries = [
            (
                program,
                self._store.list_registrations(program.id),
                self._store.list_assignments(program.id),
            )
            for program in self._store.list_programs(year)
        ]
        rollup = calculate_monthly_rollup(
            entries,
            period,
            self.settings.employer_overhead_rate,
            season=season,
            strict=strict,
        )
        if rollup.errors:
            logger.warning(
                "Dashboard %d-%02d skipped %d program(s): %s",
                year,
                month,
                len(rollup.errors),
                ", ".join(error.program_id for error in rollup.errors),
            )
        return rollup

    def instructor_hours(self, year: int, month: int) -> list[InstructorPayLine]:
        """Return per-instructor hours and pay for one month.

        Seasonal programs show their season figures spread over the months
        the season spans; without a season covering the month they are left out.
        """
        period = MonthPeriod(year, month)
        season = find_season_for_month(self._store.list_seasons(year), year, month)
        rate = self.settings.employer_overhead_rate
        lines: list[InstructorPayLine] = []
        for program in self._store.list_programs(year):
            assignments = self._store.list_assignments(program.id)
            if program.is_monthly:
                lines.extend(
                    instructor_pay_lines(
                        program, assignments_for_period(assignments, period), period, rate
                    )
                )
            elif season is not None:
                season_period = SeasonPeriod(season)
                lines.extend(
                    instructor_pay_lines(
                        program,
                        assignments_for_period(assignments, season_period),
                        season_period,
                        rate,
                        months=months_spanned(season),
                    )
                )
        return lines

    def venue_balance(self, year: int, period: Period) -> VenueBalance:
        """Return what the venue is owed for a period against what was paid."""
        owed = 0
        for program in self._store.list_programs(year):
            if program.is_monthly != isinstance(period, MonthPeriod):
                continue
            line_items = period_line_items(
                program, self._store.list_registrations(program.id), period
            )
            revenue = calculate_revenue(line_items)
            owed += calculate_venue_costs(revenue, program.venue_split_percent)
        payments = payments_for_period(self._store.list_venue_payments(year), period)
        return reconcile_venue_payments(owed, payments)

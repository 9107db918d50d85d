"""Unit tests for instructor payroll.

Run with: pytest tests/test_payroll.py -v
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from bookkeeping.domain import (
    InstructorAssignment,
    InstructorHours,
    InvalidInputError,
    MonthPeriod,
    Season,
    SeasonPeriod,
    WorkDays,
    assignments_for_period,
    calculate_assignment_wages,
    calculate_instructor_wages,
    instructor_pay_lines,
)
from bookkeeping.domain.payroll import sessions_for_period


class TestCalculateInstructorWages:
    """Gross wages from pre-computed hours."""

    def test_single_instructor(self):
        """Wage times hours for one instructor."""
        assert calculate_instructor_wages([InstructorHours(3000, 60)]) == 180000

    def test_multiple_instructors(self):
        """Wages of several instructors are summed."""
        instructors = [InstructorHours(3000, 40), InstructorHours(2500, 30)]
        assert calculate_instructor_wages(instructors) == 195000

    def test_empty_list(self):
        """No instructors cost nothing."""
        assert calculate_instructor_wages([]) == 0

    def test_fractional_hours_round_once(self):
        """Fractional hours are summed before rounding."""
        instructors = [InstructorHours(1001, 0.5), InstructorHours(1001, 0.5)]
        assert calculate_instructor_wages(instructors) == 1001

    def test_rejects_negative_hours(self):
        """InstructorHours rejects negative hours."""
        with pytest.raises(InvalidInputError):
            InstructorHours(3000, -1)


class TestMonthlyPayroll:
    """Monthly cadence counts assigned weekdays exactly."""

    def test_loaded_wage_for_january(self, mwf_assignment, overhead):
        """January MWF sessions loaded with employer overhead."""
        # 14 sessions * 2h * 3000 = 84000, loaded by 18%
        wages = calculate_assignment_wages([mwf_assignment], MonthPeriod(2024, 1), 2, overhead)
        assert wages == 99120

    def test_zero_overhead_is_base_wage(self, mwf_assignment):
        """A zero overhead rate leaves the base wage."""
        wages = calculate_assignment_wages([mwf_assignment], MonthPeriod(2024, 2), 2, 0)
        assert wages == 12 * 2 * 3000

    def test_no_assignments(self, overhead):
        """No assignments cost nothing."""
        assert calculate_assignment_wages([], MonthPeriod(2024, 1), 2, overhead) == 0

    def test_sums_assignments_before_rounding(self):
        """Assignment wages are summed unrounded."""
        assignment = InstructorAssignment(
            hourly_wage=1,
            work_days=WorkDays.from_names(["MONDAY"]),
        )
        # Each: 5 Mondays * 0.1h * 1 = 0.5; two of them make 1.0
        wages = calculate_assignment_wages(
            [assignment, assignment], MonthPeriod(2024, 1), "0.1", 0
        )
        assert wages == 1

    def test_rejects_negative_overhead(self, mwf_assignment):
        """A negative overhead rate raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            calculate_assignment_wages([mwf_assignment], MonthPeriod(2024, 1), 2, "-0.1")


class TestSeasonalPayroll:
    """Seasonal cadence uses fractional weeks in the season."""

    def test_whole_weeks(self, mwf_assignment, spring_season, overhead):
        """A 17-week season costs three sessions a week."""
        # 119 days = 17 weeks; 51 sessions * 1.5h * 3000 = 229500, loaded by 18%
        wages = calculate_assignment_wages(
            [mwf_assignment], SeasonPeriod(spring_season), 1.5, overhead
        )
        assert wages == 270810

    def test_weeks_are_not_floored(self):
        """Partial weeks count fractionally."""
        season = Season(id="s", name="Short", start_date=date(2024, 1, 1), end_date=date(2024, 1, 11))
        assignment = InstructorAssignment(
            hourly_wage=7000,
            work_days=WorkDays.from_names(["TUESDAY", "THURSDAY"]),
        )

        # 10 / 7 weeks * 2 sessions = 20 / 7 sessions; 1h at 7000
        assert calculate_assignment_wages([assignment], SeasonPeriod(season), 1, 0) == 20000

    def test_sessions_for_season(self, mwf_assignment, spring_season):
        """sessions_for_period gives work days times weeks for a season."""
        assert sessions_for_period(mwf_assignment, SeasonPeriod(spring_season)) == Decimal(51)


class TestInstructorPayLines:
    """Per-instructor hours report."""

    def test_monthly_program_line(self, monthly_program, mwf_assignment, overhead):
        """A monthly pay line shows exact sessions, hours and wages."""
        (line,) = instructor_pay_lines(
            monthly_program, [mwf_assignment], MonthPeriod(2024, 1), overhead
        )

        assert line.instructor_name == "Anna"
        assert line.program_id == "adults"
        assert line.sessions == 14
        assert line.hours == 28
        assert line.base_wage == 84000
        assert line.loaded_wage == 99120

    def test_season_spread_over_months(self, flexible_program, mwf_assignment, spring_season, overhead):
        """A seasonal pay line is spread evenly over the months."""
        (line,) = instructor_pay_lines(
            flexible_program, [mwf_assignment], SeasonPeriod(spring_season), overhead, months=4
        )

        assert line.sessions == Decimal("12.75")
        assert line.hours == Decimal("19.125")
        assert line.base_wage == 57375
        assert line.loaded_wage == 67703

    def test_rejects_zero_months(self, flexible_program, mwf_assignment, spring_season, overhead):
        """Spreading over zero months raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            instructor_pay_lines(
                flexible_program, [mwf_assignment], SeasonPeriod(spring_season), overhead, months=0
            )


class TestAssignmentsForPeriod:
    """Which assignments teach in a period."""

    def test_season_keeps_own_and_unscoped(self, mwf_assignment, spring_season):
        """A season keeps unscoped assignments and its own."""
        own = replace(mwf_assignment, season_id=spring_season.id)
        other = replace(mwf_assignment, season_id="autumn-2024")

        kept = assignments_for_period([mwf_assignment, own, other], SeasonPeriod(spring_season))

        assert kept == [mwf_assignment, own]

    def test_month_keeps_every_assignment(self, mwf_assignment):
        """A month keeps assignments scoped to any season."""
        other = replace(mwf_assignment, season_id="autumn-2024")

        kept = assignments_for_period([mwf_assignment, other], MonthPeriod(2024, 1))

        assert kept == [mwf_assignment, other]

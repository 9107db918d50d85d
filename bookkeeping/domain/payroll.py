"""Instructor payroll: hours and wages loaded with employer overhead.

Monthly periods count the assigned weekdays exactly. Seasons are costed as
``len(work_days) * weeks_in_season`` with fractional weeks, which assumes a
uniform weekly cadence across the season.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from bookkeeping.domain.errors import InvalidInputError
from bookkeeping.domain.models import (
    InstructorAssignment,
    InstructorHours,
    InstructorPayLine,
    Period,
    Program,
    SeasonPeriod,
)
from bookkeeping.domain.scheduling import count_sessions_in_month, weeks_between
from bookkeeping.domain.value_objects import (
    MonthPeriod,
    SessionHours,
    round_half_up,
    to_decimal,
)


def _overhead_multiplier(employer_overhead_rate: Decimal | float | str) -> Decimal:
    rate = to_decimal(employer_overhead_rate, "employer_overhead_rate")
    if rate < 0:
        raise InvalidInputError("employer_overhead_rate", "cannot be negative")
    return Decimal(1) + rate


def assignments_for_period(
    assignments: Iterable[InstructorAssignment],
    period: Period,
) -> list[InstructorAssignment]:
    """Assignments that teach in the period.

    A season-scoped assignment only counts toward its own season. Monthly
    periods take every assignment of the program.
    """
    if isinstance(period, SeasonPeriod):
        return [a for a in assignments if a.applies_to(period.season.id)]
    return list(assignments)


def calculate_instructor_wages(instructors: Iterable[InstructorHours]) -> int:
    """Gross wages for instructors whose hours are already known."""
    total = Decimal(0)
    for instructor in instructors:
        total += instructor.hourly_wage * to_decimal(instructor.total_hours, "total_hours")
    return round_half_up(total)


def sessions_for_period(
    assignment: InstructorAssignment,
    period: Period,
) -> Decimal:
    """Sessions an assignment teaches in the period.

    Exact for a month; ``work days per week * weeks`` for a season.
    """
    if isinstance(period, MonthPeriod):
        count = count_sessions_in_month(
            period.year, period.month, assignment.work_days, Decimal(1)
        )
        return Decimal(count.total_sessions)
    if isinstance(period, SeasonPeriod):
        season = period.season
        return len(assignment.work_days) * weeks_between(season.start_date, season.end_date)
    raise InvalidInputError("period", f"unsupported period type {type(period).__name__}")


def assignment_wage(
    assignment: InstructorAssignment,
    period: Period,
    session_duration: SessionHours,
    employer_overhead_rate: Decimal | float | str,
) -> Decimal:
    """Unrounded loaded wage of one assignment for the period."""
    hours = sessions_for_period(assignment, period) * session_duration.value
    return hours * assignment.hourly_wage * _overhead_multiplier(employer_overhead_rate)


def calculate_assignment_wages(
    assignments: Iterable[InstructorAssignment],
    period: Period,
    session_duration: SessionHours | int | float | Decimal,
    employer_overhead_rate: Decimal | float | str,
) -> int:
    """Loaded wages of all assignments for the period, rounded once at the end."""
    if not isinstance(session_duration, SessionHours):
        session_duration = SessionHours.of(session_duration)
    total = sum(
        (
            assignment_wage(assignment, period, session_duration, employer_overhead_rate)
            for assignment in assignments
        ),
        Decimal(0),
    )
    return round_half_up(total)


def instructor_pay_lines(
    program: Program,
    assignments: Sequence[InstructorAssignment],
    period: Period,
    employer_overhead_rate: Decimal | float | str,
    months: int = 1,
) -> list[InstructorPayLine]:
    """Per-instructor hours and pay for one program.

    ``months`` spreads the period's figures evenly, e.g. to show one month
    of a season.
    """
    if months < 1:
        raise InvalidInputError("months", "must be at least 1")
    multiplier = _overhead_multiplier(employer_overhead_rate)
    lines = []
    for assignment in assignments:
        sessions = sessions_for_period(assignment, period) / months
        hours = sessions * program.session_duration.value
        base = hours * assignment.hourly_wage
        lines.append(
            InstructorPayLine(
                instructor_id=assignment.instructor_id,
                instructor_name=assignment.instructor_name,
                program_id=program.id,
                sessions=sessions,
                hours=hours,
                base_wage=round_half_up(base),
                loaded_wage=round_half_up(base * multiplier),
            )
        )
    return lines

"""Session counting over calendar ranges.

Every session and hour count, including monthly payroll, goes through
``count_sessions``: days are counted exactly rather than estimated from an
average number of weeks per month.
"""

from collections.abc import Iterable
from datetime import date, timedelta
from decimal import Decimal

from bookkeeping.domain.models import Season, SessionCount
from bookkeeping.domain.value_objects import (
    MonthPeriod,
    SessionHours,
    Weekday,
    WorkDays,
)

ONE_DAY = timedelta(days=1)


def _session_hours(value: SessionHours | int | float | Decimal) -> SessionHours:
    if isinstance(value, SessionHours):
        return value
    return SessionHours.of(value)


def _work_days(value: WorkDays | Iterable[str | Weekday]) -> WorkDays:
    if isinstance(value, WorkDays):
        return value
    return WorkDays(
        days=frozenset(
            day if isinstance(day, Weekday) else Weekday.from_name(day) for day in value
        )
    )


def count_sessions(
    start_date: date,
    end_date: date,
    work_days: WorkDays | Iterable[str | Weekday],
    session_hours: SessionHours | int | float | Decimal,
) -> SessionCount:
    """Count days from start_date to end_date inclusive that fall on a work day.

    An empty range (start after end) yields zero sessions.

    Raises:
        InvalidInputError: If session_hours is not positive or a weekday name
            is unknown.
    """
    hours = _session_hours(session_hours)
    days = _work_days(work_days)

    total_sessions = 0
    current = start_date
    while current <= end_date:
        if Weekday.of(current) in days:
            total_sessions += 1
        current += ONE_DAY

    return SessionCount(
        total_sessions=total_sessions,
        total_hours=total_sessions * hours.value,
    )


def count_sessions_in_month(
    year: int,
    month: int,
    work_days: WorkDays | Iterable[str | Weekday],
    session_hours: SessionHours | int | float | Decimal,
) -> SessionCount:
    """Exact number of work-day occurrences in one calendar month."""
    period = MonthPeriod(year, month)
    return count_sessions(period.first_day, period.last_day, work_days, session_hours)


def weeks_between(start_date: date, end_date: date) -> Decimal:
    """Fractional number of weeks from start to end (not floored)."""
    return Decimal((end_date - start_date).days) / Decimal(7)


def months_spanned(season: Season) -> int:
    """Calendar months a season touches, counting both end months."""
    start, end = season.start_date, season.end_date
    return (end.year - start.year) * 12 + (end.month - start.month) + 1


def find_season_for_month(
    seasons: Iterable[Season],
    year: int,
    month: int,
) -> Season | None:
    """Season that contains the 15th of the month, if any."""
    mid_month = MonthPeriod(year, month).mid_month
    for season in seasons:
        if season.contains(mid_month):
            return season
    return None

"""Domain primitives that enforce validity at creation time."""

import calendar
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Self

from bookkeeping.domain.errors import InvalidInputError


def to_decimal(value: int | float | str | Decimal, field: str) -> Decimal:
    """Convert a numeric input to Decimal without binary float artefacts."""
    if isinstance(value, bool):
        raise InvalidInputError(field, "must be a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidInputError(field, "must be a number") from exc
    if not result.is_finite():
        raise InvalidInputError(field, "must be a finite number")
    return result


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero (166666.5 -> 166667)."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def require_non_negative_int(value: int, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, "must be an integer")
    if value < 0:
        raise InvalidInputError(field, "cannot be negative")


class Weekday(Enum):
    """Canonical weekday names, valued by ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_name(cls, name: str) -> Self:
        try:
            return cls[name.strip().upper()]
        except (KeyError, AttributeError) as exc:
            raise InvalidInputError("work_days", f"unknown weekday {name!r}") from exc

    @classmethod
    def of(cls, day: date) -> Self:
        return cls(day.weekday())


@dataclass(frozen=True)
class WorkDays:
    """Set of weekdays an instructor teaches on."""

    days: frozenset[Weekday]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> Self:
        return cls(days=frozenset(Weekday.from_name(name) for name in names))

    def __contains__(self, day: Weekday) -> bool:
        return day in self.days

    def __len__(self) -> int:
        return len(self.days)


@dataclass(frozen=True)
class SplitPercent:
    """Share of revenue owed to the venue, 0 to 100."""

    value: Decimal

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Self:
        return cls(value=to_decimal(value, "venue_split_percent"))

    def __post_init__(self) -> None:
        if not Decimal(0) <= self.value <= Decimal(100):
            raise InvalidInputError("venue_split_percent", "must be between 0 and 100")


@dataclass(frozen=True)
class SessionHours:
    """Length of one session in hours."""

    value: Decimal

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Self:
        return cls(value=to_decimal(value, "session_hours"))

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidInputError("session_hours", "must be positive")


@dataclass(frozen=True)
class MonthPeriod:
    """A calendar month, the billing period of monthly programs."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidInputError("month", "must be between 1 and 12")

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    @property
    def mid_month(self) -> date:
        return date(self.year, self.month, 15)

"""Bookkeeping settings, read from ``settings.BOOKKEEPING``.

Example::

    BOOKKEEPING = {
        "EMPLOYER_OVERHEAD_RATE": "0.18",
        "DEFAULT_SESSION_HOURS": "1.5",
        "CURRENCY": "ISK",
    }
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Self

from django.conf import settings

from bookkeeping.domain.errors import InvalidInputError
from bookkeeping.domain.value_objects import SessionHours, to_decimal

DEFAULTS = {
    # Statutory employer contributions on top of gross wages.
    "EMPLOYER_OVERHEAD_RATE": "0.18",
    "DEFAULT_SESSION_HOURS": "1.5",
    "CURRENCY": "ISK",
}


@dataclass(frozen=True)
class BookkeepingSettings:
    employer_overhead_rate: Decimal
    default_session_hours: SessionHours
    currency: str

    def __post_init__(self) -> None:
        if self.employer_overhead_rate < 0:
            raise InvalidInputError("EMPLOYER_OVERHEAD_RATE", "cannot be negative")

    @classmethod
    def from_dict(cls, values: dict) -> Self:
        merged = {**DEFAULTS, **values}
        unknown = set(merged) - set(DEFAULTS)
        if unknown:
            raise InvalidInputError("BOOKKEEPING", f"unknown settings {sorted(unknown)}")
        return cls(
            employer_overhead_rate=to_decimal(
                merged["EMPLOYER_OVERHEAD_RATE"], "EMPLOYER_OVERHEAD_RATE"
            ),
            default_session_hours=SessionHours.of(merged["DEFAULT_SESSION_HOURS"]),
            currency=str(merged["CURRENCY"]),
        )


def get_settings() -> BookkeepingSettings:
    """Current settings; re-read on every call so overrides in tests apply."""
    return BookkeepingSettings.from_dict(getattr(settings, "BOOKKEEPING", {}))

"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Records they return are
already validated; the calculators never load anything themselves.
"""

from abc import ABC, abstractmethod

from bookkeeping.domain import (
    InstructorAssignment,
    Program,
    Registration,
    Season,
    VenuePayment,
)


class FinanceStore(ABC):
    """Interface for the records one year of club bookkeeping needs."""

    @abstractmethod
    def list_programs(self, year: int) -> list[Program]:
        """Return all programs of a year."""
        ...

    @abstractmethod
    def get_program(self, program_id: str) -> Program | None:
        """Return a program by ID, or None if not found."""
        ...

    @abstractmethod
    def list_seasons(self, year: int) -> list[Season]:
        """Return the seasons of a year ordered by start_date ascending."""
        ...

    @abstractmethod
    def get_season(self, season_id: str) -> Season | None:
        """Return a season by ID, or None if not found."""
        ...

    @abstractmethod
    def list_registrations(self, program_id: str) -> list[Registration]:
        """Return every registration record of a program."""
        ...

    @abstractmethod
    def list_assignments(self, program_id: str) -> list[InstructorAssignment]:
        """Return the instructor assignments of a program."""
        ...

    @abstractmethod
    def list_venue_payments(self, year: int) -> list[VenuePayment]:
        """Return the venue payments recorded for a year."""
        ...

"""In-memory implementation of the FinanceStore.

Holds records handed over by a data-access layer (or built in tests).
"""

from collections import defaultdict

from bookkeeping.domain import (
    InstructorAssignment,
    Program,
    Registration,
    Season,
    VenuePayment,
)
from bookkeeping.stores.interfaces import FinanceStore


class InMemoryFinanceStore(FinanceStore):
    """Dictionary-backed finance store."""

    def __init__(self) -> None:
        self._programs: dict[str, Program] = {}
        self._program_years: dict[int, list[str]] = defaultdict(list)
        self._seasons: dict[str, Season] = {}
        self._season_years: dict[int, list[str]] = defaultdict(list)
        self._registrations: dict[str, list[Registration]] = defaultdict(list)
        self._assignments: dict[str, list[InstructorAssignment]] = defaultdict(list)
        self._venue_payments: dict[int, list[VenuePayment]] = defaultdict(list)

    def add_program(self, year: int, program: Program) -> None:
        if program.id not in self._programs:
            self._program_years[year].append(program.id)
        self._programs[program.id] = program

    def add_season(self, year: int, season: Season) -> None:
        if season.id not in self._seasons:
            self._season_years[year].append(season.id)
        self._seasons[season.id] = season

    def add_registration(self, registration: Registration) -> None:
        self._registrations[registration.program_id].append(registration)

    def add_assignment(self, program_id: str, assignment: InstructorAssignment) -> None:
        self._assignments[program_id].append(assignment)

    def add_venue_payment(self, year: int, payment: VenuePayment) -> None:
        self._venue_payments[year].append(payment)

    def list_programs(self, year: int) -> list[Program]:
        return [self._programs[pid] for pid in self._program_years.get(year, [])]

    def get_program(self, program_id: str) -> Program | None:
        return self._programs.get(program_id)

    def list_seasons(self, year: int) -> list[Season]:
        seasons = [self._seasons[sid] for sid in self._season_years.get(year, [])]
        return sorted(seasons, key=lambda season: season.start_date)

    def get_season(self, season_id: str) -> Season | None:
        return self._seasons.get(season_id)

    def list_registrations(self, program_id: str) -> list[Registration]:
        return list(self._registrations.get(program_id, []))

    def list_assignments(self, program_id: str) -> list[InstructorAssignment]:
        return list(self._assignments.get(program_id, []))

    def list_venue_payments(self, year: int) -> list[VenuePayment]:
        return list(self._venue_payments.get(year, []))

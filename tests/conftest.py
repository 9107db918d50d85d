"""Pytest configuration and shared fixtures."""

from datetime import date
from decimal import Decimal

import pytest

from bookkeeping.conf import BookkeepingSettings
from bookkeeping.domain import (
    FlexiblePricing,
    InstructorAssignment,
    LegacyPricing,
    PricingOption,
    Program,
    Season,
    SessionHours,
    SplitPercent,
    WorkDays,
)
from bookkeeping.services.finance_service import FinanceService
from bookkeeping.stores.memory_store import InMemoryFinanceStore


@pytest.fixture
def bookkeeping_settings() -> BookkeepingSettings:
    return BookkeepingSettings.from_dict({})


@pytest.fixture
def spring_season() -> Season:
    return Season(
        id="spring-2024",
        name="Spring",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 4, 29),
    )


@pytest.fixture
def flexible_program() -> Program:
    return Program(
        id="youth",
        name="Youth Archery",
        venue_split_percent=SplitPercent.of(50),
        is_monthly=False,
        session_duration=SessionHours.of("1.5"),
        pricing=FlexiblePricing(
            options=(
                PricingOption(id="full", name="Full Season", price=50000, order=0),
                PricingOption(id="student", name="Student Rate", price=25000, order=1),
                PricingOption(id="old", name="Old Rate", price=40000, order=2, is_active=False),
            )
        ),
    )


@pytest.fixture
def monthly_program() -> Program:
    return Program(
        id="adults",
        name="Adult Drop-in",
        venue_split_percent=SplitPercent.of(40),
        is_monthly=True,
        session_duration=SessionHours.of(2),
        pricing=LegacyPricing(full_price=12000, half_price=6000),
    )


@pytest.fixture
def mwf_assignment() -> InstructorAssignment:
    return InstructorAssignment(
        hourly_wage=3000,
        work_days=WorkDays.from_names(["MONDAY", "WEDNESDAY", "FRIDAY"]),
        instructor_id="anna",
        instructor_name="Anna",
    )


@pytest.fixture
def store() -> InMemoryFinanceStore:
    return InMemoryFinanceStore()


@pytest.fixture
def service(store: InMemoryFinanceStore, bookkeeping_settings: BookkeepingSettings) -> FinanceService:
    return FinanceService(store, settings=bookkeeping_settings)


@pytest.fixture
def overhead() -> Decimal:
    return Decimal("0.18")

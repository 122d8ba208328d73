"""Shared test fixtures — schedules matching schedules/*.yaml and sample standings."""

from __future__ import annotations

from pathlib import Path

import pytest

from teachbid_fees.config import FeeSchedule, RateTier, load_fee_schedule
from teachbid_fees.engine import FeeEngine
from teachbid_fees.models import TeacherStanding

SCHEDULES_DIR = Path(__file__).parent.parent / "schedules"


@pytest.fixture
def schedule() -> FeeSchedule:
    return FeeSchedule()


@pytest.fixture
def pricing_schedule() -> FeeSchedule:
    """Pricing-page table: <30k 20%, <50k 18%, <100k 15%, ≥100k 12%."""
    return load_fee_schedule(SCHEDULES_DIR / "pricing_page.yaml")


@pytest.fixture
def applied_schedule() -> FeeSchedule:
    return FeeSchedule(discount_policy="applied")


@pytest.fixture
def synthetic_schedule() -> FeeSchedule:
    """Two round-number tiers and no fixed processor fee — easy hand maths."""
    return FeeSchedule(
        name="synthetic",
        tiers=[
            RateTier(min=0, max=9_999, rate=0.10, label="small"),
            RateTier(min=10_000, max=None, rate=0.05, label="large"),
        ],
        processor={"stripe_fee_rate": 0.0, "stripe_fixed_fee": 0},
    )


@pytest.fixture
def engine(schedule: FeeSchedule) -> FeeEngine:
    return FeeEngine(schedule)


@pytest.fixture
def rising_star() -> TeacherStanding:
    """Earns all three discounts: new, verified, top rated."""
    return TeacherStanding(transaction_count=2, is_verified=True, rating=4.9)


@pytest.fixture
def veteran() -> TeacherStanding:
    """Earns no discount."""
    return TeacherStanding(transaction_count=10, is_verified=False, rating=3.0)

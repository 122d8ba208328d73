"""Volume-tier lookup."""

from __future__ import annotations

from teachbid_fees.config.rates import RateTier
from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.models.results import TeacherStanding, TierInfo


class RateTableError(LookupError):
    """No tier covers an amount — the rate table itself is broken."""


def resolve_schedule(schedule: FeeSchedule | None) -> FeeSchedule:
    return schedule if schedule is not None else FeeSchedule()


def find_tier(amount: int, schedule: FeeSchedule | None = None) -> RateTier | None:
    """First tier whose inclusive ``[min, max]`` contains ``amount``."""
    for tier in resolve_schedule(schedule).tiers:
        if tier.contains(amount):
            return tier
    return None


def resolve_commission_rate(
    amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> float:
    """Base commission rate for ``amount``.

    ``standing`` is accepted for call-site symmetry with the breakdown but
    never changes the result; discounts are layered on separately.
    """
    tier = find_tier(amount, schedule)
    if tier is None:
        raise RateTableError(f"no commission tier covers amount {amount}")
    return tier.rate


def _tier_info(tier: RateTier) -> TierInfo:
    return TierInfo(name=tier.label, rate=tier.rate, min=tier.min, max=tier.max)


def get_fee_tier_info(amount: int, schedule: FeeSchedule | None = None) -> TierInfo | None:
    """Display metadata for the tier containing ``amount``, or None."""
    tier = find_tier(amount, schedule)
    if tier is None:
        return None
    return _tier_info(tier)


def get_fee_tiers(schedule: FeeSchedule | None = None) -> list[TierInfo]:
    """The full tier table, in amount order, for pricing pages."""
    return [_tier_info(t) for t in resolve_schedule(schedule).tiers]

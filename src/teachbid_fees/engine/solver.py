"""Inverse fee solver — what must the student pay so the teacher nets X?

Search strategy (binary search over whole-yen gross amounts):
  1. Lower bound = the target itself (fees are never negative).
  2. Upper bound = 2 × target.  The schedule guarantees the percentage
     fees stay below 50%, but the fixed processor fee can still push the
     answer past 2 × target for very small targets, so the bound is
     doubled until it passes.
  3. Binary-search for a gross amount ``r`` with ``net(r) ≥ target`` and
     ``net(r − 1) < target``.
  4. Walk down from ``r`` over a short window and keep the lowest passing
     amount.

Step 4 is needed because net payout is only nearly monotone.  Within a
tier the commission and processor roundings can step up at the same
amount and dip the net by ¥1 (e.g. 10097 nets 7200, 10098 nets 7199).
For ``a > b`` with combined percentage rate at most ``R``:

    net(a) − net(b) > (a − b)(1 − R) − 2

so every amount at least ``ceil(2 / (1 − R))`` above the true minimum
passes.  Since ``r − 1`` fails, the true minimum lies within that window
below ``r``.
"""

from __future__ import annotations

import logging
import math

from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.engine.breakdown import calculate_fee_breakdown
from teachbid_fees.engine.tiers import resolve_schedule
from teachbid_fees.models.results import TeacherStanding

logger = logging.getLogger(__name__)


def _rounding_window(schedule: FeeSchedule) -> int:
    """How far below a search hit the true minimum can sit (¥)."""
    top_rate = max(t.rate for t in schedule.tiers)
    if schedule.discount_policy == "applied":
        top_rate = max(top_rate, schedule.minimum_commission_rate)
    combined = top_rate + schedule.processor.stripe_fee_rate
    return math.ceil(2 / (1 - combined)) + 1


def calculate_required_amount(
    target_net_amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> int:
    """Smallest gross amount whose net payout reaches ``target_net_amount``.

    Parameters
    ----------
    target_net_amount : int
        Net payout the teacher must receive (¥).  Must be ≥ 0.
    standing : TeacherStanding | None
        Teacher standing, forwarded to the breakdown (only changes the
        answer when the schedule applies discounts).
    schedule : FeeSchedule | None
        Fee schedule.  Default: the standard schedule.

    Returns
    -------
    int
        Gross amount (¥).  Not range-checked against request limits.
    """
    if target_net_amount < 0:
        raise ValueError(f"target net amount must be non-negative, got {target_net_amount}")
    schedule = resolve_schedule(schedule)

    def net(amount: int) -> int:
        return calculate_fee_breakdown(amount, standing, schedule).net_amount

    lo = target_net_amount
    hi = max(target_net_amount * 2, 1)
    while net(hi) < target_net_amount:
        logger.debug("Widening required-amount bound past %d for target %d", hi, target_net_amount)
        lo = hi + 1
        hi *= 2

    result = hi
    while lo <= hi:
        mid = (lo + hi) // 2
        if net(mid) >= target_net_amount:
            result = mid
            hi = mid - 1  # try smaller
        else:
            lo = mid + 1  # need bigger

    found = result
    for amount in range(found - 1, max(found - _rounding_window(schedule), 0) - 1, -1):
        if net(amount) >= target_net_amount:
            result = amount
    if result != found:
        logger.debug(
            "Rounding dip: %d nets %d as well, below search hit %d",
            result, target_net_amount, found,
        )
    return result

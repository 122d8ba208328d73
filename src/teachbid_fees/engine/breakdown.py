"""Fee breakdown for a single transaction.

    commission = round(amount × fee_rate)
    stripe     = round(amount × stripe_fee_rate) + stripe_fixed_fee
    net        = amount − commission − stripe

Teacher discounts are itemised as ``round(amount × discount_rate)`` each.
Under the default ``advisory`` policy they are display figures only and
``fee_rate`` is the tier rate.  Under ``applied`` the earned discount
rates come off the tier rate first, floored at
``minimum_commission_rate``.

No bounds checking happens here; callers validate the amount first
(``validate_transaction_amount``).
"""

from __future__ import annotations

from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.engine.rounding import round_half_up, to_decimal
from teachbid_fees.engine.tiers import resolve_commission_rate, resolve_schedule
from teachbid_fees.models.results import (
    CommissionLine,
    DiscountBreakdown,
    FeeBreakdown,
    FeeLineItems,
    ProcessorLine,
    TeacherStanding,
)


def _earned_discount_rates(
    standing: TeacherStanding, schedule: FeeSchedule,
) -> dict[str, float]:
    """Discount name → rate for every discount the teacher qualifies for."""
    rates = schedule.discounts
    earned: dict[str, float] = {}
    if standing.transaction_count < rates.new_teacher_transaction_threshold:
        earned["new_teacher"] = rates.new_teacher
    if standing.is_verified:
        earned["verified"] = rates.verified_teacher
    if standing.rating >= rates.top_rated_min_rating:
        earned["top_rated"] = rates.top_rated
    return earned


def calculate_discounts(
    amount: int,
    standing: TeacherStanding | None,
    schedule: FeeSchedule | None = None,
) -> DiscountBreakdown | None:
    """Itemise earned discounts.  None when nothing was earned."""
    if standing is None:
        return None
    schedule = resolve_schedule(schedule)

    components = {
        name: round_half_up(amount, rate)
        for name, rate in _earned_discount_rates(standing, schedule).items()
    }
    total = sum(components.values())
    if total <= 0:
        return None
    return DiscountBreakdown(**components, total=total)


def effective_commission_rate(
    amount: int,
    standing: TeacherStanding | None,
    schedule: FeeSchedule | None = None,
) -> float:
    """Tier rate minus earned discount rates, never below the floor.

    The subtraction is done in Decimal so 0.25 − 0.05 − 0.02 − 0.03 comes
    out as exactly 0.15.
    """
    schedule = resolve_schedule(schedule)
    base_rate = resolve_commission_rate(amount, standing, schedule)
    if standing is None:
        return base_rate

    rate = to_decimal(base_rate)
    for discount_rate in _earned_discount_rates(standing, schedule).values():
        rate -= to_decimal(discount_rate)
    return float(max(rate, to_decimal(schedule.minimum_commission_rate)))


def calculate_fee_breakdown(
    amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> FeeBreakdown:
    """Compute commission, processor fee, net payout and discounts."""
    schedule = resolve_schedule(schedule)
    processor = schedule.processor

    base_rate = resolve_commission_rate(amount, standing, schedule)
    if schedule.discount_policy == "applied":
        fee_rate = effective_commission_rate(amount, standing, schedule)
    else:
        fee_rate = base_rate

    commission_fee = round_half_up(amount, fee_rate)
    stripe_fee = round_half_up(amount, processor.stripe_fee_rate) + processor.stripe_fixed_fee
    total_fees = commission_fee + stripe_fee
    net_amount = amount - total_fees

    return FeeBreakdown(
        amount=amount,
        fee_rate=fee_rate,
        base_rate=base_rate,
        commission_fee=commission_fee,
        stripe_fee=stripe_fee,
        total_fees=total_fees,
        net_amount=net_amount,
        breakdown=FeeLineItems(
            base_amount=amount,
            commission=CommissionLine(rate=fee_rate, amount=commission_fee),
            stripe=ProcessorLine(
                rate=processor.stripe_fee_rate,
                fixed_fee=processor.stripe_fixed_fee,
                amount=stripe_fee,
            ),
            discounts=calculate_discounts(amount, standing, schedule),
        ),
    )


def calculate_minimum_payout(
    amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> int:
    """What the teacher is guaranteed to receive for ``amount``."""
    return calculate_fee_breakdown(amount, standing, schedule).net_amount


def calculate_teacher_fee(
    amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> int:
    """Net amount paid out to the teacher after all fees."""
    return calculate_fee_breakdown(amount, standing, schedule).net_amount


def calculate_student_fee(
    amount: int,
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> int:
    """Amount charged to the student.

    Fees are deducted from the teacher's side, so the student pays the
    agreed amount unchanged.
    """
    return calculate_fee_breakdown(amount, standing, schedule).amount

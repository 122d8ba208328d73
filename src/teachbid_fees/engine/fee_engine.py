"""FeeEngine — binds one validated schedule to every fee operation."""

from __future__ import annotations

from typing import Sequence

from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.engine.breakdown import (
    calculate_discounts,
    calculate_fee_breakdown,
    calculate_minimum_payout,
    calculate_student_fee,
    calculate_teacher_fee,
)
from teachbid_fees.engine.display import (
    calculate_earnings_estimate,
    calculate_referral_bonus,
    get_option_price,
)
from teachbid_fees.engine.solver import calculate_required_amount
from teachbid_fees.engine.tiers import get_fee_tier_info, get_fee_tiers, resolve_commission_rate
from teachbid_fees.engine.validation import validate_payout_amount, validate_transaction_amount
from teachbid_fees.models.results import (
    AmountValidation,
    DiscountBreakdown,
    EarningsEstimateRow,
    FeeBreakdown,
    ReferralBonusAmounts,
    TeacherStanding,
    TierInfo,
)


class FeeEngine:
    """Stateless fee calculator over an injected schedule.

    Usage:
        engine = FeeEngine(load_fee_schedule("schedules/standard.yaml"))
        if engine.validate_transaction_amount(amount).is_valid:
            breakdown = engine.calculate_fee_breakdown(amount, standing)
    """

    def __init__(self, schedule: FeeSchedule | None = None) -> None:
        self._schedule = schedule if schedule is not None else FeeSchedule()

    @property
    def schedule(self) -> FeeSchedule:
        return self._schedule

    def resolve_commission_rate(self, amount: int, standing: TeacherStanding | None = None) -> float:
        return resolve_commission_rate(amount, standing, self._schedule)

    def calculate_fee_breakdown(self, amount: int, standing: TeacherStanding | None = None) -> FeeBreakdown:
        return calculate_fee_breakdown(amount, standing, self._schedule)

    def calculate_discounts(self, amount: int, standing: TeacherStanding | None) -> DiscountBreakdown | None:
        return calculate_discounts(amount, standing, self._schedule)

    def calculate_minimum_payout(self, amount: int, standing: TeacherStanding | None = None) -> int:
        return calculate_minimum_payout(amount, standing, self._schedule)

    def calculate_teacher_fee(self, amount: int, standing: TeacherStanding | None = None) -> int:
        return calculate_teacher_fee(amount, standing, self._schedule)

    def calculate_student_fee(self, amount: int, standing: TeacherStanding | None = None) -> int:
        return calculate_student_fee(amount, standing, self._schedule)

    def calculate_required_amount(
        self, target_net_amount: int, standing: TeacherStanding | None = None,
    ) -> int:
        return calculate_required_amount(target_net_amount, standing, self._schedule)

    def validate_transaction_amount(self, amount: int) -> AmountValidation:
        return validate_transaction_amount(amount, self._schedule)

    def validate_payout_amount(self, net_amount: int) -> AmountValidation:
        return validate_payout_amount(net_amount, self._schedule)

    def get_fee_tier_info(self, amount: int) -> TierInfo | None:
        return get_fee_tier_info(amount, self._schedule)

    def get_fee_tiers(self) -> list[TierInfo]:
        return get_fee_tiers(self._schedule)

    def calculate_earnings_estimate(
        self, amounts: Sequence[int], standing: TeacherStanding | None = None,
    ) -> list[EarningsEstimateRow]:
        return calculate_earnings_estimate(amounts, standing, self._schedule)

    def calculate_referral_bonus(self) -> ReferralBonusAmounts:
        return calculate_referral_bonus(self._schedule)

    def get_option_price(self, option: str) -> int:
        return get_option_price(option, self._schedule)

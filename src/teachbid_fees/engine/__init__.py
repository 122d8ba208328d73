"""Engine — pure fee computations over a FeeSchedule."""

from teachbid_fees.engine.rounding import round_half_up
from teachbid_fees.engine.tiers import (
    RateTableError,
    find_tier,
    get_fee_tier_info,
    get_fee_tiers,
    resolve_commission_rate,
)
from teachbid_fees.engine.breakdown import (
    calculate_discounts,
    calculate_fee_breakdown,
    calculate_minimum_payout,
    calculate_student_fee,
    calculate_teacher_fee,
    effective_commission_rate,
)
from teachbid_fees.engine.solver import calculate_required_amount
from teachbid_fees.engine.validation import validate_payout_amount, validate_transaction_amount
from teachbid_fees.engine.display import (
    calculate_earnings_estimate,
    calculate_referral_bonus,
    format_currency,
    format_fee_calculation,
    format_rate,
    get_option_price,
)
from teachbid_fees.engine.fee_engine import FeeEngine

__all__ = [
    "round_half_up",
    "RateTableError",
    "find_tier",
    "resolve_commission_rate",
    "get_fee_tier_info",
    "get_fee_tiers",
    "calculate_discounts",
    "effective_commission_rate",
    "calculate_fee_breakdown",
    "calculate_minimum_payout",
    "calculate_student_fee",
    "calculate_teacher_fee",
    "calculate_required_amount",
    "validate_transaction_amount",
    "validate_payout_amount",
    "calculate_earnings_estimate",
    "calculate_referral_bonus",
    "format_currency",
    "format_fee_calculation",
    "format_rate",
    "get_option_price",
    "FeeEngine",
]

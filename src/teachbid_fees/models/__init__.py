"""Input and result models."""

from teachbid_fees.models.results import (
    AmountValidation,
    CommissionLine,
    DiscountBreakdown,
    EarningsEstimateRow,
    FeeBreakdown,
    FeeLineItems,
    FormattedEstimate,
    FormattedFeeCalculation,
    ProcessorLine,
    ReferralBonusAmounts,
    TeacherStanding,
    TierInfo,
)

__all__ = [
    "TeacherStanding",
    "CommissionLine",
    "ProcessorLine",
    "DiscountBreakdown",
    "FeeLineItems",
    "FeeBreakdown",
    "AmountValidation",
    "TierInfo",
    "FormattedFeeCalculation",
    "FormattedEstimate",
    "EarningsEstimateRow",
    "ReferralBonusAmounts",
]

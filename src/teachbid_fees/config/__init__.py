"""Configuration models — every fee input."""

from teachbid_fees.config.rates import (
    AmountLimits,
    DiscountRates,
    OptionPrices,
    ProcessorFees,
    RateTier,
    ReferralBonus,
)
from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.config.loader import default_fee_schedule, load_fee_schedule

__all__ = [
    "RateTier",
    "DiscountRates",
    "ProcessorFees",
    "AmountLimits",
    "OptionPrices",
    "ReferralBonus",
    "FeeSchedule",
    "load_fee_schedule",
    "default_fee_schedule",
]

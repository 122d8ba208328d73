"""Top-level fee schedule — bundles every fee input.

The schedule is validated once, when it is built.  A table that leaves a
gap, overlaps, or would break the inverse solver is rejected here with a
``pydantic.ValidationError`` instead of surfacing later inside a
per-transaction calculation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from teachbid_fees.config.rates import (
    AmountLimits,
    DiscountRates,
    OptionPrices,
    ProcessorFees,
    RateTier,
    ReferralBonus,
    standard_tiers,
)

# Gross amounts of up to twice the target net must always be enough to
# cover the percentage fees, so their combined rate stays below one half.
MAX_COMBINED_PERCENTAGE_RATE = 0.5


class FeeSchedule(BaseModel):
    """Complete input bundle for the fee engine.

    Frozen; the table-level checks run once, at construction.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="standard", description="Human label for this schedule")
    tiers: tuple[RateTier, ...] = Field(
        default_factory=standard_tiers,
        description="Volume tiers, ordered by amount, contiguous from ¥0 to ∞.",
    )
    discounts: DiscountRates = Field(default_factory=DiscountRates)
    processor: ProcessorFees = Field(default_factory=ProcessorFees)
    limits: AmountLimits = Field(default_factory=AmountLimits)
    options: OptionPrices = Field(default_factory=OptionPrices)
    referral: ReferralBonus = Field(default_factory=ReferralBonus)

    discount_policy: Literal["advisory", "applied"] = Field(
        default="advisory",
        description="'advisory' = discounts are itemised for display only and "
                    "never change the commission or the net payout. "
                    "'applied' = earned discount rates are subtracted from the "
                    "tier rate (floored at minimum_commission_rate).",
    )
    minimum_commission_rate: float = Field(
        default=0.10, ge=0, lt=1.0,
        description="Floor for the discounted commission rate. "
                    "Only used when discount_policy='applied'.",
    )

    @model_validator(mode="after")
    def _check_tier_table(self) -> FeeSchedule:
        tiers = self.tiers
        if not tiers:
            raise ValueError("rate table has no tiers")
        if tiers[0].min != 0:
            raise ValueError(f"first tier must start at 0, not {tiers[0].min}")

        for prev, nxt in zip(tiers, tiers[1:]):
            if prev.max is None:
                raise ValueError("only the last tier may be open-ended")
            if nxt.min != prev.max + 1:
                raise ValueError(
                    f"tiers are not contiguous: {prev.min}–{prev.max} is followed by "
                    f"a tier starting at {nxt.min}"
                )
            # A higher rate above a boundary would make the net payout drop
            # as the gross amount rises.
            if nxt.rate > prev.rate:
                raise ValueError(
                    f"tier rates must not increase with amount: "
                    f"{prev.rate} at {prev.min}–{prev.max}, {nxt.rate} from {nxt.min}"
                )

        if tiers[-1].max is not None:
            raise ValueError(f"last tier must be open-ended, not capped at {tiers[-1].max}")

        top_rate = max(t.rate for t in tiers)
        if self.discount_policy == "applied":
            # The floor can lift a discounted rate above a cheap tier.
            top_rate = max(top_rate, self.minimum_commission_rate)
        combined = top_rate + self.processor.stripe_fee_rate
        if combined >= MAX_COMBINED_PERCENTAGE_RATE:
            raise ValueError(
                f"highest commission rate plus processor rate is {combined:.4f}; "
                f"must stay below {MAX_COMBINED_PERCENTAGE_RATE}"
            )
        return self

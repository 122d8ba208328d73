"""Rate table, discount, processor and limit inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RateTier(BaseModel):
    """One commission volume tier.  Bounds are inclusive integer yen."""

    model_config = ConfigDict(frozen=True)

    min: int = Field(ge=0, description="Lowest amount in the tier (¥, inclusive)")
    max: int | None = Field(
        default=None, ge=0,
        description="Highest amount in the tier (¥, inclusive). None = open-ended.",
    )
    rate: float = Field(ge=0, lt=1.0, description="Commission fraction (e.g. 0.25 = 25%)")
    label: str = Field(default="", description="Display name for pricing tables")

    @model_validator(mode="after")
    def _bounds_ordered(self) -> RateTier:
        if self.max is not None and self.max < self.min:
            raise ValueError(f"tier max ({self.max}) is below tier min ({self.min})")
        return self

    def contains(self, amount: int) -> bool:
        return amount >= self.min and (self.max is None or amount <= self.max)


def standard_tiers() -> tuple[RateTier, ...]:
    return (
        RateTier(min=0, max=50_000, rate=0.25, label="～5万円"),
        RateTier(min=50_001, max=100_000, rate=0.22, label="5万円～10万円"),
        RateTier(min=100_001, max=200_000, rate=0.20, label="10万円～20万円"),
        RateTier(min=200_001, max=500_000, rate=0.18, label="20万円～50万円"),
        RateTier(min=500_001, max=None, rate=0.15, label="50万円以上"),
    )


class DiscountRates(BaseModel):
    """Teacher-standing discounts.

    Each earned discount is worth ``amount × rate``.  Whether it actually
    lowers the commission depends on ``FeeSchedule.discount_policy``.
    """

    model_config = ConfigDict(frozen=True)

    new_teacher: float = Field(default=0.05, ge=0, lt=1.0, description="Discount for new teachers")
    verified_teacher: float = Field(default=0.02, ge=0, lt=1.0, description="Discount for verified teachers")
    top_rated: float = Field(default=0.03, ge=0, lt=1.0, description="Discount for top-rated teachers")
    new_teacher_transaction_threshold: int = Field(
        default=5, ge=0,
        description="A teacher with fewer completed transactions than this is 'new'.",
    )
    top_rated_min_rating: float = Field(
        default=4.8, ge=0, le=5.0,
        description="Minimum average rating (0–5) for the top-rated discount.",
    )


class ProcessorFees(BaseModel):
    """Card-processor pricing: a percentage plus a flat per-charge fee."""

    model_config = ConfigDict(frozen=True)

    stripe_fee_rate: float = Field(default=0.036, ge=0, lt=1.0, description="Percentage component (3.6%)")
    stripe_fixed_fee: int = Field(default=10, ge=0, description="Flat component per transaction (¥)")


class AmountLimits(BaseModel):
    """Accepted request and payout amounts."""

    model_config = ConfigDict(frozen=True)

    min_request_amount: int = Field(default=1_000, ge=0, description="Minimum amount per request (¥)")
    max_request_amount: int = Field(default=1_000_000, ge=0, description="Maximum amount per request (¥)")
    min_payout_amount: int = Field(default=1_000, ge=0, description="Minimum payout to a teacher (¥)")


class OptionPrices(BaseModel):
    """Flat-priced listing options."""

    model_config = ConfigDict(frozen=True)

    urgent_listing: int = Field(default=2_000, ge=0, description="Urgent listing fee (¥)")
    proposal_boost: int = Field(default=1_000, ge=0, description="Proposal boost fee (¥)")


class ReferralBonus(BaseModel):
    """Fixed bonuses paid on a successful referral."""

    model_config = ConfigDict(frozen=True)

    referrer: int = Field(default=3_000, ge=0, description="Bonus to the referring user (¥)")
    referred: int = Field(default=2_000, ge=0, description="Bonus to the referred user (¥)")

"""Input and result types — the contract between the engine and its callers.

Every monetary field is integer yen.  Rates are fractions (0.25 = 25%).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ═══════════════════════════════════════════════════════════════════════════
# Inputs
# ═══════════════════════════════════════════════════════════════════════════

class TeacherStanding(BaseModel):
    """What the platform knows about the teacher receiving the payout.

    Omitted fields fall back to the least-privileged value, so a standing
    with no ``transaction_count`` is treated as a new teacher.
    """

    transaction_count: int = Field(default=0, ge=0, description="Prior completed transactions")
    is_verified: bool = Field(default=False, description="Identity/credentials verified")
    rating: float = Field(default=0.0, ge=0, le=5.0, description="Average review rating (0–5)")


# ═══════════════════════════════════════════════════════════════════════════
# Fee breakdown
# ═══════════════════════════════════════════════════════════════════════════

class CommissionLine(BaseModel):
    rate: float
    amount: int


class ProcessorLine(BaseModel):
    rate: float
    fixed_fee: int
    amount: int


class DiscountBreakdown(BaseModel):
    """Earned teacher discounts.  Absent components were not earned."""

    new_teacher: int | None = None
    verified: int | None = None
    top_rated: int | None = None
    total: int


class FeeLineItems(BaseModel):
    """Itemised view of one fee computation."""

    base_amount: int
    commission: CommissionLine
    stripe: ProcessorLine
    discounts: DiscountBreakdown | None = None


class FeeBreakdown(BaseModel):
    """Result of one fee computation.

    Invariant: ``amount == commission_fee + stripe_fee + net_amount``.
    """

    amount: int
    """Gross amount the student pays (¥)."""

    fee_rate: float
    """Commission rate actually charged.  Equals ``base_rate`` unless the
    schedule applies discounts."""

    base_rate: float
    """Volume-tier rate before any teacher discount."""

    commission_fee: int
    stripe_fee: int
    total_fees: int

    net_amount: int
    """What the teacher receives = amount − total_fees."""

    breakdown: FeeLineItems


# ═══════════════════════════════════════════════════════════════════════════
# Validation, tiers, display
# ═══════════════════════════════════════════════════════════════════════════

class AmountValidation(BaseModel):
    """Outcome of an amount check.  Failures are data, never exceptions."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)


class TierInfo(BaseModel):
    """Display metadata for one volume tier."""

    name: str
    rate: float
    min: int
    max: int | None
    """None for the open-ended top tier."""


class FormattedFeeCalculation(BaseModel):
    amount: str
    fee_rate: str
    commission_fee: str
    stripe_fee: str
    total_fees: str
    net_amount: str


class FormattedEstimate(BaseModel):
    amount: str
    net_amount: str
    fee_rate: str


class EarningsEstimateRow(BaseModel):
    """One row of an earnings table: what a teacher keeps at ``amount``."""

    amount: int
    net_amount: int
    fee_rate: float
    formatted: FormattedEstimate


class ReferralBonusAmounts(BaseModel):
    referrer: int
    referred: int
    total: int

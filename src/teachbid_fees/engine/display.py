"""Display helpers — yen and percent strings, earnings tables, extras."""

from __future__ import annotations

from typing import Sequence

from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.engine.breakdown import calculate_fee_breakdown
from teachbid_fees.engine.tiers import resolve_schedule
from teachbid_fees.models.results import (
    EarningsEstimateRow,
    FeeBreakdown,
    FormattedEstimate,
    FormattedFeeCalculation,
    ReferralBonusAmounts,
    TeacherStanding,
)


def format_currency(amount: int) -> str:
    """¥12,345 — no decimals, sign in front of the symbol."""
    if amount < 0:
        return f"-¥{-amount:,}"
    return f"¥{amount:,}"


def format_rate(rate: float) -> str:
    """0.25 → '25.0%'."""
    return f"{rate * 100:.1f}%"


def format_fee_calculation(calculation: FeeBreakdown) -> FormattedFeeCalculation:
    return FormattedFeeCalculation(
        amount=format_currency(calculation.amount),
        fee_rate=format_rate(calculation.fee_rate),
        commission_fee=format_currency(calculation.commission_fee),
        stripe_fee=format_currency(calculation.stripe_fee),
        total_fees=format_currency(calculation.total_fees),
        net_amount=format_currency(calculation.net_amount),
    )


def calculate_earnings_estimate(
    amounts: Sequence[int],
    standing: TeacherStanding | None = None,
    schedule: FeeSchedule | None = None,
) -> list[EarningsEstimateRow]:
    """One earnings row per candidate amount, in input order."""
    schedule = resolve_schedule(schedule)
    rows: list[EarningsEstimateRow] = []
    for amount in amounts:
        calculation = calculate_fee_breakdown(amount, standing, schedule)
        rows.append(EarningsEstimateRow(
            amount=amount,
            net_amount=calculation.net_amount,
            fee_rate=calculation.fee_rate,
            formatted=FormattedEstimate(
                amount=format_currency(amount),
                net_amount=format_currency(calculation.net_amount),
                fee_rate=format_rate(calculation.fee_rate),
            ),
        ))
    return rows


def calculate_referral_bonus(schedule: FeeSchedule | None = None) -> ReferralBonusAmounts:
    """Flat referral bonuses; independent of the transaction amount."""
    referral = resolve_schedule(schedule).referral
    return ReferralBonusAmounts(
        referrer=referral.referrer,
        referred=referral.referred,
        total=referral.referrer + referral.referred,
    )


def get_option_price(option: str, schedule: FeeSchedule | None = None) -> int:
    """Price of a listing option: ``'urgent_listing'`` or ``'proposal_boost'``."""
    options = resolve_schedule(schedule).options
    prices = options.model_dump()
    if option not in prices:
        raise ValueError(f"unknown listing option '{option}'; expected one of {sorted(prices)}")
    return prices[option]

"""FastAPI server — fee preview and payout API for TeachBid callers.

Run with:
    uvicorn teachbid_fees.api.server:app --reload --port 8000

Or:
    python -m teachbid_fees.api.server

The schedule is read once at import time from the YAML file named by
``TEACHBID_FEE_SCHEDULE``; without it the built-in standard schedule is used.

Endpoints:
    GET  /health                — liveness
    GET  /schedule              — active fee schedule as JSON
    GET  /tiers                 — full tier table (pricing page)
    GET  /tiers/lookup          — tier for one amount
    GET  /referral-bonus        — referral bonus amounts
    POST /fees/validate         — amount limit check
    POST /fees/breakdown        — validated fee preview
    POST /fees/required-amount  — gross amount for a target net payout
    POST /fees/estimate         — earnings table for several amounts
"""

from __future__ import annotations

import logging
import os
from typing import Any

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from teachbid_fees import __version__
from teachbid_fees.config import FeeSchedule, default_fee_schedule, load_fee_schedule
from teachbid_fees.engine import FeeEngine, format_fee_calculation
from teachbid_fees.models import (
    AmountValidation,
    EarningsEstimateRow,
    FeeBreakdown,
    FormattedFeeCalculation,
    ReferralBonusAmounts,
    TeacherStanding,
    TierInfo,
)

logger = logging.getLogger(__name__)

SCHEDULE_ENV_VAR = "TEACHBID_FEE_SCHEDULE"


# ═══════════════════════════════════════════════════════════════════════════
# Schedule / engine setup
# ═══════════════════════════════════════════════════════════════════════════

def _load_schedule_from_env() -> FeeSchedule:
    path = os.environ.get(SCHEDULE_ENV_VAR)
    if path:
        return load_fee_schedule(path)
    logger.info("%s not set; using the built-in standard fee schedule", SCHEDULE_ENV_VAR)
    return default_fee_schedule()


engine = FeeEngine(_load_schedule_from_env())

app = FastAPI(
    title="TeachBid Fee Engine API",
    version=__version__,
    description=(
        "Commission, processor fee and net payout calculations for TeachBid "
        "transactions. All amounts are whole yen."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class AmountRequest(BaseModel):
    """Request body for /fees/validate."""
    amount: int = Field(description="Transaction amount (¥)")


class BreakdownRequest(BaseModel):
    """Request body for /fees/breakdown."""
    amount: int = Field(description="Transaction amount (¥)")
    standing: TeacherStanding | None = Field(
        default=None,
        description="Optional teacher standing. Example: "
                    "{'transaction_count': 2, 'is_verified': true, 'rating': 4.9}",
    )


class BreakdownResponse(BaseModel):
    """Response from /fees/breakdown."""
    calculation: FeeBreakdown
    formatted: FormattedFeeCalculation


class RequiredAmountRequest(BaseModel):
    """Request body for /fees/required-amount."""
    target_net_amount: int = Field(ge=0, description="Net payout the teacher must receive (¥)")
    standing: TeacherStanding | None = None


class RequiredAmountResponse(BaseModel):
    """Response from /fees/required-amount."""
    target_net_amount: int
    required_amount: int
    calculation: FeeBreakdown
    validation: AmountValidation


class EstimateRequest(BaseModel):
    """Request body for /fees/estimate."""
    amounts: list[int] = Field(
        default_factory=lambda: [5_000, 10_000, 30_000, 50_000, 100_000],
        description="Candidate amounts (¥), one row each",
    )
    standing: TeacherStanding | None = None


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/schedule")
def get_schedule() -> dict[str, Any]:
    """The active fee schedule — tiers, discounts, processor fees, limits."""
    return engine.schedule.model_dump()


@app.get("/tiers", response_model=list[TierInfo])
def get_tiers():
    """Full tier table for the pricing page."""
    return engine.get_fee_tiers()


@app.get("/tiers/lookup", response_model=TierInfo)
def lookup_tier(amount: int = Query(description="Transaction amount (¥)")):
    """Tier that applies to ``amount``."""
    info = engine.get_fee_tier_info(amount)
    if info is None:
        raise HTTPException(status_code=404, detail=f"No fee tier covers amount {amount}")
    return info


@app.get("/referral-bonus", response_model=ReferralBonusAmounts)
def get_referral_bonus():
    return engine.calculate_referral_bonus()


@app.post("/fees/validate", response_model=AmountValidation)
def validate_amount(req: AmountRequest):
    """Check an amount against the request limits. Never fails."""
    return engine.validate_transaction_amount(req.amount)


@app.post("/fees/breakdown", response_model=BreakdownResponse)
def fee_breakdown(req: BreakdownRequest):
    """Validated fee preview.

    Out-of-range amounts are rejected with 422 and the validation messages,
    since the breakdown itself performs no bounds checking.
    """
    validation = engine.validate_transaction_amount(req.amount)
    if not validation.is_valid:
        raise HTTPException(status_code=422, detail=validation.errors)

    calculation = engine.calculate_fee_breakdown(req.amount, req.standing)
    return BreakdownResponse(
        calculation=calculation,
        formatted=format_fee_calculation(calculation),
    )


@app.post("/fees/required-amount", response_model=RequiredAmountResponse)
def required_amount(req: RequiredAmountRequest):
    """Smallest gross amount that nets the teacher ``target_net_amount``.

    The result is returned with its validation so callers can see whether
    it falls inside the request limits.
    """
    amount = engine.calculate_required_amount(req.target_net_amount, req.standing)
    return RequiredAmountResponse(
        target_net_amount=req.target_net_amount,
        required_amount=amount,
        calculation=engine.calculate_fee_breakdown(amount, req.standing),
        validation=engine.validate_transaction_amount(amount),
    )


@app.post("/fees/estimate", response_model=list[EarningsEstimateRow])
def earnings_estimate(req: EstimateRequest):
    """Earnings table for several candidate amounts.

    Every amount is validated first; any out-of-range amount rejects the
    whole request with 422, listing the messages per amount.
    """
    invalid = []
    for amount in req.amounts:
        validation = engine.validate_transaction_amount(amount)
        if not validation.is_valid:
            invalid.append({"amount": amount, "errors": validation.errors})
    if invalid:
        raise HTTPException(status_code=422, detail=invalid)

    return engine.calculate_earnings_estimate(req.amounts, req.standing)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "teachbid_fees.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()

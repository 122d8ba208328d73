"""Amount checks.  Results are returned as data so forms can show them inline."""

from __future__ import annotations

from teachbid_fees.config.schedule import FeeSchedule
from teachbid_fees.engine.tiers import resolve_schedule
from teachbid_fees.models.results import AmountValidation


def validate_transaction_amount(
    amount: int, schedule: FeeSchedule | None = None,
) -> AmountValidation:
    """Check ``amount`` against the request limits.

    Both bounds are checked independently, so a misconfigured schedule
    with min > max reports both messages.
    """
    limits = resolve_schedule(schedule).limits
    errors: list[str] = []

    if amount < limits.min_request_amount:
        errors.append(f"最小金額は{limits.min_request_amount:,}円です")

    if amount > limits.max_request_amount:
        errors.append(f"最大金額は{limits.max_request_amount:,}円です")

    return AmountValidation(is_valid=not errors, errors=errors)


def validate_payout_amount(
    net_amount: int, schedule: FeeSchedule | None = None,
) -> AmountValidation:
    """Check a net payout against the minimum payout amount."""
    limits = resolve_schedule(schedule).limits
    errors: list[str] = []

    if net_amount < limits.min_payout_amount:
        errors.append(f"最低出金額は{limits.min_payout_amount:,}円です")

    return AmountValidation(is_valid=not errors, errors=errors)

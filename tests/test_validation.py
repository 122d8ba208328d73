"""Tests for engine/validation.py — amount limits returned as data."""

from __future__ import annotations

from teachbid_fees.config import AmountLimits, FeeSchedule
from teachbid_fees.engine.validation import validate_payout_amount, validate_transaction_amount


class TestTransactionAmount:

    def test_minimum_is_valid(self, schedule: FeeSchedule):
        result = validate_transaction_amount(1_000, schedule)
        assert result.is_valid is True
        assert result.errors == []

    def test_below_minimum(self, schedule: FeeSchedule):
        result = validate_transaction_amount(999, schedule)
        assert result.is_valid is False
        assert result.errors == ["最小金額は1,000円です"]

    def test_maximum_is_valid(self, schedule: FeeSchedule):
        assert validate_transaction_amount(1_000_000, schedule).is_valid is True

    def test_above_maximum(self, schedule: FeeSchedule):
        result = validate_transaction_amount(1_000_001, schedule)
        assert result.is_valid is False
        assert result.errors == ["最大金額は1,000,000円です"]

    def test_negative_amount_does_not_raise(self, schedule: FeeSchedule):
        result = validate_transaction_amount(-50, schedule)
        assert result.is_valid is False
        assert len(result.errors) == 1

    def test_inverted_limits_report_both(self):
        schedule = FeeSchedule(limits=AmountLimits(min_request_amount=5_000, max_request_amount=2_000))
        result = validate_transaction_amount(3_000, schedule)
        assert result.is_valid is False
        assert result.errors == ["最小金額は5,000円です", "最大金額は2,000円です"]

    def test_default_schedule(self):
        assert validate_transaction_amount(999).is_valid is False


class TestPayoutAmount:

    def test_at_minimum(self, schedule: FeeSchedule):
        assert validate_payout_amount(1_000, schedule).is_valid is True

    def test_below_minimum(self, schedule: FeeSchedule):
        result = validate_payout_amount(704, schedule)
        assert result.is_valid is False
        assert result.errors == ["最低出金額は1,000円です"]

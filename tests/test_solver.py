"""Tests for engine/solver.py — gross amount for a target net payout."""

from __future__ import annotations

import pytest

from teachbid_fees.config import FeeSchedule
from teachbid_fees.engine.breakdown import calculate_fee_breakdown
from teachbid_fees.engine.solver import calculate_required_amount
from teachbid_fees.models import TeacherStanding

TARGETS = [
    0, 1, 5, 100, 704, 1_000, 7_130, 10_000, 35_789, 50_000, 71_000,
    77_777, 123_456, 250_000, 500_000, 800_000,
]


def _net(amount: int, standing: TeacherStanding | None, schedule: FeeSchedule) -> int:
    return calculate_fee_breakdown(amount, standing, schedule).net_amount


class TestRequiredAmount:

    def test_known_answer(self, schedule: FeeSchedule):
        # 10000 nets 7130; 9999 nets 9999 − 2500 − 370 = 7129
        assert calculate_required_amount(7_130, schedule=schedule) == 10_000

    @pytest.mark.parametrize("target", TARGETS)
    def test_reaches_target_and_one_less_does_not(self, schedule: FeeSchedule, target: int):
        amount = calculate_required_amount(target, schedule=schedule)
        assert _net(amount, None, schedule) >= target
        assert _net(amount - 1, None, schedule) < target

    @pytest.mark.parametrize("target", TARGETS)
    def test_pricing_page_table(self, pricing_schedule: FeeSchedule, target: int):
        amount = calculate_required_amount(target, schedule=pricing_schedule)
        assert _net(amount, None, pricing_schedule) >= target
        assert _net(amount - 1, None, pricing_schedule) < target

    def test_small_target_widens_bound(self, schedule: FeeSchedule):
        """2 × target cannot cover the ¥10 fixed fee for tiny targets."""
        amount = calculate_required_amount(5, schedule=schedule)
        assert amount > 10
        assert _net(amount, None, schedule) >= 5

    def test_zero_target(self, schedule: FeeSchedule):
        amount = calculate_required_amount(0, schedule=schedule)
        assert _net(amount, None, schedule) >= 0
        assert _net(amount - 1, None, schedule) < 0

    def test_negative_target_rejected(self, schedule: FeeSchedule):
        with pytest.raises(ValueError, match="non-negative"):
            calculate_required_amount(-1, schedule=schedule)

    def test_advisory_standing_does_not_change_answer(
        self, schedule: FeeSchedule, rising_star: TeacherStanding,
    ):
        assert (
            calculate_required_amount(50_000, rising_star, schedule)
            == calculate_required_amount(50_000, None, schedule)
        )

    def test_applied_discounts_lower_required_amount(
        self, applied_schedule: FeeSchedule, rising_star: TeacherStanding,
    ):
        plain = calculate_required_amount(50_000, None, applied_schedule)
        discounted = calculate_required_amount(50_000, rising_star, applied_schedule)
        assert discounted < plain
        assert _net(discounted, rising_star, applied_schedule) >= 50_000
        assert _net(discounted - 1, rising_star, applied_schedule) < 50_000

    def test_no_fees_means_identity(self):
        free = FeeSchedule(
            tiers=[{"min": 0, "max": None, "rate": 0.0}],
            processor={"stripe_fee_rate": 0.0, "stripe_fixed_fee": 0},
        )
        assert calculate_required_amount(12_345, schedule=free) == 12_345

    def test_synthetic_schedule(self, synthetic_schedule: FeeSchedule):
        # Large tier: 5% commission, no processor fee → 19000 / 0.95 = 20000
        assert calculate_required_amount(19_000, schedule=synthetic_schedule) == 20_000


# ═══════════════════════════════════════════════════════════════════════════
# Minimality against an exhaustive scan
# ═══════════════════════════════════════════════════════════════════════════

def _lowest_passing(nets: list[int], target: int) -> int:
    return next(amount for amount, n in enumerate(nets) if n >= target)


@pytest.fixture(scope="module")
def standard_nets() -> list[int]:
    """Net payout for every gross amount 0..11,500 on the standard table."""
    standard = FeeSchedule()
    return [_net(amount, None, standard) for amount in range(11_501)]


class TestMinimality:

    def test_rounding_dip_is_real(self, schedule: FeeSchedule):
        # 10097: 2524 + 373 fees → 7200;  10098: 2525 + 374 fees → 7199
        assert _net(10_097, None, schedule) == 7_200
        assert _net(10_098, None, schedule) == 7_199
        assert _net(10_099, None, schedule) == 7_200

    @pytest.mark.parametrize("target, expected", [
        (7_200, 10_097),
        (7_497, 10_513),
        (7_537, 10_569),
    ])
    def test_dip_targets(self, schedule: FeeSchedule, target: int, expected: int):
        assert calculate_required_amount(target, schedule=schedule) == expected

    def test_matches_scan_7000_to_7999(self, schedule: FeeSchedule, standard_nets: list[int]):
        for target in range(7_000, 8_000):
            assert calculate_required_amount(target, schedule=schedule) == \
                _lowest_passing(standard_nets, target), f"target {target}"

    def test_matches_scan_small_targets(self, schedule: FeeSchedule, standard_nets: list[int]):
        for target in range(0, 200):
            assert calculate_required_amount(target, schedule=schedule) == \
                _lowest_passing(standard_nets, target), f"target {target}"

    def test_matches_scan_applied_discounts(
        self, applied_schedule: FeeSchedule, rising_star: TeacherStanding,
    ):
        nets = [_net(amount, rising_star, applied_schedule) for amount in range(3_001)]
        for target in range(0, 2_000, 7):
            assert calculate_required_amount(target, rising_star, applied_schedule) == \
                _lowest_passing(nets, target), f"target {target}"

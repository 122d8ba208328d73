"""YAML schedule loading."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from teachbid_fees.config.schedule import FeeSchedule

logger = logging.getLogger(__name__)


def load_fee_schedule(path: str | Path) -> FeeSchedule:
    """Load and validate a fee schedule from a YAML file.

    Sections missing from the file take their defaults.  An invalid table
    raises ``pydantic.ValidationError``.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    schedule = FeeSchedule(**data)
    logger.info(
        "Loaded fee schedule '%s' from %s (%d tiers, %s discounts)",
        schedule.name, path, len(schedule.tiers), schedule.discount_policy,
    )
    return schedule


def default_fee_schedule() -> FeeSchedule:
    """The built-in standard TeachBid schedule."""
    return FeeSchedule()

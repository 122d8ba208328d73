"""TeachBid fee engine — commission, processor fees and payouts in whole yen."""

from teachbid_fees.config import FeeSchedule, default_fee_schedule, load_fee_schedule
from teachbid_fees.engine import FeeEngine
from teachbid_fees.models import FeeBreakdown, TeacherStanding

__all__ = [
    "FeeSchedule",
    "FeeEngine",
    "FeeBreakdown",
    "TeacherStanding",
    "load_fee_schedule",
    "default_fee_schedule",
]

__version__ = "1.0.0"

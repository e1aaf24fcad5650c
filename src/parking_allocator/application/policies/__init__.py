from .slot_selection import (
    SlotSelectionPolicy,
    NearestFirstPolicy,
    BestFitPolicy,
    LoadBalancedPolicy,
    get_slot_policy,
)
from .fees import (
    FeePolicy,
    HourlyFeePolicy,
    TieredFeePolicy,
    DEFAULT_HOURLY_RATES,
    billed_hours,
)

__all__ = [
    "SlotSelectionPolicy",
    "NearestFirstPolicy",
    "BestFitPolicy",
    "LoadBalancedPolicy",
    "get_slot_policy",
    "FeePolicy",
    "HourlyFeePolicy",
    "TieredFeePolicy",
    "DEFAULT_HOURLY_RATES",
    "billed_hours",
]

"""Build a ready-to-use parking manager from settings."""
from typing import List, Optional

from loguru import logger

from parking_allocator.application.policies.fees import FeePolicy, HourlyFeePolicy, TieredFeePolicy
from parking_allocator.application.policies.slot_selection import get_slot_policy
from parking_allocator.application.services.parking_manager import ParkingManager
from parking_allocator.config.settings_env import Settings, settings as default_settings
from parking_allocator.domain.entities import Level, Slot


def build_levels(settings: Settings) -> List[Level]:
    levels = []
    slot_id = 1
    for level_number in range(1, settings.PARKING_LEVELS + 1):
        slots = []
        for vehicle_type, count in settings.slots_per_level().items():
            for _ in range(count):
                slots.append(Slot(vehicle_type=vehicle_type, id=slot_id))
                slot_id += 1
        levels.append(Level(slots, id=level_number, name=f"Level {level_number}"))
    return levels


def build_fee_policy(settings: Settings) -> FeePolicy:
    if settings.FEE_POLICY == HourlyFeePolicy.name:
        return HourlyFeePolicy(settings.hourly_rates(), strict_clock=settings.STRICT_CLOCK)
    if settings.FEE_POLICY == TieredFeePolicy.name:
        return TieredFeePolicy(
            settings.hourly_rates(),
            first_tier_hours=settings.TIERED_FIRST_HOURS,
            extended_rate_factor=settings.TIERED_EXTENDED_FACTOR,
            strict_clock=settings.STRICT_CLOCK,
        )
    raise ValueError(f"Unknown fee policy: {settings.FEE_POLICY}")


def create_parking_manager(settings: Optional[Settings] = None) -> ParkingManager:
    settings = settings or default_settings
    manager = ParkingManager(
        slot_policy=get_slot_policy(settings.SLOT_POLICY),
        fee_policy=build_fee_policy(settings),
    )
    for level in build_levels(settings):
        manager.add_level(level)
    status = manager.get_parking_status()
    logger.info(
        f"Parking lot ready: {len(status['levels'])} levels, {status['total_slots']} slots, "
        f"slot policy {settings.SLOT_POLICY}, fee policy {settings.FEE_POLICY}"
    )
    return manager

import pytest

from parking_allocator.application.policies.fees import HourlyFeePolicy
from parking_allocator.application.policies.slot_selection import NearestFirstPolicy
from parking_allocator.application.services.parking_manager import ParkingManager
from parking_allocator.config.settings_env import Settings
from parking_allocator.domain.common import VehicleType
from parking_allocator.domain.entities import Level, Slot, Vehicle


@pytest.fixture
def test_settings():
    """Provide test settings."""
    return Settings(
        DEV_MODE=False,
        PARKING_LEVELS=2,
        CAR_SLOTS_PER_LEVEL=3,
        BIKE_SLOTS_PER_LEVEL=2,
        TRUCK_SLOTS_PER_LEVEL=1,
    )


@pytest.fixture
def two_levels():
    """Two levels: level 1 with slots 1-4, level 2 with slots 5-8."""
    level_one = Level(
        [
            Slot(VehicleType.CAR, id=1),
            Slot(VehicleType.CAR, id=2),
            Slot(VehicleType.BIKE, id=3),
            Slot(VehicleType.TRUCK, id=4),
        ],
        id=1,
    )
    level_two = Level(
        [
            Slot(VehicleType.CAR, id=5),
            Slot(VehicleType.CAR, id=6),
            Slot(VehicleType.CAR, id=7),
            Slot(VehicleType.BIKE, id=8),
        ],
        id=2,
    )
    return [level_one, level_two]


@pytest.fixture
def parking_manager(two_levels):
    """Create a ParkingManager with the default policies and two levels."""
    manager = ParkingManager(slot_policy=NearestFirstPolicy(), fee_policy=HourlyFeePolicy())
    for level in two_levels:
        manager.add_level(level)
    return manager


@pytest.fixture
def small_manager():
    """One level with a single car slot and a single bike slot."""
    manager = ParkingManager()
    manager.add_level(Level([Slot(VehicleType.CAR, id=1), Slot(VehicleType.BIKE, id=2)], id=1))
    return manager


@pytest.fixture
def car():
    return Vehicle(VehicleType.CAR, "CAR123")


@pytest.fixture
def bike():
    return Vehicle(VehicleType.BIKE, "BIKE123")

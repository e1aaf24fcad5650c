from typing import Dict, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from parking_allocator.domain.common import VehicleType


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug mode")

    # Pricing
    CAR_HOURLY_RATE: float = Field(default=50.0, ge=0, description="Hourly rate for cars")
    BIKE_HOURLY_RATE: float = Field(default=20.0, ge=0, description="Hourly rate for bikes")
    TRUCK_HOURLY_RATE: float = Field(default=100.0, ge=0, description="Hourly rate for trucks")
    FEE_POLICY: Literal["hourly", "tiered"] = Field(default="hourly", description="Fee policy: hourly or tiered")
    TIERED_FIRST_HOURS: int = Field(default=3, ge=1, description="Hours billed at full rate by the tiered policy")
    TIERED_EXTENDED_FACTOR: float = Field(default=0.5, ge=0, description="Rate multiplier after the first tier")
    STRICT_CLOCK: bool = Field(default=False, description="Reject exit times earlier than entry times")

    # Allocation
    SLOT_POLICY: Literal["nearest", "best_fit", "load_balanced"] = Field(default="nearest", description="Slot policy: nearest, best_fit or load_balanced")

    # Parking Layout
    PARKING_LEVELS: int = Field(default=3, ge=0, description="Number of parking levels")
    CAR_SLOTS_PER_LEVEL: int = Field(default=10, ge=0, description="Car slots per level")
    BIKE_SLOTS_PER_LEVEL: int = Field(default=5, ge=0, description="Bike slots per level")
    TRUCK_SLOTS_PER_LEVEL: int = Field(default=2, ge=0, description="Truck slots per level")

    def hourly_rates(self) -> Dict[VehicleType, float]:
        return {
            VehicleType.CAR: self.CAR_HOURLY_RATE,
            VehicleType.BIKE: self.BIKE_HOURLY_RATE,
            VehicleType.TRUCK: self.TRUCK_HOURLY_RATE,
        }

    def slots_per_level(self) -> Dict[VehicleType, int]:
        return {
            VehicleType.CAR: self.CAR_SLOTS_PER_LEVEL,
            VehicleType.BIKE: self.BIKE_SLOTS_PER_LEVEL,
            VehicleType.TRUCK: self.TRUCK_SLOTS_PER_LEVEL,
        }


# Create settings instance
settings = Settings()

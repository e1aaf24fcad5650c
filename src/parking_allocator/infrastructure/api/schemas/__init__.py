from .parking import (
    VehicleEntry,
    VehicleExit,
    TicketResponse,
    Receipt,
    LevelStatus,
    VehicleTypeStatus,
    ParkingStatus,
)

__all__ = [
    "VehicleEntry",
    "VehicleExit",
    "TicketResponse",
    "Receipt",
    "LevelStatus",
    "VehicleTypeStatus",
    "ParkingStatus",
]

from .common import VehicleType, TicketStatus
from .entities import Vehicle, Slot, Level, Ticket
from .exceptions import (
    ParkingError,
    NoAvailabilityError,
    UnknownTicketError,
    VehicleAlreadyParkedError,
    InvalidStateError,
    ClockAnomalyError,
)

__all__ = [
    "VehicleType",
    "TicketStatus",
    "Vehicle",
    "Slot",
    "Level",
    "Ticket",
    "ParkingError",
    "NoAvailabilityError",
    "UnknownTicketError",
    "VehicleAlreadyParkedError",
    "InvalidStateError",
    "ClockAnomalyError",
]

from enum import Enum


class VehicleType(str, Enum):
    CAR = "car"
    BIKE = "bike"
    TRUCK = "truck"


class TicketStatus(str, Enum):
    PARKED = "parked"
    CLOSED = "closed"

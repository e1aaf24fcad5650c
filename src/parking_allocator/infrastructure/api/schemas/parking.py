from pydantic import BaseModel, Field, field_validator, ConfigDict
from datetime import datetime
from typing import Optional, List

from parking_allocator.domain.common import VehicleType, TicketStatus
from parking_allocator.domain.entities import Ticket


class VehicleEntry(BaseModel):
    license_plate: str = Field(..., min_length=1, max_length=20)
    vehicle_type: VehicleType = VehicleType.CAR

    @field_validator('license_plate')
    def validate_license_plate(cls, v):  # pylint: disable=no-self-argument
        return v.upper().strip()


class VehicleExit(BaseModel):
    license_plate: str = Field(..., min_length=1, max_length=20)

    @field_validator('license_plate')
    def validate_license_plate(cls, v):  # pylint: disable=no-self-argument
        return v.upper().strip()


class TicketResponse(BaseModel):
    id: int
    license_plate: str
    vehicle_type: VehicleType
    slot_id: int
    parked_time: datetime
    exit_time: Optional[datetime] = None
    status: TicketStatus
    amount: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "TicketResponse":
        return cls(
            id=ticket.id,
            license_plate=ticket.vehicle.license_plate,
            vehicle_type=ticket.vehicle.vehicle_type,
            slot_id=ticket.slot.id,
            parked_time=ticket.parked_time,
            exit_time=ticket.exit_time,
            status=ticket.status,
            amount=ticket.amount,
        )


class Receipt(BaseModel):
    ticket_id: int
    license_plate: str
    vehicle_type: VehicleType
    slot_id: int
    parked_time: datetime
    exit_time: datetime
    duration_minutes: int
    amount_due: float

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> "Receipt":
        return cls(
            ticket_id=ticket.id,
            license_plate=ticket.vehicle.license_plate,
            vehicle_type=ticket.vehicle.vehicle_type,
            slot_id=ticket.slot.id,
            parked_time=ticket.parked_time,
            exit_time=ticket.exit_time,
            duration_minutes=int(ticket.get_duration().total_seconds() // 60),
            amount_due=ticket.amount,
        )


class LevelStatus(BaseModel):
    level: int
    name: str
    total: int
    occupied: int
    available: int


class VehicleTypeStatus(BaseModel):
    vehicle_type: VehicleType
    total: int
    occupied: int
    available: int


class ParkingStatus(BaseModel):
    total_slots: int
    occupied_slots: int
    available_slots: int
    occupancy_rate: float
    active_tickets: int
    levels: List[LevelStatus]
    vehicle_types: List[VehicleTypeStatus]

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from parking_allocator.domain.common import VehicleType, TicketStatus
from parking_allocator.domain.entities import Slot, Ticket, Vehicle
from parking_allocator.infrastructure.api.schemas.parking import (
    VehicleEntry, VehicleExit, TicketResponse, Receipt, ParkingStatus
)


def test_vehicle_entry_normalises_plate():
    entry = VehicleEntry(license_plate="  ab12cd ", vehicle_type="truck")
    assert entry.license_plate == "AB12CD"
    assert entry.vehicle_type == VehicleType.TRUCK


def test_vehicle_entry_default_type():
    assert VehicleEntry(license_plate="A1").vehicle_type == VehicleType.CAR


def test_vehicle_exit_rejects_empty_plate():
    with pytest.raises(ValidationError):
        VehicleExit(license_plate="")


def test_vehicle_entry_rejects_long_plate():
    with pytest.raises(ValidationError):
        VehicleEntry(license_plate="X" * 21)


def test_ticket_response_from_ticket():
    entry = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    ticket = Ticket(Slot(VehicleType.BIKE, id=4), Vehicle(VehicleType.BIKE, "BK7"), id=12, parked_time=entry)

    response = TicketResponse.from_ticket(ticket)

    assert response.id == 12
    assert response.slot_id == 4
    assert response.license_plate == "BK7"
    assert response.status == TicketStatus.PARKED
    assert response.amount is None


def test_receipt_from_closed_ticket():
    entry = datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)
    ticket = Ticket(Slot(VehicleType.CAR, id=2), Vehicle(VehicleType.CAR, "RC1"), id=3, parked_time=entry)
    ticket.close(datetime(2024, 1, 1, 12, 5, tzinfo=timezone.utc))
    ticket.amount = 150.0

    receipt = Receipt.from_ticket(ticket)

    assert receipt.ticket_id == 3
    assert receipt.duration_minutes == 125
    assert receipt.amount_due == 150.0


def test_parking_status_validation():
    status = ParkingStatus(
        total_slots=1,
        occupied_slots=0,
        available_slots=1,
        occupancy_rate=0.0,
        active_tickets=0,
        levels=[{"level": 1, "name": "Level 1", "total": 1, "occupied": 0, "available": 1}],
        vehicle_types=[{"vehicle_type": "car", "total": 1, "occupied": 0, "available": 1}],
    )
    assert status.levels[0].name == "Level 1"
    assert status.vehicle_types[0].vehicle_type == VehicleType.CAR

from fastapi import APIRouter, Depends, HTTPException, Request
from typing import List

from parking_allocator.application.services.parking_manager import ParkingManager
from parking_allocator.domain.entities import Vehicle
from parking_allocator.domain.exceptions import (
    InvalidStateError,
    NoAvailabilityError,
    UnknownTicketError,
    VehicleAlreadyParkedError,
)
from parking_allocator.infrastructure.api.schemas.parking import (
    VehicleEntry, VehicleExit, TicketResponse, Receipt, ParkingStatus
)

router = APIRouter(prefix="/api/parking", tags=["parking"])


def get_manager(request: Request) -> ParkingManager:
    return request.app.state.manager


@router.post("/entry", response_model=TicketResponse, status_code=201)
def vehicle_entry(
    vehicle_data: VehicleEntry,
    manager: ParkingManager = Depends(get_manager)
):
    vehicle = Vehicle(vehicle_type=vehicle_data.vehicle_type, license_plate=vehicle_data.license_plate)
    try:
        ticket = manager.park_vehicle(vehicle)
    except (VehicleAlreadyParkedError, NoAvailabilityError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    return TicketResponse.from_ticket(ticket)


@router.post("/exit", response_model=Receipt)
def vehicle_exit(
    exit_data: VehicleExit,
    manager: ParkingManager = Depends(get_manager)
):
    ticket = manager.get_active_ticket(exit_data.license_plate)
    if ticket is None:
        raise HTTPException(status_code=404, detail=f"No active ticket for vehicle {exit_data.license_plate}")
    try:
        manager.unpark_vehicle(ticket)
    except UnknownTicketError as e:
        # Another request checked the same vehicle out first.
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidStateError as e:
        # Checkout was rolled back; the vehicle is still parked.
        raise HTTPException(status_code=409, detail=str(e))
    return Receipt.from_ticket(ticket)


@router.get("/status", response_model=ParkingStatus)
def get_parking_status(manager: ParkingManager = Depends(get_manager)):
    return manager.get_parking_status()


@router.get("/tickets/active", response_model=List[TicketResponse])
def get_active_tickets(manager: ParkingManager = Depends(get_manager)):
    return [TicketResponse.from_ticket(ticket) for ticket in manager.get_active_tickets()]

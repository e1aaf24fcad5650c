import threading
from typing import Dict, List, Optional

from loguru import logger

from parking_allocator.application.policies.fees import FeePolicy, HourlyFeePolicy
from parking_allocator.application.policies.slot_selection import (
    NearestFirstPolicy,
    SlotSelectionPolicy,
    ordered_levels,
)
from parking_allocator.domain.common import VehicleType
from parking_allocator.domain.entities import Level, Ticket, Vehicle
from parking_allocator.domain.exceptions import (
    InvalidStateError,
    NoAvailabilityError,
    UnknownTicketError,
    VehicleAlreadyParkedError,
)


class ParkingManager:
    """Owns the levels and the active-ticket registry.

    ``park_vehicle`` and ``unpark_vehicle`` run as one critical section each,
    so a free slot can never be handed to two callers.
    """

    def __init__(
        self,
        slot_policy: Optional[SlotSelectionPolicy] = None,
        fee_policy: Optional[FeePolicy] = None,
    ):
        self.slot_policy = slot_policy or NearestFirstPolicy()
        self.fee_policy = fee_policy or HourlyFeePolicy()
        self._levels: Dict[int, Level] = {}
        self._active_tickets: Dict[str, Ticket] = {}
        self._lock = threading.RLock()

    def add_level(self, level: Level) -> Level:
        with self._lock:
            if level.id in self._levels:
                raise InvalidStateError(f"Level {level.id} is already part of the parking lot")
            self._levels[level.id] = level
        logger.debug(f"Added {level.name} with {len(level)} slots")
        return level

    def get_levels(self) -> List[Level]:
        with self._lock:
            return ordered_levels(list(self._levels.values()))

    def park_vehicle(self, vehicle: Vehicle) -> Ticket:
        with self._lock:
            if vehicle.license_plate in self._active_tickets:
                logger.warning(f"Rejected entry for {vehicle.license_plate}: already parked")
                raise VehicleAlreadyParkedError(vehicle.license_plate)

            slot = self.slot_policy.find_slot(ordered_levels(list(self._levels.values())), vehicle)
            if slot is None:
                logger.warning(f"No {vehicle.vehicle_type.value} slot for {vehicle.license_plate}")
                raise NoAvailabilityError(vehicle.vehicle_type)
            if not slot.accepts(vehicle):
                raise InvalidStateError(
                    f"{type(self.slot_policy).__name__} returned slot {slot.id} "
                    f"of type {slot.vehicle_type} for a {vehicle.vehicle_type}"
                )

            slot.park()
            ticket = Ticket(slot=slot, vehicle=vehicle)
            self._active_tickets[vehicle.license_plate] = ticket

        logger.info(f"Vehicle {vehicle.license_plate} parked at slot {slot.id} (ticket {ticket.id})")
        return ticket

    def unpark_vehicle(self, ticket: Ticket) -> float:
        with self._lock:
            plate = ticket.vehicle.license_plate
            if self._active_tickets.get(plate) is not ticket:
                logger.warning(f"Rejected exit for unknown ticket {ticket.id} ({plate})")
                raise UnknownTicketError(ticket.id, plate)

            ticket.slot.unpark()
            ticket.close()
            del self._active_tickets[plate]
            try:
                fee = self.fee_policy.get_fee(ticket)
            except Exception:
                ticket.reopen()
                ticket.slot.park()
                self._active_tickets[plate] = ticket
                raise
            ticket.amount = fee

        logger.info(f"Vehicle {plate} left slot {ticket.slot.id}. Amount: {fee}")
        return fee

    def get_active_ticket(self, license_plate: str) -> Optional[Ticket]:
        with self._lock:
            return self._active_tickets.get(license_plate.upper().strip())

    def get_active_tickets(self) -> List[Ticket]:
        with self._lock:
            return sorted(self._active_tickets.values(), key=lambda t: t.id)

    def get_parking_status(self) -> Dict:
        with self._lock:
            levels = ordered_levels(list(self._levels.values()))
            by_type = {
                vehicle_type: {"total": 0, "occupied": 0}
                for vehicle_type in VehicleType
            }
            floors = []
            for level in levels:
                total = len(level)
                occupied = 0
                for slot in level.iter_slots():
                    by_type[slot.vehicle_type]["total"] += 1
                    if slot.is_occupied:
                        occupied += 1
                        by_type[slot.vehicle_type]["occupied"] += 1
                floors.append({
                    "level": level.id,
                    "name": level.name,
                    "total": total,
                    "occupied": occupied,
                    "available": total - occupied
                })
            active_tickets = len(self._active_tickets)

        total_slots = sum(floor["total"] for floor in floors)
        occupied_slots = sum(floor["occupied"] for floor in floors)
        occupancy_rate = (occupied_slots / total_slots * 100) if total_slots > 0 else 0

        return {
            "total_slots": total_slots,
            "occupied_slots": occupied_slots,
            "available_slots": total_slots - occupied_slots,
            "occupancy_rate": round(occupancy_rate, 2),
            "active_tickets": active_tickets,
            "levels": floors,
            "vehicle_types": [
                {
                    "vehicle_type": vehicle_type,
                    "total": stats["total"],
                    "occupied": stats["occupied"],
                    "available": stats["total"] - stats["occupied"]
                }
                for vehicle_type, stats in by_type.items()
            ]
        }

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Dict, Iterable, Iterator, Optional

from parking_allocator.domain.common import VehicleType, TicketStatus
from parking_allocator.domain.exceptions import InvalidStateError
from parking_allocator.shared.identity import IdGenerator


_vehicle_ids = IdGenerator()
_slot_ids = IdGenerator()
_level_ids = IdGenerator()
_ticket_ids = IdGenerator()


@dataclass(frozen=True)
class Vehicle:
    vehicle_type: VehicleType
    license_plate: str
    id: int = field(default_factory=_vehicle_ids.next)

    def __post_init__(self):
        if not isinstance(self.vehicle_type, VehicleType):
            raise InvalidStateError(f"Unknown vehicle type: {self.vehicle_type!r}")
        if not isinstance(self.license_plate, str):
            raise InvalidStateError(f"Vehicle license plate must be a string, got {self.license_plate!r}")
        plate = self.license_plate.upper().strip()
        if not plate:
            raise InvalidStateError("Vehicle license plate must not be empty")
        object.__setattr__(self, "license_plate", plate)
        _vehicle_ids.reserve(self.id)


class Slot:
    def __init__(self, vehicle_type: VehicleType, id: Optional[int] = None, is_occupied: bool = False):
        if not isinstance(vehicle_type, VehicleType):
            raise InvalidStateError(f"Slot cannot accept unknown vehicle type {vehicle_type!r}")
        self.id = _slot_ids.reserve(id) if id is not None else _slot_ids.next()
        self._vehicle_type = vehicle_type
        self.is_occupied = is_occupied

    @property
    def vehicle_type(self) -> VehicleType:
        return self._vehicle_type

    def is_available(self) -> bool:
        return not self.is_occupied

    def accepts(self, vehicle: Vehicle) -> bool:
        return self._vehicle_type == vehicle.vehicle_type

    def park(self):
        if self.is_occupied:
            raise InvalidStateError(f"Slot {self.id} is already occupied")
        self.is_occupied = True

    def unpark(self):
        if not self.is_occupied:
            raise InvalidStateError(f"Slot {self.id} is not occupied")
        self.is_occupied = False

    def __repr__(self) -> str:
        state = "occupied" if self.is_occupied else "free"
        return f"Slot(id={self.id}, type={self._vehicle_type.value}, {state})"


class Level:
    """A floor of the parking lot; its slots are fixed once it is built."""

    def __init__(self, slots: Iterable[Slot], id: Optional[int] = None, name: Optional[str] = None):
        self.id = _level_ids.reserve(id) if id is not None else _level_ids.next()
        self.name = name or f"Level {self.id}"
        slot_map: Dict[int, Slot] = {}
        for slot in slots:
            if slot.id in slot_map:
                raise InvalidStateError(f"Duplicate slot id {slot.id} on level {self.id}")
            slot_map[slot.id] = slot
        self._slots = {slot_id: slot_map[slot_id] for slot_id in sorted(slot_map)}

    @property
    def slots(self) -> Dict[int, Slot]:
        return dict(self._slots)

    def iter_slots(self) -> Iterator[Slot]:
        return iter(self._slots.values())

    def get_slot(self, slot_id: int) -> Optional[Slot]:
        return self._slots.get(slot_id)

    def count_free(self, vehicle_type: VehicleType) -> int:
        return sum(
            1 for slot in self._slots.values()
            if slot.vehicle_type == vehicle_type and slot.is_available()
        )

    def __len__(self) -> int:
        return len(self._slots)


class Ticket:
    def __init__(self, slot: Slot, vehicle: Vehicle, id: Optional[int] = None, parked_time: Optional[datetime] = None):
        self.id = _ticket_ids.reserve(id) if id is not None else _ticket_ids.next()
        self.slot = slot
        self.vehicle = vehicle
        self.parked_time = parked_time or datetime.now(timezone.utc)
        self.exit_time: Optional[datetime] = None
        self.amount: Optional[float] = None

    @property
    def status(self) -> TicketStatus:
        return TicketStatus.CLOSED if self.exit_time is not None else TicketStatus.PARKED

    @property
    def is_closed(self) -> bool:
        return self.exit_time is not None

    def get_id(self) -> int:
        return self.id

    def close(self, exit_time: Optional[datetime] = None):
        if self.exit_time is not None:
            raise InvalidStateError(f"Ticket {self.id} is already closed")
        self.exit_time = exit_time or datetime.now(timezone.utc)

    def reopen(self):
        # Only used to roll back a failed checkout.
        self.exit_time = None
        self.amount = None

    def get_duration(self) -> timedelta:
        if self.exit_time is None:
            raise InvalidStateError(f"Ticket {self.id} is still open")
        return self.exit_time - self.parked_time

    def __repr__(self) -> str:
        return (
            f"Ticket(id={self.id}, plate={self.vehicle.license_plate}, "
            f"slot={self.slot.id}, status={self.status.value})"
        )

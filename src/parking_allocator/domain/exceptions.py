from typing import Optional


class ParkingError(Exception):
    """Base class for every error raised by the allocation core."""


class NoAvailabilityError(ParkingError):
    def __init__(self, vehicle_type):
        self.vehicle_type = vehicle_type
        super().__init__(f"No available {vehicle_type.value} slots")


class UnknownTicketError(ParkingError):
    def __init__(self, ticket_id: Optional[int], license_plate: Optional[str] = None):
        self.ticket_id = ticket_id
        self.license_plate = license_plate
        super().__init__(f"Ticket {ticket_id} is not an active ticket of this parking lot")


class VehicleAlreadyParkedError(ParkingError):
    def __init__(self, license_plate: str):
        self.license_plate = license_plate
        super().__init__(f"Vehicle {license_plate} is already in the parking")


class InvalidStateError(ParkingError):
    """Raised on programming errors: billing an open ticket, bad setup data."""


class ClockAnomalyError(InvalidStateError):
    def __init__(self, parked_time, exit_time):
        self.parked_time = parked_time
        self.exit_time = exit_time
        super().__init__(f"Exit time {exit_time} is before parked time {parked_time}")

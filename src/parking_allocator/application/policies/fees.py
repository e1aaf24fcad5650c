from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Dict, Mapping, Optional

from parking_allocator.domain.common import VehicleType
from parking_allocator.domain.entities import Ticket
from parking_allocator.domain.exceptions import ClockAnomalyError, InvalidStateError


DEFAULT_HOURLY_RATES: Dict[VehicleType, float] = {
    VehicleType.CAR: 50.0,
    VehicleType.BIKE: 20.0,
    VehicleType.TRUCK: 100.0,
}


def billed_hours(duration: timedelta) -> int:
    """Whole hours to bill: ceil(minutes / 60), never less than one."""
    minutes = int(duration.total_seconds() // 60)
    return max(1, (minutes + 59) // 60)


class FeePolicy(ABC):
    name = "abstract"

    @abstractmethod
    def get_fee(self, ticket: Ticket) -> float:
        pass


class _RateTablePolicy(FeePolicy):
    def __init__(self, rates: Optional[Mapping[VehicleType, float]] = None, strict_clock: bool = False):
        self.rates = dict(rates if rates is not None else DEFAULT_HOURLY_RATES)
        self.strict_clock = strict_clock

    def _billed_hours(self, ticket: Ticket) -> int:
        if not ticket.is_closed:
            raise InvalidStateError(f"Cannot compute fee for open ticket {ticket.id}")
        duration = ticket.get_duration()
        if duration < timedelta(0) and self.strict_clock:
            raise ClockAnomalyError(ticket.parked_time, ticket.exit_time)
        return billed_hours(duration)

    def _rate(self, vehicle_type: VehicleType) -> float:
        try:
            return self.rates[vehicle_type]
        except KeyError:
            raise InvalidStateError(f"No hourly rate configured for {vehicle_type}") from None


class HourlyFeePolicy(_RateTablePolicy):
    name = "hourly"

    def get_fee(self, ticket: Ticket) -> float:
        hours = self._billed_hours(ticket)
        return hours * self._rate(ticket.vehicle.vehicle_type)


class TieredFeePolicy(_RateTablePolicy):
    """Full rate for the first tier of hours, a reduced rate afterwards."""

    name = "tiered"

    def __init__(
        self,
        rates: Optional[Mapping[VehicleType, float]] = None,
        first_tier_hours: int = 3,
        extended_rate_factor: float = 0.5,
        strict_clock: bool = False,
    ):
        super().__init__(rates, strict_clock=strict_clock)
        if first_tier_hours < 1:
            raise InvalidStateError("first_tier_hours must be at least 1")
        self.first_tier_hours = first_tier_hours
        self.extended_rate_factor = extended_rate_factor

    def get_fee(self, ticket: Ticket) -> float:
        hours = self._billed_hours(ticket)
        rate = self._rate(ticket.vehicle.vehicle_type)
        first = min(hours, self.first_tier_hours)
        extended = hours - first
        return first * rate + extended * rate * self.extended_rate_factor

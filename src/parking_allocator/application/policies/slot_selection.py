"""Slot-selection policies.

A policy is a pure query: it inspects the levels it is given and returns the
slot the manager should reserve, or ``None``. It never marks a slot occupied.
Levels are visited in the order the caller passes them and slots in
ascending id order, so every policy is deterministic.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Sequence

from parking_allocator.domain.entities import Level, Slot, Vehicle


class SlotSelectionPolicy(ABC):
    name = "abstract"

    @abstractmethod
    def find_slot(self, levels: Iterable[Level], vehicle: Vehicle) -> Optional[Slot]:
        pass


def _first_free_slot(level: Level, vehicle: Vehicle) -> Optional[Slot]:
    for slot in level.iter_slots():
        if slot.is_available() and slot.accepts(vehicle):
            return slot
    return None


class NearestFirstPolicy(SlotSelectionPolicy):
    """First free matching slot, scanning levels then slots in order."""

    name = "nearest"

    def find_slot(self, levels: Iterable[Level], vehicle: Vehicle) -> Optional[Slot]:
        for level in levels:
            slot = _first_free_slot(level, vehicle)
            if slot is not None:
                return slot
        return None


class _LevelRankingPolicy(SlotSelectionPolicy):
    prefer_fewest = True

    def find_slot(self, levels: Iterable[Level], vehicle: Vehicle) -> Optional[Slot]:
        candidates: List[tuple] = []
        for position, level in enumerate(levels):
            free = level.count_free(vehicle.vehicle_type)
            if free:
                candidates.append((free, position, level))
        if not candidates:
            return None
        if self.prefer_fewest:
            _, _, chosen = min(candidates, key=lambda c: (c[0], c[1]))
        else:
            _, _, chosen = min(candidates, key=lambda c: (-c[0], c[1]))
        return _first_free_slot(chosen, vehicle)


class BestFitPolicy(_LevelRankingPolicy):
    """Fill the level with the fewest free matching slots first."""

    name = "best_fit"
    prefer_fewest = True


class LoadBalancedPolicy(_LevelRankingPolicy):
    """Spread vehicles over the level with the most free matching slots."""

    name = "load_balanced"
    prefer_fewest = False


SLOT_POLICIES = {
    policy.name: policy
    for policy in (NearestFirstPolicy, BestFitPolicy, LoadBalancedPolicy)
}


def get_slot_policy(name: str) -> SlotSelectionPolicy:
    try:
        return SLOT_POLICIES[name]()
    except KeyError:
        raise ValueError(f"Unknown slot policy: {name}") from None


def ordered_levels(levels: Sequence[Level]) -> List[Level]:
    return sorted(levels, key=lambda level: level.id)

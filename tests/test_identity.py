from concurrent.futures import ThreadPoolExecutor

from parking_allocator.shared.identity import IdGenerator
from parking_allocator.domain.common import VehicleType
from parking_allocator.domain.entities import Slot, Vehicle


def test_generator_starts_at_one():
    generator = IdGenerator()
    assert generator.next() == 1
    assert generator.next() == 2
    assert generator.next() == 3


def test_generator_custom_start():
    generator = IdGenerator(start=100)
    assert generator.peek() == 100
    assert generator.next() == 100
    assert generator.peek() == 101


def test_generator_unique_under_concurrency():
    """Ids handed out from many threads are unique and cover a contiguous range."""
    generator = IdGenerator()

    def draw(_):
        return [generator.next() for _ in range(200)]

    with ThreadPoolExecutor(max_workers=16) as executor:
        batches = list(executor.map(draw, range(16)))

    ids = [value for batch in batches for value in batch]
    assert len(ids) == len(set(ids)) == 16 * 200
    assert sorted(ids) == list(range(1, 16 * 200 + 1))
    for batch in batches:
        assert batch == sorted(batch)


def test_entities_receive_increasing_ids():
    first = Vehicle(VehicleType.CAR, "ID-1")
    second = Vehicle(VehicleType.CAR, "ID-2")
    assert second.id > first.id

    slot_a = Slot(VehicleType.BIKE)
    slot_b = Slot(VehicleType.BIKE)
    assert slot_b.id > slot_a.id


def test_entity_ids_unique_under_concurrency():
    with ThreadPoolExecutor(max_workers=8) as executor:
        vehicles = list(executor.map(lambda n: Vehicle(VehicleType.CAR, f"P{n}"), range(500)))
    assert len({vehicle.id for vehicle in vehicles}) == 500


def test_reserve_moves_generator_past_explicit_id():
    generator = IdGenerator()
    assert generator.next() == 1
    assert generator.reserve(5) == 5
    assert generator.next() == 6


def test_reserve_below_counter_is_noop():
    generator = IdGenerator(start=10)
    generator.reserve(3)
    assert generator.next() == 10

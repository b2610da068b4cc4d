"""Tests for interval overlap and resource availability."""

from datetime import date

import pytest

from travel_api.core.exceptions import ValidationError
from travel_api.domain.availability import (
    DateInterval,
    ResourceState,
    check_availability,
    intervals_overlap,
    is_available,
)

JUNE_1 = date(2024, 6, 1)
JUNE_3 = date(2024, 6, 3)
JUNE_5 = date(2024, 6, 5)
JUNE_8 = date(2024, 6, 8)

FREE_ROOM = ResourceState(is_available=True, status="Available", capacity=2)


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        ((JUNE_1, JUNE_3), (JUNE_5, JUNE_8), False),
        ((JUNE_1, JUNE_5), (JUNE_3, JUNE_8), True),
        ((JUNE_1, JUNE_8), (JUNE_3, JUNE_5), True),
        # Touching boundaries conflict
        ((JUNE_1, JUNE_3), (JUNE_3, JUNE_5), True),
        ((JUNE_3, JUNE_5), (JUNE_1, JUNE_3), True),
    ],
)
def test_intervals_overlap_is_inclusive(first, second, expected):
    assert intervals_overlap(*first, *second) is expected
    assert intervals_overlap(*second, *first) is expected


def test_interval_requires_start_before_end():
    with pytest.raises(ValidationError):
        DateInterval(JUNE_3, JUNE_1)
    with pytest.raises(ValidationError):
        DateInterval(JUNE_1, JUNE_1)


def test_free_resource_is_available():
    result = check_availability(FREE_ROOM, DateInterval(JUNE_1, JUNE_3), [], guests=2)

    assert result.available
    assert result.reason is None


def test_unavailable_flag_wins_regardless_of_dates():
    closed = ResourceState(is_available=False, status="Available", capacity=4)

    result = check_availability(closed, DateInterval(JUNE_1, JUNE_3))

    assert not result
    assert "not available" in result.reason


def test_maintenance_status_blocks_booking():
    room = ResourceState(is_available=True, status="Maintenance", capacity=2)

    assert not is_available(room, DateInterval(JUNE_1, JUNE_3))


def test_capacity_must_fit_party():
    result = check_availability(FREE_ROOM, DateInterval(JUNE_1, JUNE_3), guests=3)

    assert not result
    assert "capacity" in result.reason


def test_existing_reservation_conflicts():
    booked = [DateInterval(JUNE_3, JUNE_5)]

    assert not is_available(FREE_ROOM, DateInterval(JUNE_1, JUNE_3), booked)
    assert is_available(FREE_ROOM, DateInterval(date(2024, 6, 6), JUNE_8), booked)


def test_scheduled_service_inside_rental_blocks_vehicle():
    vehicle = ResourceState(is_available=True, status="Available", next_service=JUNE_5)

    assert not is_available(vehicle, DateInterval(JUNE_1, JUNE_8))
    assert is_available(vehicle, DateInterval(JUNE_1, JUNE_3))

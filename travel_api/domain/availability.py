"""Availability checks for bookable resources (hotel rooms and vehicles).

Two date intervals conflict when they share at least one day, boundaries
included: a reservation ending on the day another one starts is a conflict.
The same test is available as a SQL predicate so that queries and in-memory
checks agree.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement

from travel_api.core.exceptions import ValidationError

AVAILABLE_STATUS = "Available"


@dataclass(frozen=True)
class DateInterval:
    """A booking interval, start strictly before end."""

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValidationError("End date must be after start date", path="endDate")

    def overlaps(self, other: "DateInterval") -> bool:
        return intervals_overlap(self.start, self.end, other.start, other.end)


@dataclass(frozen=True)
class ResourceState:
    """The parts of a room or vehicle that decide whether it can be booked."""

    is_available: bool
    status: str
    capacity: int | None = None
    next_service: date | None = None


@dataclass(frozen=True)
class AvailabilityResult:
    available: bool
    reason: str | None = None

    def __bool__(self) -> bool:
        return self.available


def intervals_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """Inclusive overlap test."""
    return start_a <= end_b and start_b <= end_a


def overlap_clause(
    start_column: ColumnElement, end_column: ColumnElement, start: date, end: date
) -> ColumnElement[bool]:
    """SQL form of ``intervals_overlap`` against stored reservations."""
    return and_(start_column <= end, end_column >= start)


def check_availability(
    resource: ResourceState,
    requested: DateInterval,
    reservations: Iterable[DateInterval] = (),
    guests: int | None = None,
) -> AvailabilityResult:
    """Decide whether a resource can be booked for the requested interval.

    Args:
        resource: Availability flag, maintenance status, capacity and next
            scheduled service of the resource
        requested: Requested booking interval
        reservations: Active reservations already held on the resource
        guests: Requested party size, when the resource has a capacity

    Returns:
        AvailabilityResult: ``available`` plus the first reason it is not
    """
    if not resource.is_available:
        return AvailabilityResult(False, "Resource is not available for booking")

    if resource.status != AVAILABLE_STATUS:
        return AvailabilityResult(False, f"Resource status is '{resource.status}'")

    if guests is not None and resource.capacity is not None and resource.capacity < guests:
        return AvailabilityResult(
            False, f"Resource capacity ({resource.capacity}) is less than {guests} guests"
        )

    if resource.next_service is not None and resource.next_service <= requested.end:
        return AvailabilityResult(
            False, f"Resource is scheduled for service on {resource.next_service.isoformat()}"
        )

    for reservation in reservations:
        if requested.overlaps(reservation):
            return AvailabilityResult(False, "Resource is already booked for the selected dates")

    return AvailabilityResult(True)


def is_available(
    resource: ResourceState,
    requested: DateInterval,
    reservations: Iterable[DateInterval] = (),
    guests: int | None = None,
) -> bool:
    return check_availability(resource, requested, reservations, guests).available

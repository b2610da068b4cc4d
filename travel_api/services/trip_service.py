"""Trip planning service. Every operation is scoped to the trip owner."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import NotFoundError, ValidationError, handle_service_errors
from travel_api.domain.search import Pagination, paginate
from travel_api.domain.trip_budget import new_budget, record_expense
from travel_api.models.destination import Destination
from travel_api.models.hotel import Hotel, Room
from travel_api.models.trip import Trip
from travel_api.models.vehicle import Vehicle
from travel_api.schemas.common import CamelModel
from travel_api.schemas.trip import (
    AccommodationCreate,
    MealCreate,
    TransportationCreate,
    TripActivityCreate,
    TripCreate,
    TripUpdate,
)

logger = logging.getLogger(__name__)


def _check_dates(start_date: date, end_date: date) -> None:
    if start_date >= end_date:
        raise ValidationError("End date must be after start date", path="endDate")


class TripService:
    """Service for user trip plans."""

    @handle_service_errors("Failed to create trip")
    async def create_trip(self, db: AsyncSession, user_id: UUID, data: TripCreate) -> Trip:
        _check_dates(data.start_date, data.end_date)
        await self._ensure_destinations(db, [d.destination_id for d in data.destinations])

        values = data.to_column_values()
        values["budget"] = new_budget(data.budget.total)

        trip = Trip(user_id=user_id, **values)
        db.add(trip)
        await db.flush()

        logger.info(f"Trip created: {trip.id} for user {user_id}")
        return trip

    @handle_service_errors("Failed to fetch trips")
    async def list_trips(
        self,
        db: AsyncSession,
        user_id: UUID,
        page: int,
        limit: int,
        status: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> tuple[list[Trip], Pagination]:
        filters = [Trip.user_id == user_id]
        if status:
            filters.append(Trip.status == status)
        if start_date:
            filters.append(Trip.start_date >= start_date)
        if end_date:
            filters.append(Trip.end_date <= end_date)

        query = select(Trip).where(and_(*filters)).order_by(Trip.start_date.asc())
        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch trip")
    async def get_trip(self, db: AsyncSession, trip_id: UUID, user_id: UUID) -> Trip:
        result = await db.execute(select(Trip).where(Trip.id == trip_id, Trip.user_id == user_id))
        trip = result.scalar_one_or_none()
        if not trip:
            raise NotFoundError("Trip", str(trip_id))
        return trip

    @handle_service_errors("Failed to update trip")
    async def update_trip(self, db: AsyncSession, trip_id: UUID, user_id: UUID, data: TripUpdate) -> Trip:
        trip = await self.get_trip(db, trip_id, user_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        _check_dates(values.get("start_date", trip.start_date), values.get("end_date", trip.end_date))
        if "destinations" in values:
            await self._ensure_destinations(db, [d.destination_id for d in data.destinations or []])

        for field, value in values.items():
            setattr(trip, field, value)
        await db.flush()
        return trip

    @handle_service_errors("Failed to delete trip")
    async def delete_trip(self, db: AsyncSession, trip_id: UUID, user_id: UUID) -> None:
        trip = await self.get_trip(db, trip_id, user_id)
        await db.delete(trip)
        await db.flush()

    @handle_service_errors("Failed to add accommodation")
    async def add_accommodation(
        self, db: AsyncSession, trip_id: UUID, user_id: UUID, data: AccommodationCreate
    ) -> Trip:
        trip = await self.get_trip(db, trip_id, user_id)

        if not await db.get(Hotel, data.hotel_id):
            raise NotFoundError("Hotel", str(data.hotel_id))
        if data.room_ids:
            result = await db.execute(
                select(Room.id).where(Room.id.in_(data.room_ids), Room.hotel_id == data.hotel_id)
            )
            if len(result.all()) != len(set(data.room_ids)):
                raise ValidationError("One or more rooms do not belong to this hotel", path="roomIds")

        self._append(trip, "accommodations", data, "accommodation", data.cost)
        await db.flush()
        return trip

    @handle_service_errors("Failed to add transportation")
    async def add_transportation(
        self, db: AsyncSession, trip_id: UUID, user_id: UUID, data: TransportationCreate
    ) -> Trip:
        trip = await self.get_trip(db, trip_id, user_id)

        if data.vehicle_id and not await db.get(Vehicle, data.vehicle_id):
            raise NotFoundError("Vehicle", str(data.vehicle_id))

        self._append(trip, "transportation", data, "transportation", data.cost)
        await db.flush()
        return trip

    @handle_service_errors("Failed to add activity")
    async def add_activity(
        self, db: AsyncSession, trip_id: UUID, user_id: UUID, data: TripActivityCreate
    ) -> Trip:
        trip = await self.get_trip(db, trip_id, user_id)
        self._append(trip, "activities", data, "activities", data.cost)
        await db.flush()
        return trip

    @handle_service_errors("Failed to add meal")
    async def add_meal(self, db: AsyncSession, trip_id: UUID, user_id: UUID, data: MealCreate) -> Trip:
        trip = await self.get_trip(db, trip_id, user_id)
        self._append(trip, "meals", data, "meals", data.cost)
        await db.flush()
        return trip

    @staticmethod
    def _append(trip: Trip, field: str, item: CamelModel, category: str, cost: float) -> None:
        # JSON columns only track reassignment
        setattr(trip, field, [*(getattr(trip, field) or []), item.model_dump(mode="json")])
        if cost:
            trip.budget = record_expense(trip.budget, category, cost)

    async def _ensure_destinations(self, db: AsyncSession, destination_ids: list[UUID]) -> None:
        if not destination_ids:
            return
        result = await db.execute(select(Destination.id).where(Destination.id.in_(destination_ids)))
        if len(result.all()) != len(set(destination_ids)):
            raise ValidationError("One or more destinations do not exist", path="destinations")


trip_service = TripService()

"""Trip planning endpoints. Trips are visible to their owner only."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AuthUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.trip import (
    AccommodationCreate,
    MealCreate,
    TransportationCreate,
    TripActivityCreate,
    TripCreate,
    TripResponse,
    TripStatus,
    TripUpdate,
)
from travel_api.services.trip_service import trip_service

router = APIRouter()


@router.post("/", response_model=ApiResponse[TripResponse], status_code=status.HTTP_201_CREATED)
async def create_trip(data: TripCreate, current_user: AuthUser, db: DbSession) -> ApiResponse:
    trip = await trip_service.create_trip(db, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Trip created successfully")


@router.get("/", response_model=ApiResponse[list[TripResponse]])
async def list_trips(
    current_user: AuthUser,
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    status_filter: TripStatus | None = Query(None, alias="status"),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
) -> ApiResponse:
    """List the user's trips by start date."""
    trips, pagination = await trip_service.list_trips(
        db,
        current_user.id,
        page,
        limit,
        status=status_filter,
        start_date=start_date,
        end_date=end_date,
    )
    return paginated_response(TripResponse, trips, pagination)


@router.get("/{trip_id}", response_model=ApiResponse[TripResponse])
async def get_trip(trip_id: UUID, current_user: AuthUser, db: DbSession) -> ApiResponse:
    trip = await trip_service.get_trip(db, trip_id, current_user.id)
    return success_response(TripResponse.model_validate(trip))


@router.put("/{trip_id}", response_model=ApiResponse[TripResponse])
async def update_trip(
    trip_id: UUID, data: TripUpdate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    trip = await trip_service.update_trip(db, trip_id, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Trip updated successfully")


@router.delete("/{trip_id}", response_model=ApiResponse[None])
async def delete_trip(trip_id: UUID, current_user: AuthUser, db: DbSession) -> ApiResponse:
    await trip_service.delete_trip(db, trip_id, current_user.id)
    return success_response(message="Trip deleted successfully")


@router.post("/{trip_id}/accommodations", response_model=ApiResponse[TripResponse])
async def add_accommodation(
    trip_id: UUID, data: AccommodationCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    trip = await trip_service.add_accommodation(db, trip_id, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Accommodation added")


@router.post("/{trip_id}/transportation", response_model=ApiResponse[TripResponse])
async def add_transportation(
    trip_id: UUID, data: TransportationCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    trip = await trip_service.add_transportation(db, trip_id, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Transportation added")


@router.post("/{trip_id}/activities", response_model=ApiResponse[TripResponse])
async def add_activity(
    trip_id: UUID, data: TripActivityCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    """Add an activity; its cost is booked against the trip budget."""
    trip = await trip_service.add_activity(db, trip_id, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Activity added")


@router.post("/{trip_id}/meals", response_model=ApiResponse[TripResponse])
async def add_meal(
    trip_id: UUID, data: MealCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    trip = await trip_service.add_meal(db, trip_id, current_user.id, data)
    return success_response(TripResponse.model_validate(trip), "Meal added")

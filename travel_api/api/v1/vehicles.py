"""Vehicle rental endpoints."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from travel_api.api.deps import AdminUser, AuthUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.booking import BookingResponse
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.hotel import RatingCreate
from travel_api.schemas.vehicle import (
    NearbyVehicleResponse,
    VehicleAvailabilityResponse,
    VehicleBookingCreate,
    VehicleCreate,
    VehicleResponse,
    VehicleStatsResponse,
    VehicleUpdate,
)
from travel_api.services.vehicle_service import vehicle_service

router = APIRouter()


async def _list_vehicles(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    is_available: bool | None = Query(None, alias="isAvailable"),
    min_price: Decimal | None = Query(None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(None, alias="maxPrice", ge=0),
    vehicle_type: str | None = Query(None, alias="vehicleType"),
    city: str | None = None,
    country: str | None = None,
    capacity: int | None = Query(None, ge=1),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
) -> ApiResponse:
    vehicles, pagination = await vehicle_service.list_vehicles(
        db,
        page,
        limit,
        search_term=search_term,
        is_available=is_available,
        min_price=min_price,
        max_price=max_price,
        vehicle_type=vehicle_type,
        city=city,
        country=country,
        capacity=capacity,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return paginated_response(VehicleResponse, vehicles, pagination)


# Public


@router.get("/public", response_model=ApiResponse[list[VehicleResponse]])
async def list_vehicles(response: ApiResponse = Depends(_list_vehicles)) -> ApiResponse:
    """List vehicles with search, filters and sorting."""
    return response


@router.get("/public/nearby", response_model=ApiResponse[list[NearbyVehicleResponse]])
async def get_nearby_vehicles(
    db: DbSession,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float = Query(settings.nearby_default_radius_km, gt=0, description="Radius in km"),
    limit: int = Query(10, ge=1, le=100),
) -> ApiResponse:
    """Available vehicles around a point, closest first."""
    nearby = await vehicle_service.get_nearby_vehicles(db, latitude, longitude, radius, limit)
    return success_response(
        [
            NearbyVehicleResponse.model_validate(
                {**VehicleResponse.model_validate(vehicle).model_dump(), "distance_km": distance}
            )
            for vehicle, distance in nearby
        ]
    )


@router.get("/public/{vehicle_id}", response_model=ApiResponse[VehicleResponse])
async def get_vehicle(vehicle_id: UUID, db: DbSession) -> ApiResponse:
    vehicle = await vehicle_service.get_vehicle(db, vehicle_id)
    return success_response(VehicleResponse.model_validate(vehicle))


@router.get(
    "/public/{vehicle_id}/availability", response_model=ApiResponse[VehicleAvailabilityResponse]
)
async def check_vehicle_availability(
    vehicle_id: UUID,
    db: DbSession,
    start_date: date = Query(..., alias="startDate"),
    end_date: date = Query(..., alias="endDate"),
    insurance_type: str | None = Query(None, alias="insuranceType"),
) -> ApiResponse:
    """Whether the vehicle is free for the period, with the rental price."""
    availability = await vehicle_service.check_availability(
        db, vehicle_id, start_date, end_date, insurance_type
    )
    return success_response(VehicleAvailabilityResponse.model_validate(availability))


# Authenticated users


@router.post(
    "/{vehicle_id}/book",
    response_model=ApiResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
)
async def book_vehicle(
    vehicle_id: UUID, data: VehicleBookingCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    booking = await vehicle_service.book_vehicle(db, vehicle_id, current_user.id, data)
    return success_response(BookingResponse.model_validate(booking), "Vehicle booked successfully")


@router.post("/{vehicle_id}/ratings", response_model=ApiResponse[VehicleResponse])
async def rate_vehicle(
    vehicle_id: UUID, data: RatingCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    """Rate a vehicle; a second rating by the same user replaces the first."""
    vehicle = await vehicle_service.rate_vehicle(db, vehicle_id, current_user.id, data)
    return success_response(VehicleResponse.model_validate(vehicle), "Rating added successfully")


# Admin


@router.get("/admin", response_model=ApiResponse[list[VehicleResponse]])
async def admin_list_vehicles(
    admin: AdminUser, response: ApiResponse = Depends(_list_vehicles)
) -> ApiResponse:
    return response


@router.get("/admin/stats", response_model=ApiResponse[VehicleStatsResponse])
async def get_vehicle_stats(admin: AdminUser, db: DbSession) -> ApiResponse:
    stats = await vehicle_service.get_vehicle_stats(db)
    return success_response(VehicleStatsResponse.model_validate(stats))


@router.get("/admin/{vehicle_id}", response_model=ApiResponse[VehicleResponse])
async def admin_get_vehicle(vehicle_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    vehicle = await vehicle_service.get_vehicle(db, vehicle_id)
    return success_response(VehicleResponse.model_validate(vehicle))


@router.post(
    "/admin", response_model=ApiResponse[VehicleResponse], status_code=status.HTTP_201_CREATED
)
async def create_vehicle(data: VehicleCreate, admin: AdminUser, db: DbSession) -> ApiResponse:
    vehicle = await vehicle_service.create_vehicle(db, data)
    return success_response(VehicleResponse.model_validate(vehicle), "Vehicle created successfully")


@router.put("/admin/{vehicle_id}", response_model=ApiResponse[VehicleResponse])
async def update_vehicle(
    vehicle_id: UUID, data: VehicleUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    vehicle = await vehicle_service.update_vehicle(db, vehicle_id, data)
    return success_response(VehicleResponse.model_validate(vehicle), "Vehicle updated successfully")


@router.delete("/admin/{vehicle_id}", response_model=ApiResponse[None])
async def delete_vehicle(vehicle_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    await vehicle_service.delete_vehicle(db, vehicle_id)
    return success_response(message="Vehicle deleted successfully")

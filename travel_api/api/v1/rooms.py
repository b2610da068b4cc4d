"""Hotel room endpoints."""

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AdminUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.hotel import (
    RoomAvailabilityUpdate,
    RoomCreate,
    RoomResponse,
    RoomStatsResponse,
    RoomUpdate,
)
from travel_api.services.room_service import room_service

router = APIRouter()


@router.get("/public", response_model=ApiResponse[list[RoomResponse]])
async def list_rooms(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    hotel_id: UUID | None = Query(None, alias="hotelId"),
    is_available: bool | None = Query(None, alias="isAvailable"),
    min_price: Decimal | None = Query(None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(None, alias="maxPrice", ge=0),
    room_type: str | None = Query(None, alias="roomType"),
    capacity: int | None = Query(None, ge=1),
) -> ApiResponse:
    rooms, pagination = await room_service.list_rooms(
        db,
        page,
        limit,
        hotel_id=hotel_id,
        is_available=is_available,
        min_price=min_price,
        max_price=max_price,
        room_type=room_type,
        capacity=capacity,
    )
    return paginated_response(RoomResponse, rooms, pagination)


@router.get("/public/hotel/{hotel_id}", response_model=ApiResponse[list[RoomResponse]])
async def get_rooms_by_hotel(hotel_id: UUID, db: DbSession) -> ApiResponse:
    rooms = await room_service.get_rooms_by_hotel(db, hotel_id)
    return success_response([RoomResponse.model_validate(room) for room in rooms])


@router.get("/public/{room_id}", response_model=ApiResponse[RoomResponse])
async def get_room(room_id: UUID, db: DbSession) -> ApiResponse:
    room = await room_service.get_room(db, room_id)
    return success_response(RoomResponse.model_validate(room))


@router.post(
    "/admin", response_model=ApiResponse[RoomResponse], status_code=status.HTTP_201_CREATED
)
async def create_room(data: RoomCreate, admin: AdminUser, db: DbSession) -> ApiResponse:
    room = await room_service.create_room(db, data)
    return success_response(RoomResponse.model_validate(room), "Room created successfully")


@router.put("/admin/{room_id}", response_model=ApiResponse[RoomResponse])
async def update_room(
    room_id: UUID, data: RoomUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    room = await room_service.update_room(db, room_id, data)
    return success_response(RoomResponse.model_validate(room), "Room updated successfully")


@router.patch("/admin/{room_id}/availability", response_model=ApiResponse[RoomResponse])
async def update_room_availability(
    room_id: UUID, data: RoomAvailabilityUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    """Put a room into maintenance or return it to service."""
    room = await room_service.update_room_availability(db, room_id, data.is_available)
    return success_response(RoomResponse.model_validate(room), "Room availability updated")


@router.delete("/admin/{room_id}", response_model=ApiResponse[None])
async def delete_room(room_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    await room_service.delete_room(db, room_id)
    return success_response(message="Room deleted successfully")


@router.get("/admin/stats/{hotel_id}", response_model=ApiResponse[RoomStatsResponse])
async def get_room_stats(hotel_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    stats = await room_service.get_room_stats(db, hotel_id)
    return success_response(RoomStatsResponse.model_validate(stats))

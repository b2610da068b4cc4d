"""Hotel endpoints."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from travel_api.api.deps import AdminUser, AuthUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.booking import BookingResponse
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.hotel import (
    AvailableRoomResponse,
    HotelBookingCreate,
    HotelCreate,
    HotelDetailResponse,
    HotelResponse,
    HotelUpdate,
    NearbyHotelResponse,
    RatingCreate,
    RoomAvailabilityResponse,
    RoomResponse,
)
from travel_api.services.hotel_service import hotel_service

router = APIRouter()


async def _list_hotels(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    city: str | None = None,
    country: str | None = None,
    is_available: bool | None = Query(None, alias="isAvailable"),
    min_price: Decimal | None = Query(None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(None, alias="maxPrice", ge=0),
    min_rating: float | None = Query(None, alias="minRating", ge=0, le=5),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
) -> ApiResponse:
    hotels, pagination = await hotel_service.list_hotels(
        db,
        page,
        limit,
        search_term=search_term,
        city=city,
        country=country,
        is_available=is_available,
        min_price=min_price,
        max_price=max_price,
        min_rating=min_rating,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return paginated_response(HotelResponse, hotels, pagination)


# Public


@router.get("/public", response_model=ApiResponse[list[HotelResponse]])
async def list_hotels(response: ApiResponse = Depends(_list_hotels)) -> ApiResponse:
    """List hotels with search, filters and sorting."""
    return response


@router.get("/public/nearby", response_model=ApiResponse[list[NearbyHotelResponse]])
async def get_nearby_hotels(
    db: DbSession,
    latitude: float = Query(..., ge=-90, le=90),
    longitude: float = Query(..., ge=-180, le=180),
    radius: float = Query(settings.nearby_default_radius_km, gt=0, description="Radius in km"),
    limit: int = Query(10, ge=1, le=100),
) -> ApiResponse:
    """Hotels around a point, closest first."""
    nearby = await hotel_service.get_nearby_hotels(db, latitude, longitude, radius, limit)
    return success_response(
        [
            NearbyHotelResponse.model_validate(
                {**HotelResponse.model_validate(hotel).model_dump(), "distance_km": distance}
            )
            for hotel, distance in nearby
        ]
    )


@router.get("/public/{hotel_id}", response_model=ApiResponse[HotelDetailResponse])
async def get_hotel(hotel_id: UUID, db: DbSession) -> ApiResponse:
    """Get a hotel with its rooms."""
    hotel, rooms = await hotel_service.get_hotel_with_rooms(db, hotel_id)
    return success_response(
        HotelDetailResponse(
            hotel=HotelResponse.model_validate(hotel),
            rooms=[RoomResponse.model_validate(room) for room in rooms],
        )
    )


@router.get(
    "/public/{hotel_id}/availability", response_model=ApiResponse[RoomAvailabilityResponse]
)
async def get_room_availability(
    hotel_id: UUID,
    db: DbSession,
    check_in: date = Query(..., alias="checkIn"),
    check_out: date = Query(..., alias="checkOut"),
    guests: int = Query(1, ge=1),
) -> ApiResponse:
    """Rooms free for the whole stay with their calculated price."""
    availability = await hotel_service.get_room_availability(
        db, hotel_id, check_in, check_out, guests
    )
    available_rooms = [
        AvailableRoomResponse.model_validate(
            {**RoomResponse.model_validate(room).model_dump(), "calculated_price": price}
        )
        for room, price in availability["available_rooms"]
    ]
    return success_response(
        RoomAvailabilityResponse(
            available_rooms=available_rooms,
            total_rooms=availability["total_rooms"],
            check_in=availability["check_in"],
            check_out=availability["check_out"],
            nights=availability["nights"],
        )
    )


# Authenticated users


@router.post(
    "/{hotel_id}/book",
    response_model=ApiResponse[BookingResponse],
    status_code=status.HTTP_201_CREATED,
)
async def book_room(
    hotel_id: UUID, data: HotelBookingCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    """Book a room of the hotel."""
    booking = await hotel_service.book_room(db, hotel_id, current_user.id, data)
    return success_response(BookingResponse.model_validate(booking), "Room booked successfully")


@router.post("/{hotel_id}/reviews", response_model=ApiResponse[HotelResponse])
async def add_review(
    hotel_id: UUID, data: RatingCreate, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    """Rate a hotel; a second rating by the same user replaces the first."""
    hotel = await hotel_service.rate_hotel(db, hotel_id, current_user.id, data)
    return success_response(HotelResponse.model_validate(hotel), "Review added successfully")


# Admin


@router.get("/admin", response_model=ApiResponse[list[HotelResponse]])
async def admin_list_hotels(
    admin: AdminUser, response: ApiResponse = Depends(_list_hotels)
) -> ApiResponse:
    return response


@router.get("/admin/{hotel_id}", response_model=ApiResponse[HotelResponse])
async def admin_get_hotel(hotel_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    hotel = await hotel_service.get_hotel(db, hotel_id)
    return success_response(HotelResponse.model_validate(hotel))


@router.post(
    "/admin", response_model=ApiResponse[HotelResponse], status_code=status.HTTP_201_CREATED
)
async def create_hotel(data: HotelCreate, admin: AdminUser, db: DbSession) -> ApiResponse:
    hotel = await hotel_service.create_hotel(db, data)
    return success_response(HotelResponse.model_validate(hotel), "Hotel created successfully")


@router.put("/admin/{hotel_id}", response_model=ApiResponse[HotelResponse])
async def update_hotel(
    hotel_id: UUID, data: HotelUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    hotel = await hotel_service.update_hotel(db, hotel_id, data)
    return success_response(HotelResponse.model_validate(hotel), "Hotel updated successfully")


@router.delete("/admin/{hotel_id}", response_model=ApiResponse[None])
async def delete_hotel(hotel_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    """Delete a hotel and its rooms."""
    await hotel_service.delete_hotel(db, hotel_id)
    return success_response(message="Hotel deleted successfully")


@router.post("/admin/{hotel_id}/ratings", response_model=ApiResponse[HotelResponse])
async def admin_add_rating(
    hotel_id: UUID, data: RatingCreate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    hotel = await hotel_service.rate_hotel(db, hotel_id, admin.id, data)
    return success_response(HotelResponse.model_validate(hotel), "Rating added successfully")

"""Booking endpoints. Bookings are created through the hotel and vehicle routes."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Query

from travel_api.api.deps import AdminUser, AuthUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.booking import (
    BookingCancelRequest,
    BookingResponse,
    BookingStatus,
    BookingUpdate,
    PaymentStatus,
)
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.services.booking_service import booking_service

router = APIRouter()


@router.get("/", response_model=ApiResponse[list[BookingResponse]])
async def list_my_bookings(
    current_user: AuthUser,
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    status_filter: BookingStatus | None = Query(None, alias="status"),
    booking_type: str | None = Query(None, alias="bookingType"),
    search_term: str | None = Query(None, alias="searchTerm"),
) -> ApiResponse:
    """List the current user's bookings, newest first."""
    bookings, pagination = await booking_service.list_bookings(
        db,
        page,
        limit,
        user_id=current_user.id,
        status=status_filter,
        booking_type=booking_type,
        search_term=search_term,
    )
    return paginated_response(BookingResponse, bookings, pagination)


@router.get("/admin", response_model=ApiResponse[list[BookingResponse]])
async def admin_list_bookings(
    admin: AdminUser,
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    status_filter: BookingStatus | None = Query(None, alias="status"),
    payment_status: PaymentStatus | None = Query(None, alias="paymentStatus"),
    booking_type: str | None = Query(None, alias="bookingType"),
    start_date: date | None = Query(None, alias="startDate"),
    end_date: date | None = Query(None, alias="endDate"),
    search_term: str | None = Query(None, alias="searchTerm"),
) -> ApiResponse:
    bookings, pagination = await booking_service.list_bookings(
        db,
        page,
        limit,
        status=status_filter,
        payment_status=payment_status,
        booking_type=booking_type,
        start_date=start_date,
        end_date=end_date,
        search_term=search_term,
    )
    return paginated_response(BookingResponse, bookings, pagination)


@router.put("/admin/{booking_id}", response_model=ApiResponse[BookingResponse])
async def admin_update_booking(
    booking_id: UUID, data: BookingUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    """Change booking or payment status."""
    booking = await booking_service.update_booking(db, booking_id, data)
    return success_response(BookingResponse.model_validate(booking), "Booking updated successfully")


@router.get("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def get_booking(booking_id: UUID, current_user: AuthUser, db: DbSession) -> ApiResponse:
    booking = await booking_service.get_booking(
        db, booking_id, current_user.id, current_user.is_admin
    )
    return success_response(BookingResponse.model_validate(booking))


@router.post("/{booking_id}/cancel", response_model=ApiResponse[BookingResponse])
async def cancel_booking(
    booking_id: UUID,
    current_user: AuthUser,
    db: DbSession,
    data: BookingCancelRequest | None = None,
) -> ApiResponse:
    """Cancel a booking and release the room or vehicle."""
    booking = await booking_service.cancel_booking(
        db,
        booking_id,
        current_user.id,
        current_user.is_admin,
        reason=data.reason if data else None,
    )
    return success_response(BookingResponse.model_validate(booking), "Booking cancelled successfully")

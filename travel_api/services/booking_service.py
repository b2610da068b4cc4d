"""Booking (reservation) service.

Creating bookings lives with the resource being booked (hotel rooms in
``hotel_service``, vehicles in ``vehicle_service``); this module owns the
lifecycle afterwards and the reservation lookups both of them share.
"""

import logging
from collections import defaultdict
from datetime import UTC, date, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import AuthorizationError, NotFoundError, handle_service_errors
from travel_api.domain.availability import DateInterval, overlap_clause
from travel_api.domain.booking_state import assert_booking_transition, assert_payment_transition
from travel_api.domain.search import Pagination, paginate, text_search
from travel_api.models.booking import ACTIVE_BOOKING_STATUSES, Booking
from travel_api.models.hotel import Room
from travel_api.models.vehicle import Vehicle
from travel_api.schemas.booking import BookingUpdate
from travel_api.services.notification_service import notification_service

logger = logging.getLogger(__name__)


class BookingService:
    """Service for reservation queries, cancellation and status changes."""

    async def reserved_intervals(
        self,
        db: AsyncSession,
        resource_column: Any,
        resource_ids: list[UUID],
        start: date,
        end: date,
    ) -> dict[UUID, list[DateInterval]]:
        """Active reservations overlapping [start, end], grouped by resource id."""
        if not resource_ids:
            return {}

        result = await db.execute(
            select(resource_column, Booking.start_date, Booking.end_date).where(
                resource_column.in_(resource_ids),
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
                overlap_clause(Booking.start_date, Booking.end_date, start, end),
            )
        )
        intervals: dict[UUID, list[DateInterval]] = defaultdict(list)
        for resource_id, booking_start, booking_end in result.all():
            intervals[resource_id].append(DateInterval(booking_start, booking_end))
        return intervals

    @handle_service_errors("Failed to fetch bookings")
    async def list_bookings(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        user_id: UUID | None = None,
        status: str | None = None,
        payment_status: str | None = None,
        booking_type: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        search_term: str | None = None,
    ) -> tuple[list[Booking], Pagination]:
        """List bookings newest first; pass ``user_id`` to restrict to one guest."""
        filters = []
        if user_id:
            filters.append(Booking.user_id == user_id)
        if status:
            filters.append(Booking.status == status)
        if payment_status:
            filters.append(Booking.payment_status == payment_status)
        if booking_type:
            filters.append(Booking.booking_type == booking_type)
        if start_date:
            filters.append(Booking.start_date >= start_date)
        if end_date:
            filters.append(Booking.end_date <= end_date)
        search = text_search(search_term, Booking.booking_reference)
        if search is not None:
            filters.append(search)

        query = select(Booking)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(Booking.created_at.desc())

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch booking")
    async def get_booking(
        self, db: AsyncSession, booking_id: UUID, user_id: UUID, is_admin: bool = False
    ) -> Booking:
        booking = await db.get(Booking, booking_id)
        if not booking:
            raise NotFoundError("Booking", str(booking_id))
        if not is_admin and booking.user_id != user_id:
            raise AuthorizationError("You don't have permission to access this booking")
        return booking

    @handle_service_errors("Failed to cancel booking")
    async def cancel_booking(
        self,
        db: AsyncSession,
        booking_id: UUID,
        user_id: UUID,
        is_admin: bool = False,
        reason: str | None = None,
    ) -> Booking:
        """Cancel a booking and release the booked room or vehicle."""
        booking = await self.get_booking(db, booking_id, user_id, is_admin)
        assert_booking_transition(booking.status, "Cancelled")

        await self._apply_cancellation(db, booking, reason)
        logger.info(f"Booking cancelled: {booking.booking_reference}")
        return booking

    @handle_service_errors("Failed to update booking")
    async def update_booking(self, db: AsyncSession, booking_id: UUID, data: BookingUpdate) -> Booking:
        """Admin status change."""
        booking = await db.get(Booking, booking_id)
        if not booking:
            raise NotFoundError("Booking", str(booking_id))

        if data.payment_status and data.payment_status != booking.payment_status:
            assert_payment_transition(booking.payment_status, data.payment_status)
            booking.payment_status = data.payment_status

        if data.status and data.status != booking.status:
            assert_booking_transition(booking.status, data.status)
            if data.status == "Cancelled":
                await self._apply_cancellation(db, booking, reason=None)
            else:
                booking.status = data.status

        await db.flush()
        return booking

    async def _apply_cancellation(self, db: AsyncSession, booking: Booking, reason: str | None) -> None:
        booking.status = "Cancelled"
        booking.cancelled_at = datetime.now(UTC)
        if reason:
            booking.details = {**(booking.details or {}), "cancellation_reason": reason}
        await db.flush()

        await self._release_resource(db, booking)
        await notification_service.create_booking_cancellation(db, booking)

    async def _release_resource(self, db: AsyncSession, booking: Booking) -> None:
        """Flip the resource's availability flag back once nothing else holds it."""
        if booking.room_id:
            resource_column, resource = Booking.room_id, await db.get(Room, booking.room_id)
        elif booking.vehicle_id:
            resource_column, resource = Booking.vehicle_id, await db.get(Vehicle, booking.vehicle_id)
        else:
            return

        if resource is None:
            return

        result = await db.execute(
            select(func.count(Booking.id)).where(
                resource_column == resource.id,
                Booking.id != booking.id,
                Booking.status.in_(ACTIVE_BOOKING_STATUSES),
            )
        )
        if not result.scalar():
            resource.is_available = True


booking_service = BookingService()

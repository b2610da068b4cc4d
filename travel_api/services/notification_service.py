"""In-app notification service."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import and_, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import NotFoundError, handle_service_errors
from travel_api.domain.search import Pagination, paginate
from travel_api.models.booking import Booking
from travel_api.models.notification import Notification
from travel_api.schemas.notification import NotificationCreate

logger = logging.getLogger(__name__)


class NotificationService:
    """Service for creating and reading user notifications."""

    BOOKING_CONFIRMED = "booking_confirmed"
    BOOKING_CANCELED = "booking_canceled"

    @handle_service_errors("Failed to create notification")
    async def create_notification(self, db: AsyncSession, data: NotificationCreate) -> Notification:
        notification = Notification(**data.to_column_values())
        db.add(notification)
        await db.flush()
        return notification

    @handle_service_errors("Failed to fetch notifications")
    async def list_notifications(
        self,
        db: AsyncSession,
        user_id: UUID,
        page: int,
        limit: int,
        unread_only: bool = False,
    ) -> tuple[list[Notification], Pagination, int]:
        """List a user's notifications, newest first.

        Returns:
            tuple: notifications on the page, pagination, unread count
        """
        filters = [Notification.user_id == user_id, self._not_expired()]
        if unread_only:
            filters.append(Notification.read.is_(False))

        query = (
            select(Notification)
            .where(and_(*filters))
            .order_by(Notification.created_at.desc())
        )
        notifications, pagination = await paginate(db, query, page, limit)
        unread = await self.unread_count(db, user_id)
        return notifications, pagination, unread

    @handle_service_errors("Failed to count notifications")
    async def unread_count(self, db: AsyncSession, user_id: UUID) -> int:
        result = await db.execute(
            select(func.count(Notification.id)).where(
                Notification.user_id == user_id,
                Notification.read.is_(False),
                self._not_expired(),
            )
        )
        return result.scalar() or 0

    @handle_service_errors("Failed to mark notification as read")
    async def mark_as_read(self, db: AsyncSession, notification_id: UUID, user_id: UUID) -> Notification:
        notification = await self._get_user_notification(db, notification_id, user_id)
        notification.read = True
        await db.flush()
        return notification

    @handle_service_errors("Failed to mark notifications as read")
    async def mark_all_as_read(self, db: AsyncSession, user_id: UUID) -> int:
        """Mark every unread notification of the user as read, returning how many changed."""
        result = await db.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.read.is_(False))
            .values(read=True)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount or 0

    @handle_service_errors("Failed to delete notification")
    async def delete_notification(self, db: AsyncSession, notification_id: UUID, user_id: UUID) -> None:
        notification = await self._get_user_notification(db, notification_id, user_id)
        await db.delete(notification)
        await db.flush()

    async def create_booking_confirmation(self, db: AsyncSession, booking: Booking) -> Notification:
        """Notify the guest that a booking went through."""
        kind = "hotel room" if booking.booking_type == "hotel" else "vehicle"
        notification = Notification(
            user_id=booking.user_id,
            type=self.BOOKING_CONFIRMED,
            title="Booking Confirmed",
            message=(
                f"Your {kind} booking {booking.booking_reference} from "
                f"{booking.start_date.isoformat()} to {booking.end_date.isoformat()} is confirmed."
            ),
            related_id=booking.id,
            related_type="booking",
            priority="high",
        )
        db.add(notification)
        await db.flush()
        logger.info(f"Booking confirmation sent for {booking.booking_reference}")
        return notification

    async def create_booking_cancellation(self, db: AsyncSession, booking: Booking) -> Notification:
        notification = Notification(
            user_id=booking.user_id,
            type=self.BOOKING_CANCELED,
            title="Booking Cancelled",
            message=f"Your booking {booking.booking_reference} has been cancelled.",
            related_id=booking.id,
            related_type="booking",
            priority="medium",
        )
        db.add(notification)
        await db.flush()
        return notification

    async def _get_user_notification(
        self, db: AsyncSession, notification_id: UUID, user_id: UUID
    ) -> Notification:
        result = await db.execute(
            select(Notification).where(
                Notification.id == notification_id,
                Notification.user_id == user_id,
            )
        )
        notification = result.scalar_one_or_none()
        if not notification:
            raise NotFoundError("Notification", str(notification_id))
        return notification

    @staticmethod
    def _not_expired():
        return or_(Notification.expires_at.is_(None), Notification.expires_at > datetime.now(UTC))


notification_service = NotificationService()

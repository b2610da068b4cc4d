"""Activity catalog service."""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import NotFoundError, ValidationError, handle_service_errors
from travel_api.domain.search import Pagination, paginate, range_filter, sort_clause, text_search
from travel_api.models.activity import Activity
from travel_api.models.destination import Destination
from travel_api.schemas.activity import ActivityCreate, ActivityUpdate

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": Activity.name,
    "price": Activity.price,
    "duration": Activity.duration,
    "created_at": Activity.created_at,
}


class ActivityService:
    """Service for activities offered at destinations."""

    @handle_service_errors("Failed to fetch activities")
    async def list_activities(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        search_term: str | None = None,
        category: str | None = None,
        destination_id: UUID | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        min_duration: float | None = None,
        max_duration: float | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Activity], Pagination]:
        filters = []

        search = text_search(search_term, Activity.name, Activity.description)
        if search is not None:
            filters.append(search)
        if category:
            filters.append(Activity.category == category)
        if destination_id:
            filters.append(Activity.destination_id == destination_id)
        filters.extend(range_filter(Activity.price, min_price, max_price))
        filters.extend(range_filter(Activity.duration, min_duration, max_duration))

        query = select(Activity)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(sort_clause(SORT_COLUMNS, sort_by, sort_order))

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch activity")
    async def get_activity(self, db: AsyncSession, activity_id: UUID) -> Activity:
        activity = await db.get(Activity, activity_id)
        if not activity:
            raise NotFoundError("Activity", str(activity_id))
        return activity

    @handle_service_errors("Failed to fetch destination activities")
    async def get_activities_by_destination(
        self, db: AsyncSession, destination_id: UUID
    ) -> list[Activity]:
        result = await db.execute(
            select(Activity)
            .where(Activity.destination_id == destination_id, Activity.is_active.is_(True))
            .order_by(Activity.name)
        )
        return list(result.scalars().all())

    @handle_service_errors("Failed to create activity")
    async def create_activity(self, db: AsyncSession, data: ActivityCreate) -> Activity:
        await self._ensure_destination(db, data.destination_id)

        activity = Activity(**data.to_column_values())
        db.add(activity)
        await db.flush()

        logger.info(f"Activity created: {activity.id} ({activity.name})")
        return activity

    @handle_service_errors("Failed to update activity")
    async def update_activity(self, db: AsyncSession, activity_id: UUID, data: ActivityUpdate) -> Activity:
        activity = await self.get_activity(db, activity_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if "destination_id" in values:
            await self._ensure_destination(db, values["destination_id"])

        for field, value in values.items():
            setattr(activity, field, value)

        if activity.max_participants is not None and activity.max_participants < activity.min_participants:
            raise ValidationError(
                "Maximum participants must not be less than minimum participants",
                path="maxParticipants",
            )

        await db.flush()
        return activity

    @handle_service_errors("Failed to delete activity")
    async def delete_activity(self, db: AsyncSession, activity_id: UUID) -> None:
        activity = await self.get_activity(db, activity_id)
        await db.delete(activity)
        await db.flush()

    async def _ensure_destination(self, db: AsyncSession, destination_id: UUID) -> None:
        if not await db.get(Destination, destination_id):
            raise ValidationError("Destination does not exist", path="destinationId")


activity_service = ActivityService()

"""Destination catalog service."""

import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import DuplicateError, NotFoundError, handle_service_errors
from travel_api.domain.search import (
    Pagination,
    all_words_search,
    paginate,
    range_filter,
    sort_clause,
    text_search,
)
from travel_api.models.destination import Destination
from travel_api.schemas.destination import DestinationCreate, DestinationUpdate

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": Destination.name,
    "price": Destination.price,
    "rating": Destination.rating,
    "created_at": Destination.created_at,
}


class DestinationService:
    """Service for destination CRUD and search."""

    @handle_service_errors("Failed to fetch destinations")
    async def list_destinations(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        search_term: str | None = None,
        country: str | None = None,
        city: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Destination], Pagination]:
        filters = []

        search = all_words_search(search_term, Destination.name, Destination.description)
        if search is not None:
            filters.append(search)
        if country:
            filters.append(text_search(country, Destination.country))
        if city:
            filters.append(text_search(city, Destination.city))
        filters.extend(range_filter(Destination.price, min_price, max_price))

        query = select(Destination)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(sort_clause(SORT_COLUMNS, sort_by, sort_order))

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch destination")
    async def get_destination(self, db: AsyncSession, destination_id: UUID) -> Destination:
        destination = await db.get(Destination, destination_id)
        if not destination:
            raise NotFoundError("Destination", str(destination_id))
        return destination

    @handle_service_errors("Failed to create destination")
    async def create_destination(self, db: AsyncSession, data: DestinationCreate) -> Destination:
        await self._ensure_unique_name(db, data.name)

        destination = Destination(**data.to_column_values())
        db.add(destination)
        await db.flush()

        logger.info(f"Destination created: {destination.id} ({destination.name})")
        return destination

    @handle_service_errors("Failed to update destination")
    async def update_destination(
        self, db: AsyncSession, destination_id: UUID, data: DestinationUpdate
    ) -> Destination:
        destination = await self.get_destination(db, destination_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if values.get("name") and values["name"] != destination.name:
            await self._ensure_unique_name(db, values["name"], exclude_id=destination.id)

        for field, value in values.items():
            setattr(destination, field, value)
        await db.flush()
        return destination

    @handle_service_errors("Failed to delete destination")
    async def delete_destination(self, db: AsyncSession, destination_id: UUID) -> None:
        destination = await self.get_destination(db, destination_id)
        await db.delete(destination)
        await db.flush()
        logger.info(f"Destination deleted: {destination_id}")

    async def _ensure_unique_name(
        self, db: AsyncSession, name: str, exclude_id: UUID | None = None
    ) -> None:
        query = select(Destination.id).where(Destination.name == name)
        if exclude_id:
            query = query.where(Destination.id != exclude_id)
        if (await db.execute(query)).first():
            raise DuplicateError("Destination", "name", name)


destination_service = DestinationService()

"""User favorites service."""

import logging
from collections import defaultdict
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import NotFoundError, ValidationError, handle_service_errors
from travel_api.database import Base
from travel_api.models.activity import Activity
from travel_api.models.destination import Destination
from travel_api.models.favorite import Favorite
from travel_api.models.hotel import Hotel
from travel_api.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

FAVORITE_MODELS: dict[str, type[Base]] = {
    "hotel": Hotel,
    "vehicle": Vehicle,
    "destination": Destination,
    "activity": Activity,
}

GROUP_KEYS = {
    "hotel": "hotels",
    "vehicle": "vehicles",
    "destination": "destinations",
    "activity": "activities",
}


def favorite_model(item_type: str) -> type[Base]:
    model = FAVORITE_MODELS.get(item_type)
    if model is None:
        raise ValidationError(f"Invalid item type: {item_type}", path="itemType")
    return model


class FavoriteService:
    """Service for toggling and listing favorites."""

    @handle_service_errors("Failed to toggle favorite")
    async def toggle_favorite(
        self, db: AsyncSession, user_id: UUID, item_type: str, item_id: UUID
    ) -> bool:
        """Add the item to the user's favorites or remove it.

        Returns:
            bool: True if the item is now a favorite
        """
        model = favorite_model(item_type)
        if not await db.get(model, item_id):
            raise NotFoundError(item_type.capitalize(), str(item_id))

        favorite = await self._find(db, user_id, item_type, item_id)
        if favorite:
            await db.delete(favorite)
            await db.flush()
            return False

        db.add(Favorite(user_id=user_id, item_id=item_id, item_type=item_type))
        await db.flush()
        return True

    @handle_service_errors("Failed to check favorite")
    async def is_favorite(self, db: AsyncSession, user_id: UUID, item_type: str, item_id: UUID) -> bool:
        favorite_model(item_type)
        return await self._find(db, user_id, item_type, item_id) is not None

    @handle_service_errors("Failed to fetch favorites")
    async def list_favorites(
        self, db: AsyncSession, user_id: UUID, item_type: str | None = None
    ) -> dict[str, list]:
        """Favorite items of the user grouped by type, newest first.

        Favorites whose item has since been deleted are left out.
        """
        query = select(Favorite).where(Favorite.user_id == user_id)
        if item_type:
            favorite_model(item_type)
            query = query.where(Favorite.item_type == item_type)
        result = await db.execute(query.order_by(Favorite.created_at.desc()))

        ids_by_type: dict[str, list[UUID]] = defaultdict(list)
        for favorite in result.scalars().all():
            ids_by_type[favorite.item_type].append(favorite.item_id)

        grouped: dict[str, list] = {key: [] for key in GROUP_KEYS.values()}
        for kind, item_ids in ids_by_type.items():
            model = FAVORITE_MODELS[kind]
            items = await db.execute(select(model).where(model.id.in_(item_ids)))
            by_id = {item.id: item for item in items.scalars().all()}
            grouped[GROUP_KEYS[kind]] = [by_id[item_id] for item_id in item_ids if item_id in by_id]

        return grouped

    async def _find(
        self, db: AsyncSession, user_id: UUID, item_type: str, item_id: UUID
    ) -> Favorite | None:
        result = await db.execute(
            select(Favorite).where(
                Favorite.user_id == user_id,
                Favorite.item_type == item_type,
                Favorite.item_id == item_id,
            )
        )
        return result.scalar_one_or_none()


favorite_service = FavoriteService()

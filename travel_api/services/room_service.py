"""Hotel room management service."""

import logging
from collections import Counter
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import DuplicateError, NotFoundError, handle_service_errors
from travel_api.domain.search import Pagination, paginate, range_filter, text_search
from travel_api.models.hotel import Hotel, Room
from travel_api.schemas.hotel import RoomCreate, RoomUpdate

logger = logging.getLogger(__name__)


class RoomService:
    """Service for hotel rooms."""

    @handle_service_errors("Failed to fetch rooms")
    async def list_rooms(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        hotel_id: UUID | None = None,
        is_available: bool | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        room_type: str | None = None,
        capacity: int | None = None,
    ) -> tuple[list[Room], Pagination]:
        filters = []
        if hotel_id:
            filters.append(Room.hotel_id == hotel_id)
        if is_available is not None:
            filters.append(Room.is_available == is_available)
        filters.extend(range_filter(Room.price_per_night, min_price, max_price))
        if room_type:
            filters.append(text_search(room_type, Room.room_type))
        if capacity is not None:
            filters.append(Room.capacity >= capacity)

        query = select(Room)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(Room.created_at.desc())

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch hotel rooms")
    async def get_rooms_by_hotel(self, db: AsyncSession, hotel_id: UUID) -> list[Room]:
        await self._get_hotel(db, hotel_id)
        result = await db.execute(
            select(Room).where(Room.hotel_id == hotel_id).order_by(Room.room_number)
        )
        return list(result.scalars().all())

    @handle_service_errors("Failed to fetch room")
    async def get_room(self, db: AsyncSession, room_id: UUID) -> Room:
        room = await db.get(Room, room_id)
        if not room:
            raise NotFoundError("Room", str(room_id))
        return room

    @handle_service_errors("Failed to create room")
    async def create_room(self, db: AsyncSession, data: RoomCreate) -> Room:
        await self._get_hotel(db, data.hotel_id)
        await self._ensure_unique_number(db, data.hotel_id, data.room_number)

        room = Room(**data.to_column_values())
        db.add(room)
        await db.flush()

        logger.info(f"Room {room.room_number} created for hotel {room.hotel_id}")
        return room

    @handle_service_errors("Failed to update room")
    async def update_room(self, db: AsyncSession, room_id: UUID, data: RoomUpdate) -> Room:
        room = await self.get_room(db, room_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if values.get("room_number") and values["room_number"] != room.room_number:
            await self._ensure_unique_number(db, room.hotel_id, values["room_number"], exclude_id=room.id)

        for field, value in values.items():
            setattr(room, field, value)
        await db.flush()
        return room

    @handle_service_errors("Failed to delete room")
    async def delete_room(self, db: AsyncSession, room_id: UUID) -> None:
        room = await self.get_room(db, room_id)
        await db.delete(room)
        await db.flush()

    @handle_service_errors("Failed to update room availability")
    async def update_room_availability(self, db: AsyncSession, room_id: UUID, is_available: bool) -> Room:
        """Take a room out of service or bring it back."""
        room = await self.get_room(db, room_id)
        room.is_available = is_available
        room.maintenance_status = "Available" if is_available else "Maintenance"
        await db.flush()
        return room

    @handle_service_errors("Failed to fetch room statistics")
    async def get_room_stats(self, db: AsyncSession, hotel_id: UUID) -> dict[str, Any]:
        rooms = await self.get_rooms_by_hotel(db, hotel_id)

        total = len(rooms)
        available = sum(
            1 for room in rooms if room.is_available and room.maintenance_status == "Available"
        )
        maintenance = sum(1 for room in rooms if room.maintenance_status != "Available")
        occupied = sum(
            1 for room in rooms if not room.is_available and room.maintenance_status == "Available"
        )
        average_price = (
            float(sum(room.price_per_night for room in rooms) / total) if total else 0.0
        )

        return {
            "total": total,
            "available": available,
            "occupied": occupied,
            "maintenance": maintenance,
            "by_type": dict(Counter(room.room_type for room in rooms)),
            "average_price": round(average_price, 2),
        }

    async def _get_hotel(self, db: AsyncSession, hotel_id: UUID) -> Hotel:
        hotel = await db.get(Hotel, hotel_id)
        if not hotel:
            raise NotFoundError("Hotel", str(hotel_id))
        return hotel

    async def _ensure_unique_number(
        self, db: AsyncSession, hotel_id: UUID, room_number: str, exclude_id: UUID | None = None
    ) -> None:
        query = select(Room.id).where(Room.hotel_id == hotel_id, Room.room_number == room_number)
        if exclude_id:
            query = query.where(Room.id != exclude_id)
        if (await db.execute(query)).first():
            raise DuplicateError("Room", "roomNumber", room_number)


room_service = RoomService()

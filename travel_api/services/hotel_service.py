"""Hotel catalog, room availability and hotel booking service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.config import settings
from travel_api.core.exceptions import NotFoundError, ResourceNotAvailable, handle_service_errors
from travel_api.domain.availability import DateInterval, ResourceState, check_availability
from travel_api.domain.pricing import calculate_nights, compute_price, seasonal_rate, validate_seasonal_windows
from travel_api.domain.ratings import upsert_rating
from travel_api.domain.search import (
    GeoRadius,
    Pagination,
    paginate,
    range_filter,
    sort_clause,
    text_search,
)
from travel_api.models.booking import Booking
from travel_api.models.hotel import Hotel, Room
from travel_api.schemas.hotel import HotelBookingCreate, HotelCreate, HotelUpdate, RatingCreate
from travel_api.services.booking_service import booking_service
from travel_api.services.notification_service import notification_service
from travel_api.utils.booking_reference import generate_booking_reference

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "name": Hotel.name,
    "price_per_night": Hotel.price_per_night,
    "star_rating": Hotel.star_rating,
    "average_rating": Hotel.average_rating,
    "created_at": Hotel.created_at,
}


def room_state(room: Room) -> ResourceState:
    return ResourceState(
        is_available=room.is_available,
        status=room.maintenance_status,
        capacity=room.capacity,
    )


class HotelService:
    """Service for hotels, room availability and room bookings."""

    @handle_service_errors("Failed to fetch hotels")
    async def list_hotels(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        search_term: str | None = None,
        city: str | None = None,
        country: str | None = None,
        is_available: bool | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        min_rating: float | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Hotel], Pagination]:
        filters = []

        search = text_search(search_term, Hotel.name, Hotel.city, Hotel.country)
        if search is not None:
            filters.append(search)
        if city:
            filters.append(text_search(city, Hotel.city))
        if country:
            filters.append(text_search(country, Hotel.country))
        if is_available is not None:
            filters.append(Hotel.is_available == is_available)
        filters.extend(range_filter(Hotel.price_per_night, min_price, max_price))
        if min_rating is not None:
            filters.append(Hotel.average_rating >= min_rating)

        query = select(Hotel)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(sort_clause(SORT_COLUMNS, sort_by, sort_order))

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch hotel")
    async def get_hotel(self, db: AsyncSession, hotel_id: UUID) -> Hotel:
        hotel = await db.get(Hotel, hotel_id)
        if not hotel:
            raise NotFoundError("Hotel", str(hotel_id))
        return hotel

    @handle_service_errors("Failed to fetch hotel")
    async def get_hotel_with_rooms(self, db: AsyncSession, hotel_id: UUID) -> tuple[Hotel, list[Room]]:
        hotel = await self.get_hotel(db, hotel_id)
        return hotel, await self._hotel_rooms(db, hotel.id)

    @handle_service_errors("Failed to create hotel")
    async def create_hotel(self, db: AsyncSession, data: HotelCreate) -> Hotel:
        values = data.to_column_values()
        validate_seasonal_windows(values["seasonal_prices"])

        hotel = Hotel(**values)
        db.add(hotel)
        await db.flush()

        logger.info(f"Hotel created: {hotel.id} ({hotel.name})")
        return hotel

    @handle_service_errors("Failed to update hotel")
    async def update_hotel(self, db: AsyncSession, hotel_id: UUID, data: HotelUpdate) -> Hotel:
        hotel = await self.get_hotel(db, hotel_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if "seasonal_prices" in values:
            validate_seasonal_windows(values["seasonal_prices"])

        for field, value in values.items():
            setattr(hotel, field, value)
        await db.flush()
        return hotel

    @handle_service_errors("Failed to delete hotel")
    async def delete_hotel(self, db: AsyncSession, hotel_id: UUID) -> None:
        hotel = await self.get_hotel(db, hotel_id)
        await db.delete(hotel)
        await db.flush()
        logger.info(f"Hotel deleted with its rooms: {hotel_id}")

    @handle_service_errors("Failed to rate hotel")
    async def rate_hotel(
        self, db: AsyncSession, hotel_id: UUID, user_id: UUID, data: RatingCreate
    ) -> Hotel:
        """Add the user's rating, replacing an earlier one."""
        hotel = await self.get_hotel(db, hotel_id)
        hotel.ratings, hotel.average_rating = upsert_rating(
            hotel.ratings, user_id, data.rating, data.review
        )
        await db.flush()
        return hotel

    @handle_service_errors("Failed to check room availability")
    async def get_room_availability(
        self,
        db: AsyncSession,
        hotel_id: UUID,
        check_in: date,
        check_out: date,
        guests: int = 1,
    ) -> dict[str, Any]:
        """Rooms of a hotel free for the whole stay, each with its price.

        Returns:
            dict: available_rooms [(room, calculated_price)], total_rooms,
            check_in, check_out, nights
        """
        hotel = await self.get_hotel(db, hotel_id)
        requested = DateInterval(check_in, check_out)
        nights = calculate_nights(check_in, check_out)

        rooms = await self._hotel_rooms(db, hotel.id)
        reservations = await booking_service.reserved_intervals(
            db, Booking.room_id, [room.id for room in rooms], check_in, check_out
        )

        available_rooms = []
        for room in rooms:
            result = check_availability(
                room_state(room), requested, reservations.get(room.id, []), guests
            )
            if not result:
                continue
            rate = seasonal_rate(room.price_per_night, hotel.seasonal_prices, check_in)
            price = compute_price(rate, nights)
            available_rooms.append(
                (
                    room,
                    {
                        "base_price": room.price_per_night,
                        "seasonal_price": rate,
                        "total_price": price.total_price,
                    },
                )
            )

        return {
            "available_rooms": available_rooms,
            "total_rooms": len(rooms),
            "check_in": check_in,
            "check_out": check_out,
            "nights": nights,
        }

    @handle_service_errors("Failed to fetch nearby hotels")
    async def get_nearby_hotels(
        self,
        db: AsyncSession,
        latitude: float,
        longitude: float,
        radius_km: float | None = None,
        limit: int = 10,
    ) -> list[tuple[Hotel, float]]:
        """Hotels within the radius, closest first, with distance in km."""
        area = GeoRadius(latitude, longitude, radius_km or settings.nearby_default_radius_km)

        result = await db.execute(
            select(Hotel).where(
                Hotel.latitude.is_not(None),
                Hotel.longitude.is_not(None),
                area.bounding_box(Hotel.latitude, Hotel.longitude),
            )
        )
        nearby = [
            (hotel, area.distance_m(hotel.latitude, hotel.longitude))
            for hotel in result.scalars().all()
            if area.contains(hotel.latitude, hotel.longitude)
        ]
        nearby.sort(key=lambda pair: pair[1])
        return [(hotel, round(distance / 1000, 3)) for hotel, distance in nearby[:limit]]

    @handle_service_errors("Failed to book room")
    async def book_room(
        self, db: AsyncSession, hotel_id: UUID, user_id: UUID, data: HotelBookingCreate
    ) -> Booking:
        """Book a room of the hotel for the requested stay.

        The booking, the room's availability flag and the confirmation
        notification are written in the caller's transaction.

        Raises:
            NotFoundError: Hotel or room does not exist
            ResourceNotAvailable: Hotel closed, room unavailable, too small or already booked
        """
        hotel = await self.get_hotel(db, hotel_id)
        if not hotel.is_available:
            raise ResourceNotAvailable("Hotel is not accepting bookings")

        room = await db.get(Room, data.room_id)
        if not room or room.hotel_id != hotel.id:
            raise NotFoundError("Room", str(data.room_id))

        requested = DateInterval(data.check_in, data.check_out)
        reservations = await booking_service.reserved_intervals(
            db, Booking.room_id, [room.id], data.check_in, data.check_out
        )
        availability = check_availability(
            room_state(room), requested, reservations.get(room.id, []), data.guests
        )
        if not availability:
            raise ResourceNotAvailable(f"Room {room.room_number} is not available: {availability.reason}")

        nights = calculate_nights(data.check_in, data.check_out)
        rate = seasonal_rate(room.price_per_night, hotel.seasonal_prices, data.check_in)
        price = compute_price(rate, nights, tax_rate=settings.hotel_tax_rate)

        booking = Booking(
            booking_reference=generate_booking_reference("hotel"),
            booking_type="hotel",
            user_id=user_id,
            hotel_id=hotel.id,
            room_id=room.id,
            start_date=data.check_in,
            end_date=data.check_out,
            guests=data.guests,
            nightly_rate=price.nightly_rate,
            nights=price.nights,
            base_price=price.base_price,
            taxes=price.extra,
            insurance=Decimal("0"),
            total_price=price.total_price,
            status="Confirmed",
            payment_status="Unpaid",
            details={"special_requests": data.special_requests} if data.special_requests else {},
        )
        db.add(booking)
        room.is_available = False
        await db.flush()

        await notification_service.create_booking_confirmation(db, booking)
        logger.info(f"Room {room.room_number} of hotel {hotel.id} booked: {booking.booking_reference}")
        return booking

    async def _hotel_rooms(self, db: AsyncSession, hotel_id: UUID) -> list[Room]:
        result = await db.execute(
            select(Room).where(Room.hotel_id == hotel_id).order_by(Room.room_number)
        )
        return list(result.scalars().all())


hotel_service = HotelService()

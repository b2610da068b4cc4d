"""Vehicle rental service."""

import logging
from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.config import settings
from travel_api.core.exceptions import (
    DuplicateError,
    NotFoundError,
    ResourceNotAvailable,
    ValidationError,
    handle_service_errors,
)
from travel_api.domain.availability import AvailabilityResult, DateInterval, ResourceState, check_availability
from travel_api.domain.pricing import PriceBreakdown, calculate_nights, compute_price
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
from travel_api.models.vehicle import Vehicle
from travel_api.schemas.hotel import RatingCreate
from travel_api.schemas.vehicle import VehicleBookingCreate, VehicleCreate, VehicleUpdate
from travel_api.services.booking_service import booking_service
from travel_api.services.notification_service import notification_service
from travel_api.utils.booking_reference import generate_booking_reference

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "price_per_day": Vehicle.price_per_day,
    "capacity": Vehicle.capacity,
    "year": Vehicle.year,
    "average_rating": Vehicle.average_rating,
    "created_at": Vehicle.created_at,
}


def vehicle_state(vehicle: Vehicle) -> ResourceState:
    return ResourceState(
        is_available=vehicle.is_available,
        status=vehicle.maintenance_status,
        capacity=vehicle.capacity,
        next_service=vehicle.next_service,
    )


def insurance_rate(vehicle: Vehicle, insurance_type: str | None) -> Decimal | None:
    """Daily price of the named insurance option, None when no insurance was asked for."""
    if not insurance_type:
        return None
    for option in (vehicle.rental_terms or {}).get("insurance_options", []):
        if option.get("type", "").lower() == insurance_type.lower():
            return Decimal(str(option.get("price_per_day", 0)))
    raise ValidationError(f"Insurance option '{insurance_type}' is not offered", path="insuranceType")


class VehicleService:
    """Service for vehicle listings, availability, pricing and rentals."""

    @handle_service_errors("Failed to fetch vehicles")
    async def list_vehicles(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        search_term: str | None = None,
        is_available: bool | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        vehicle_type: str | None = None,
        city: str | None = None,
        country: str | None = None,
        capacity: int | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> tuple[list[Vehicle], Pagination]:
        filters = []

        search = text_search(search_term, Vehicle.vehicle_type, Vehicle.make, Vehicle.model)
        if search is not None:
            filters.append(search)
        if is_available is not None:
            filters.append(Vehicle.is_available == is_available)
        filters.extend(range_filter(Vehicle.price_per_day, min_price, max_price))
        if vehicle_type:
            filters.append(text_search(vehicle_type, Vehicle.vehicle_type))
        if city:
            filters.append(text_search(city, Vehicle.city))
        if country:
            filters.append(text_search(country, Vehicle.country))
        if capacity is not None:
            filters.append(Vehicle.capacity >= capacity)

        query = select(Vehicle)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(sort_clause(SORT_COLUMNS, sort_by, sort_order))

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch vehicle")
    async def get_vehicle(self, db: AsyncSession, vehicle_id: UUID) -> Vehicle:
        vehicle = await db.get(Vehicle, vehicle_id)
        if not vehicle:
            raise NotFoundError("Vehicle", str(vehicle_id))
        return vehicle

    @handle_service_errors("Failed to create vehicle")
    async def create_vehicle(self, db: AsyncSession, data: VehicleCreate) -> Vehicle:
        await self._ensure_unique_plate(db, data.license_plate)

        vehicle = Vehicle(**data.to_column_values())
        db.add(vehicle)
        await db.flush()

        logger.info(f"Vehicle created: {vehicle.id} ({vehicle.make} {vehicle.model})")
        return vehicle

    @handle_service_errors("Failed to update vehicle")
    async def update_vehicle(self, db: AsyncSession, vehicle_id: UUID, data: VehicleUpdate) -> Vehicle:
        vehicle = await self.get_vehicle(db, vehicle_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if values.get("license_plate") and values["license_plate"] != vehicle.license_plate:
            await self._ensure_unique_plate(db, values["license_plate"], exclude_id=vehicle.id)

        for field, value in values.items():
            setattr(vehicle, field, value)
        await db.flush()
        return vehicle

    @handle_service_errors("Failed to delete vehicle")
    async def delete_vehicle(self, db: AsyncSession, vehicle_id: UUID) -> None:
        vehicle = await self.get_vehicle(db, vehicle_id)
        await db.delete(vehicle)
        await db.flush()
        logger.info(f"Vehicle deleted: {vehicle_id}")

    @handle_service_errors("Failed to rate vehicle")
    async def rate_vehicle(
        self, db: AsyncSession, vehicle_id: UUID, user_id: UUID, data: RatingCreate
    ) -> Vehicle:
        vehicle = await self.get_vehicle(db, vehicle_id)
        vehicle.ratings, vehicle.average_rating = upsert_rating(
            vehicle.ratings, user_id, data.rating, data.review
        )
        await db.flush()
        return vehicle

    @handle_service_errors("Failed to check vehicle availability")
    async def check_availability(
        self,
        db: AsyncSession,
        vehicle_id: UUID,
        start_date: date,
        end_date: date,
        insurance_type: str | None = None,
    ) -> dict[str, Any]:
        """Availability of a vehicle for the rental period with its price.

        Returns:
            dict: is_available, reason, pricing (None when unavailable)
        """
        vehicle = await self.get_vehicle(db, vehicle_id)
        availability = await self._availability(db, vehicle, start_date, end_date)

        pricing = None
        if availability:
            pricing = self._pricing_dict(self._price(vehicle, start_date, end_date, insurance_type))

        return {
            "is_available": availability.available,
            "reason": availability.reason,
            "pricing": pricing,
        }

    @handle_service_errors("Failed to book vehicle")
    async def book_vehicle(
        self, db: AsyncSession, vehicle_id: UUID, user_id: UUID, data: VehicleBookingCreate
    ) -> Booking:
        """Rent a vehicle for the requested period.

        Raises:
            NotFoundError: Vehicle does not exist
            ResourceNotAvailable: Vehicle unavailable, in maintenance or already booked
        """
        vehicle = await self.get_vehicle(db, vehicle_id)

        availability = await self._availability(db, vehicle, data.start_date, data.end_date)
        if not availability:
            raise ResourceNotAvailable(f"Vehicle is not available: {availability.reason}")

        price = self._price(vehicle, data.start_date, data.end_date, data.insurance_type)

        details = data.to_column_values(exclude_none=True)
        for key in ("start_date", "end_date"):
            details.pop(key, None)

        booking = Booking(
            booking_reference=generate_booking_reference("vehicle"),
            booking_type="vehicle",
            user_id=user_id,
            vehicle_id=vehicle.id,
            start_date=data.start_date,
            end_date=data.end_date,
            guests=1,
            nightly_rate=price.nightly_rate,
            nights=price.nights,
            base_price=price.base_price,
            taxes=Decimal("0"),
            insurance=price.extra,
            total_price=price.total_price,
            status="Confirmed",
            payment_status="Unpaid",
            details=details,
        )
        db.add(booking)
        vehicle.is_available = False
        await db.flush()

        await notification_service.create_booking_confirmation(db, booking)
        logger.info(f"Vehicle {vehicle.id} booked: {booking.booking_reference}")
        return booking

    @handle_service_errors("Failed to fetch nearby vehicles")
    async def get_nearby_vehicles(
        self,
        db: AsyncSession,
        latitude: float,
        longitude: float,
        radius_km: float | None = None,
        limit: int = 10,
    ) -> list[tuple[Vehicle, float]]:
        area = GeoRadius(latitude, longitude, radius_km or settings.nearby_default_radius_km)

        result = await db.execute(
            select(Vehicle).where(
                Vehicle.is_available.is_(True),
                Vehicle.latitude.is_not(None),
                Vehicle.longitude.is_not(None),
                area.bounding_box(Vehicle.latitude, Vehicle.longitude),
            )
        )
        nearby = [
            (vehicle, area.distance_m(vehicle.latitude, vehicle.longitude))
            for vehicle in result.scalars().all()
            if area.contains(vehicle.latitude, vehicle.longitude)
        ]
        nearby.sort(key=lambda pair: pair[1])
        return [(vehicle, round(distance / 1000, 3)) for vehicle, distance in nearby[:limit]]

    @handle_service_errors("Failed to fetch vehicle statistics")
    async def get_vehicle_stats(self, db: AsyncSession) -> dict[str, Any]:
        vehicles = list((await db.execute(select(Vehicle))).scalars().all())

        total = len(vehicles)
        average_price = float(sum(v.price_per_day for v in vehicles) / total) if total else 0.0
        return {
            "total": total,
            "available": sum(
                1 for v in vehicles if v.is_available and v.maintenance_status == "Available"
            ),
            "in_maintenance": sum(1 for v in vehicles if v.maintenance_status != "Available"),
            "by_type": dict(Counter(v.vehicle_type for v in vehicles)),
            "average_price": round(average_price, 2),
        }

    async def _availability(
        self, db: AsyncSession, vehicle: Vehicle, start_date: date, end_date: date
    ) -> AvailabilityResult:
        requested = DateInterval(start_date, end_date)
        reservations = await booking_service.reserved_intervals(
            db, Booking.vehicle_id, [vehicle.id], start_date, end_date
        )
        return check_availability(vehicle_state(vehicle), requested, reservations.get(vehicle.id, []))

    def _price(
        self, vehicle: Vehicle, start_date: date, end_date: date, insurance_type: str | None
    ) -> PriceBreakdown:
        days = calculate_nights(start_date, end_date)
        return compute_price(
            vehicle.price_per_day, days, daily_extra=insurance_rate(vehicle, insurance_type)
        )

    @staticmethod
    def _pricing_dict(price: PriceBreakdown) -> dict[str, Any]:
        return {
            "days": price.nights,
            "price_per_day": price.nightly_rate,
            "base_price": price.base_price,
            "insurance_cost": price.extra,
            "total_price": price.total_price,
        }

    async def _ensure_unique_plate(
        self, db: AsyncSession, license_plate: str, exclude_id: UUID | None = None
    ) -> None:
        query = select(Vehicle.id).where(Vehicle.license_plate == license_plate)
        if exclude_id:
            query = query.where(Vehicle.id != exclude_id)
        if (await db.execute(query)).first():
            raise DuplicateError("Vehicle", "licensePlate", license_plate)


vehicle_service = VehicleService()

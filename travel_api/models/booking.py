"""Booking (reservation) database model."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, Date, DateTime, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from travel_api.database import Base, utc_now

ACTIVE_BOOKING_STATUSES = ("Pending", "Confirmed")


class Booking(Base):
    """Reservation of a hotel room or a vehicle."""

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    booking_reference: Mapped[str] = mapped_column(
        String(20), unique=True, nullable=False, index=True
    )  # H2406010042, V2406010042
    booking_type: Mapped[str] = mapped_column(String(10), nullable=False, index=True)  # hotel, vehicle
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    # Booked resource
    hotel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("hotels.id", ondelete="SET NULL"), index=True
    )
    room_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("rooms.id", ondelete="SET NULL"), index=True
    )
    vehicle_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid, ForeignKey("vehicles.id", ondelete="SET NULL"), index=True
    )

    # Dates
    start_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    guests: Mapped[int] = mapped_column(Integer, default=1)

    # Pricing
    nightly_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    nights: Mapped[int] = mapped_column(Integer, nullable=False)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    taxes: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    insurance: Mapped[Decimal] = mapped_column(Numeric(12, 2), default=Decimal("0"))
    total_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Status
    status: Mapped[str] = mapped_column(
        String(20), default="Pending", index=True
    )  # Pending, Confirmed, Cancelled
    payment_status: Mapped[str] = mapped_column(String(20), default="Unpaid")  # Unpaid, Paid

    # special_requests, insurance_type, pickup_location, dropoff_location, driver_details
    details: Mapped[dict] = mapped_column(JSON, default=dict)

    booked_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    cancelled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

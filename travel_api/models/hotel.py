"""Hotel and room database models."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_api.database import Base, utc_now


class Hotel(Base):
    """Hotel model."""

    __tablename__ = "hotels"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    # Location
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)

    contact_info: Mapped[dict] = mapped_column(JSON, default=dict)  # phone, email, website
    star_rating: Mapped[int] = mapped_column(Integer, default=3)
    amenities: Mapped[list] = mapped_column(JSON, default=list)
    check_in_time: Mapped[str] = mapped_column(String(5), default="14:00")
    check_out_time: Mapped[str] = mapped_column(String(5), default="12:00")
    images: Mapped[list] = mapped_column(JSON, default=list)
    policies: Mapped[dict] = mapped_column(JSON, default=dict)

    # Pricing
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    seasonal_prices: Mapped[list] = mapped_column(
        JSON, default=list
    )  # [{start_date, end_date, multiplier}], non-overlapping

    # Ratings
    ratings: Mapped[list] = mapped_column(JSON, default=list)  # [{user_id, rating, review, rated_at}]
    average_rating: Mapped[float] = mapped_column(Float, default=0.0)

    is_available: Mapped[bool] = mapped_column(Boolean, default=True, index=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    rooms: Mapped[list["Room"]] = relationship(
        "Room", back_populates="hotel", cascade="all, delete-orphan"
    )


class Room(Base):
    """Bookable hotel room."""

    __tablename__ = "rooms"
    __table_args__ = (UniqueConstraint("hotel_id", "room_number", name="uq_rooms_hotel_number"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    hotel_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True
    )
    room_number: Mapped[str] = mapped_column(String(20), nullable=False)
    floor: Mapped[int] = mapped_column(Integer, default=0)
    room_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    price_per_night: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    features: Mapped[list] = mapped_column(JSON, default=list)
    images: Mapped[list] = mapped_column(JSON, default=list)
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    maintenance_status: Mapped[str] = mapped_column(
        String(20), default="Available"
    )  # Available, Cleaning, Maintenance

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

    hotel: Mapped["Hotel"] = relationship("Hotel", back_populates="rooms")

"""Vehicle database model."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from travel_api.database import Base, utc_now


class Vehicle(Base):
    """Rental vehicle."""

    __tablename__ = "vehicles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    vehicle_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)  # Car, SUV, Van, Bike...
    make: Mapped[str] = mapped_column(String(100), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)

    # Details
    license_plate: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    color: Mapped[str | None] = mapped_column(String(50))
    transmission: Mapped[str] = mapped_column(String(20), default="Automatic")  # Automatic, Manual
    fuel_type: Mapped[str] = mapped_column(String(20), default="Petrol")  # Petrol, Diesel, Electric, Hybrid
    mileage: Mapped[int] = mapped_column(Integer, default=0)
    features: Mapped[list] = mapped_column(JSON, default=list)
    images: Mapped[list] = mapped_column(JSON, default=list)

    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_day: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    # Availability
    is_available: Mapped[bool] = mapped_column(Boolean, default=True, index=True)
    address: Mapped[str | None] = mapped_column(String(500))
    city: Mapped[str | None] = mapped_column(String(100), index=True)
    country: Mapped[str | None] = mapped_column(String(100), index=True)
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)

    # Maintenance
    maintenance_status: Mapped[str] = mapped_column(
        String(20), default="Available", index=True
    )  # Available, In Service, Repairs Needed
    last_service: Mapped[date | None] = mapped_column(Date)
    next_service: Mapped[date | None] = mapped_column(Date)
    maintenance_history: Mapped[list] = mapped_column(JSON, default=list)

    # minimum_age, security_deposit, mileage_limit, additional_drivers,
    # required_documents, insurance_options [{type, coverage, price_per_day}]
    rental_terms: Mapped[dict] = mapped_column(JSON, default=dict)

    ratings: Mapped[list] = mapped_column(JSON, default=list)  # [{user_id, rating, review, rated_at}]
    average_rating: Mapped[float] = mapped_column(Float, default=0.0)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

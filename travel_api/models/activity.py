"""Activity database model."""

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from travel_api.database import Base, utc_now


class Activity(Base):
    """Bookable activity at a destination."""

    __tablename__ = "activities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    destination_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True
    )
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, index=True
    )  # Adventure, Cultural, Nature, Entertainment
    duration: Mapped[float] = mapped_column(Float, nullable=False)  # hours
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    min_participants: Mapped[int] = mapped_column(Integer, default=1)
    max_participants: Mapped[int | None] = mapped_column(Integer)
    availability: Mapped[list] = mapped_column(
        JSON, default=list
    )  # [{day_of_week, start_time, end_time}]
    included: Mapped[list] = mapped_column(JSON, default=list)
    excluded: Mapped[list] = mapped_column(JSON, default=list)
    images: Mapped[list] = mapped_column(JSON, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )

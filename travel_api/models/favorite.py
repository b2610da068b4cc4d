"""Favorite database model."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from travel_api.database import Base, utc_now


class Favorite(Base):
    """An item a user marked as favorite."""

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "item_id", "item_type", name="uq_favorites_user_item"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    item_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    item_type: Mapped[str] = mapped_column(String(20), nullable=False)  # hotel, vehicle, destination, activity
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)

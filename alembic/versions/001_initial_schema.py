"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates all tables for the travel booking API:
- Destinations and activities
- Hotels and rooms
- Vehicles
- Bookings
- Trips and favorites
- Notifications and FAQs
"""

from typing import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now()),
    ]


def upgrade() -> None:
    """Create all database tables."""

    # ==================== DESTINATIONS ====================
    op.create_table(
        "destinations",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), unique=True, nullable=False, index=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("country", sa.String(100), index=True),
        sa.Column("city", sa.String(100), index=True),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("discount", sa.Integer, default=0),
        sa.Column("rating", sa.Float, default=0.0),
        sa.Column("best_time_to_visit", sa.String(100)),
        sa.Column("images", sa.JSON),
        sa.Column("activities", sa.JSON),
        *_timestamps(),
    )

    op.create_table(
        "activities",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False, index=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("destination_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("destinations.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("category", sa.String(20), nullable=False, index=True),
        sa.Column("duration", sa.Float, nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("min_participants", sa.Integer, default=1),
        sa.Column("max_participants", sa.Integer),
        sa.Column("availability", sa.JSON),
        sa.Column("included", sa.JSON),
        sa.Column("excluded", sa.JSON),
        sa.Column("images", sa.JSON),
        sa.Column("is_active", sa.Boolean, default=True),
        *_timestamps(),
    )

    # ==================== HOTELS ====================
    op.create_table(
        "hotels",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False, index=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("city", sa.String(100), nullable=False, index=True),
        sa.Column("country", sa.String(100), nullable=False, index=True),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("contact_info", sa.JSON),
        sa.Column("star_rating", sa.Integer, default=3),
        sa.Column("amenities", sa.JSON),
        sa.Column("check_in_time", sa.String(5), default="14:00"),
        sa.Column("check_out_time", sa.String(5), default="12:00"),
        sa.Column("images", sa.JSON),
        sa.Column("policies", sa.JSON),
        sa.Column("price_per_night", sa.Numeric(12, 2), nullable=False),
        sa.Column("seasonal_prices", sa.JSON),
        sa.Column("ratings", sa.JSON),
        sa.Column("average_rating", sa.Float, default=0.0),
        sa.Column("is_available", sa.Boolean, default=True, index=True),
        *_timestamps(),
    )

    op.create_table(
        "rooms",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("hotel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("room_number", sa.String(20), nullable=False),
        sa.Column("floor", sa.Integer, default=0),
        sa.Column("room_type", sa.String(50), nullable=False, index=True),
        sa.Column("price_per_night", sa.Numeric(12, 2), nullable=False),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("features", sa.JSON),
        sa.Column("images", sa.JSON),
        sa.Column("is_available", sa.Boolean, default=True, index=True),
        sa.Column("maintenance_status", sa.String(20), default="Available"),
        *_timestamps(),
        sa.UniqueConstraint("hotel_id", "room_number", name="uq_rooms_hotel_number"),
    )

    # ==================== VEHICLES ====================
    op.create_table(
        "vehicles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("vehicle_type", sa.String(50), nullable=False, index=True),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer, nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("license_plate", sa.String(20), unique=True, nullable=False, index=True),
        sa.Column("color", sa.String(50)),
        sa.Column("transmission", sa.String(20), default="Automatic"),
        sa.Column("fuel_type", sa.String(20), default="Petrol"),
        sa.Column("mileage", sa.Integer, default=0),
        sa.Column("features", sa.JSON),
        sa.Column("images", sa.JSON),
        sa.Column("capacity", sa.Integer, nullable=False),
        sa.Column("price_per_day", sa.Numeric(12, 2), nullable=False),
        sa.Column("is_available", sa.Boolean, default=True, index=True),
        sa.Column("address", sa.String(500)),
        sa.Column("city", sa.String(100), index=True),
        sa.Column("country", sa.String(100), index=True),
        sa.Column("latitude", sa.Float),
        sa.Column("longitude", sa.Float),
        sa.Column("maintenance_status", sa.String(20), default="Available", index=True),
        sa.Column("last_service", sa.Date),
        sa.Column("next_service", sa.Date),
        sa.Column("maintenance_history", sa.JSON),
        sa.Column("rental_terms", sa.JSON),
        sa.Column("ratings", sa.JSON),
        sa.Column("average_rating", sa.Float, default=0.0),
        *_timestamps(),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("booking_reference", sa.String(20), unique=True, nullable=False, index=True),
        sa.Column("booking_type", sa.String(10), nullable=False, index=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("hotel_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("hotels.id", ondelete="SET NULL"), index=True),
        sa.Column("room_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("rooms.id", ondelete="SET NULL"), index=True),
        sa.Column("vehicle_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("vehicles.id", ondelete="SET NULL"), index=True),
        sa.Column("start_date", sa.Date, nullable=False, index=True),
        sa.Column("end_date", sa.Date, nullable=False, index=True),
        sa.Column("guests", sa.Integer, default=1),
        sa.Column("nightly_rate", sa.Numeric(12, 2), nullable=False),
        sa.Column("nights", sa.Integer, nullable=False),
        sa.Column("base_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("taxes", sa.Numeric(12, 2), default=0),
        sa.Column("insurance", sa.Numeric(12, 2), default=0),
        sa.Column("total_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(20), default="Pending", index=True),
        sa.Column("payment_status", sa.String(20), default="Unpaid"),
        sa.Column("details", sa.JSON),
        sa.Column("booked_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("cancelled_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    # ==================== TRIPS ====================
    op.create_table(
        "trips",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("start_date", sa.Date, nullable=False, index=True),
        sa.Column("end_date", sa.Date, nullable=False, index=True),
        sa.Column("destinations", sa.JSON),
        sa.Column("accommodations", sa.JSON),
        sa.Column("transportation", sa.JSON),
        sa.Column("activities", sa.JSON),
        sa.Column("meals", sa.JSON),
        sa.Column("budget", sa.JSON, nullable=False),
        sa.Column("status", sa.String(20), default="Draft", index=True),
        sa.Column("is_public", sa.Boolean, default=False),
        sa.Column("notes", sa.Text),
        *_timestamps(),
    )

    op.create_table(
        "favorites",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("item_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("user_id", "item_id", "item_type", name="uq_favorites_user_item"),
    )

    # ==================== NOTIFICATIONS ====================
    op.create_table(
        "notifications",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), nullable=False, index=True),
        sa.Column("type", sa.String(30), nullable=False, index=True),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("read", sa.Boolean, default=False, index=True),
        sa.Column("related_id", postgresql.UUID(as_uuid=True), index=True),
        sa.Column("related_type", sa.String(20)),
        sa.Column("priority", sa.String(10), default="medium"),
        sa.Column("expires_at", sa.DateTime(timezone=True)),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ==================== FAQS ====================
    op.create_table(
        "faqs",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("question", sa.String(500), unique=True, nullable=False),
        sa.Column("answer", sa.Text, nullable=False),
        sa.Column("description", sa.String(1000)),
        sa.Column("category", sa.String(20), default="general", index=True),
        sa.Column("tags", sa.JSON),
        sa.Column("order", sa.Integer, default=0),
        sa.Column("is_published", sa.Boolean, default=True, index=True),
        sa.Column("view_count", sa.Integer, default=0),
        sa.Column("helpful_count", sa.Integer, default=0),
        sa.Column("not_helpful_count", sa.Integer, default=0),
        *_timestamps(),
    )


def downgrade() -> None:
    """Drop all database tables in reverse order."""
    op.drop_table("faqs")
    op.drop_table("notifications")
    op.drop_table("favorites")
    op.drop_table("trips")
    op.drop_table("bookings")
    op.drop_table("vehicles")
    op.drop_table("rooms")
    op.drop_table("hotels")
    op.drop_table("activities")
    op.drop_table("destinations")

"""Booking schemas."""

from datetime import date, datetime
from typing import Any, Literal
from uuid import UUID

from pydantic import Field

from travel_api.schemas.common import CamelModel

BookingStatus = Literal["Pending", "Confirmed", "Cancelled"]
PaymentStatus = Literal["Unpaid", "Paid"]


class BookingUpdate(CamelModel):
    """Schema for an admin changing booking or payment status."""

    status: BookingStatus | None = None
    payment_status: PaymentStatus | None = None


class BookingCancelRequest(CamelModel):
    reason: str | None = Field(None, max_length=1000)


class BookingResponse(CamelModel):
    id: UUID
    booking_reference: str
    booking_type: str
    user_id: UUID
    hotel_id: UUID | None
    room_id: UUID | None
    vehicle_id: UUID | None
    start_date: date
    end_date: date
    guests: int
    nightly_rate: float
    nights: int
    base_price: float
    taxes: float
    insurance: float
    total_price: float
    status: str
    payment_status: str
    details: dict[str, Any]
    booked_at: datetime
    cancelled_at: datetime | None
    created_at: datetime
    updated_at: datetime

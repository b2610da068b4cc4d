"""Notification schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from travel_api.schemas.common import CamelModel

NotificationType = Literal[
    "booking_confirmed",
    "payment_success",
    "booking_reminder",
    "special_offer",
    "vehicle_ready",
    "booking_canceled",
    "welcome",
    "review_reminder",
    "price_drop",
    "system_alert",
]
RelatedType = Literal["booking", "payment", "vehicle", "hotel", "package", "review"]
Priority = Literal["low", "medium", "high"]


class NotificationCreate(CamelModel):
    """Schema for creating a notification."""

    user_id: UUID
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=100)
    message: str = Field(..., min_length=1)
    related_id: UUID | None = None
    related_type: RelatedType | None = None
    priority: Priority = "medium"
    expires_at: datetime | None = None


class NotificationResponse(CamelModel):
    id: UUID
    user_id: UUID
    type: str
    title: str
    message: str
    read: bool
    related_id: UUID | None
    related_type: str | None
    priority: str
    expires_at: datetime | None
    created_at: datetime


class NotificationList(CamelModel):
    notifications: list[NotificationResponse]
    unread_count: int


class MarkAllReadResponse(CamelModel):
    modified_count: int


class UnreadCountResponse(CamelModel):
    unread_count: int

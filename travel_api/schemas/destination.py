"""Destination schemas."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field

from travel_api.schemas.common import CamelModel


class DestinationBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    country: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    price: Decimal = Field(..., gt=0)
    discount: int = Field(default=0, ge=0, le=100)
    rating: float = Field(default=0, ge=0, le=5)
    best_time_to_visit: str | None = Field(None, max_length=100)
    images: list[str] = []
    activities: list[str] = []


class DestinationCreate(DestinationBase):
    """Schema for creating a destination."""


class DestinationUpdate(CamelModel):
    """Schema for updating a destination."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    country: str | None = Field(None, max_length=100)
    city: str | None = Field(None, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    price: Decimal | None = Field(None, gt=0)
    discount: int | None = Field(None, ge=0, le=100)
    rating: float | None = Field(None, ge=0, le=5)
    best_time_to_visit: str | None = Field(None, max_length=100)
    images: list[str] | None = None
    activities: list[str] | None = None


class DestinationResponse(CamelModel):
    id: UUID
    name: str
    description: str
    country: str | None
    city: str | None
    latitude: float | None
    longitude: float | None
    price: float
    discount: int
    rating: float
    best_time_to_visit: str | None
    images: list[str]
    activities: list[str]
    created_at: datetime
    updated_at: datetime

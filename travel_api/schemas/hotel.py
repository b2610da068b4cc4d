"""Hotel and room schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Literal
from uuid import UUID

from pydantic import Field, field_validator

from travel_api.schemas.common import TIME_PATTERN, CamelModel

RoomStatus = Literal["Available", "Cleaning", "Maintenance"]


class ContactInfo(CamelModel):
    phone: str | None = None
    email: str | None = None
    website: str | None = None


class SeasonalPrice(CamelModel):
    start_date: date
    end_date: date
    multiplier: float = Field(..., ge=0)


class Rating(CamelModel):
    user_id: UUID | None = None
    rating: int = Field(..., ge=1, le=5)
    review: str | None = None
    rated_at: datetime | None = None


class RatingCreate(CamelModel):
    """Schema for rating a hotel or vehicle."""

    rating: int = Field(..., ge=1, le=5)
    review: str | None = Field(None, max_length=2000)


class HotelBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1, max_length=500)
    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    star_rating: int = Field(default=3, ge=1, le=5)
    amenities: list[str] = []
    check_in_time: str = Field(default="14:00", pattern=TIME_PATTERN)
    check_out_time: str = Field(default="12:00", pattern=TIME_PATTERN)
    images: list[str] = []
    policies: dict[str, Any] = {}
    price_per_night: Decimal = Field(..., ge=0)
    seasonal_prices: list[SeasonalPrice] = []
    is_available: bool = True


class HotelCreate(HotelBase):
    """Schema for creating a hotel."""


class HotelUpdate(CamelModel):
    """Schema for updating a hotel."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    address: str | None = Field(None, min_length=1, max_length=500)
    city: str | None = Field(None, min_length=1, max_length=100)
    country: str | None = Field(None, min_length=1, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    contact_info: ContactInfo | None = None
    star_rating: int | None = Field(None, ge=1, le=5)
    amenities: list[str] | None = None
    check_in_time: str | None = Field(None, pattern=TIME_PATTERN)
    check_out_time: str | None = Field(None, pattern=TIME_PATTERN)
    images: list[str] | None = None
    policies: dict[str, Any] | None = None
    price_per_night: Decimal | None = Field(None, ge=0)
    seasonal_prices: list[SeasonalPrice] | None = None
    is_available: bool | None = None


class HotelResponse(CamelModel):
    id: UUID
    name: str
    description: str
    address: str
    city: str
    country: str
    latitude: float | None
    longitude: float | None
    contact_info: ContactInfo
    star_rating: int
    amenities: list[str]
    check_in_time: str
    check_out_time: str
    images: list[str]
    policies: dict[str, Any]
    price_per_night: float
    seasonal_prices: list[SeasonalPrice]
    ratings: list[Rating]
    average_rating: float
    is_available: bool
    created_at: datetime
    updated_at: datetime


class NearbyHotelResponse(HotelResponse):
    distance_km: float


class RoomBase(CamelModel):
    room_number: str = Field(..., min_length=1, max_length=20)
    floor: int = 0
    room_type: str = Field(..., min_length=1, max_length=50)
    price_per_night: Decimal = Field(..., ge=0)
    capacity: int = Field(..., ge=1)
    features: list[str] = []
    images: list[str] = []
    is_available: bool = True
    maintenance_status: RoomStatus = "Available"


class RoomCreate(RoomBase):
    """Schema for creating a room."""

    hotel_id: UUID


class RoomUpdate(CamelModel):
    """Schema for updating a room."""

    room_number: str | None = Field(None, min_length=1, max_length=20)
    floor: int | None = None
    room_type: str | None = Field(None, min_length=1, max_length=50)
    price_per_night: Decimal | None = Field(None, ge=0)
    capacity: int | None = Field(None, ge=1)
    features: list[str] | None = None
    images: list[str] | None = None
    is_available: bool | None = None
    maintenance_status: RoomStatus | None = None


class RoomAvailabilityUpdate(CamelModel):
    """Take a room in or out of maintenance."""

    is_available: bool


class RoomResponse(CamelModel):
    id: UUID
    hotel_id: UUID
    room_number: str
    floor: int
    room_type: str
    price_per_night: float
    capacity: int
    features: list[str]
    images: list[str]
    is_available: bool
    maintenance_status: str
    created_at: datetime
    updated_at: datetime


class HotelDetailResponse(CamelModel):
    hotel: HotelResponse
    rooms: list[RoomResponse]


class CalculatedPrice(CamelModel):
    base_price: float
    seasonal_price: float
    total_price: float


class AvailableRoomResponse(RoomResponse):
    calculated_price: CalculatedPrice


class RoomAvailabilityResponse(CamelModel):
    available_rooms: list[AvailableRoomResponse]
    total_rooms: int
    check_in: date
    check_out: date
    nights: int


class RoomStatsResponse(CamelModel):
    total: int
    available: int
    occupied: int
    maintenance: int
    by_type: dict[str, int]
    average_price: float


class HotelBookingCreate(CamelModel):
    """Schema for booking a hotel room."""

    room_id: UUID
    check_in: date
    check_out: date
    guests: int = Field(default=1, ge=1, le=20)
    special_requests: str | None = Field(None, max_length=1000)

    @field_validator("check_out")
    @classmethod
    def validate_checkout(cls, v: date, info) -> date:
        check_in = info.data.get("check_in")
        if check_in and v <= check_in:
            raise ValueError("check_out must be after check_in")
        return v

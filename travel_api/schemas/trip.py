"""Trip planning schemas."""

from datetime import date, datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, field_validator

from travel_api.schemas.common import CamelModel

TripStatus = Literal["Draft", "Planned", "InProgress", "Completed", "Cancelled"]
TransportType = Literal["Flight", "Train", "Bus", "RentalCar", "Own"]
MealType = Literal["Breakfast", "Lunch", "Dinner"]


class TripDestination(CamelModel):
    destination_id: UUID
    order: int = Field(..., ge=0)
    stay_duration: int = Field(..., ge=1)  # days


class AccommodationCreate(CamelModel):
    hotel_id: UUID
    room_ids: list[UUID] = []
    check_in: date
    check_out: date
    special_requests: str | None = None
    cost: float = Field(default=0, ge=0)

    @field_validator("check_out")
    @classmethod
    def validate_checkout(cls, v: date, info) -> date:
        check_in = info.data.get("check_in")
        if check_in and v <= check_in:
            raise ValueError("check_out must be after check_in")
        return v


class TransportationCreate(CamelModel):
    vehicle_id: UUID | None = None
    type: TransportType
    origin: str = Field(..., min_length=1)
    destination: str = Field(..., min_length=1)
    departure_time: datetime | None = None
    arrival_time: datetime | None = None
    booking_reference: str | None = None
    cost: float = Field(default=0, ge=0)


class TripActivityCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: str | None = None
    location_name: str = Field(..., min_length=1)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    scheduled_at: datetime
    duration: float = Field(..., gt=0)  # hours
    cost: float = Field(..., ge=0)


class MealCreate(CamelModel):
    type: MealType
    meal_date: date
    venue: str | None = None
    is_included: bool = False
    preferences: list[str] = []
    cost: float = Field(default=0, ge=0)


class BudgetSpent(CamelModel):
    accommodation: float = 0
    transportation: float = 0
    activities: float = 0
    meals: float = 0
    others: float = 0


class Budget(CamelModel):
    total: float
    spent: BudgetSpent
    remaining: float


class BudgetCreate(CamelModel):
    total: float = Field(..., ge=0)


class TripCreate(CamelModel):
    """Schema for creating a trip."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    start_date: date
    end_date: date
    destinations: list[TripDestination] = []
    budget: BudgetCreate
    status: TripStatus = "Draft"
    is_public: bool = False
    notes: str | None = None


class TripUpdate(CamelModel):
    """Schema for updating a trip."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    destinations: list[TripDestination] | None = None
    status: TripStatus | None = None
    is_public: bool | None = None
    notes: str | None = None


class TripResponse(CamelModel):
    id: UUID
    user_id: UUID
    name: str
    description: str | None
    start_date: date
    end_date: date
    destinations: list[TripDestination]
    accommodations: list[AccommodationCreate]
    transportation: list[TransportationCreate]
    activities: list[TripActivityCreate]
    meals: list[MealCreate]
    budget: Budget
    status: str
    is_public: bool
    notes: str | None
    created_at: datetime
    updated_at: datetime

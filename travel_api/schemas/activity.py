"""Activity schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import Field, model_validator

from travel_api.schemas.common import TIME_PATTERN, CamelModel

ActivityCategory = Literal["Adventure", "Cultural", "Nature", "Entertainment"]


class TimeSlot(CamelModel):
    day_of_week: int = Field(..., ge=0, le=6)  # 0 = Sunday
    start_time: str = Field(..., pattern=TIME_PATTERN)
    end_time: str = Field(..., pattern=TIME_PATTERN)


class ActivityBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    destination_id: UUID
    category: ActivityCategory
    duration: float = Field(..., gt=0)
    price: Decimal = Field(..., ge=0)
    min_participants: int = Field(default=1, ge=1)
    max_participants: int | None = Field(None, ge=1)
    availability: list[TimeSlot] = []
    included: list[str] = []
    excluded: list[str] = []
    images: list[str] = []
    is_active: bool = True

    @model_validator(mode="after")
    def validate_participants(self) -> "ActivityBase":
        if self.max_participants is not None and self.max_participants < self.min_participants:
            raise ValueError("max_participants must not be less than min_participants")
        return self


class ActivityCreate(ActivityBase):
    """Schema for creating an activity."""


class ActivityUpdate(CamelModel):
    """Schema for updating an activity."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    destination_id: UUID | None = None
    category: ActivityCategory | None = None
    duration: float | None = Field(None, gt=0)
    price: Decimal | None = Field(None, ge=0)
    min_participants: int | None = Field(None, ge=1)
    max_participants: int | None = Field(None, ge=1)
    availability: list[TimeSlot] | None = None
    included: list[str] | None = None
    excluded: list[str] | None = None
    images: list[str] | None = None
    is_active: bool | None = None


class ActivityResponse(CamelModel):
    id: UUID
    name: str
    description: str
    destination_id: UUID
    category: str
    duration: float
    price: float
    min_participants: int
    max_participants: int | None
    availability: list[TimeSlot]
    included: list[str]
    excluded: list[str]
    images: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime

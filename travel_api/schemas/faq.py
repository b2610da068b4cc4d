"""FAQ schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field

from travel_api.schemas.common import CamelModel

FaqCategory = Literal[
    "general",
    "booking",
    "payment",
    "cancellation",
    "hotels",
    "vehicles",
    "packages",
    "account",
    "other",
]


class FaqCreate(CamelModel):
    """Schema for creating an FAQ."""

    question: str = Field(..., min_length=1, max_length=500)
    answer: str = Field(..., min_length=10, max_length=5000)
    description: str | None = Field(None, max_length=1000)
    category: FaqCategory = "general"
    tags: list[str] = []
    order: int = 0
    is_published: bool = True


class FaqUpdate(CamelModel):
    """Schema for updating an FAQ."""

    question: str | None = Field(None, min_length=1, max_length=500)
    answer: str | None = Field(None, min_length=10, max_length=5000)
    description: str | None = Field(None, max_length=1000)
    category: FaqCategory | None = None
    tags: list[str] | None = None
    order: int | None = None
    is_published: bool | None = None


class FaqResponse(CamelModel):
    id: UUID
    question: str
    answer: str
    description: str | None
    category: str
    tags: list[str]
    order: int
    is_published: bool
    view_count: int
    helpful_count: int
    not_helpful_count: int
    created_at: datetime
    updated_at: datetime

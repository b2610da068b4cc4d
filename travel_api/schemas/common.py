"""Shared schema base classes and response envelopes."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_column_values(
        self, *, exclude_unset: bool = False, exclude_none: bool = False
    ) -> dict[str, Any]:
        """Field values for model columns, nested data converted to JSON-safe form."""
        options = {"exclude_unset": exclude_unset, "exclude_none": exclude_none}
        values = self.model_dump(**options)
        json_values = self.model_dump(mode="json", **options)
        return {
            key: json_values[key] if isinstance(value, (list, dict)) else value
            for key, value in values.items()
        }


class PaginationMeta(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class ApiResponse(CamelModel, Generic[T]):
    """Success envelope."""

    success: bool = True
    message: str | None = None
    data: T | None = None
    pagination: PaginationMeta | None = None


class ErrorDetail(CamelModel):
    type: str
    path: str | None = None
    message: str


class ErrorResponse(CamelModel):
    """Failure envelope."""

    success: bool = False
    message: str
    errors: list[ErrorDetail] = []


def success_response(data: Any = None, message: str | None = None) -> ApiResponse:
    return ApiResponse(data=data, message=message)


def paginated_response(
    schema: type[BaseModel], items: list[Any], pagination: Any, message: str | None = None
) -> ApiResponse:
    """Envelope for a page of ORM objects rendered with ``schema``."""
    return ApiResponse(
        message=message,
        data=[schema.model_validate(item) for item in items],
        pagination=PaginationMeta.model_validate(pagination),
    )

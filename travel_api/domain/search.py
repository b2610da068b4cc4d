"""Filter, sort and pagination building blocks shared by list endpoints."""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic.alias_generators import to_snake
from sqlalchemy import Select, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from travel_api.core.exceptions import ValidationError

EARTH_RADIUS_M = 6_371_000.0


def text_search(term: str | None, *columns: Any) -> ColumnElement[bool] | None:
    """Case-insensitive substring match on any of the columns."""
    if not term or not term.strip():
        return None
    needle = term.strip().lower()
    return or_(*(func.lower(column).contains(needle, autoescape=True) for column in columns))


def all_words_search(term: str | None, *columns: Any) -> ColumnElement[bool] | None:
    """All words of the term must appear within a single column."""
    if not term or not term.strip():
        return None
    words = [word.lower() for word in term.split()]
    return or_(
        *(
            and_(*(func.lower(column).contains(word, autoescape=True) for word in words))
            for column in columns
        )
    )


def range_filter(column: Any, minimum: Any = None, maximum: Any = None) -> list[ColumnElement[bool]]:
    filters = []
    if minimum is not None:
        filters.append(column >= minimum)
    if maximum is not None:
        filters.append(column <= maximum)
    return filters


def sort_clause(
    columns: Mapping[str, Any],
    sort_by: str | None,
    sort_order: str | None = "desc",
    default: str = "created_at",
) -> Any:
    """ORDER BY clause for a whitelisted sort field.

    Unknown or missing fields fall back to newest first.
    """
    key = to_snake(sort_by) if sort_by else None
    if key not in columns:
        return columns[default].desc()
    column = columns[key]
    return column.asc() if (sort_order or "").lower() == "asc" else column.desc()


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_M * math.asin(math.sqrt(a))


@dataclass(frozen=True)
class GeoRadius:
    """A circle around a point, radius given in kilometers."""

    latitude: float
    longitude: float
    radius_km: float

    def __post_init__(self) -> None:
        if not -90 <= self.latitude <= 90:
            raise ValidationError("Latitude must be between -90 and 90", path="latitude")
        if not -180 <= self.longitude <= 180:
            raise ValidationError("Longitude must be between -180 and 180", path="longitude")
        if self.radius_km <= 0:
            raise ValidationError("Radius must be greater than 0", path="radius")

    @property
    def max_distance_m(self) -> float:
        return self.radius_km * 1000

    def bounding_box(self, latitude_column: Any, longitude_column: Any) -> ColumnElement[bool]:
        """Coarse SQL prefilter; ``contains`` gives the exact answer."""
        d_lat = math.degrees(self.max_distance_m / EARTH_RADIUS_M)
        cos_lat = max(math.cos(math.radians(self.latitude)), 1e-6)
        d_lon = min(math.degrees(self.max_distance_m / (EARTH_RADIUS_M * cos_lat)), 180.0)
        return and_(
            latitude_column.between(self.latitude - d_lat, self.latitude + d_lat),
            longitude_column.between(self.longitude - d_lon, self.longitude + d_lon),
        )

    def distance_m(self, latitude: float, longitude: float) -> float:
        return haversine_m(self.latitude, self.longitude, latitude, longitude)

    def contains(self, latitude: float | None, longitude: float | None) -> bool:
        if latitude is None or longitude is None:
            return False
        return self.distance_m(latitude, longitude) <= self.max_distance_m


@dataclass(frozen=True)
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @property
    def skip(self) -> int:
        return (self.current_page - 1) * self.items_per_page


def _check_page_args(page: int, limit: int) -> None:
    if page < 1:
        raise ValidationError("Page must be greater than 0", path="page")
    if limit < 1:
        raise ValidationError("Limit must be greater than 0", path="limit")


def build_pagination(page: int, limit: int, total_items: int) -> Pagination:
    """Pagination metadata. Pages past the last one are allowed and empty."""
    _check_page_args(page, limit)
    return Pagination(
        current_page=page,
        total_pages=math.ceil(total_items / limit),
        total_items=total_items,
        items_per_page=limit,
    )


async def paginate(db: AsyncSession, query: Select, page: int, limit: int) -> tuple[list[Any], Pagination]:
    """Run a count and a page query for ``query``."""
    _check_page_args(page, limit)

    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await db.execute(count_query)).scalar() or 0
    pagination = build_pagination(page, limit, total)

    result = await db.execute(query.offset(pagination.skip).limit(limit))
    return list(result.scalars().all()), pagination

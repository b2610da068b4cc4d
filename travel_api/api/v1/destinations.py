"""Destination endpoints."""

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AdminUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.destination import DestinationCreate, DestinationResponse, DestinationUpdate
from travel_api.services.destination_service import destination_service

router = APIRouter()


@router.get("/public", response_model=ApiResponse[list[DestinationResponse]])
async def list_destinations(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    country: str | None = None,
    city: str | None = None,
    min_price: Decimal | None = Query(None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(None, alias="maxPrice", ge=0),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
) -> ApiResponse:
    """List destinations with search and filters."""
    destinations, pagination = await destination_service.list_destinations(
        db,
        page,
        limit,
        search_term=search_term,
        country=country,
        city=city,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return paginated_response(DestinationResponse, destinations, pagination)


@router.get("/public/{destination_id}", response_model=ApiResponse[DestinationResponse])
async def get_destination(destination_id: UUID, db: DbSession) -> ApiResponse:
    destination = await destination_service.get_destination(db, destination_id)
    return success_response(DestinationResponse.model_validate(destination))


@router.post(
    "/admin",
    response_model=ApiResponse[DestinationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_destination(
    data: DestinationCreate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    destination = await destination_service.create_destination(db, data)
    return success_response(
        DestinationResponse.model_validate(destination), "Destination created successfully"
    )


@router.put("/admin/{destination_id}", response_model=ApiResponse[DestinationResponse])
async def update_destination(
    destination_id: UUID, data: DestinationUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    destination = await destination_service.update_destination(db, destination_id, data)
    return success_response(
        DestinationResponse.model_validate(destination), "Destination updated successfully"
    )


@router.delete("/admin/{destination_id}", response_model=ApiResponse[None])
async def delete_destination(destination_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    await destination_service.delete_destination(db, destination_id)
    return success_response(message="Destination deleted successfully")

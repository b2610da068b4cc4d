"""Activity endpoints."""

from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AdminUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.services.activity_service import activity_service

router = APIRouter()


@router.get("/public", response_model=ApiResponse[list[ActivityResponse]])
async def list_activities(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    category: str | None = None,
    destination_id: UUID | None = Query(None, alias="destinationId"),
    min_price: Decimal | None = Query(None, alias="minPrice", ge=0),
    max_price: Decimal | None = Query(None, alias="maxPrice", ge=0),
    min_duration: float | None = Query(None, alias="minDuration", ge=0),
    max_duration: float | None = Query(None, alias="maxDuration", ge=0),
    sort_by: str | None = Query(None, alias="sortBy"),
    sort_order: str | None = Query(None, alias="sortOrder"),
) -> ApiResponse:
    activities, pagination = await activity_service.list_activities(
        db,
        page,
        limit,
        search_term=search_term,
        category=category,
        destination_id=destination_id,
        min_price=min_price,
        max_price=max_price,
        min_duration=min_duration,
        max_duration=max_duration,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    return paginated_response(ActivityResponse, activities, pagination)


@router.get(
    "/public/destination/{destination_id}", response_model=ApiResponse[list[ActivityResponse]]
)
async def get_activities_by_destination(destination_id: UUID, db: DbSession) -> ApiResponse:
    """Active activities offered at a destination."""
    activities = await activity_service.get_activities_by_destination(db, destination_id)
    return success_response([ActivityResponse.model_validate(a) for a in activities])


@router.get("/public/{activity_id}", response_model=ApiResponse[ActivityResponse])
async def get_activity(activity_id: UUID, db: DbSession) -> ApiResponse:
    activity = await activity_service.get_activity(db, activity_id)
    return success_response(ActivityResponse.model_validate(activity))


@router.post(
    "/admin", response_model=ApiResponse[ActivityResponse], status_code=status.HTTP_201_CREATED
)
async def create_activity(data: ActivityCreate, admin: AdminUser, db: DbSession) -> ApiResponse:
    activity = await activity_service.create_activity(db, data)
    return success_response(ActivityResponse.model_validate(activity), "Activity created successfully")


@router.put("/admin/{activity_id}", response_model=ApiResponse[ActivityResponse])
async def update_activity(
    activity_id: UUID, data: ActivityUpdate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    activity = await activity_service.update_activity(db, activity_id, data)
    return success_response(ActivityResponse.model_validate(activity), "Activity updated successfully")


@router.delete("/admin/{activity_id}", response_model=ApiResponse[None])
async def delete_activity(activity_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    await activity_service.delete_activity(db, activity_id)
    return success_response(message="Activity deleted successfully")

"""FAQ endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AdminUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.common import ApiResponse, paginated_response, success_response
from travel_api.schemas.faq import FaqCategory, FaqCreate, FaqResponse, FaqUpdate
from travel_api.services.faq_service import faq_service

router = APIRouter()


@router.get("/public", response_model=ApiResponse[list[FaqResponse]])
async def list_faqs(
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    category: FaqCategory | None = None,
) -> ApiResponse:
    """List published FAQs."""
    faqs, pagination = await faq_service.list_faqs(
        db, page, limit, search_term=search_term, category=category
    )
    return paginated_response(FaqResponse, faqs, pagination)


@router.get("/public/popular", response_model=ApiResponse[list[FaqResponse]])
async def popular_faqs(db: DbSession, limit: int = Query(5, ge=1, le=50)) -> ApiResponse:
    faqs = await faq_service.popular_faqs(db, limit)
    return success_response([FaqResponse.model_validate(faq) for faq in faqs])


@router.get("/public/{faq_id}", response_model=ApiResponse[FaqResponse])
async def get_faq(faq_id: UUID, db: DbSession) -> ApiResponse:
    """Get an FAQ, counting the view."""
    faq = await faq_service.get_faq(db, faq_id, count_view=True)
    return success_response(FaqResponse.model_validate(faq))


@router.post("/public/{faq_id}/helpful", response_model=ApiResponse[FaqResponse])
async def mark_helpful(faq_id: UUID, db: DbSession) -> ApiResponse:
    faq = await faq_service.record_feedback(db, faq_id, helpful=True)
    return success_response(FaqResponse.model_validate(faq), "Thanks for your feedback")


@router.post("/public/{faq_id}/not-helpful", response_model=ApiResponse[FaqResponse])
async def mark_not_helpful(faq_id: UUID, db: DbSession) -> ApiResponse:
    faq = await faq_service.record_feedback(db, faq_id, helpful=False)
    return success_response(FaqResponse.model_validate(faq), "Thanks for your feedback")


@router.get("/admin", response_model=ApiResponse[list[FaqResponse]])
async def admin_list_faqs(
    admin: AdminUser,
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    search_term: str | None = Query(None, alias="searchTerm"),
    category: FaqCategory | None = None,
) -> ApiResponse:
    """List all FAQs including unpublished ones."""
    faqs, pagination = await faq_service.list_faqs(
        db, page, limit, search_term=search_term, category=category, published_only=False
    )
    return paginated_response(FaqResponse, faqs, pagination)


@router.post("/admin", response_model=ApiResponse[FaqResponse], status_code=status.HTTP_201_CREATED)
async def create_faq(data: FaqCreate, admin: AdminUser, db: DbSession) -> ApiResponse:
    faq = await faq_service.create_faq(db, data)
    return success_response(FaqResponse.model_validate(faq), "FAQ created successfully")


@router.put("/admin/{faq_id}", response_model=ApiResponse[FaqResponse])
async def update_faq(faq_id: UUID, data: FaqUpdate, admin: AdminUser, db: DbSession) -> ApiResponse:
    faq = await faq_service.update_faq(db, faq_id, data)
    return success_response(FaqResponse.model_validate(faq), "FAQ updated successfully")


@router.delete("/admin/{faq_id}", response_model=ApiResponse[None])
async def delete_faq(faq_id: UUID, admin: AdminUser, db: DbSession) -> ApiResponse:
    await faq_service.delete_faq(db, faq_id)
    return success_response(message="FAQ deleted successfully")

"""FAQ service."""

import logging
from uuid import UUID

from sqlalchemy import String, and_, cast, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_api.core.exceptions import DuplicateError, NotFoundError, handle_service_errors
from travel_api.domain.search import Pagination, paginate, text_search
from travel_api.models.faq import Faq
from travel_api.schemas.faq import FaqCreate, FaqUpdate

logger = logging.getLogger(__name__)


class FaqService:
    """Service for FAQ management and feedback counters."""

    @handle_service_errors("Failed to fetch FAQs")
    async def list_faqs(
        self,
        db: AsyncSession,
        page: int,
        limit: int,
        search_term: str | None = None,
        category: str | None = None,
        published_only: bool = True,
    ) -> tuple[list[Faq], Pagination]:
        filters = []
        if published_only:
            filters.append(Faq.is_published.is_(True))
        if category:
            filters.append(Faq.category == category)
        search = text_search(search_term, Faq.question, Faq.answer, cast(Faq.tags, String))
        if search is not None:
            filters.append(search)

        query = select(Faq)
        if filters:
            query = query.where(and_(*filters))
        query = query.order_by(Faq.order.asc(), Faq.created_at.desc())

        return await paginate(db, query, page, limit)

    @handle_service_errors("Failed to fetch popular FAQs")
    async def popular_faqs(self, db: AsyncSession, limit: int = 5) -> list[Faq]:
        result = await db.execute(
            select(Faq)
            .where(Faq.is_published.is_(True))
            .order_by(Faq.view_count.desc(), Faq.helpful_count.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    @handle_service_errors("Failed to fetch FAQ")
    async def get_faq(self, db: AsyncSession, faq_id: UUID, count_view: bool = False) -> Faq:
        faq = await db.get(Faq, faq_id)
        if not faq:
            raise NotFoundError("FAQ", str(faq_id))
        if count_view:
            faq.view_count += 1
            await db.flush()
        return faq

    @handle_service_errors("Failed to create FAQ")
    async def create_faq(self, db: AsyncSession, data: FaqCreate) -> Faq:
        await self._ensure_unique_question(db, data.question)

        faq = Faq(**data.to_column_values())
        db.add(faq)
        await db.flush()

        logger.info(f"FAQ created: {faq.id}")
        return faq

    @handle_service_errors("Failed to update FAQ")
    async def update_faq(self, db: AsyncSession, faq_id: UUID, data: FaqUpdate) -> Faq:
        faq = await self.get_faq(db, faq_id)

        values = data.to_column_values(exclude_unset=True, exclude_none=True)
        if "question" in values and values["question"] != faq.question:
            await self._ensure_unique_question(db, values["question"])

        for field, value in values.items():
            setattr(faq, field, value)
        await db.flush()
        return faq

    @handle_service_errors("Failed to delete FAQ")
    async def delete_faq(self, db: AsyncSession, faq_id: UUID) -> None:
        faq = await self.get_faq(db, faq_id)
        await db.delete(faq)
        await db.flush()

    @handle_service_errors("Failed to record FAQ feedback")
    async def record_feedback(self, db: AsyncSession, faq_id: UUID, helpful: bool) -> Faq:
        faq = await self.get_faq(db, faq_id)
        if helpful:
            faq.helpful_count += 1
        else:
            faq.not_helpful_count += 1
        await db.flush()
        return faq

    async def _ensure_unique_question(self, db: AsyncSession, question: str) -> None:
        result = await db.execute(select(Faq.id).where(Faq.question == question))
        if result.first():
            raise DuplicateError("FAQ", "question")


faq_service = FaqService()

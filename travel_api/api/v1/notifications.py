"""Notification endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from travel_api.api.deps import AdminUser, AuthUser, DbSession, LimitQuery, PageQuery
from travel_api.config import settings
from travel_api.schemas.common import ApiResponse, PaginationMeta, success_response
from travel_api.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationList,
    NotificationResponse,
    UnreadCountResponse,
)
from travel_api.services.notification_service import notification_service

router = APIRouter()


@router.get("/", response_model=ApiResponse[NotificationList])
async def list_notifications(
    current_user: AuthUser,
    db: DbSession,
    page: PageQuery = 1,
    limit: LimitQuery = settings.default_page_size,
    unread_only: bool = Query(False, alias="unreadOnly"),
) -> ApiResponse:
    """List notifications for the current user, newest first."""
    notifications, pagination, unread = await notification_service.list_notifications(
        db, current_user.id, page, limit, unread_only
    )
    return ApiResponse(
        data=NotificationList(
            notifications=[NotificationResponse.model_validate(n) for n in notifications],
            unread_count=unread,
        ),
        pagination=PaginationMeta.model_validate(pagination),
    )


@router.get("/unread-count", response_model=ApiResponse[UnreadCountResponse])
async def get_unread_count(current_user: AuthUser, db: DbSession) -> ApiResponse:
    count = await notification_service.unread_count(db, current_user.id)
    return success_response(UnreadCountResponse(unread_count=count))


@router.put("/read-all", response_model=ApiResponse[MarkAllReadResponse])
async def mark_all_as_read(current_user: AuthUser, db: DbSession) -> ApiResponse:
    modified = await notification_service.mark_all_as_read(db, current_user.id)
    return success_response(MarkAllReadResponse(modified_count=modified), "All notifications marked as read")


@router.put("/{notification_id}/read", response_model=ApiResponse[NotificationResponse])
async def mark_as_read(notification_id: UUID, current_user: AuthUser, db: DbSession) -> ApiResponse:
    notification = await notification_service.mark_as_read(db, notification_id, current_user.id)
    return success_response(NotificationResponse.model_validate(notification))


@router.delete("/{notification_id}", response_model=ApiResponse[None])
async def delete_notification(
    notification_id: UUID, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    await notification_service.delete_notification(db, notification_id, current_user.id)
    return success_response(message="Notification deleted successfully")


@router.post(
    "/admin",
    response_model=ApiResponse[NotificationResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_notification(
    data: NotificationCreate, admin: AdminUser, db: DbSession
) -> ApiResponse:
    """Send a notification to a user."""
    notification = await notification_service.create_notification(db, data)
    return success_response(NotificationResponse.model_validate(notification), "Notification created")

"""Favorite endpoints."""

from uuid import UUID

from fastapi import APIRouter, Query

from travel_api.api.deps import AuthUser, DbSession
from travel_api.schemas.activity import ActivityResponse
from travel_api.schemas.common import ApiResponse, success_response
from travel_api.schemas.destination import DestinationResponse
from travel_api.schemas.favorite import FavoriteItemType, FavoritesGrouped, FavoriteStatus
from travel_api.schemas.hotel import HotelResponse
from travel_api.schemas.vehicle import VehicleResponse
from travel_api.services.favorite_service import favorite_service

router = APIRouter()


@router.get("/", response_model=ApiResponse[FavoritesGrouped])
async def list_favorites(
    current_user: AuthUser,
    db: DbSession,
    item_type: FavoriteItemType | None = Query(None, alias="type"),
) -> ApiResponse:
    """The user's favorites grouped by item type."""
    grouped = await favorite_service.list_favorites(db, current_user.id, item_type)
    return success_response(
        FavoritesGrouped(
            hotels=[HotelResponse.model_validate(h) for h in grouped["hotels"]],
            vehicles=[VehicleResponse.model_validate(v) for v in grouped["vehicles"]],
            destinations=[DestinationResponse.model_validate(d) for d in grouped["destinations"]],
            activities=[ActivityResponse.model_validate(a) for a in grouped["activities"]],
        )
    )


@router.get("/check/{item_type}/{item_id}", response_model=ApiResponse[FavoriteStatus])
async def check_favorite(
    item_type: FavoriteItemType, item_id: UUID, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    is_favorite = await favorite_service.is_favorite(db, current_user.id, item_type, item_id)
    return success_response(FavoriteStatus(is_favorite=is_favorite))


@router.post("/{item_type}/{item_id}", response_model=ApiResponse[FavoriteStatus])
async def toggle_favorite(
    item_type: FavoriteItemType, item_id: UUID, current_user: AuthUser, db: DbSession
) -> ApiResponse:
    """Add the item to favorites, or remove it if it is already there."""
    is_favorite = await favorite_service.toggle_favorite(db, current_user.id, item_type, item_id)
    message = "Added to favorites" if is_favorite else "Removed from favorites"
    return success_response(FavoriteStatus(is_favorite=is_favorite), message)

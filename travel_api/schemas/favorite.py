"""Favorite schemas."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from travel_api.schemas.activity import ActivityResponse
from travel_api.schemas.common import CamelModel
from travel_api.schemas.destination import DestinationResponse
from travel_api.schemas.hotel import HotelResponse
from travel_api.schemas.vehicle import VehicleResponse

FavoriteItemType = Literal["hotel", "vehicle", "destination", "activity"]


class FavoriteStatus(CamelModel):
    is_favorite: bool


class FavoriteResponse(CamelModel):
    id: UUID
    item_id: UUID
    item_type: str
    created_at: datetime


class FavoritesGrouped(CamelModel):
    hotels: list[HotelResponse] = []
    vehicles: list[VehicleResponse] = []
    destinations: list[DestinationResponse] = []
    activities: list[ActivityResponse] = []

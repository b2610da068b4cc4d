"""Pydantic schemas for API validation."""

from travel_api.schemas.activity import ActivityCreate, ActivityResponse, ActivityUpdate
from travel_api.schemas.booking import BookingCancelRequest, BookingResponse, BookingUpdate
from travel_api.schemas.common import ApiResponse, ErrorResponse, PaginationMeta
from travel_api.schemas.destination import (
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
)
from travel_api.schemas.faq import FaqCreate, FaqResponse, FaqUpdate
from travel_api.schemas.favorite import FavoriteResponse, FavoritesGrouped, FavoriteStatus
from travel_api.schemas.hotel import (
    HotelBookingCreate,
    HotelCreate,
    HotelResponse,
    HotelUpdate,
    RoomCreate,
    RoomResponse,
    RoomUpdate,
)
from travel_api.schemas.notification import NotificationCreate, NotificationResponse
from travel_api.schemas.trip import TripCreate, TripResponse, TripUpdate
from travel_api.schemas.vehicle import (
    VehicleBookingCreate,
    VehicleCreate,
    VehicleResponse,
    VehicleUpdate,
)

__all__ = [
    # Envelopes
    "ApiResponse",
    "ErrorResponse",
    "PaginationMeta",
    # Catalog
    "DestinationCreate",
    "DestinationUpdate",
    "DestinationResponse",
    "HotelCreate",
    "HotelUpdate",
    "HotelResponse",
    "RoomCreate",
    "RoomUpdate",
    "RoomResponse",
    "VehicleCreate",
    "VehicleUpdate",
    "VehicleResponse",
    "ActivityCreate",
    "ActivityUpdate",
    "ActivityResponse",
    # Bookings
    "HotelBookingCreate",
    "VehicleBookingCreate",
    "BookingUpdate",
    "BookingCancelRequest",
    "BookingResponse",
    # User content
    "TripCreate",
    "TripUpdate",
    "TripResponse",
    "FavoriteStatus",
    "FavoriteResponse",
    "FavoritesGrouped",
    "NotificationCreate",
    "NotificationResponse",
    # Support
    "FaqCreate",
    "FaqUpdate",
    "FaqResponse",
]

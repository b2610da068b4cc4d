"""Database models."""

from travel_api.models.activity import Activity
from travel_api.models.booking import ACTIVE_BOOKING_STATUSES, Booking
from travel_api.models.destination import Destination
from travel_api.models.faq import Faq
from travel_api.models.favorite import Favorite
from travel_api.models.hotel import Hotel, Room
from travel_api.models.notification import Notification
from travel_api.models.trip import Trip
from travel_api.models.vehicle import Vehicle

__all__ = [
    # Catalog
    "Destination",
    "Activity",
    "Hotel",
    "Room",
    "Vehicle",
    # Bookings
    "Booking",
    "ACTIVE_BOOKING_STATUSES",
    # User content
    "Trip",
    "Favorite",
    "Notification",
    # Support
    "Faq",
]

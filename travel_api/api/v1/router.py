"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from travel_api.api.v1 import (
    activities,
    bookings,
    destinations,
    faqs,
    favorites,
    hotels,
    notifications,
    rooms,
    trips,
    vehicles,
)

api_router = APIRouter()

# Catalog
api_router.include_router(destinations.router, prefix="/destinations", tags=["Destinations"])
api_router.include_router(hotels.router, prefix="/hotels", tags=["Hotels"])
api_router.include_router(rooms.router, prefix="/rooms", tags=["Rooms"])
api_router.include_router(vehicles.router, prefix="/vehicles", tags=["Vehicles"])
api_router.include_router(activities.router, prefix="/activities", tags=["Activities"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Trip planning
api_router.include_router(trips.router, prefix="/trips", tags=["Trips"])

# User
api_router.include_router(favorites.router, prefix="/favorites", tags=["Favorites"])
api_router.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])

# Help
api_router.include_router(faqs.router, prefix="/faqs", tags=["FAQs"])

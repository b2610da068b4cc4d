"""Shared fixtures: in-memory database, API client and auth headers."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import uuid
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from travel_api import models  # noqa: F401
from travel_api.core.security import create_user_token
from travel_api.database import Base, get_db
from travel_api.main import app

API = "/api/v1"


@pytest.fixture
async def session_maker() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
async def client(session_maker) -> AsyncGenerator[AsyncClient, None]:
    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def user_headers(user_id) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_token(str(user_id))}"}


@pytest.fixture
def other_user_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {create_user_token(str(uuid.uuid4()))}"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = create_user_token(str(uuid.uuid4()), role="admin", email="admin@example.com")
    return {"Authorization": f"Bearer {token}"}


def hotel_payload(**overrides) -> dict:
    payload = {
        "name": "Seaside Resort",
        "description": "A quiet resort by the sea",
        "address": "1 Beach Road",
        "city": "Nice",
        "country": "France",
        "latitude": 43.695,
        "longitude": 7.265,
        "contactInfo": {"phone": "+33 4 00 00 00 00", "email": "info@seaside.example"},
        "starRating": 4,
        "amenities": ["pool", "wifi"],
        "pricePerNight": 100,
        "seasonalPrices": [],
    }
    payload.update(overrides)
    return payload


def room_payload(hotel_id: str, **overrides) -> dict:
    payload = {
        "hotelId": hotel_id,
        "roomNumber": "101",
        "floor": 1,
        "roomType": "Double",
        "pricePerNight": 100,
        "capacity": 2,
    }
    payload.update(overrides)
    return payload


def vehicle_payload(**overrides) -> dict:
    payload = {
        "vehicleType": "Car",
        "make": "Toyota",
        "model": "Corolla",
        "year": 2022,
        "licensePlate": "ab-123-cd",
        "capacity": 5,
        "pricePerDay": 50,
        "city": "Nice",
        "country": "France",
        "latitude": 43.7,
        "longitude": 7.26,
    }
    payload.update(overrides)
    return payload


def destination_payload(**overrides) -> dict:
    payload = {
        "name": "Paris",
        "description": "City of light and museums",
        "country": "France",
        "city": "Paris",
        "price": 1200,
    }
    payload.update(overrides)
    return payload

"""Shared fixtures: in-memory SQLite database, API client, sample records."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_CONTACT_INFO", "false")

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from backend.db.database import Base, get_db
from backend.db.models import Car, ContactInfo, FuelType, Transmission
from backend.main import app


CAR_PAYLOAD = {
    "name": "Toyota Avanza 2022",
    "brand": "Toyota",
    "model": "Avanza",
    "year": 2022,
    "image_url": "https://example.com/avanza.jpg",
    "rental_price_per_day": 350000,
    "transmission": "manual",
    "fuel_type": "gasoline",
    "seats": 7,
    "description": "MPV keluarga irit",
    "features": '["AC", "Audio"]',
    "is_available": True,
}


def make_car(**overrides) -> Car:
    """A transient Car, never attached to a session."""
    values = {
        "id": 1,
        "name": "Toyota Avanza 2022",
        "brand": "Toyota",
        "model": "Avanza",
        "year": 2022,
        "image_url": "https://example.com/avanza.jpg",
        "rental_price_per_day": Decimal("350000.00"),
        "transmission": Transmission.MANUAL,
        "fuel_type": FuelType.GASOLINE,
        "seats": 7,
        "description": None,
        "features": None,
        "is_available": True,
    }
    values.update(overrides)
    return Car(**values)


def make_contact(**overrides) -> ContactInfo:
    values = {
        "id": 1,
        "company_name": "Rental Mobil Jaya",
        "phone": "021-555-0101",
        "email": "halo@rentaljaya.id",
        "address": "Jl. Merdeka No. 10, Bandung",
        "whatsapp_number": "0812-3456-7890",
        "facebook_url": None,
        "instagram_url": None,
        "business_hours": "Senin - Sabtu, 08:00 - 17:00",
    }
    values.update(overrides)
    return ContactInfo(**values)


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def car_payload() -> dict:
    return dict(CAR_PAYLOAD)

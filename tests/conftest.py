"""Test configuration and fixtures"""

import os
import tempfile

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("UPLOADS_PATH", tempfile.mkdtemp(prefix="tablo-uploads-"))
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "true"
os.environ["SMTP_HOST"] = ""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from uuid import uuid4

from app.main import app
from app.database import Base, get_db
from app.models.restaurant import Restaurant
from app.models.user import User, UserRole
from app.models.menu import MenuItem
from app.api.auth import get_password_hash


# Test database URL (use in-memory SQLite for tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

OWNER_EMAIL = "owner@example.com"
OWNER_PASSWORD = "ownerpass123"
OTHER_OWNER_EMAIL = "other@example.com"
OTHER_OWNER_PASSWORD = "otherpass123"
ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "adminpass123"


def make_client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def login(client: AsyncClient, email: str, password: str) -> dict:
    """Log in through the API so the session cookie lands in the client"""
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
async def test_db():
    """Create test database"""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with session_factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def override_db(test_db):
    """Route every request through the test session"""
    async def override_get_db():
        yield test_db

    app.dependency_overrides[get_db] = override_get_db
    yield test_db
    app.dependency_overrides.clear()


async def _create_owner(db, email: str, password: str, restaurant_name: str):
    owner = User(
        id=uuid4(),
        name=f"{restaurant_name} Owner",
        email=email,
        hashed_password=get_password_hash(password),
        role=UserRole.OWNER,
        is_active=True,
    )
    db.add(owner)
    await db.flush()

    restaurant = Restaurant(
        id=uuid4(),
        owner_id=owner.id,
        name=restaurant_name,
        plan="Basic",
        address="123 Test St",
        opening_hours="09:00",
        closing_hours="21:00",
    )
    db.add(restaurant)
    await db.commit()

    return owner, restaurant


@pytest.fixture
async def test_owner(test_db):
    """Create an owner with a restaurant"""
    return await _create_owner(test_db, OWNER_EMAIL, OWNER_PASSWORD, "Test Restaurant")


@pytest.fixture
async def test_restaurant(test_owner):
    return test_owner[1]


@pytest.fixture
async def other_owner(test_db):
    """A second, unrelated owner and restaurant"""
    return await _create_owner(test_db, OTHER_OWNER_EMAIL, OTHER_OWNER_PASSWORD, "Other Restaurant")


@pytest.fixture
async def other_restaurant(other_owner):
    return other_owner[1]


@pytest.fixture
async def test_admin_user(test_db):
    """Create a platform admin"""
    user = User(
        id=uuid4(),
        name="Admin User",
        email=ADMIN_EMAIL,
        hashed_password=get_password_hash(ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        is_active=True,
    )
    test_db.add(user)
    await test_db.commit()

    return user


@pytest.fixture
async def test_menu_items(test_db, test_restaurant):
    """Create test menu items"""
    items = [
        MenuItem(
            restaurant_id=test_restaurant.id,
            name="Margherita Pizza",
            description="Classic tomato and mozzarella",
            price_cents=1499,
            category="Pizza",
            dish_tags=["vegetarian"],
            popularity="High",
            rating=4.8,
            is_available=True,
        ),
        MenuItem(
            restaurant_id=test_restaurant.id,
            name="Diavola Pizza",
            description="Spicy salami and mozzarella",
            price_cents=1699,
            category="Pizza",
            dish_tags=["spicy"],
            popularity="Medium",
            rating=4.1,
            is_available=True,
        ),
        MenuItem(
            restaurant_id=test_restaurant.id,
            name="Caesar Salad",
            description="Romaine with caesar dressing",
            price_cents=1099,
            category="Salads",
            dish_tags=[],
            popularity="Low",
            rating=3.5,
            is_available=False,
        ),
    ]

    for item in items:
        test_db.add(item)

    await test_db.commit()
    return items


@pytest.fixture
async def client(override_db):
    """Anonymous test client"""
    async with make_client() as client:
        yield client


@pytest.fixture
async def owner_client(override_db, test_owner):
    """Client logged in as the restaurant owner"""
    async with make_client() as client:
        await login(client, OWNER_EMAIL, OWNER_PASSWORD)
        yield client


@pytest.fixture
async def other_owner_client(override_db, other_owner):
    """Client logged in as the owner of another restaurant"""
    async with make_client() as client:
        await login(client, OTHER_OWNER_EMAIL, OTHER_OWNER_PASSWORD)
        yield client


@pytest.fixture
async def admin_client(override_db, test_admin_user):
    """Client logged in as a platform admin"""
    async with make_client() as client:
        await login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
        yield client

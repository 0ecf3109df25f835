import os

# Cheap hashes and a throwaway database for the whole test session
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")

import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient

from homebid.main import app
from homebid.core.config import settings
from homebid.core.database import DatabaseManager
from homebid.core.security.pass_hash import get_password_hash
from homebid.models.property import Property
from homebid.models.user import User
from homebid.services.auth_service import AuthService
from homebid.services.bid_ledger import BidLedger


@pytest.fixture(scope="function", autouse=True)
async def initialize_tests():
    """Fresh in-memory database for every test"""
    await DatabaseManager.init(db_url="sqlite://:memory:")
    yield
    app.dependency_overrides.clear()
    await DatabaseManager.close()


@pytest.fixture
async def client() -> AsyncGenerator:
    """Anonymous async HTTP client"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def ledger() -> BidLedger:
    return BidLedger()


@pytest.fixture
def make_user():
    async def _make(email: str = "test@example.com", password: str = "testpass123", **overrides) -> User:
        data = {
            "email": email,
            "first_name": "Test",
            "last_name": "User",
            "password_hash": get_password_hash(password),
        }
        data.update(overrides)
        return await User.create(**data)
    return _make


@pytest.fixture
async def test_user(make_user) -> User:
    return await make_user()


@pytest.fixture
async def other_user(make_user) -> User:
    return await make_user(email="other@example.com", first_name="Other")


@pytest.fixture
def make_property():
    async def _make(**overrides) -> Property:
        data = {
            "title": "Modern Lakefront Villa",
            "address": "123 Lake View Dr",
            "city": "Seattle",
            "state": "WA",
            "zip_code": "98101",
            "description": "Lakefront villa with a private dock.",
            "asking_price": Decimal("500000.00"),
            "beds": 4,
            "baths": Decimal("3.0"),
            "square_feet": 2800,
            "garage_spaces": 2,
            "featured_image": "https://example.com/villa.jpg",
            "images": ["https://example.com/villa.jpg"],
            "features": ["Private Dock"],
            "end_date": datetime.now(timezone.utc) + timedelta(days=14),
        }
        data.update(overrides)
        return await Property.create(**data)
    return _make


@pytest.fixture
async def test_property(make_property) -> Property:
    return await make_property()


@pytest.fixture
async def login_client():
    """Builds async clients carrying a live session for the given user"""
    clients = []

    async def _login(user: User) -> AsyncClient:
        session = await AuthService.create_session(user)
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        ac.cookies.set(settings.session_cookie_name, session.token)
        clients.append(ac)
        return ac

    yield _login

    for ac in clients:
        await ac.aclose()


@pytest.fixture
async def user_client(login_client, test_user) -> AsyncClient:
    return await login_client(test_user)

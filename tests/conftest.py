"""
Pytest fixtures.

Every test gets a fresh in-memory SQLite database with the schema applied.
"""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from milkcoop.contracts import CollectionCenterPayload, RegisterPayload
from milkcoop.db import Database
from milkcoop.main import create_app
from milkcoop.models import CollectionCenter, User
from milkcoop.schema import ensure_schema
from milkcoop.service import AuthService, CollectionCenterService
from milkcoop.settings import Settings

TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def settings():
    """Settings for tests (cheap bcrypt, in-memory database)."""
    return Settings(DATABASE_URL="sqlite://", BCRYPT_ROUNDS=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def database(settings):
    """Fresh in-memory database with all tables."""
    database = Database(settings.DATABASE_URL)
    ensure_schema(database.engine)
    yield database
    database.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture
def client(settings, database):
    """API client bound to the test database."""
    app = create_app(settings=settings, database=database)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(session):
    """Register a farmer through the auth service and return the row."""

    def _make_user(username="wanjiku", fullname="Wanjiku Kamau", phone="0712000001", password="secret"):
        AuthService(session, bcrypt_rounds=TEST_BCRYPT_ROUNDS).register(
            RegisterPayload(
                fullname=fullname,
                phone=phone,
                username=username,
                password=password,
                passwordConfirmation=password,
            )
        )
        return session.query(User).filter(User.username == username).one()

    return _make_user


@pytest.fixture
def make_center(session):
    """Create a collection center and return the row."""

    def _make_center(code="C1", name="Kiambu", price=Decimal("10")):
        created = CollectionCenterService(session).create(
            CollectionCenterPayload(
                name=name,
                code=code,
                manager="Otieno",
                phone="0722000000",
                price=price,
                location="Kiambu Road",
            )
        )
        return session.get(CollectionCenter, created["id"])

    return _make_center

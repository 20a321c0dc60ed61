"""Request-scoped dependencies: the session and the services built on it."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from milkcoop.db import Database
from milkcoop.service import (
    AuthService,
    CollectionCenterService,
    CollectionService,
    PaymentService,
    StatsService,
    UserService,
)
from milkcoop.settings import Settings


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(database: Database = Depends(get_database)) -> Iterator[Session]:
    """One session per request, closed when the response is done."""
    yield from database.get_db()


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthService:
    return AuthService(db, bcrypt_rounds=settings.BCRYPT_ROUNDS)


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


def get_center_service(db: Session = Depends(get_db)) -> CollectionCenterService:
    return CollectionCenterService(db)


def get_collection_service(db: Session = Depends(get_db)) -> CollectionService:
    return CollectionService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(db)

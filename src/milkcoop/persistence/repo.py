"""
Repositories for the cooperative tables.

Each repository wraps one Session and issues plain parameterized queries.
They never commit on their own; services decide when a unit of work ends.
"""

from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import func, or_
from sqlalchemy.orm import Session
from sqlalchemy.sql.dml import Update

from milkcoop.models import ROLE_USER, Collection, CollectionCenter, Payment, User


class UserRepository:
    """Repository for the ``register`` table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: UUID) -> User | None:
        return self.db.get(User, user_id)

    def exists(self, user_id: UUID) -> bool:
        return self.db.query(User.id).filter(User.id == user_id).first() is not None

    def username_taken(self, username: str) -> bool:
        return self.db.query(User.id).filter(User.username == username).first() is not None

    def find_by_login(self, identifier: str) -> User | None:
        """First user whose username or phone equals the identifier."""
        return (
            self.db.query(User)
            .filter(or_(User.username == identifier, User.phone == identifier))
            .first()
        )

    def create(
        self,
        fullname: str,
        phone: str,
        username: str,
        password_hash: str,
        role: str = ROLE_USER,
    ) -> User:
        user = User(
            fullname=fullname,
            phone=phone,
            username=username,
            password=password_hash,
            role=role,
        )
        self.db.add(user)
        self.db.flush()
        return user

    def set_role(self, user_id: UUID, role: str) -> None:
        self.db.query(User).filter(User.id == user_id).update(
            {User.role: role}, synchronize_session=False
        )

    def list_all(self) -> list[User]:
        return self.db.query(User).order_by(User.created_at).all()

    def summaries(self) -> list[Any]:
        """
        Per-farmer totals: liters delivered and the highest center price seen.

        Farmers with no deliveries come back with zeros.
        """
        return (
            self.db.query(
                User.id,
                User.fullname,
                func.coalesce(func.sum(Collection.quantity), 0).label("total_quantity"),
                func.coalesce(func.max(CollectionCenter.price), 0).label("unit_price"),
            )
            .outerjoin(Collection, Collection.user_id == User.id)
            .outerjoin(CollectionCenter, CollectionCenter.id == Collection.collection_center_id)
            .filter(User.role == ROLE_USER)
            .group_by(User.id, User.fullname)
            .order_by(User.fullname)
            .all()
        )


class CollectionCenterRepository:
    """Repository for the ``collection_center`` table."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, center_id: UUID, refresh: bool = False) -> CollectionCenter | None:
        return self.db.get(CollectionCenter, center_id, populate_existing=refresh)

    def exists(self, center_id: UUID) -> bool:
        return (
            self.db.query(CollectionCenter.id).filter(CollectionCenter.id == center_id).first()
            is not None
        )

    def get_by_code(self, code: str) -> CollectionCenter | None:
        return self.db.query(CollectionCenter).filter(CollectionCenter.code == code).first()

    def create(
        self,
        name: str,
        code: str,
        manager: str,
        phone: str,
        price: Decimal,
        location: str,
    ) -> CollectionCenter:
        center = CollectionCenter(
            name=name,
            code=code,
            manager=manager,
            phone=phone,
            price=price,
            location=location,
        )
        self.db.add(center)
        self.db.flush()
        return center

    def execute_update(self, stmt: Update) -> None:
        self.db.execute(stmt.execution_options(synchronize_session=False))

    def delete(self, center_id: UUID) -> bool:
        """Delete a center; its collections go with it (ON DELETE CASCADE)."""
        deleted = (
            self.db.query(CollectionCenter)
            .filter(CollectionCenter.id == center_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0

    def list_all(self) -> list[CollectionCenter]:
        return self.db.query(CollectionCenter).order_by(CollectionCenter.created_at.desc()).all()


class CollectionRepository:
    """Repository for the ``created_collection`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        collection_center_id: UUID,
        user_id: UUID,
        quantity: Decimal,
        quality: str | None = None,
    ) -> Collection:
        collection = Collection(
            collection_center_id=collection_center_id,
            user_id=user_id,
            quantity=quantity,
            quality=quality,
        )
        self.db.add(collection)
        self.db.flush()
        return collection

    def recent(self, limit: int) -> list[Any]:
        """Newest collections with the farmer's name and the center's name."""
        return (
            self.db.query(
                Collection,
                User.fullname.label("user_fullname"),
                CollectionCenter.name.label("center_name"),
            )
            .join(User, Collection.user_id == User.id)
            .join(CollectionCenter, Collection.collection_center_id == CollectionCenter.id)
            .order_by(Collection.created_at.desc())
            .limit(limit)
            .all()
        )


class PaymentRepository:
    """Repository for the ``payments`` table."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        farmer_id: UUID,
        quantity: Decimal,
        amount: Decimal,
        payment_method: str,
    ) -> Payment:
        payment = Payment(
            farmer_id=farmer_id,
            quantity=quantity,
            amount=amount,
            payment_method=payment_method,
        )
        self.db.add(payment)
        self.db.flush()
        return payment

    def list_all(self) -> list[Payment]:
        return self.db.query(Payment).order_by(Payment.created_at.desc()).all()

    def delete(self, payment_id: UUID) -> bool:
        deleted = (
            self.db.query(Payment)
            .filter(Payment.id == payment_id)
            .delete(synchronize_session=False)
        )
        return deleted > 0

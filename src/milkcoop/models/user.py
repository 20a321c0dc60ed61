"""User model.

Farmers and administrators share the ``register`` table; ``role`` tells them
apart.
"""

from sqlalchemy import Column, String

from milkcoop.db import Base
from milkcoop.models.base import BaseModelMixin

ROLE_USER = "user"
ROLE_ADMIN = "admin"


class User(Base, BaseModelMixin):
    __tablename__ = "register"

    fullname = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    username = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt digest
    role = Column(String(20), nullable=False, default=ROLE_USER, server_default=ROLE_USER)

    def to_public_dict(self) -> dict:
        """Everything except the password digest."""
        return {
            "id": self.id,
            "fullname": self.fullname,
            "phone": self.phone,
            "username": self.username,
            "role": self.role,
            "created_at": self.created_at,
        }

from sqlalchemy import Column, Numeric, String

from milkcoop.db import Base
from milkcoop.models.base import BaseModelMixin


class CollectionCenter(Base, BaseModelMixin):
    """A center buying milk from farmers at a fixed unit price."""

    __tablename__ = "collection_center"

    name = Column(String(100), nullable=False)
    code = Column(String(50), unique=True, nullable=False)
    manager = Column(String(100), nullable=False)
    phone = Column(String(20), nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    location = Column(String(255), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "manager": self.manager,
            "phone": self.phone,
            "price": self.price,
            "location": self.location,
            "created_at": self.created_at,
        }

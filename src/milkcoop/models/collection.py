from sqlalchemy import Column, ForeignKey, Numeric, String, Uuid

from milkcoop.db import Base
from milkcoop.models.base import BaseModelMixin


class Collection(Base, BaseModelMixin):
    """One delivery of milk by a farmer to a collection center."""

    __tablename__ = "created_collection"

    collection_center_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("collection_center.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Uuid(as_uuid=True), ForeignKey("register.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity = Column(Numeric(12, 2), nullable=False)  # liters
    quality = Column(String(50), nullable=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "collection_center_id": self.collection_center_id,
            "user_id": self.user_id,
            "quantity": self.quantity,
            "quality": self.quality,
            "created_at": self.created_at,
        }

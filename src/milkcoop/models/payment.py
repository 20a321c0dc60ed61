from sqlalchemy import Column, ForeignKey, Numeric, String, Uuid

from milkcoop.db import Base
from milkcoop.models.base import BaseModelMixin


class Payment(Base, BaseModelMixin):
    """Money paid out to a farmer."""

    __tablename__ = "payments"

    farmer_id = Column(
        Uuid(as_uuid=True), ForeignKey("register.id", ondelete="CASCADE"), nullable=False, index=True
    )
    quantity = Column(Numeric(12, 2), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    payment_method = Column(String(50), nullable=False)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "farmer_id": self.farmer_id,
            "quantity": self.quantity,
            "amount": self.amount,
            "payment_method": self.payment_method,
            "created_at": self.created_at,
        }

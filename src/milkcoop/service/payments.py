import logging

from sqlalchemy.orm import Session

from milkcoop.contracts.payloads import PaymentPayload
from milkcoop.exceptions import NotFoundError, ValidationError
from milkcoop.persistence.repo import PaymentRepository, UserRepository
from milkcoop.service.base import parse_uuid, storage_guard

logger = logging.getLogger(__name__)


class PaymentService:
    """Payment ledger: record, list and delete payouts to farmers."""

    def __init__(self, db: Session):
        self.db = db
        self.payments = PaymentRepository(db)
        self.users = UserRepository(db)

    def create(self, payload: PaymentPayload) -> dict:
        """
        Raises:
            ValidationError: farmer does not exist
        """
        farmer_id = parse_uuid(payload.farmer_id)

        with storage_guard(self.db, "Failed to create payment."):
            if farmer_id is None or not self.users.exists(farmer_id):
                raise ValidationError("Farmer not found.")

            payment = self.payments.create(
                farmer_id=farmer_id,
                quantity=payload.quantity,
                amount=payload.amount,
                payment_method=payload.payment_method,
            )
            self.db.commit()

        logger.info(
            "Payment created",
            extra={"payment_id": str(payment.id), "farmer_id": str(farmer_id)},
        )
        return payment.to_dict()

    def list_payments(self) -> list[dict]:
        with storage_guard(self.db, "Failed to retrieve payments."):
            return [payment.to_dict() for payment in self.payments.list_all()]

    def delete(self, payment_id: str) -> None:
        pid = parse_uuid(payment_id)
        with storage_guard(self.db, "Failed to delete payment."):
            if pid is None or not self.payments.delete(pid):
                raise NotFoundError("Payment not found.")
            self.db.commit()

        logger.info("Payment deleted", extra={"payment_id": str(pid)})

"""
Tests for the payment ledger.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from milkcoop.contracts import PaymentPayload
from milkcoop.exceptions import NotFoundError, ValidationError
from milkcoop.models import Payment, User
from milkcoop.service import PaymentService


def pay(farmer_id, amount="500"):
    return PaymentPayload(
        farmer_id=str(farmer_id),
        quantity=Decimal("50"),
        amount=Decimal(amount),
        payment_method="mpesa",
    )


class TestPaymentService:
    @pytest.fixture
    def service(self, session):
        return PaymentService(session)

    def test_create(self, service, make_user):
        farmer = make_user()
        payment = service.create(pay(farmer.id))
        assert payment["farmer_id"] == farmer.id
        assert payment["payment_method"] == "mpesa"

    def test_create_unknown_farmer(self, service):
        with pytest.raises(ValidationError) as exc:
            service.create(pay(uuid4()))
        assert exc.value.message == "Farmer not found."

    def test_list_newest_first(self, service, session, make_user):
        farmer = make_user()
        older = service.create(pay(farmer.id, "100"))
        service.create(pay(farmer.id, "200"))
        session.get(Payment, older["id"]).created_at = datetime.now() - timedelta(days=2)
        session.commit()

        amounts = [p["amount"] for p in service.list_payments()]
        assert amounts == [200, 100]

    def test_delete(self, service, session, make_user):
        farmer = make_user()
        payment = service.create(pay(farmer.id))

        service.delete(str(payment["id"]))
        assert session.query(Payment).count() == 0

    def test_delete_unknown(self, service):
        with pytest.raises(NotFoundError):
            service.delete(str(uuid4()))
        with pytest.raises(NotFoundError):
            service.delete("not-a-uuid")

    def test_payments_cascade_with_user(self, service, session, make_user):
        farmer = make_user()
        service.create(pay(farmer.id))

        session.query(User).filter(User.id == farmer.id).delete(synchronize_session=False)
        session.commit()
        assert session.query(Payment).count() == 0

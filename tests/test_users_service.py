"""
Tests for the user directory.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from milkcoop.contracts import CollectionPayload
from milkcoop.exceptions import NotFoundError
from milkcoop.models import User
from milkcoop.service import CollectionService, UserService


class TestUserService:
    @pytest.fixture
    def service(self, session):
        return UserService(session)

    def test_promote_to_admin(self, service, session, make_user):
        user = make_user()
        service.promote_to_admin(str(user.id))

        session.expire_all()
        assert session.get(User, user.id).role == "admin"

    def test_promote_is_idempotent(self, service, session, make_user):
        user = make_user()
        service.promote_to_admin(str(user.id))
        service.promote_to_admin(str(user.id))

        session.expire_all()
        assert session.get(User, user.id).role == "admin"

    def test_promote_unknown_user(self, service):
        with pytest.raises(NotFoundError):
            service.promote_to_admin(str(uuid4()))

    def test_promote_malformed_id_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.promote_to_admin("not-a-uuid")

    def test_list_users_hides_password(self, service, make_user):
        make_user(username="a", phone="01")
        make_user(username="b", phone="02")

        users = service.list_users()
        assert {u["username"] for u in users} == {"a", "b"}
        assert all("password" not in u for u in users)


class TestUserSummary:
    def test_user_without_collections_reports_zero(self, session, make_user):
        make_user(username="idle", fullname="Idle Farmer")

        rows = UserService(session).user_summary()
        assert rows == [
            {"id": rows[0]["id"], "fullname": "Idle Farmer", "total_quantity": 0.0, "unit_price": 0.0}
        ]

    def test_totals_and_max_price(self, session, make_user, make_center):
        farmer = make_user(username="busy", fullname="Busy Farmer")
        cheap = make_center(code="C1", price=Decimal("10"))
        dear = make_center(code="C2", price=Decimal("15"))

        ledger = CollectionService(session)
        for center, liters in ((cheap, "12"), (dear, "8.5"), (cheap, "4")):
            ledger.record(
                CollectionPayload(
                    collection_center_id=str(center.id),
                    user_id=str(farmer.id),
                    quantity=Decimal(liters),
                )
            )

        [row] = UserService(session).user_summary()
        assert row["fullname"] == "Busy Farmer"
        assert row["total_quantity"] == pytest.approx(24.5)
        assert row["unit_price"] == pytest.approx(15.0)

    def test_admins_are_excluded_and_sorted_by_name(self, session, make_user):
        zed = make_user(username="z", fullname="Zawadi", phone="01")
        make_user(username="a", fullname="Akinyi", phone="02")
        boss = make_user(username="boss", fullname="Boss", phone="03")
        UserService(session).promote_to_admin(str(boss.id))

        names = [row["fullname"] for row in UserService(session).user_summary()]
        assert names == ["Akinyi", zed.fullname]

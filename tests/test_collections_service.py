"""
Tests for the collection ledger and its recent feed.
"""

import locale
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

import pytest

from milkcoop.contracts import CollectionPayload
from milkcoop.exceptions import ValidationError
from milkcoop.models import Collection
from milkcoop.service import CollectionService
from milkcoop.service.collections import format_long_date, format_number


class TestFormatting:
    def test_format_number_drops_trailing_zeros(self):
        assert format_number(Decimal("12.00")) == "12"
        assert format_number(Decimal("12.50")) == "12.5"
        assert format_number(Decimal("120.00")) == "120"
        assert format_number(7.25) == "7.25"

    def test_format_long_date(self):
        assert format_long_date(datetime(2026, 3, 5, 14, 30)) == "March 5, 2026"

    def test_format_long_date_ignores_locale(self):
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            assert format_long_date(datetime(2026, 3, 5)) == "March 5, 2026"
        finally:
            locale.setlocale(locale.LC_TIME, previous)

    def test_format_long_date_year_bounds(self):
        assert format_long_date(datetime(2026, 1, 1)) == "January 1, 2026"
        assert format_long_date(datetime(2026, 12, 31)) == "December 31, 2026"


class TestRecord:
    @pytest.fixture
    def service(self, session):
        return CollectionService(session)

    def test_record_returns_row(self, service, make_user, make_center):
        farmer = make_user()
        center = make_center()

        row = service.record(
            CollectionPayload(
                collection_center_id=str(center.id),
                user_id=str(farmer.id),
                quantity=Decimal("12"),
                quality="Good",
            )
        )
        assert row["user_id"] == farmer.id
        assert row["collection_center_id"] == center.id
        assert row["quality"] == "Good"

    def test_quality_is_optional(self, service, make_user, make_center):
        farmer = make_user()
        center = make_center()
        row = service.record(
            CollectionPayload(
                collection_center_id=str(center.id), user_id=str(farmer.id), quantity=Decimal("3")
            )
        )
        assert row["quality"] is None

    def test_unknown_center_checked_first(self, service):
        """Both ids unknown: the center is reported."""
        with pytest.raises(ValidationError) as exc:
            service.record(
                CollectionPayload(
                    collection_center_id=str(uuid4()), user_id=str(uuid4()), quantity=Decimal("1")
                )
            )
        assert exc.value.message == "Collection center not found."

    def test_unknown_user(self, service, make_center):
        center = make_center()
        with pytest.raises(ValidationError) as exc:
            service.record(
                CollectionPayload(
                    collection_center_id=str(center.id), user_id="garbage", quantity=Decimal("1")
                )
            )
        assert exc.value.message == "User not found."


class TestRecent:
    @pytest.fixture
    def ledger(self, session, make_user, make_center):
        """Five collections, one per hour, newest last."""
        farmer = make_user(fullname="Wanjiku Kamau")
        center = make_center(name="Kiambu")
        base = datetime(2026, 10, 17, 6, 0)
        for i in range(5):
            session.add(
                Collection(
                    collection_center_id=center.id,
                    user_id=farmer.id,
                    quantity=Decimal(10 + i),
                    quality="good" if i % 2 == 0 else None,
                    created_at=base + timedelta(hours=i),
                )
            )
        session.commit()
        return CollectionService(session)

    def test_recent_limit_and_order(self, ledger):
        items = ledger.recent(3)
        assert [item["quantity"] for item in items] == ["14 L", "13 L", "12 L"]

    def test_recent_projection(self, ledger):
        first = ledger.recent(1)[0]
        assert first == {
            "quantity": "14 L",
            "user": "Wanjiku Kamau",
            "date_center": "October 17, 2026 • Center: Kiambu",
            "quality": "GOOD",
        }

    def test_missing_quality_is_null(self, ledger):
        second = ledger.recent(2)[1]
        assert second["quality"] is None

    def test_fewer_rows_than_limit(self, session, make_user, make_center):
        farmer = make_user()
        center = make_center()
        service = CollectionService(session)
        service.record(
            CollectionPayload(
                collection_center_id=str(center.id), user_id=str(farmer.id), quantity=Decimal("2")
            )
        )
        assert len(service.recent(3)) == 1

    def test_empty_ledger(self, session):
        assert CollectionService(session).recent() == []

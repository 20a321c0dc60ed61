"""
Tests for the dashboard statistics.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from milkcoop.models import Collection, Payment
from milkcoop.service import StatsService, UserService
from milkcoop.service.stats import day_window, month_window

NOW = datetime(2026, 10, 17, 12, 0)


class TestWindows:
    def test_day_window(self):
        assert day_window(NOW) == (datetime(2026, 10, 17), datetime(2026, 10, 18))

    def test_month_window(self):
        assert month_window(NOW) == (datetime(2026, 10, 1), datetime(2026, 11, 1))

    def test_month_window_december(self):
        assert month_window(datetime(2026, 12, 31, 23, 59)) == (
            datetime(2026, 12, 1),
            datetime(2027, 1, 1),
        )


class TestStatsService:
    def test_empty_database(self, session):
        assert StatsService(session).compute(now=NOW) == {
            "total_farmers": 0,
            "registered_farmers": 0,
            "active_farmers": 0,
            "todays_collection_liters": 0.0,
            "monthly_collection_liters": 0.0,
            "low_quality_deliveries": 0,
            "monthly_revenue": 0.0,
        }

    @pytest.fixture
    def populated(self, session, make_user, make_center):
        """
        Three farmers (one admin), two of them delivering:
        - today: 10 L "Good", 5 L "poor quality"
        - earlier this month: 7 L "LOW fat"
        - last month: 100 L "Bad"
        Payments: 300 this month, 900 last month.
        """
        a = make_user(username="a", phone="01")
        b = make_user(username="b", phone="02")
        admin = make_user(username="admin", phone="03")
        UserService(session).promote_to_admin(str(admin.id))
        center = make_center()

        rows = [
            (a, "10", "Good", datetime(2026, 10, 17, 7, 0)),
            (b, "5", "poor quality", datetime(2026, 10, 17, 9, 30)),
            (a, "7", "LOW fat", datetime(2026, 10, 3, 8, 0)),
            (b, "100", "Bad", datetime(2026, 9, 28, 8, 0)),
        ]
        for farmer, liters, quality, at in rows:
            session.add(
                Collection(
                    collection_center_id=center.id,
                    user_id=farmer.id,
                    quantity=Decimal(liters),
                    quality=quality,
                    created_at=at,
                )
            )
        for amount, at in (("300", datetime(2026, 10, 5)), ("900", datetime(2026, 9, 30, 23, 59))):
            session.add(
                Payment(
                    farmer_id=a.id,
                    quantity=Decimal("1"),
                    amount=Decimal(amount),
                    payment_method="cash",
                    created_at=at,
                )
            )
        session.commit()
        return StatsService(session)

    def test_farmer_counts(self, populated):
        stats = populated.compute(now=NOW)
        assert stats["registered_farmers"] == 2
        assert stats["active_farmers"] == 2
        assert stats["total_farmers"] == stats["active_farmers"]

    def test_today_excludes_earlier_days(self, populated):
        assert populated.compute(now=NOW)["todays_collection_liters"] == pytest.approx(15.0)

    def test_month_excludes_prior_month(self, populated):
        assert populated.compute(now=NOW)["monthly_collection_liters"] == pytest.approx(22.0)

    def test_low_quality_is_case_insensitive(self, populated):
        assert populated.compute(now=NOW)["low_quality_deliveries"] == 3

    def test_monthly_revenue(self, populated):
        assert populated.compute(now=NOW)["monthly_revenue"] == pytest.approx(300.0)

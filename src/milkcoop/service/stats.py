"""
Dashboard statistics.

Seven figures from independent read-only queries. Any failing query fails
the whole computation; partial results are never returned.
"""

from datetime import datetime, time, timedelta
from typing import Any

from sqlalchemy.orm import Session

from milkcoop.persistence.stats import StatsRepository
from milkcoop.service.base import storage_guard


def day_window(now: datetime) -> tuple[datetime, datetime]:
    """[today 00:00, tomorrow 00:00)"""
    start = datetime.combine(now.date(), time.min)
    return start, start + timedelta(days=1)


def month_window(now: datetime) -> tuple[datetime, datetime]:
    """[first of this month, first of next month)"""
    start = datetime.combine(now.date().replace(day=1), time.min)
    end = (start + timedelta(days=32)).replace(day=1)
    return start, end


class StatsService:
    def __init__(self, db: Session):
        self.db = db
        self.stats = StatsRepository(db)

    def compute(self, now: datetime | None = None) -> dict[str, Any]:
        """
        Args:
            now: reference time; defaults to the server clock

        Returns:
            Dashboard payload. ``total_farmers`` deliberately repeats
            ``active_farmers``.
        """
        now = now or datetime.now()
        today_start, today_end = day_window(now)
        month_start, month_end = month_window(now)

        with storage_guard(self.db, "Failed to fetch stats."):
            registered = self.stats.count_registered_farmers()
            active = self.stats.count_active_farmers()
            todays = self.stats.sum_collected(today_start, today_end)
            monthly = self.stats.sum_collected(month_start, month_end)
            low_quality = self.stats.count_low_quality()
            revenue = self.stats.sum_payments(month_start, month_end)

        return {
            "total_farmers": active,
            "registered_farmers": registered,
            "active_farmers": active,
            "todays_collection_liters": float(todays or 0),
            "monthly_collection_liters": float(monthly or 0),
            "low_quality_deliveries": low_quality,
            "monthly_revenue": float(revenue or 0),
        }

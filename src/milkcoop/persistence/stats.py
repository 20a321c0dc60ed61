"""
Read-only aggregate queries behind the dashboard.

Each method is one SELECT. Time windows are half-open [start, end) and are
computed by the caller from the server clock.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from milkcoop.models import ROLE_USER, Collection, Payment, User

LOW_QUALITY_MARKERS = ("low", "poor", "bad")


class StatsRepository:
    def __init__(self, db: Session):
        self.db = db

    def count_registered_farmers(self) -> int:
        return self.db.query(func.count(User.id)).filter(User.role == ROLE_USER).scalar() or 0

    def count_active_farmers(self) -> int:
        """Distinct farmers with at least one recorded collection."""
        return self.db.query(func.count(func.distinct(Collection.user_id))).scalar() or 0

    def sum_collected(self, start: datetime, end: datetime) -> Decimal:
        return (
            self.db.query(func.coalesce(func.sum(Collection.quantity), 0))
            .filter(Collection.created_at >= start, Collection.created_at < end)
            .scalar()
        )

    def count_low_quality(self) -> int:
        quality = func.lower(Collection.quality)
        return (
            self.db.query(func.count(Collection.id))
            .filter(
                Collection.quality.isnot(None),
                or_(*(quality.like(f"%{marker}%") for marker in LOW_QUALITY_MARKERS)),
            )
            .scalar()
            or 0
        )

    def sum_payments(self, start: datetime, end: datetime) -> Decimal:
        return (
            self.db.query(func.coalesce(func.sum(Payment.amount), 0))
            .filter(Payment.created_at >= start, Payment.created_at < end)
            .scalar()
        )

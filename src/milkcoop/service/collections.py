"""
Collection ledger.

Collections are append-only. The "recent" feed is a display projection for
the dashboard, not raw rows.
"""

import logging
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from milkcoop.contracts.payloads import CollectionPayload
from milkcoop.exceptions import ValidationError
from milkcoop.persistence.repo import CollectionCenterRepository, CollectionRepository, UserRepository
from milkcoop.service.base import parse_uuid, storage_guard

logger = logging.getLogger(__name__)

DEFAULT_RECENT_LIMIT = 3


def format_number(value: Decimal | float | int) -> str:
    """Render a numeric column without trailing zeros: 12.00 -> "12", 12.50 -> "12.5"."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return f"{value.normalize():f}"


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_long_date(value: datetime) -> str:
    """e.g. "October 17, 2026". Always English, whatever the process locale."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def to_feed_item(collection, user_fullname: str, center_name: str) -> dict:
    return {
        "quantity": f"{format_number(collection.quantity)} L",
        "user": user_fullname,
        "date_center": f"{format_long_date(collection.created_at)} • Center: {center_name}",
        "quality": collection.quality.upper() if collection.quality else None,
    }


class CollectionService:
    def __init__(self, db: Session):
        self.db = db
        self.collections = CollectionRepository(db)
        self.centers = CollectionCenterRepository(db)
        self.users = UserRepository(db)

    def record(self, payload: CollectionPayload) -> dict:
        """
        Record a delivery. The center is checked before the user.

        Raises:
            ValidationError: center or user does not exist
        """
        center_id = parse_uuid(payload.collection_center_id)
        user_id = parse_uuid(payload.user_id)

        with storage_guard(self.db, "Failed to record created collection."):
            if center_id is None or not self.centers.exists(center_id):
                raise ValidationError("Collection center not found.")
            if user_id is None or not self.users.exists(user_id):
                raise ValidationError("User not found.")

            collection = self.collections.create(
                collection_center_id=center_id,
                user_id=user_id,
                quantity=payload.quantity,
                quality=payload.quality,
            )
            self.db.commit()

        logger.info(
            "Collection recorded",
            extra={"collection_id": str(collection.id), "center_id": str(center_id)},
        )
        return collection.to_dict()

    def recent(self, limit: int = DEFAULT_RECENT_LIMIT) -> list[dict]:
        """Newest ``limit`` collections, formatted for display."""
        with storage_guard(self.db, "Failed to fetch recent collections."):
            rows = self.collections.recent(limit)

        return [to_feed_item(row[0], row.user_fullname, row.center_name) for row in rows]

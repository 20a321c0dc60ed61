import logging

from sqlalchemy.orm import Session

from milkcoop.exceptions import NotFoundError
from milkcoop.models import ROLE_ADMIN
from milkcoop.persistence.repo import UserRepository
from milkcoop.service.base import parse_uuid, storage_guard

logger = logging.getLogger(__name__)


class UserService:
    """User directory: role promotion, listing and per-farmer summaries."""

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def promote_to_admin(self, user_id: str) -> None:
        """Set role to admin. Idempotent."""
        uid = parse_uuid(user_id)
        with storage_guard(self.db, "Failed to update user role."):
            # a malformed id can't match a row
            if uid is None or not self.users.exists(uid):
                raise NotFoundError("User not found.")
            self.users.set_role(uid, ROLE_ADMIN)
            self.db.commit()

        logger.info("User promoted to admin", extra={"user_id": str(uid)})

    def list_users(self) -> list[dict]:
        with storage_guard(self.db, "Failed to fetch users."):
            return [user.to_public_dict() for user in self.users.list_all()]

    def user_summary(self) -> list[dict]:
        """
        Farmers with their total liters and a unit price.

        unit_price is the highest price among the centers the farmer ever
        delivered to, not a per-delivery price.
        """
        with storage_guard(self.db, "Failed to fetch user names."):
            rows = self.users.summaries()

        return [
            {
                "id": row.id,
                "fullname": row.fullname,
                "total_quantity": float(row.total_quantity or 0),
                "unit_price": float(row.unit_price or 0),
            }
            for row in rows
        ]

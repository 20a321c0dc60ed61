"""
Collection-center registry.

Partial updates go through PatchBuilder. Text fields are applied only when
non-empty; price is applied whenever it is given, so a price of 0 sticks.
"""

import logging

from sqlalchemy.orm import Session

from milkcoop.contracts.payloads import CollectionCenterPatch, CollectionCenterPayload
from milkcoop.exceptions import ConflictError, NotFoundError
from milkcoop.models import CollectionCenter
from milkcoop.persistence.patch import PatchBuilder, PatchField, defined
from milkcoop.persistence.repo import CollectionCenterRepository
from milkcoop.service.base import require_uuid, storage_guard

logger = logging.getLogger(__name__)

CENTER_PATCH = PatchBuilder(
    [
        PatchField("name"),
        PatchField("code"),
        PatchField("manager"),
        PatchField("phone"),
        PatchField("price", defined),
        PatchField("location"),
    ]
)

INVALID_CENTER_ID = "Invalid collection center id."
CENTER_NOT_FOUND = "Collection center not found."
CODE_TAKEN = "Code already exists."


class CollectionCenterService:
    def __init__(self, db: Session):
        self.db = db
        self.centers = CollectionCenterRepository(db)

    def create(self, payload: CollectionCenterPayload) -> dict:
        """
        Raises:
            ConflictError: code already used by another center
        """
        with storage_guard(self.db, "Failed to create collection center."):
            if self.centers.get_by_code(payload.code) is not None:
                raise ConflictError(CODE_TAKEN)

            center = self.centers.create(
                name=payload.name,
                code=payload.code,
                manager=payload.manager,
                phone=payload.phone,
                price=payload.price,
                location=payload.location,
            )
            self.db.commit()

        logger.info("Collection center created", extra={"center_id": str(center.id), "code": center.code})
        return center.to_dict()

    def patch(self, center_id: str, payload: CollectionCenterPatch) -> dict:
        """
        Update only the fields present in the payload.

        Raises:
            ValidationError: malformed id, or nothing to update
            NotFoundError: no center with that id
            ConflictError: new code belongs to another center
        """
        cid = require_uuid(center_id, INVALID_CENTER_ID)

        with storage_guard(self.db, "Failed to update collection center."):
            if not self.centers.exists(cid):
                raise NotFoundError(CENTER_NOT_FOUND)

            stmt = CENTER_PATCH.build(CollectionCenter, cid, payload)

            if payload.code:
                other = self.centers.get_by_code(payload.code)
                if other is not None and other.id != cid:
                    raise ConflictError(CODE_TAKEN)

            self.centers.execute_update(stmt)
            self.db.commit()
            center = self.centers.get(cid, refresh=True)
            if center is None:
                # deleted between the update and the re-read
                raise NotFoundError(CENTER_NOT_FOUND)

        logger.info("Collection center updated", extra={"center_id": str(cid)})
        return center.to_dict()

    def delete(self, center_id: str) -> None:
        """
        Delete a center and, by cascade, its collections.

        Raises:
            ValidationError: malformed id
            NotFoundError: no center with that id
        """
        cid = require_uuid(center_id, INVALID_CENTER_ID)

        with storage_guard(self.db, "Failed to delete collection center."):
            if not self.centers.delete(cid):
                raise NotFoundError(CENTER_NOT_FOUND)
            self.db.commit()

        logger.info("Collection center deleted", extra={"center_id": str(cid)})

    def list_centers(self) -> list[dict]:
        """All centers, newest first."""
        with storage_guard(self.db, "Failed to retrieve collection centers."):
            return [center.to_dict() for center in self.centers.list_all()]

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from milkcoop.exceptions import StorageError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def storage_guard(db: Session, message: str) -> Iterator[None]:
    """
    Map any database failure inside the block to StorageError.

    The session is rolled back and the real error is logged; the caller only
    ever sees ``message``. Domain errors raised in the block pass through.
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(message)
        raise StorageError(message) from None


def parse_uuid(value: str | UUID | None) -> UUID | None:
    """Parse an identifier, returning None if it is not a valid UUID."""
    if isinstance(value, UUID):
        return value
    if not value:
        return None
    try:
        return UUID(str(value))
    except ValueError:
        return None


def require_uuid(value: str | UUID | None, message: str = "Invalid id.") -> UUID:
    """
    Raises:
        ValidationError: if the value is not a valid UUID
    """
    parsed = parse_uuid(value)
    if parsed is None:
        raise ValidationError(message)
    return parsed

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Column, DateTime, Uuid


class BaseModelMixin:
    """Common columns: generated UUID primary key and insert timestamp."""

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    created_at = Column(DateTime, nullable=False, default=datetime.now, index=True)

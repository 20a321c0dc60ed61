"""
SQLAlchemy models.

Importing this package registers every table on ``Base.metadata``.
"""

from milkcoop.models.collection import Collection
from milkcoop.models.collection_center import CollectionCenter
from milkcoop.models.payment import Payment
from milkcoop.models.user import ROLE_ADMIN, ROLE_USER, User

__all__ = [
    "Collection",
    "CollectionCenter",
    "Payment",
    "User",
    "ROLE_ADMIN",
    "ROLE_USER",
]

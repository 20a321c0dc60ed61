"""
Persistence layer: repositories, the partial-update builder and the
dashboard aggregate queries.
"""

from milkcoop.persistence.patch import PatchBuilder, PatchField, defined, truthy
from milkcoop.persistence.repo import (
    CollectionCenterRepository,
    CollectionRepository,
    PaymentRepository,
    UserRepository,
)
from milkcoop.persistence.stats import StatsRepository

__all__ = [
    "CollectionCenterRepository",
    "CollectionRepository",
    "PatchBuilder",
    "PatchField",
    "PaymentRepository",
    "StatsRepository",
    "UserRepository",
    "defined",
    "truthy",
]

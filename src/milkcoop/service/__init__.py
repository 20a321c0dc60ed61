"""
Service layer

One service per area. Each takes the request's Session in its constructor.
"""

from milkcoop.service.auth import AuthService
from milkcoop.service.centers import CollectionCenterService
from milkcoop.service.collections import CollectionService
from milkcoop.service.payments import PaymentService
from milkcoop.service.stats import StatsService
from milkcoop.service.users import UserService

__all__ = [
    "AuthService",
    "CollectionCenterService",
    "CollectionService",
    "PaymentService",
    "StatsService",
    "UserService",
]

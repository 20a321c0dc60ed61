"""
API contracts

Request payload models and the response envelope.
"""

from milkcoop.contracts.envelope import error, success
from milkcoop.contracts.payloads import (
    CollectionCenterPatch,
    CollectionCenterPayload,
    CollectionPayload,
    LoginPayload,
    PaymentPayload,
    RegisterPayload,
    parse_payload,
)

__all__ = [
    "CollectionCenterPatch",
    "CollectionCenterPayload",
    "CollectionPayload",
    "LoginPayload",
    "PaymentPayload",
    "RegisterPayload",
    "error",
    "parse_payload",
    "success",
]

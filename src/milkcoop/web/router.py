"""
API routes.

Handlers are plain ``def`` so FastAPI runs them on its thread pool; each
request gets its own session. Bodies are read as raw JSON and validated by
the payload models so a missing field is a 400 with our envelope rather
than FastAPI's 422.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from milkcoop.contracts import (
    CollectionCenterPatch,
    CollectionCenterPayload,
    CollectionPayload,
    LoginPayload,
    PaymentPayload,
    RegisterPayload,
    parse_payload,
    success,
)
from milkcoop.service import (
    AuthService,
    CollectionCenterService,
    CollectionService,
    PaymentService,
    StatsService,
    UserService,
)
from milkcoop.settings import Settings
from milkcoop.web.deps import (
    get_app_settings,
    get_auth_service,
    get_center_service,
    get_collection_service,
    get_payment_service,
    get_stats_service,
    get_user_service,
)

api_router = APIRouter()


# =============================================================================
# Auth
# =============================================================================

@api_router.post("/register", tags=["Auth"], status_code=201)
def register(
    body: Any = Body(None),
    service: AuthService = Depends(get_auth_service),
):
    """Register a new farmer account."""
    service.register(parse_payload(RegisterPayload, body))
    return success(201, message="User registered successfully.")


@api_router.post("/login", tags=["Auth"])
def login(
    body: Any = Body(None),
    service: AuthService = Depends(get_auth_service),
):
    """Log in with username or phone number."""
    user = service.login(parse_payload(LoginPayload, body))
    return success(message="Login successful.", user=user)


# =============================================================================
# Users
# =============================================================================

@api_router.patch("/user/{user_id}/role", tags=["Users"])
def promote_user(user_id: str, service: UserService = Depends(get_user_service)):
    """Promote a user to admin."""
    service.promote_to_admin(user_id)
    return success(message="User role updated to admin.")


@api_router.get("/users", tags=["Users"])
def list_users(service: UserService = Depends(get_user_service)):
    return success(users=service.list_users())


@api_router.get("/user-names", tags=["Users"])
def user_names(service: UserService = Depends(get_user_service)):
    """Farmers with total liters delivered and unit price."""
    return success(users=service.user_summary())


# =============================================================================
# Collection centers
# =============================================================================

@api_router.post("/collection-center", tags=["Collection centers"], status_code=201)
def create_center(
    body: Any = Body(None),
    service: CollectionCenterService = Depends(get_center_service),
):
    center = service.create(parse_payload(CollectionCenterPayload, body))
    return success(201, message="Collection center created successfully.", center=center)


@api_router.patch("/collection-center/{center_id}", tags=["Collection centers"])
def update_center(
    center_id: str,
    body: Any = Body(None),
    service: CollectionCenterService = Depends(get_center_service),
):
    """Partially update a collection center."""
    center = service.patch(center_id, parse_payload(CollectionCenterPatch, body))
    return success(message="Collection center updated successfully.", center=center)


@api_router.delete("/collection-center/{center_id}", tags=["Collection centers"])
def delete_center(center_id: str, service: CollectionCenterService = Depends(get_center_service)):
    service.delete(center_id)
    return success(message="Collection center deleted successfully.")


@api_router.get("/collection-centers", tags=["Collection centers"])
def list_centers(service: CollectionCenterService = Depends(get_center_service)):
    return success(centers=service.list_centers())


# =============================================================================
# Collections
# =============================================================================

@api_router.post("/created-collection", tags=["Collections"], status_code=201)
def record_collection(
    body: Any = Body(None),
    service: CollectionService = Depends(get_collection_service),
):
    collection = service.record(parse_payload(CollectionPayload, body))
    return success(201, message="Created collection recorded successfully.", collection=collection)


@api_router.get("/created-collections/recent", tags=["Collections"])
def recent_collections(
    limit: Optional[int] = Query(None, ge=1, le=100),
    service: CollectionService = Depends(get_collection_service),
    settings: Settings = Depends(get_app_settings),
):
    """Latest collections formatted for the dashboard feed."""
    items = service.recent(limit or settings.RECENT_COLLECTIONS_LIMIT)
    return success(collections=items)


# =============================================================================
# Payments
# =============================================================================

@api_router.post("/payment", tags=["Payments"], status_code=201)
def create_payment(
    body: Any = Body(None),
    service: PaymentService = Depends(get_payment_service),
):
    payment = service.create(parse_payload(PaymentPayload, body))
    return success(201, message="Payment created successfully.", payment=payment)


@api_router.get("/payments", tags=["Payments"])
def list_payments(service: PaymentService = Depends(get_payment_service)):
    return success(payments=service.list_payments())


@api_router.delete("/payment/{payment_id}", tags=["Payments"])
def delete_payment(payment_id: str, service: PaymentService = Depends(get_payment_service)):
    service.delete(payment_id)
    return success(message="Payment deleted successfully.")


# =============================================================================
# Stats
# =============================================================================

@api_router.get("/stats", tags=["Stats"])
def stats(service: StatsService = Depends(get_stats_service)):
    """Dashboard statistics."""
    return success(data=service.compute())

"""
Request payload models.

One pydantic model per write endpoint. Required string fields must be
non-empty (JSON numbers are accepted as strings); numeric fields may be
zero. Unknown keys are ignored.
``missing_message`` is what the caller sees when validation fails.
"""

from decimal import Decimal
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from milkcoop.exceptions import ValidationError


class Payload(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    missing_message: ClassVar[str] = "All fields are required."


class RegisterPayload(Payload):
    fullname: str = Field(..., min_length=1, description="Full name of the farmer")
    phone: str = Field(..., min_length=1, description="Contact phone number")
    username: str = Field(..., min_length=1, description="Unique login name")
    password: str = Field(..., min_length=1)
    passwordConfirmation: str = Field(..., min_length=1)


class LoginPayload(Payload):
    missing_message: ClassVar[str] = "Username/phone and password are required."

    username: str = Field(..., min_length=1, description="Username or phone number")
    password: str = Field(..., min_length=1)


class CollectionCenterPayload(Payload):
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1, description="Unique center code")
    manager: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    price: Decimal = Field(..., description="Unit price paid per liter")
    location: str = Field(..., min_length=1)


class CollectionCenterPatch(Payload):
    """Partial update. Every field is optional; see service.centers for the rules."""

    missing_message: ClassVar[str] = "Invalid collection center fields."

    name: str | None = None
    code: str | None = None
    manager: str | None = None
    phone: str | None = None
    price: Decimal | None = None
    location: str | None = None


class CollectionPayload(Payload):
    missing_message: ClassVar[str] = "collection_center_id, user_id and quantity are required."

    collection_center_id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    quantity: Decimal = Field(..., description="Liters delivered")
    quality: str | None = Field(None, description="Free-text quality grade")


class PaymentPayload(Payload):
    missing_message: ClassVar[str] = "farmer_id, quantity, amount and payment_method are required."

    farmer_id: str = Field(..., min_length=1)
    quantity: Decimal
    amount: Decimal
    payment_method: str = Field(..., min_length=1)


P = TypeVar("P", bound=Payload)


def parse_payload(model: type[P], data: Any) -> P:
    """
    Validate a raw JSON body against a payload model.

    Anything that is not a JSON object is treated as an empty body.

    Raises:
        ValidationError: with the model's ``missing_message``
    """
    if not isinstance(data, dict):
        data = {}
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(model.missing_message) from e

"""
Partial-update builder.

Turns a sparse payload into one UPDATE statement that only touches the
columns actually supplied. Fields are visited in a fixed order, so the SET
clause is deterministic for a given payload.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy import update
from sqlalchemy.sql.dml import Update

from milkcoop.exceptions import ValidationError


def truthy(value: Any) -> bool:
    """Include the field only if the value is truthy (skips "", 0, None)."""
    return bool(value)


def defined(value: Any) -> bool:
    """Include the field whenever a value was given, even 0."""
    return value is not None


@dataclass(frozen=True)
class PatchField:
    name: str
    include: Callable[[Any], bool] = truthy


class PatchBuilder:
    """
    Builds ``UPDATE <table> SET ... WHERE id = :id`` from a payload object.

    Example:
        builder = PatchBuilder([PatchField("name"), PatchField("price", defined)])
        stmt = builder.build(CollectionCenter, center_id, payload)
    """

    empty_message = "No fields to update."

    def __init__(self, fields: Sequence[PatchField]):
        self.fields = tuple(fields)

    def collect(self, payload: Any) -> dict[str, Any]:
        """Return the (column, value) pairs that pass their rule, in field order."""
        values: dict[str, Any] = {}
        for field in self.fields:
            value = getattr(payload, field.name, None)
            if field.include(value):
                values[field.name] = value
        return values

    def build(self, model: Any, key: Any, payload: Any) -> Update:
        """
        Raises:
            ValidationError: if no field survived, so nothing would be updated
        """
        values = self.collect(payload)
        if not values:
            raise ValidationError(self.empty_message)
        return update(model).where(model.id == key).values(values)

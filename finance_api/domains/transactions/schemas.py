"""Pydantic schemas for the transactions domain.

JSON keys are camelCase on the wire (``insertedId``, ``deletedCount``...);
models are populated by field name in Python code.
"""

from pydantic import BaseModel, ConfigDict, JsonValue
from pydantic.alias_generators import to_camel

MUTABLE_FIELDS = ("title", "amount", "description", "date", "category", "type")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionIn(BaseModel):
    """A transaction record as sent by the client.

    Every field is optional and takes any JSON value, stored exactly as sent:
    no type checks and no coercion (``"100"`` stays a string). Meaningful
    values are an ``amount`` number, a ``YYYY-MM-DD`` ``date`` and a ``type``
    of ``income`` or ``expense``; anything else is kept but ignored by the
    statistics.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    title: JsonValue = None
    amount: JsonValue = None
    description: JsonValue = None
    date: JsonValue = None
    category: JsonValue = None
    type: JsonValue = None


class TransactionOut(BaseModel):
    """A stored transaction record."""

    id: str
    title: JsonValue = None
    amount: JsonValue = None
    description: JsonValue = None
    date: JsonValue = None
    category: JsonValue = None
    type: JsonValue = None


class InsertAck(_CamelModel):
    acknowledged: bool = True
    inserted_id: str


class DeleteAck(_CamelModel):
    acknowledged: bool = True
    deleted_count: int


class UpdateAck(_CamelModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int

"""
Domain entities for customer data.

``CustomerId`` keeps the storage engine's identifier type behind a small
value object so callers only ever see its string form.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from bson import ObjectId

from .exceptions import DataIntegrityException, InvalidIdentifierException


@dataclass(frozen=True)
class CustomerId:
    """
    Value object for a customer document identifier.

    Wraps a 12-byte ObjectId. Parse from text with ``CustomerId.parse`` and
    render back with ``str()``.
    """

    value: ObjectId

    @classmethod
    def parse(cls, raw: str) -> "CustomerId":
        """
        Parse the canonical 24-character hex form of an identifier.

        Args:
            raw: Identifier string supplied by the caller

        Returns:
            Parsed identifier

        Raises:
            InvalidIdentifierException: If ``raw`` is not a valid identifier
        """
        if not isinstance(raw, str) or not ObjectId.is_valid(raw):
            raise InvalidIdentifierException(str(raw))
        return cls(ObjectId(raw))

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class CustomerDocument:
    """Persisted representation of a customer in the ``customer`` collection."""

    id: CustomerId
    name: str
    created_at: datetime

    # Field names as stored in MongoDB
    ID_FIELD = "_id"
    NAME_FIELD = "name"
    CREATED_AT_FIELD = "createdAt"

    @classmethod
    def from_mongo(cls, document: Mapping[str, Any]) -> "CustomerDocument":
        """
        Build an entity from a raw MongoDB document.

        Raises:
            DataIntegrityException: If a required field is missing or mistyped
        """
        missing = [
            name
            for name in (cls.ID_FIELD, cls.NAME_FIELD, cls.CREATED_AT_FIELD)
            if name not in document
        ]
        if missing:
            raise DataIntegrityException(
                "customer", f"missing field(s): {', '.join(missing)}"
            )

        oid = document[cls.ID_FIELD]
        name = document[cls.NAME_FIELD]
        created_at = document[cls.CREATED_AT_FIELD]
        if not isinstance(oid, ObjectId):
            raise DataIntegrityException("customer", f"_id is not an ObjectId: {oid!r}")
        if not isinstance(created_at, datetime):
            raise DataIntegrityException(
                "customer", f"createdAt is not a datetime: {created_at!r}"
            )
        if not isinstance(name, str):
            raise DataIntegrityException("customer", f"name is not a string: {name!r}")

        return cls(
            id=CustomerId(oid),
            name=name,
            created_at=created_at,
        )

    @classmethod
    def new_fields(cls, name: str, created_at: datetime) -> dict:
        """Fields written by create; ``_id`` is generated on insert."""
        return {cls.NAME_FIELD: name, cls.CREATED_AT_FIELD: created_at}

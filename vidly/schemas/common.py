from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic.fields import FieldInfo

from vidly.core.ids import is_valid_object_id


def _check_object_id(value: str) -> str:
    if not is_valid_object_id(value):
        raise ValueError("must be a valid id")
    return value.lower()


def _as_utc(value: datetime) -> datetime:
    # Some backends hand timestamps back without tzinfo; they are stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


ObjectIdStr = Annotated[str, AfterValidator(_check_object_id)]
UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


def document_id() -> FieldInfo:
    """Identifier field read from ``id`` and written out as ``_id``."""
    return Field(
        validation_alias=AliasChoices("id", "_id"),
        serialization_alias="_id",
    )


class CamelModel(BaseModel):
    """Base schema speaking camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


__all__ = ["CamelModel", "ObjectIdStr", "UtcDatetime", "document_id"]

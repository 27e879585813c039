from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from vidly.schemas.common import CamelModel, document_id


class CustomerIn(CamelModel):
    name: str = Field(..., min_length=5, max_length=50)
    phone: str = Field(..., min_length=5, max_length=50)
    is_gold: bool = False

    @field_validator("name", "phone", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class CustomerResponse(CamelModel):
    id: str = document_id()
    name: str
    phone: str
    is_gold: bool

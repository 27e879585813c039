from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from vidly.schemas.common import CamelModel, document_id


class GenreIn(CamelModel):
    name: str = Field(..., min_length=3, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class GenreResponse(CamelModel):
    id: str = document_id()
    name: str

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator

from vidly.schemas.common import CamelModel, ObjectIdStr, document_id


class MovieIn(CamelModel):
    title: str = Field(..., min_length=5, max_length=255)
    genre_id: ObjectIdStr
    number_in_stock: int = Field(..., ge=0, le=255)
    daily_rental_rate: Decimal = Field(..., gt=0, le=255, decimal_places=2)

    @field_validator("title", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value


class MovieGenreResponse(CamelModel):
    id: str = document_id()
    name: str


class MovieResponse(CamelModel):
    id: str = document_id()
    title: str
    genre: MovieGenreResponse
    number_in_stock: int
    daily_rental_rate: float

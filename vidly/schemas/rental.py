"""Pydantic schemas for rentals and returns."""

from __future__ import annotations

from typing import Optional

from vidly.schemas.common import CamelModel, ObjectIdStr, UtcDatetime, document_id


class RentalIn(CamelModel):
    """Body of a new rental."""

    customer_id: ObjectIdStr
    movie_id: ObjectIdStr


class ReturnIn(CamelModel):
    """Body of a rental return."""

    customer_id: ObjectIdStr
    movie_id: ObjectIdStr


class RentalCustomerResponse(CamelModel):
    id: str = document_id()
    name: str
    phone: str
    is_gold: bool


class RentalMovieResponse(CamelModel):
    id: str = document_id()
    title: str
    daily_rental_rate: float


class RentalResponse(CamelModel):
    """Rental data returned to API clients."""

    id: str = document_id()
    customer: RentalCustomerResponse
    movie: RentalMovieResponse
    date_out: UtcDatetime
    date_returned: Optional[UtcDatetime] = None
    rental_fee: Optional[float] = None

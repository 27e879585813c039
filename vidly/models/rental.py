from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, DateTime, Numeric, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from vidly.core.database import Base
from vidly.core.ids import new_object_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CustomerSnapshot:
    id: str
    name: str
    phone: str
    is_gold: bool


@dataclass
class MovieSnapshot:
    id: str
    title: str
    daily_rental_rate: Decimal


class Rental(Base):
    """A customer's rental of one movie.

    Customer and movie details are copied at rental time so later edits to
    either document do not change what was rented or what it costs.
    ``date_returned`` and ``rental_fee`` are written together, once.
    """

    __tablename__ = "rentals"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_object_id)

    customer_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    customer_name: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_phone: Mapped[str] = mapped_column(String(50), nullable=False)
    customer_is_gold: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    movie_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    movie_title: Mapped[str] = mapped_column(String(255), nullable=False)
    movie_daily_rental_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    date_out: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow
    )
    date_returned: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    rental_fee: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 3), nullable=True)

    customer: Mapped[CustomerSnapshot] = composite(
        CustomerSnapshot,
        "customer_id",
        "customer_name",
        "customer_phone",
        "customer_is_gold",
    )
    movie: Mapped[MovieSnapshot] = composite(
        MovieSnapshot,
        "movie_id",
        "movie_title",
        "movie_daily_rental_rate",
    )

    def __repr__(self) -> str:
        return (
            f"<Rental(id={self.id}, customer_id={self.customer_id}, "
            f"movie_id={self.movie_id}, date_out={self.date_out}, "
            f"date_returned={self.date_returned})>"
        )

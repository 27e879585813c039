from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, composite, mapped_column

from vidly.core.database import Base
from vidly.core.ids import new_object_id


@dataclass
class GenreSnapshot:
    """Genre fields copied into a movie when it is saved."""

    id: str
    name: str


class Movie(Base):
    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_object_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    genre_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    genre_name: Mapped[str] = mapped_column(String(50), nullable=False)
    number_in_stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    daily_rental_rate: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)

    genre: Mapped[GenreSnapshot] = composite(GenreSnapshot, "genre_id", "genre_name")

    def __repr__(self) -> str:
        return (
            f"<Movie(id={self.id}, title={self.title}, "
            f"number_in_stock={self.number_in_stock})>"
        )

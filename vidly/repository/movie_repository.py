from __future__ import annotations

from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from vidly.models import Movie


def list_movies(db: Session) -> List[Movie]:
    return db.query(Movie).order_by(Movie.title).all()


def get_movie(db: Session, movie_id: str) -> Optional[Movie]:
    return db.query(Movie).filter(Movie.id == movie_id).first()


def create_movie(db: Session, movie: Movie) -> Movie:
    db.add(movie)
    db.flush()
    return movie


def delete_movie(db: Session, movie: Movie) -> None:
    db.delete(movie)


def increment_stock(db: Session, movie_id: str, amount: int = 1) -> int:
    """Add ``amount`` to the stock in place and return the affected row count."""
    result = db.execute(
        update(Movie)
        .where(Movie.id == movie_id)
        .values(number_in_stock=Movie.number_in_stock + amount)
    )
    return result.rowcount


def take_from_stock(db: Session, movie_id: str) -> int:
    """Remove one copy if any is left; 0 affected rows means out of stock."""
    result = db.execute(
        update(Movie)
        .where(Movie.id == movie_id)
        .where(Movie.number_in_stock > 0)
        .values(number_in_stock=Movie.number_in_stock - 1)
    )
    return result.rowcount

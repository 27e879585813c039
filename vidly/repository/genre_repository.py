from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from vidly.models import Genre


def list_genres(db: Session) -> List[Genre]:
    return db.query(Genre).order_by(Genre.name).all()


def get_genre(db: Session, genre_id: str) -> Optional[Genre]:
    return db.query(Genre).filter(Genre.id == genre_id).first()


def create_genre(db: Session, genre: Genre) -> Genre:
    db.add(genre)
    db.flush()
    return genre


def delete_genre(db: Session, genre: Genre) -> None:
    db.delete(genre)

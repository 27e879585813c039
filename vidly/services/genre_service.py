from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.models import Genre
from vidly.repository import genre_repository
from vidly.schemas import GenreIn, GenreResponse


class GenreService:
    def __init__(self, db: Session):
        self.db = db

    def list_genres(self) -> list[Genre]:
        try:
            return genre_repository.list_genres(self.db)
        except SQLAlchemyError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to list genres",
            ) from exc

    def get_genre(self, genre_id: str) -> Genre:
        genre = genre_repository.get_genre(self.db, genre_id)
        if not genre:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="The genre with the given ID was not found.",
            )
        return genre

    def create_genre(self, genre_in: GenreIn) -> Genre:
        try:
            genre = genre_repository.create_genre(self.db, Genre(**genre_in.model_dump()))
            self.db.commit()
            self.db.refresh(genre)
            return genre
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create genre",
            ) from exc

    def update_genre(self, genre_id: str, genre_in: GenreIn) -> Genre:
        genre = self.get_genre(genre_id)
        genre.name = genre_in.name
        try:
            self.db.flush()
            self.db.commit()
            self.db.refresh(genre)
            return genre
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update genre",
            ) from exc

    def delete_genre(self, genre_id: str) -> GenreResponse:
        genre = self.get_genre(genre_id)
        deleted = GenreResponse.model_validate(genre)
        try:
            genre_repository.delete_genre(self.db, genre)
            self.db.commit()
            return deleted
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete genre",
            ) from exc

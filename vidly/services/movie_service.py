from __future__ import annotations

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.models import GenreSnapshot, Movie
from vidly.repository import genre_repository, movie_repository
from vidly.schemas import MovieIn, MovieResponse


class MovieService:
    def __init__(self, db: Session):
        self.db = db

    def list_movies(self) -> list[Movie]:
        try:
            return movie_repository.list_movies(self.db)
        except SQLAlchemyError as exc:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to list movies",
            ) from exc

    def get_movie(self, movie_id: str) -> Movie:
        movie = movie_repository.get_movie(self.db, movie_id)
        if not movie:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="The movie with the given ID was not found.",
            )
        return movie

    def create_movie(self, movie_in: MovieIn) -> Movie:
        genre = self._genre_snapshot(movie_in.genre_id)
        movie = Movie(
            title=movie_in.title,
            genre=genre,
            number_in_stock=movie_in.number_in_stock,
            daily_rental_rate=movie_in.daily_rental_rate,
        )
        try:
            movie_repository.create_movie(self.db, movie)
            self.db.commit()
            self.db.refresh(movie)
            return movie
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create movie",
            ) from exc

    def update_movie(self, movie_id: str, movie_in: MovieIn) -> Movie:
        genre = self._genre_snapshot(movie_in.genre_id)
        movie = self.get_movie(movie_id)

        movie.title = movie_in.title
        movie.genre = genre
        movie.number_in_stock = movie_in.number_in_stock
        movie.daily_rental_rate = movie_in.daily_rental_rate

        try:
            self.db.flush()
            self.db.commit()
            self.db.refresh(movie)
            return movie
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to update movie",
            ) from exc

    def delete_movie(self, movie_id: str) -> MovieResponse:
        movie = self.get_movie(movie_id)
        deleted = MovieResponse.model_validate(movie)
        try:
            movie_repository.delete_movie(self.db, movie)
            self.db.commit()
            return deleted
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to delete movie",
            ) from exc

    def _genre_snapshot(self, genre_id: str) -> GenreSnapshot:
        genre = genre_repository.get_genre(self.db, genre_id)
        if not genre:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid genre.",
            )
        return GenreSnapshot(id=genre.id, name=genre.name)

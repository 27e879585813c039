from . import (
    customer_repository,
    genre_repository,
    movie_repository,
    rental_repository,
    user_repository,
)

__all__ = [
    "customer_repository",
    "genre_repository",
    "movie_repository",
    "rental_repository",
    "user_repository",
]

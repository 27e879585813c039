from .customer import Customer
from .genre import Genre
from .movie import GenreSnapshot, Movie
from .rental import CustomerSnapshot, MovieSnapshot, Rental
from .user import User

__all__ = [
    "Customer",
    "CustomerSnapshot",
    "Genre",
    "GenreSnapshot",
    "Movie",
    "MovieSnapshot",
    "Rental",
    "User",
]

from .customer import CustomerIn, CustomerResponse
from .genre import GenreIn, GenreResponse
from .movie import MovieGenreResponse, MovieIn, MovieResponse
from .rental import (
    RentalCustomerResponse,
    RentalIn,
    RentalMovieResponse,
    RentalResponse,
    ReturnIn,
)
from .user import AuthIn, UserIn, UserResponse

__all__ = [
    "AuthIn",
    "CustomerIn",
    "CustomerResponse",
    "GenreIn",
    "GenreResponse",
    "MovieGenreResponse",
    "MovieIn",
    "MovieResponse",
    "RentalCustomerResponse",
    "RentalIn",
    "RentalMovieResponse",
    "RentalResponse",
    "ReturnIn",
    "UserIn",
    "UserResponse",
]

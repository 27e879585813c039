from .auth_service import AuthService
from .customer_service import CustomerService
from .genre_service import GenreService
from .movie_service import MovieService
from .rental_service import RentalService
from .return_service import ReturnService, compute_rental_fee, elapsed_days
from .user_service import UserService

__all__ = [
    "AuthService",
    "CustomerService",
    "GenreService",
    "MovieService",
    "RentalService",
    "ReturnService",
    "UserService",
    "compute_rental_fee",
    "elapsed_days",
]

from fastapi import APIRouter

from .auth_routes import router as auth_router
from .customer_routes import router as customer_router
from .genre_routes import router as genre_router
from .movie_routes import router as movie_router
from .rental_routes import router as rental_router
from .return_routes import router as return_router
from .user_routes import router as user_router

router = APIRouter()
router.include_router(auth_router)
router.include_router(customer_router)
router.include_router(genre_router)
router.include_router(movie_router)
router.include_router(rental_router)
router.include_router(return_router)
router.include_router(user_router)

__all__ = [
    "router",
    "auth_router",
    "customer_router",
    "genre_router",
    "movie_router",
    "rental_router",
    "return_router",
    "user_router",
]

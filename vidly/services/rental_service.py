import logging
from typing import List

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.models import CustomerSnapshot, MovieSnapshot, Rental
from vidly.repository import customer_repository, movie_repository, rental_repository
from vidly.schemas import RentalIn

logger = logging.getLogger(__name__)


class RentalService:
    def __init__(self, db: Session):
        self.db = db

    def list_rentals(self) -> List[Rental]:
        return rental_repository.list_rentals(self.db)

    def get_rental(self, rental_id: str) -> Rental:
        rental = rental_repository.get_rental(self.db, rental_id)
        if rental is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="The rental with the given ID was not found.",
            )
        return rental

    def create_rental(self, payload: RentalIn) -> Rental:
        """Rent one copy of a movie to a customer.

        The new rental and the stock decrement commit together.
        """

        customer = customer_repository.get_customer(self.db, payload.customer_id)
        if customer is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid customer.",
            )

        movie = movie_repository.get_movie(self.db, payload.movie_id)
        if movie is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid movie.",
            )

        if movie.number_in_stock <= 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Movie not in stock.",
            )

        rental = Rental(
            customer=CustomerSnapshot(
                id=customer.id,
                name=customer.name,
                phone=customer.phone,
                is_gold=customer.is_gold,
            ),
            movie=MovieSnapshot(
                id=movie.id,
                title=movie.title,
                daily_rental_rate=movie.daily_rental_rate,
            ),
        )

        try:
            if not movie_repository.take_from_stock(self.db, movie.id):
                self.db.rollback()
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Movie not in stock.",
                )
            rental_repository.create_rental(self.db, rental)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create rental of movie %s", movie.id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to create rental",
            ) from exc

        self.db.refresh(rental)
        logger.info("Rental %s created for customer %s", rental.id, customer.id)
        return rental

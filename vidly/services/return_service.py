import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.models import Rental
from vidly.repository import movie_repository, rental_repository
from vidly.schemas import ReturnIn

logger = logging.getLogger(__name__)

GOLD_DISCOUNT = Decimal("0.9")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def elapsed_days(date_out: datetime, now: Optional[datetime] = None) -> int:
    """Whole days between ``date_out`` and ``now``, never negative."""

    now = _as_utc(now or datetime.now(timezone.utc))
    return max((now - _as_utc(date_out)).days, 0)


def compute_rental_fee(days: int, daily_rental_rate: Decimal, is_gold: bool) -> Decimal:
    """Exact fee; a two-place rate times the gold discount needs three places."""
    fee = Decimal(days) * Decimal(daily_rental_rate)
    if is_gold:
        fee *= GOLD_DISCOUNT
    return fee


class ReturnService:
    def __init__(self, db: Session):
        self.db = db

    def process_return(self, payload: ReturnIn) -> Rental:
        """Close the customer's rental of the movie and put the copy back in stock.

        The rental update and the stock increment commit together. Raises 404
        when there is no such rental and 400 when it was already returned,
        including when a concurrent request returns it first.
        """

        rental = rental_repository.lookup(self.db, payload.customer_id, payload.movie_id)
        if rental is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Rental not found.",
            )

        if rental.date_returned is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Return already processed.",
            )

        returned_at = datetime.now(timezone.utc)
        fee = compute_rental_fee(
            elapsed_days(rental.date_out, returned_at),
            rental.movie.daily_rental_rate,
            rental.customer.is_gold,
        )
        rental_id = rental.id
        movie_id = rental.movie_id

        try:
            updated = rental_repository.mark_returned(
                self.db,
                rental_id,
                returned_at=returned_at,
                rental_fee=fee,
            )
            if not updated:
                self.db.rollback()
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Return already processed.",
                )

            if not movie_repository.increment_stock(self.db, movie_id, 1):
                logger.warning(
                    "Movie %s of rental %s no longer exists; stock not updated",
                    movie_id,
                    rental_id,
                )

            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to process return of rental %s", rental_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Failed to process return",
            ) from exc

        logger.info("Rental %s returned with fee %s", rental_id, fee)
        return rental_repository.get_rental(self.db, rental_id)

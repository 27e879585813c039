from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from vidly.models import Rental


def list_rentals(db: Session) -> List[Rental]:
    return db.query(Rental).order_by(Rental.date_out.desc()).all()


def get_rental(db: Session, rental_id: str) -> Optional[Rental]:
    return db.query(Rental).filter(Rental.id == rental_id).first()


def lookup(db: Session, customer_id: str, movie_id: str) -> Optional[Rental]:
    """Find the rental of ``movie_id`` by ``customer_id``.

    An open rental wins over returned ones; among equals the latest
    ``date_out`` wins.
    """
    return (
        db.query(Rental)
        .filter(Rental.customer_id == customer_id)
        .filter(Rental.movie_id == movie_id)
        .order_by(Rental.date_returned.is_not(None), Rental.date_out.desc())
        .first()
    )


def create_rental(db: Session, rental: Rental) -> Rental:
    db.add(rental)
    db.flush()
    return rental


def mark_returned(
    db: Session,
    rental_id: str,
    *,
    returned_at: datetime,
    rental_fee: Decimal,
) -> int:
    """Close an open rental and return the affected row count.

    The ``date_returned IS NULL`` guard makes a second close a no-op, so a
    count of 0 means someone else returned it first.
    """
    result = db.execute(
        update(Rental)
        .where(Rental.id == rental_id)
        .where(Rental.date_returned.is_(None))
        .values(date_returned=returned_at, rental_fee=rental_fee)
    )
    return result.rowcount

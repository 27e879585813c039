"""API routes for rentals."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.security import Identity, get_current_identity
from vidly.dependencies import get_db, valid_object_id
from vidly.schemas import RentalIn, RentalResponse
from vidly.services import RentalService

router = APIRouter(prefix="/rentals", tags=["rentals"])


@router.get("", response_model=List[RentalResponse])
def list_rentals(db: Session = Depends(get_db)):
    """Retrieve all rentals, newest first."""

    service = RentalService(db)
    return service.list_rentals()


@router.get("/{id}", response_model=RentalResponse)
def get_rental(
    rental_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    """Retrieve a rental by its identifier."""

    service = RentalService(db)
    return service.get_rental(rental_id)


@router.post("", response_model=RentalResponse)
def create_rental(
    payload: RentalIn,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Rent a movie to a customer."""

    service = RentalService(db)
    return service.create_rental(payload)

"""API routes for rental returns."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.security import Identity, get_current_identity
from vidly.dependencies import get_db
from vidly.schemas import RentalResponse, ReturnIn
from vidly.services import ReturnService

router = APIRouter(prefix="/returns", tags=["returns"])


@router.post("", response_model=RentalResponse)
def process_return(
    payload: ReturnIn,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Return a rented movie and charge the rental fee."""

    service = ReturnService(db)
    return service.process_return(payload)

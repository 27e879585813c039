from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.security import Identity, get_current_identity, require_admin
from vidly.dependencies import get_db, valid_object_id
from vidly.schemas import GenreIn, GenreResponse
from vidly.services import GenreService

router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("", response_model=list[GenreResponse])
def list_genres(db: Session = Depends(get_db)):
    service = GenreService(db)
    return service.list_genres()


@router.get("/{id}", response_model=GenreResponse)
def get_genre(genre_id: str = Depends(valid_object_id), db: Session = Depends(get_db)):
    service = GenreService(db)
    return service.get_genre(genre_id)


@router.post("", response_model=GenreResponse)
def create_genre(
    genre_in: GenreIn,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    service = GenreService(db)
    return service.create_genre(genre_in)


@router.put("/{id}", response_model=GenreResponse)
def update_genre(
    genre_in: GenreIn,
    identity: Identity = Depends(get_current_identity),
    genre_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = GenreService(db)
    return service.update_genre(genre_id, genre_in)


@router.delete("/{id}", response_model=GenreResponse)
def delete_genre(
    identity: Identity = Depends(require_admin),
    genre_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = GenreService(db)
    return service.delete_genre(genre_id)

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.security import Identity, get_current_identity, require_admin
from vidly.dependencies import get_db, valid_object_id
from vidly.schemas import MovieIn, MovieResponse
from vidly.services import MovieService

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
def list_movies(db: Session = Depends(get_db)):
    service = MovieService(db)
    return service.list_movies()


@router.get("/{id}", response_model=MovieResponse)
def get_movie(movie_id: str = Depends(valid_object_id), db: Session = Depends(get_db)):
    service = MovieService(db)
    return service.get_movie(movie_id)


@router.post("", response_model=MovieResponse)
def create_movie(
    movie_in: MovieIn,
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    return service.create_movie(movie_in)


@router.put("/{id}", response_model=MovieResponse)
def update_movie(
    movie_in: MovieIn,
    identity: Identity = Depends(get_current_identity),
    movie_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    return service.update_movie(movie_id, movie_in)


@router.delete("/{id}", response_model=MovieResponse)
def delete_movie(
    identity: Identity = Depends(require_admin),
    movie_id: str = Depends(valid_object_id),
    db: Session = Depends(get_db),
):
    service = MovieService(db)
    return service.delete_movie(movie_id)

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from vidly.core.config import Settings
from vidly.core.security import ANONYMOUS, AUTH_HEADER, Identity, get_current_identity
from vidly.dependencies import get_app_settings, get_db
from vidly.schemas import UserIn, UserResponse
from vidly.services import AuthService, UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse)
def get_me(
    identity: Identity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    if identity == ANONYMOUS:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )

    user_service = UserService(db)
    return user_service.get_user_by_id(identity.id)


@router.post("", response_model=UserResponse)
def register_user(
    register_data: UserIn,
    response: Response,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    auth_service = AuthService(db, settings)
    access_token, user = auth_service.register_user(register_data)
    response.headers[AUTH_HEADER] = access_token
    return user

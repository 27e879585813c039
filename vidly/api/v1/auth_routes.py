from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vidly.core.config import Settings
from vidly.dependencies import get_app_settings, get_db
from vidly.schemas import AuthIn
from vidly.services import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("", response_model=str)
def login_user(
    login_data: AuthIn,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    auth_service = AuthService(db, settings)
    return auth_service.login_user(login_data)

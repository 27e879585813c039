import logging
from typing import Tuple

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from vidly.core.config import Settings
from vidly.core.security import Identity, create_access_token, hash_password, verify_password
from vidly.models import User
from vidly.repository import user_repository
from vidly.schemas import AuthIn, UserIn

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def register_user(self, register_data: UserIn) -> Tuple[str, User]:
        existing_user = user_repository.get_user_by_email(self.db, register_data.email)
        if existing_user:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already registered.",
            )

        new_user = User(
            name=register_data.name,
            email=register_data.email,
            password_hash=hash_password(register_data.password),
        )

        try:
            user_repository.create_user(self.db, new_user)
            self.db.commit()
        except IntegrityError as exc:
            # Lost a race with another registration of the same email.
            self.db.rollback()
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already registered.",
            ) from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to register user %s", register_data.email)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unexpected error while saving user",
            ) from exc

        self.db.refresh(new_user)
        logger.info("User %s registered", new_user.id)
        return self.generate_auth_token(new_user), new_user

    def login_user(self, login_data: AuthIn) -> str:
        user = user_repository.get_user_by_email(self.db, login_data.email)
        if not user or not verify_password(login_data.password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Invalid email or password.",
            )
        return self.generate_auth_token(user)

    def generate_auth_token(self, user: User) -> str:
        return create_access_token(
            Identity(id=user.id, is_admin=bool(user.is_admin)),
            self.settings,
        )

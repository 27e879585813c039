from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from vidly.models import User
from vidly.repository import user_repository


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: str) -> User:
        user = user_repository.get_user_by_id(self.db, user_id)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"User with id {user_id} not found",
            )
        return user

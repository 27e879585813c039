"""Shared dependencies for the vidly service."""

from typing import Generator

from fastapi import HTTPException, Request, status

from vidly.core.config import Settings
from vidly.core.ids import is_valid_object_id


def get_db(request: Request) -> Generator:
    """Provide a database session for request handling."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def valid_object_id(id: str) -> str:
    """Reject malformed path identifiers with 404 before any lookup runs."""

    if not is_valid_object_id(id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Invalid ID.",
        )
    return id.lower()


__all__ = ["get_app_settings", "get_db", "valid_object_id"]

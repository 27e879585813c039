import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from jose import JWTError, jwt
from passlib.context import CryptContext

from vidly.core.config import Settings
from vidly.dependencies import get_app_settings

logger = logging.getLogger(__name__)

AUTH_HEADER = "x-auth-token"

token_header = APIKeyHeader(name=AUTH_HEADER, auto_error=False)

_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class Identity:
    """Caller identity carried inside a signed token."""

    id: str
    is_admin: bool = False


ANONYMOUS = Identity(id="", is_admin=False)


def hash_password(password: str) -> str:
    return _pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return _pwd_context.verify(password, password_hash)


def create_access_token(identity: Identity, settings: Settings) -> str:
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode = {"sub": identity.id, "isAdmin": identity.is_admin, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str, settings: Settings) -> Identity:
    invalid_token = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token.",
    )

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.ALGORITHM],
        )
    except JWTError as exc:
        logger.warning("Rejected token: %s", exc)
        raise invalid_token from exc

    user_id = payload.get("sub")
    if not user_id:
        logger.warning("Rejected token without subject")
        raise invalid_token

    return Identity(id=str(user_id), is_admin=bool(payload.get("isAdmin", False)))


def get_current_identity(
    token: Optional[str] = Depends(token_header),
    settings: Settings = Depends(get_app_settings),
) -> Identity:
    """Verify the header token and hand the decoded identity to the route.

    Raises 401 when the token is missing, tampered with or expired.
    """

    if not settings.REQUIRE_AUTH:
        return ANONYMOUS

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access denied. No token provided.",
        )

    return decode_access_token(token, settings)


def require_admin(identity: Identity = Depends(get_current_identity)) -> Identity:
    if not identity.is_admin:
        logger.warning("Admin access denied for user %s", identity.id or "<anonymous>")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied.",
        )
    return identity


__all__ = [
    "ANONYMOUS",
    "AUTH_HEADER",
    "Identity",
    "create_access_token",
    "decode_access_token",
    "get_current_identity",
    "hash_password",
    "require_admin",
    "verify_password",
]

from __future__ import annotations

from typing import Annotated

from pydantic import EmailStr, StringConstraints

from vidly.schemas.common import CamelModel, document_id

NameStr = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=5, max_length=50),
]
PasswordStr = Annotated[str, StringConstraints(min_length=5, max_length=255)]


class UserIn(CamelModel):
    name: NameStr
    email: EmailStr
    password: PasswordStr


class AuthIn(CamelModel):
    email: EmailStr
    password: PasswordStr


class UserResponse(CamelModel):
    id: str = document_id()
    name: str
    email: str
    is_admin: bool = False

"""User Schemas — sign-up/sign-in bodies and their responses.

Invariants:
    - Request fields are optional at the schema level: emptiness is judged by the
      identity service so every missing-field case yields the same ValidationFailure
    - No response ever carries password or password_hash
"""

from datetime import datetime

from pydantic import Field

from freight.schemas.common import CamelModel


class UserSignUpRequest(CamelModel):
    full_name: str | None = Field(None, max_length=200)
    email: str | None = Field(None, max_length=320)
    password: str | None = None


class UserSignInRequest(CamelModel):
    email: str | None = Field(None, max_length=320)
    password: str | None = None


class UserSignUpResponse(CamelModel):
    id: int
    full_name: str
    email: str


class ClaimsResponse(CamelModel):
    """Decoded identity claims, as carried in the token."""
    id: int
    email: str
    name: str


class SignInResponse(CamelModel):
    user: ClaimsResponse
    token: str
    expires_at: datetime

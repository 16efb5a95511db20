"""Auth Schemas: registration, login and token payloads.

Invariants:
    - UserResponse never includes password_hash
"""

from pydantic import Field

from place_reviews.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    phone: str = Field(min_length=3, max_length=32)
    password: str = Field(min_length=6, max_length=128)


class LoginRequest(CamelModel):
    phone: str = Field(min_length=1, max_length=32)
    password: str = Field(min_length=1, max_length=128)


class UserResponse(CamelModel):
    id: int
    name: str
    phone: str


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"

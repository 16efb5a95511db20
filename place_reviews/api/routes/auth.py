"""Auth Routes: registration and login."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from place_reviews.config import get_settings, Settings
from place_reviews.infrastructure.database import get_db
from place_reviews.infrastructure.security import create_access_token
from place_reviews.schemas.auth import (
    RegisterRequest, LoginRequest, UserResponse, TokenResponse,
)
from place_reviews.services.auth import register_user, authenticate_user

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/register", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    user = await register_user(db, body.name, body.phone, body.password)
    return UserResponse(id=user.id, name=user.name, phone=user.phone)


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user = await authenticate_user(db, body.phone, body.password)
    token = create_access_token(
        user.id,
        settings.jwt_secret,
        settings.jwt_algorithm,
        settings.jwt_expires_minutes,
    )
    return TokenResponse(access_token=token)

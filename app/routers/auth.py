"""Auth routes: register, login, me, logout. Identity travels in an http-only cookie."""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings
from app.core.deps import get_app_settings, get_client_ip, get_current_user_id
from app.core.security import create_session_token
from app.db.session import get_db
from app.schemas.auth import (
    AuthResponseSchema,
    LoginSchema,
    MeResponseSchema,
    MessageSchema,
    RegisterSchema,
    UserDetailSchema,
    UserOutSchema,
)
from app.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_auth_service(
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> AuthService:
    return AuthService(db, settings, login_limiter=request.app.state.login_limiter)


def _set_auth_cookie(response: Response, user_id: str, settings: Settings) -> None:
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=create_session_token(user_id, settings),
        max_age=settings.auth_cookie_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
        path="/",
    )


@router.post("/register", response_model=AuthResponseSchema, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterSchema,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Create the user and their empty progress, then log them in."""
    user = await service.register(body.name, body.email, body.password)
    _set_auth_cookie(response, user.id, settings)
    return AuthResponseSchema(
        message="User registered successfully",
        user=UserOutSchema.model_validate(user),
    )


@router.post("/login", response_model=AuthResponseSchema)
async def login(
    body: LoginSchema,
    response: Response,
    service: Annotated[AuthService, Depends(get_auth_service)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    client_ip: Annotated[str, Depends(get_client_ip)],
):
    user = await service.login(body.email, body.password, client_ip)
    _set_auth_cookie(response, user.id, settings)
    return AuthResponseSchema(message="Login successful", user=UserOutSchema.model_validate(user))


@router.get("/me", response_model=MeResponseSchema)
async def me(
    user_id: Annotated[str, Depends(get_current_user_id)],
    service: Annotated[AuthService, Depends(get_auth_service)],
):
    user = await service.me(user_id)
    return MeResponseSchema(user=UserDetailSchema.model_validate(user))


@router.post("/logout", response_model=MessageSchema)
async def logout(
    response: Response,
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Clear the auth cookie. The token itself stays valid until it expires."""
    # path must match the one used in set_cookie()
    response.delete_cookie(
        settings.auth_cookie_name,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return MessageSchema(message="Logged out successfully")

"""Request dependencies: settings, current user id from the session cookie."""
from typing import Annotated

from fastapi import Depends, Request

from app.core.config import Settings
from app.core.exceptions import Unauthenticated
from app.core.security import verify_session_token


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_current_user_id(
    request: Request,
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """User id from a valid session cookie. 401 without a cookie, 403 for a bad or expired one."""
    token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise Unauthenticated()
    return verify_session_token(token, settings)


def get_client_ip(request: Request) -> str:
    return request.client.host if request.client else "unknown"

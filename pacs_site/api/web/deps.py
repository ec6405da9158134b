"""Session cookie handling and the admin gate used by the HTML routes."""

from typing import Annotated

import jwt
from fastapi import Depends, Request
from sqlalchemy.orm import Session
from starlette.responses import Response

from pacs_site.core.config import settings
from pacs_site.core.database import get_db
from pacs_site.core.errors import NotAuthenticated
from pacs_site.core.security import create_session_cookie, decode_session_cookie
from pacs_site.models import UserSession
from pacs_site.models.role import ROLE_ADMIN
from pacs_site.schemas.auth import CurrentUser
from pacs_site.services.auth import resolve_session


def session_id_from_request(request: Request) -> str | None:
    """Session id from a correctly signed, unexpired cookie; None otherwise."""
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        return decode_session_cookie(token)
    except jwt.PyJWTError:
        return None


def set_session_cookie(response: Response, record: UserSession) -> None:
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_session_cookie(record.id, record.expires_at),
        max_age=settings.SESSION_TTL_HOURS * 3600,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)


def get_optional_user(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser | None:
    """Dependency: the logged-in user if any. Also stored on request.state for templates."""
    session_id = session_id_from_request(request)
    user = resolve_session(db, session_id) if session_id else None
    request.state.user = user
    return user


def require_admin_session(
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> CurrentUser:
    """Dependency: admin session required; otherwise NotAuthenticated (redirect to /login)."""
    if user is None or user.role != ROLE_ADMIN:
        raise NotAuthenticated("Authentification administrateur requise.")
    return user

"""Login form, session creation and logout."""

from typing import Annotated

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette.responses import Response

from pacs_site.api.web.deps import (
    clear_session_cookie,
    get_optional_user,
    session_id_from_request,
    set_session_cookie,
)
from pacs_site.api.web.templating import render
from pacs_site.core.database import get_db
from pacs_site.core.errors import InvalidCredentials, PersistenceError
from pacs_site.schemas.auth import CurrentUser
from pacs_site.services.auth import close_session, login

router = APIRouter()


@router.get("/login")
def get_login(
    request: Request,
    _user: Annotated[CurrentUser | None, Depends(get_optional_user)],
) -> Response:
    return render(request, "login.html", {"error": None})


@router.post("/login")
def post_login(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    username: Annotated[str | None, Form()] = None,
    password: Annotated[str | None, Form()] = None,
) -> Response:
    """
    Check username/password. On success the session cookie is set and the
    browser goes to /admin; on failure the form is shown again with the error.
    """
    try:
        record = login(
            db,
            username,
            password,
            previous_session_id=session_id_from_request(request),
        )
    except (InvalidCredentials, PersistenceError) as e:
        return render(request, "login.html", {"error": e.message, "username": username or ""})

    response = RedirectResponse("/admin", status_code=303)
    set_session_cookie(response, record)
    return response


@router.get("/logout")
def logout(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Destroy the session; protected pages need a new login afterwards."""
    session_id = session_id_from_request(request)
    if session_id:
        close_session(db, session_id)
    response = RedirectResponse("/", status_code=303)
    clear_session_cookie(response)
    return response

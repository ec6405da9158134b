"""Admin dashboard and creation forms. Every route requires an admin session."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette.responses import Response

from pacs_site.api.web.deps import require_admin_session
from pacs_site.api.web.templating import render
from pacs_site.core.database import get_db
from pacs_site.schemas.auth import CurrentUser
from pacs_site.schemas.forms import EventForm, VolunteerForm, parse_form
from pacs_site.services.site import create_event, create_volunteer, fetch_dashboard

router = APIRouter()


@router.get("")
def dashboard(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin_session)],
) -> Response:
    """Events, registrations, volunteers, contact messages and orders in one page."""
    return render(request, "admin.html", {"dashboard": fetch_dashboard(db)})


@router.post("/events/add")
async def add_event(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin_session)],
) -> Response:
    form = parse_form(EventForm, dict(await request.form()))
    create_event(db, form)
    return RedirectResponse("/admin", status_code=303)


@router.post("/volunteers/add")
async def add_volunteer(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin_session)],
) -> Response:
    form = parse_form(VolunteerForm, dict(await request.form()))
    create_volunteer(db, form)
    return RedirectResponse("/admin", status_code=303)

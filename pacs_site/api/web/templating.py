"""Jinja2 environment shared by the HTML routes and the error handlers."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from pacs_site.services.cart import format_eur

PACKAGE_DIR = Path(__file__).resolve().parents[2]
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"


def _current_user(request: Request) -> dict[str, Any]:
    """Expose the logged-in user (or None) to every template."""
    return {"user": getattr(request.state, "user", None)}


templates = Jinja2Templates(directory=str(TEMPLATES_DIR), context_processors=[_current_user])
templates.env.filters["eur"] = format_eur


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    return templates.TemplateResponse(request, name, context or {}, status_code=status_code)

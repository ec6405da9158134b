"""Public pages: home (events, volunteers, shop) and the visitor forms."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from starlette.responses import Response

from pacs_site.api.web.deps import get_optional_user
from pacs_site.api.web.templating import render
from pacs_site.core.config import settings
from pacs_site.core.database import get_db
from pacs_site.schemas.auth import CurrentUser
from pacs_site.schemas.forms import ContactForm, RegistrationForm, parse_form
from pacs_site.services.cart import CART_STORAGE_KEY, CHECKOUT_SUBJECT, Cart, MemoryStorage
from pacs_site.services.site import create_contact, fetch_home_data, register_for_event

router = APIRouter()


@router.get("/")
def home(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser | None, Depends(get_optional_user)],
    success: str | None = None,
    contact: str | None = None,
) -> Response:
    """
    Home page. ?success=1 and ?contact=1 show the confirmation banners
    after a registration or a contact message.
    """
    page = fetch_home_data(db)
    # The drawer is painted empty server-side; site.js re-renders it from localStorage.
    cart = Cart(MemoryStorage(), storage_key=CART_STORAGE_KEY)
    return render(
        request,
        "index.html",
        {
            "page": page,
            "categories": sorted({p.category_name for p in page.products}),
            "success": success == "1",
            "contact_success": contact == "1",
            "cart": cart.view,
            "cart_key": CART_STORAGE_KEY,
            "shop_email": settings.SHOP_CONTACT_EMAIL,
            "checkout_subject": CHECKOUT_SUBJECT,
        },
    )


@router.post("/events/register")
async def post_registration(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Sign a visitor up for an event. Requires event_id, name and email."""
    form = parse_form(RegistrationForm, dict(await request.form()))
    register_for_event(db, form)
    return RedirectResponse("/?success=1", status_code=303)


@router.post("/contact")
async def post_contact(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    """Store a contact message. Requires name, email and message."""
    form = parse_form(ContactForm, dict(await request.form()))
    create_contact(db, form)
    return RedirectResponse("/?contact=1", status_code=303)

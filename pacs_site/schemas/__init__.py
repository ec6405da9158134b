"""Pydantic request/response schemas."""

from pacs_site.schemas.auth import CurrentUser
from pacs_site.schemas.cart import CartLine, CartLineView, CartProduct, CartView, CheckoutDraft
from pacs_site.schemas.forms import (
    ContactForm,
    EventForm,
    RegistrationForm,
    VolunteerForm,
    parse_form,
)
from pacs_site.schemas.health import HealthResponse
from pacs_site.schemas.pages import (
    ContactItem,
    Dashboard,
    EventItem,
    HomePage,
    OrderSummary,
    ProductItem,
    RegistrationItem,
    VolunteerItem,
)

__all__ = [
    "CartLine",
    "CartLineView",
    "CartProduct",
    "CartView",
    "CheckoutDraft",
    "ContactForm",
    "ContactItem",
    "CurrentUser",
    "Dashboard",
    "EventForm",
    "EventItem",
    "HealthResponse",
    "HomePage",
    "OrderSummary",
    "ProductItem",
    "RegistrationForm",
    "RegistrationItem",
    "VolunteerForm",
    "VolunteerItem",
    "parse_form",
]

"""SQLAlchemy ORM models."""

from pacs_site.models.base import Base
from pacs_site.models.catalog import Category, Product
from pacs_site.models.contact import Contact
from pacs_site.models.event import Event, Registration
from pacs_site.models.order import Order, OrderItem
from pacs_site.models.role import Role
from pacs_site.models.session import UserSession
from pacs_site.models.user import User
from pacs_site.models.volunteer import Volunteer

__all__ = [
    "Base",
    "Category",
    "Contact",
    "Event",
    "Order",
    "OrderItem",
    "Product",
    "Registration",
    "Role",
    "User",
    "UserSession",
    "Volunteer",
]

"""Aggregate payloads rendered by the home page and the admin dashboard."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class _Row(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class EventItem(_Row):
    id: int
    title: str
    description: str | None = None
    date: str
    start_time: str
    end_time: str | None = None
    location: str
    cost: str | None = None
    capacity: int | None = None


class VolunteerItem(_Row):
    id: int
    name: str
    position: str
    bio: str | None = None
    photo: str | None = None


class ProductItem(_Row):
    """Product joined with its category name (used by the shop filters)."""

    id: int
    name: str
    description: str | None = None
    price: float
    image: str | None = None
    category_name: str


class RegistrationItem(_Row):
    id: int
    event_id: int
    event_title: str
    name: str
    email: str
    phone: str | None = None
    created_at: datetime


class ContactItem(_Row):
    id: int
    name: str
    email: str
    phone: str | None = None
    subject: str | None = None
    message: str
    created_at: datetime


class OrderSummary(_Row):
    """Order with its number of line items."""

    id: int
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    created_at: datetime
    total: float
    items: int = Field(default=0, ge=0)


class HomePage(BaseModel):
    events: list[EventItem]
    volunteers: list[VolunteerItem]
    products: list[ProductItem]


class Dashboard(BaseModel):
    events: list[EventItem]
    registrations: list[RegistrationItem]
    volunteers: list[VolunteerItem]
    contacts: list[ContactItem]
    orders: list[OrderSummary]

"""
Page aggregates and form inserts for the public site and the admin dashboard.

Aggregates run their independent queries in one session and return a single
payload, or raise PersistenceError: pages never render partial data. Each
insert is its own short transaction.
"""

import logging
from typing import TypeVar

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pacs_site.core.errors import PersistenceError, ValidationError
from pacs_site.models import (
    Base,
    Category,
    Contact,
    Event,
    Order,
    OrderItem,
    Product,
    Registration,
    Volunteer,
)
from pacs_site.schemas.forms import ContactForm, EventForm, RegistrationForm, VolunteerForm
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

logger = logging.getLogger(__name__)

HOME_LOAD_ERROR = "Erreur lors du chargement des données"
DASHBOARD_LOAD_ERROR = "Erreur lors de la récupération des données"
REGISTRATION_INSERT_ERROR = "Erreur lors de l’inscription à l’atelier."
CONTACT_INSERT_ERROR = "Erreur lors de l’enregistrement du message."
EVENT_INSERT_ERROR = "Erreur lors de la création de l’événement"
VOLUNTEER_INSERT_ERROR = "Erreur lors de la création du bénévole"
UNKNOWN_EVENT_MESSAGE = "Cet atelier n’existe pas."

RowT = TypeVar("RowT", bound=Base)


def list_events(db: Session) -> list[EventItem]:
    """All events in chronological order."""
    rows = db.query(Event).order_by(Event.date.asc(), Event.start_time.asc(), Event.id.asc())
    return [EventItem.model_validate(e) for e in rows.all()]


def list_volunteers(db: Session) -> list[VolunteerItem]:
    return [VolunteerItem.model_validate(v) for v in db.query(Volunteer).order_by(Volunteer.id).all()]


def list_products(db: Session) -> list[ProductItem]:
    """Products joined with their category name."""
    rows = (
        db.query(
            Product.id,
            Product.name,
            Product.description,
            Product.price,
            Product.image,
            Category.name.label("category_name"),
        )
        .join(Category, Product.category_id == Category.id)
        .order_by(Product.id)
        .all()
    )
    return [ProductItem.model_validate(r) for r in rows]


def list_registrations(db: Session) -> list[RegistrationItem]:
    """Registrations with their event title, newest first."""
    rows = (
        db.query(
            Registration.id,
            Registration.event_id,
            Event.title.label("event_title"),
            Registration.name,
            Registration.email,
            Registration.phone,
            Registration.created_at,
        )
        .join(Event, Registration.event_id == Event.id)
        .order_by(Registration.created_at.desc(), Registration.id.desc())
        .all()
    )
    return [RegistrationItem.model_validate(r) for r in rows]


def list_contacts(db: Session) -> list[ContactItem]:
    rows = db.query(Contact).order_by(Contact.created_at.desc(), Contact.id.desc()).all()
    return [ContactItem.model_validate(c) for c in rows]


def list_orders(db: Session) -> list[OrderSummary]:
    """Orders with their line-item count, newest first."""
    rows = (
        db.query(
            Order.id,
            Order.name,
            Order.email,
            Order.phone,
            Order.created_at,
            Order.total,
            func.count(OrderItem.id).label("items"),
        )
        .outerjoin(OrderItem, OrderItem.order_id == Order.id)
        .group_by(Order.id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )
    return [OrderSummary.model_validate(r) for r in rows]


def fetch_home_data(db: Session) -> HomePage:
    """Events, volunteers and products for the home page."""
    try:
        return HomePage(
            events=list_events(db),
            volunteers=list_volunteers(db),
            products=list_products(db),
        )
    except SQLAlchemyError as e:
        logger.exception("Home page aggregate failed")
        raise PersistenceError(HOME_LOAD_ERROR) from e


def fetch_dashboard(db: Session) -> Dashboard:
    """Everything the admin overview lists."""
    try:
        return Dashboard(
            events=list_events(db),
            registrations=list_registrations(db),
            volunteers=list_volunteers(db),
            contacts=list_contacts(db),
            orders=list_orders(db),
        )
    except SQLAlchemyError as e:
        logger.exception("Dashboard aggregate failed")
        raise PersistenceError(DASHBOARD_LOAD_ERROR) from e


def _insert(db: Session, row: RowT, error_message: str) -> RowT:
    try:
        db.add(row)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Insert into %s failed", row.__tablename__)
        raise PersistenceError(error_message) from e
    logger.info("Inserted %s id=%s", row.__tablename__, row.id)
    return row


def register_for_event(db: Session, form: RegistrationForm) -> Registration:
    try:
        event = db.get(Event, form.event_id)
    except SQLAlchemyError as e:
        logger.exception("Event lookup failed for registration")
        raise PersistenceError(REGISTRATION_INSERT_ERROR) from e
    if event is None:
        raise ValidationError(UNKNOWN_EVENT_MESSAGE)
    return _insert(
        db,
        Registration(
            event_id=event.id,
            name=form.name,
            email=form.email,
            phone=form.phone,
        ),
        REGISTRATION_INSERT_ERROR,
    )


def create_contact(db: Session, form: ContactForm) -> Contact:
    return _insert(db, Contact(**form.model_dump()), CONTACT_INSERT_ERROR)


def create_event(db: Session, form: EventForm) -> Event:
    return _insert(db, Event(**form.model_dump()), EVENT_INSERT_ERROR)


def create_volunteer(db: Session, form: VolunteerForm) -> Volunteer:
    return _insert(db, Volunteer(**form.model_dump()), VOLUNTEER_INSERT_ERROR)

"""
Startup bootstrap: schema creation, role taxonomy, default admin, demo content.

Idempotent: safe to run on every start. Roles and the default admin are
written in a single transaction so one never exists without the other.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from pacs_site.core.errors import BootstrapError
from pacs_site.core.security import hash_password
from pacs_site.models import (
    Base,
    Category,
    Event,
    Product,
    Role,
    User,
    Volunteer,
)
from pacs_site.models.role import ROLE_ADMIN, ROLE_NAMES

if TYPE_CHECKING:
    from pacs_site.core.config import Settings

logger = logging.getLogger(__name__)

DEMO_VOLUNTEERS = (
    {
        "name": "Alice Martin",
        "position": "Coordinatrice numérique",
        "bio": "Anime des ateliers d’initiation au numérique et aide les usagers "
        "à se familiariser avec les outils en ligne.",
        "photo": "https://images.unsplash.com/photo-1502685104226-ee32379fefbe"
        "?auto=format&fit=crop&w=400&q=60",
    },
    {
        "name": "Jean Dupont",
        "position": "Juriste bénévole",
        "bio": "Offre des consultations gratuites sur les droits sociaux et oriente "
        "les bénéficiaires vers les partenaires appropriés.",
        "photo": "https://images.unsplash.com/photo-1607746882042-944635dfe10e"
        "?auto=format&fit=crop&w=400&q=60",
    },
    {
        "name": "Sophie Leblanc",
        "position": "Responsable Resto/Broc",
        "bio": "Gère le restaurant et la brocante solidaire, tout en favorisant "
        "l’insertion des bénévoles en cuisine et en salle.",
        "photo": "https://images.unsplash.com/photo-1550525811-e5869dd03032"
        "?auto=format&fit=crop&w=400&q=60",
    },
)

DEMO_EVENTS = (
    {
        "title": 'Atelier "Premiers pas numériques"',
        "description": "Créer une adresse mail, mots de passe, sécurité",
        "date": "2025-09-21",
        "start_time": "10:00",
        "end_time": "12:00",
        "location": "Maison des Associations",
        "cost": "gratuit",
        "capacity": 10,
    },
    {
        "title": "Permanence juridique (droits sociaux)",
        "description": "Première information, orientation et aide aux courriers.",
        "date": "2025-09-25",
        "start_time": "14:00",
        "end_time": "17:00",
        "location": "Salle 2",
        "cost": "gratuit",
        "capacity": None,
    },
    {
        "title": 'Soirée "Chiner & Dîner"',
        "description": "Soirée spéciale au Resto/Broc avec plat unique.",
        "date": "2025-10-12",
        "start_time": "19:30",
        "end_time": None,
        "location": "Resto/Broc",
        "cost": "prix solidaire",
        "capacity": None,
    },
)

DEMO_CATEGORIES = ("merch", "broc")

# (name, description, price, image, category name)
DEMO_PRODUCTS = (
    (
        "T-shirt PACS/SIMPA",
        "Coton bio – Blanc",
        20.0,
        "https://images.unsplash.com/photo-1520975682031-ae7c8b1a9a02"
        "?q=80&w=1200&auto=format&fit=crop",
        "merch",
    ),
    (
        "Hoodie",
        "Molleton doux – Bleu",
        38.0,
        "https://images.unsplash.com/photo-1548883354-7622d03aca27"
        "?q=80&w=1200&auto=format&fit=crop",
        "merch",
    ),
    (
        "Tote Bag",
        "Coton épais",
        12.0,
        "https://images.unsplash.com/photo-1618354691438-c1d83adfb4b3"
        "?q=80&w=1200&auto=format&fit=crop",
        "merch",
    ),
    (
        "Service d’assiettes vintage (x6)",
        "Porcelaine – État : Très bon",
        28.0,
        "https://images.unsplash.com/photo-1523419409543-8c1b9b9aa4a0"
        "?q=80&w=1200&auto=format&fit=crop",
        "broc",
    ),
)


def create_schema(engine: Engine) -> None:
    """Create missing tables. Existing tables are left untouched."""
    Base.metadata.create_all(bind=engine)


def seed_roles_and_admin(db: Session, admin_username: str, admin_password: str) -> None:
    """
    Add missing roles, then the default admin if there are no users at all.
    Does not commit; the caller owns the transaction.
    """
    existing = {name for (name,) in db.query(Role.name).all()}
    missing = [name for name in ROLE_NAMES if name not in existing]
    if missing:
        db.add_all(Role(name=name) for name in missing)
        db.flush()
        logger.info("Seeded roles: %s", ", ".join(missing))

    if db.query(User).count() == 0:
        admin_role = db.query(Role).filter(Role.name == ROLE_ADMIN).one()
        db.add(
            User(
                username=admin_username,
                password=hash_password(admin_password),
                role_id=admin_role.id,
            )
        )
        db.flush()
        logger.warning(
            "Created default admin account '%s'; change its password.", admin_username
        )


def seed_demo_content(db: Session) -> None:
    """Fill empty volunteers/events/categories/products tables with the showcase data."""
    if db.query(Volunteer).count() == 0:
        db.add_all(Volunteer(**row) for row in DEMO_VOLUNTEERS)
    if db.query(Event).count() == 0:
        db.add_all(Event(**row) for row in DEMO_EVENTS)
    if db.query(Category).count() == 0:
        db.add_all(Category(name=name) for name in DEMO_CATEGORIES)
        db.flush()
    if db.query(Product).count() == 0:
        category_ids = {c.name: c.id for c in db.query(Category).all()}
        db.add_all(
            Product(
                name=name,
                description=description,
                price=price,
                image=image,
                category_id=category_ids[category],
            )
            for name, description, price, image, category in DEMO_PRODUCTS
            if category in category_ids
        )
    db.flush()


def bootstrap(session_factory: sessionmaker, settings: "Settings") -> None:
    """
    Seed roles and the default admin atomically, then demo content.
    Raises BootstrapError after rolling back if the roles/admin unit fails.
    """
    db = session_factory()
    try:
        seed_roles_and_admin(
            db,
            settings.DEFAULT_ADMIN_USERNAME,
            settings.DEFAULT_ADMIN_PASSWORD.get_secret_value(),
        )
        db.commit()
    except Exception as e:
        db.rollback()
        raise BootstrapError("Role and admin seeding failed") from e
    finally:
        db.close()

    if not settings.SEED_DEMO_CONTENT:
        return
    db = session_factory()
    try:
        seed_demo_content(db)
        db.commit()
    except Exception as e:
        db.rollback()
        raise BootstrapError("Demo content seeding failed") from e
    finally:
        db.close()


def run_startup(engine: Engine, session_factory: sessionmaker, settings: "Settings") -> bool:
    """Create the schema and bootstrap; log failures instead of raising. Returns success."""
    try:
        create_schema(engine)
        bootstrap(session_factory, settings)
    except BootstrapError as e:
        logger.exception("Bootstrap failed: %s; serving without it", e.message)
        return False
    except Exception:
        logger.exception("Schema creation failed; serving without bootstrap")
        return False
    logger.info("Bootstrap completed")
    return True

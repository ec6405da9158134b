"""ORM model for permission tiers."""

from sqlalchemy import Column, Integer, String

from pacs_site.models.base import Base

ROLE_ADMIN = "admin"
ROLE_STAFF = "staff"
ROLE_VOLUNTEER = "volunteer"
# Seed order matters: ids 1..3 on a fresh database.
ROLE_NAMES = (ROLE_ADMIN, ROLE_STAFF, ROLE_VOLUNTEER)


class Role(Base):
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(32), nullable=False, unique=True)

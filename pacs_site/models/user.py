"""ORM model for staff, volunteer and admin accounts."""

from sqlalchemy import Column, ForeignKey, Integer, String

from pacs_site.models.base import Base


class User(Base):
    """
    Account able to log in. Exactly one role per user (role_id).

    password holds a bcrypt hash, never the plain password.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=True, unique=True)
    password = Column(String(255), nullable=False)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=False)

"""ORM model for publicly listed team members."""

from sqlalchemy import Column, ForeignKey, Integer, String, Text

from pacs_site.models.base import Base


class Volunteer(Base):
    """Public profile; optionally linked to a login account."""

    __tablename__ = "volunteers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    position = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    photo = Column(String(2048), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)

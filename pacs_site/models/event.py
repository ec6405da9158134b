"""ORM models for scheduled events and their sign-ups."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func

from pacs_site.models.base import Base


class Event(Base):
    """
    Workshop or event. date (YYYY-MM-DD) and start_time (HH:MM) are kept as
    text so that lexical order is chronological order.
    """

    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(String(10), nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=True)
    location = Column(String(255), nullable=False)
    cost = Column(String(255), nullable=True)
    capacity = Column(Integer, nullable=True)


class Registration(Base):
    __tablename__ = "registrations"

    id = Column(Integer, primary_key=True, autoincrement=True)
    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

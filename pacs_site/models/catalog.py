"""ORM models for the solidarity shop catalogue."""

from sqlalchemy import Column, Float, ForeignKey, Integer, String, Text

from pacs_site.models.base import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(64), nullable=False, unique=True)


class Product(Base):
    """Shop item; read-only on the site, seeded at bootstrap."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    image = Column(String(2048), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)

"""SQLAlchemy ORM model for products."""

from sqlalchemy import Column, String

from .base import Base
from .types import ExactNumeric


class ProductModel(Base):
    """SQLAlchemy ORM model for products table."""

    __tablename__ = "products"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(ExactNumeric, nullable=False)

"""SQLAlchemy ORM model for customers."""

from sqlalchemy import Boolean, Column, Integer, String

from .base import Base


class CustomerModel(Base):
    """SQLAlchemy ORM model for customers table."""

    __tablename__ = "customers"

    id = Column(String(255), primary_key=True)
    name = Column(String(255), nullable=False)

    # Address (flattened, all nullable until an address is set)
    street = Column(String(255), nullable=True)
    number = Column(Integer, nullable=True)
    zipcode = Column(String(50), nullable=True)
    city = Column(String(255), nullable=True)

    active = Column(Boolean, default=False, nullable=False)
    reward_points = Column(Integer, default=0, nullable=False)

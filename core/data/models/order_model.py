"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import Base
from .types import ExactNumeric


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(255), primary_key=True)
    customer_id = Column(String(255), ForeignKey("customers.id"), nullable=False)
    # Denormalized, written from Order.total()
    total = Column(ExactNumeric, nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table.

    Item ids are only unique within their order, hence the composite key.
    """

    __tablename__ = "order_items"

    order_id = Column(String(255), ForeignKey("orders.id"), primary_key=True)
    id = Column(String(255), primary_key=True)
    name = Column(String(500), nullable=False)
    price = Column(ExactNumeric, nullable=False)
    quantity = Column(Integer, nullable=False)
    product_id = Column(String(255), ForeignKey("products.id"), nullable=False)
    position = Column(Integer, nullable=False, default=0)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

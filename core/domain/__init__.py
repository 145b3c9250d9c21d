"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .exceptions import (
    CustomerNotFoundError,
    DomainError,
    NotFoundError,
    OrderNotFoundError,
    PersistenceError,
    ProductNotFoundError,
    ValidationError,
)
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .value_objects import Address

__all__ = [
    "Address",
    "Customer",
    "CustomerNotFoundError",
    "CustomerRepository",
    "DomainError",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderNotFoundError",
    "OrderRepository",
    "PersistenceError",
    "Product",
    "ProductNotFoundError",
    "ProductRepository",
    "ValidationError",
]

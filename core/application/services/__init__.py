"""Application services."""
from .customer_store import CustomerStore
from .order_store import OrderStore
from .product_store import ProductStore

__all__ = ["CustomerStore", "OrderStore", "ProductStore"]

"""Application layer - stores coordinating domain and persistence."""

from .services import CustomerStore, OrderStore, ProductStore

__all__ = ["CustomerStore", "OrderStore", "ProductStore"]

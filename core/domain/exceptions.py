"""
Domain error taxonomy.

Every failure of a store operation surfaces to the caller as one of these.
"""


class DomainError(Exception):
    """Base error for domain and persistence operations."""
    pass


class ValidationError(DomainError, ValueError):
    """Inconsistent input rejected at the aggregate boundary."""
    pass


class NotFoundError(DomainError):
    """Requested aggregate has no matching row."""

    entity = "Entity"

    def __init__(self, entity_id: str):
        self.entity_id = entity_id
        super().__init__(f"{self.entity} with id {entity_id} not found.")


class OrderNotFoundError(NotFoundError):
    entity = "Order"


class CustomerNotFoundError(NotFoundError):
    entity = "Customer"


class ProductNotFoundError(NotFoundError):
    entity = "Product"


class PersistenceError(DomainError):
    """Underlying storage read/write failure (constraint, connectivity)."""
    pass

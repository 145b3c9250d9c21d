"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Insert a new order together with its items.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order id

        Returns:
            Order aggregate

        Raises:
            OrderNotFoundError: If no order matches
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """List every order with its items.

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Reconcile the persisted order with the given aggregate.

        Args:
            order: Order aggregate carrying the new state

        Raises:
            OrderNotFoundError: If the order row does not exist
        """
        pass

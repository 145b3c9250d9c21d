"""Application service persisting Order aggregates."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.data.uow import create_uow
from core.domain.entities.order import Order
from core.domain.exceptions import OrderNotFoundError, PersistenceError


logger = logging.getLogger(__name__)


class OrderStore:
    """
    Store for the Order aggregate (orders + order_items).

    Every operation runs in its own Unit of Work: one session, one
    transaction, committed on success and rolled back on any error.
    Storage errors surface as PersistenceError, unknown ids as
    OrderNotFoundError.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order store.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def create(self, order: Order) -> None:
        """Insert a new order and all its items atomically.

        Args:
            order: Order aggregate; its id must not be persisted yet

        Raises:
            PersistenceError: On duplicate id, missing customer/product
                or any other storage failure
        """
        logger.info(f"Creating order: {order.id} ({len(order.items)} item(s))")
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.orders.create(order)
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to create order {order.id}: {e}")
            raise PersistenceError(f"Could not create order {order.id}") from e

        logger.info(f"✅ Created order: {order.id}")

    async def find(self, order_id: str) -> Order:
        """Get order by id.

        Raises:
            OrderNotFoundError: If no order matches
            PersistenceError: On storage failure
        """
        try:
            async with create_uow(self._session_factory) as uow:
                return await uow.orders.find(order_id)
        except OrderNotFoundError:
            logger.info(f"Order not found: {order_id}")
            raise
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load order {order_id}: {e}")
            raise PersistenceError(f"Could not load order {order_id}") from e

    async def find_all(self) -> List[Order]:
        """List every order with its items."""
        try:
            async with create_uow(self._session_factory) as uow:
                orders = await uow.orders.find_all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to list orders: {e}")
            raise PersistenceError("Could not list orders") from e

        logger.info(f"Found {len(orders)} order(s)")
        return orders

    async def update(self, order: Order) -> None:
        """Update order header and reconcile its items.

        Items are matched by id within this order: matches are updated,
        new ids inserted, ids no longer present deleted.

        Raises:
            OrderNotFoundError: If the order row does not exist
            PersistenceError: On storage failure
        """
        logger.info(f"Updating order: {order.id}")
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.orders.update(order)
                await uow.commit()
        except OrderNotFoundError as e:
            logger.error(f"❌ Error occurred during order update: {e}")
            raise
        except SQLAlchemyError as e:
            logger.error(f"❌ Error occurred during order update {order.id}: {e}")
            raise PersistenceError(f"Could not update order {order.id}") from e

        logger.info(f"✅ Updated order: {order.id}")

"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.exceptions import OrderNotFoundError
from core.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderItemMapper, OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy.

    Works inside the caller's session and only flushes; committing is
    left to the Unit of Work.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Insert order row and item rows in one flush.

        Args:
            order: Order domain aggregate
        """
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()  # Propagate to DB without committing

    async def find(self, order_id: str) -> Order:
        """Retrieve order by id with its items eagerly loaded.

        Args:
            order_id: Order id

        Returns:
            Order aggregate

        Raises:
            OrderNotFoundError: If no order matches
        """
        model = await self._load(order_id)

        if model is None:
            raise OrderNotFoundError(order_id)

        return OrderMapper.to_domain(model)

    async def find_all(self) -> List[Order]:
        """List all orders with their items.

        Returns:
            List of Order aggregates in storage order
        """
        result = await self._session.execute(
            select(OrderModel).options(selectinload(OrderModel.items))
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def update(self, order: Order) -> None:
        """Reconcile persisted rows with the aggregate.

        The header update silently matches nothing for an unknown id; the
        reload that follows is what raises.

        Args:
            order: Order aggregate carrying the new state

        Raises:
            OrderNotFoundError: If the order row does not exist
        """
        await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .values(customer_id=order.customer_id, total=order.total())
        )

        model = await self._load(order.id, refresh=True)
        if model is None:
            raise OrderNotFoundError(order.id)

        # Rows are keyed by (order_id, id): only this order's items are candidates
        existing = {item_model.id: item_model for item_model in model.items}
        incoming_ids = {item.id for item in order.items}

        for position, item in enumerate(order.items):
            item_model = existing.get(item.id)
            if item_model is None:
                model.items.append(
                    OrderItemMapper.to_persistence(item, order.id, position)
                )
            else:
                OrderItemMapper.update_persistence(item, item_model, position)

        removed = [m for item_id, m in existing.items() if item_id not in incoming_ids]
        for item_model in removed:
            # delete-orphan cascade issues the DELETE on flush
            model.items.remove(item_model)

        if removed:
            logger.info(
                f"Removing {len(removed)} stale item(s) from order {order.id}"
            )

        await self._session.flush()

    async def _load(self, order_id: str, refresh: bool = False) -> Optional[OrderModel]:
        stmt = (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)

        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

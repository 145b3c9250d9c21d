"""Application service persisting Customer aggregates."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.data.uow import create_uow
from core.domain.entities.customer import Customer
from core.domain.exceptions import PersistenceError


logger = logging.getLogger(__name__)


class CustomerStore:
    """Store for customers, one transaction per operation."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def create(self, customer: Customer) -> None:
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.customers.create(customer)
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to create customer {customer.id}: {e}")
            raise PersistenceError(f"Could not create customer {customer.id}") from e

        logger.info(f"✅ Created customer: {customer.id}")

    async def find(self, customer_id: str) -> Customer:
        """Raises CustomerNotFoundError when absent."""
        try:
            async with create_uow(self._session_factory) as uow:
                return await uow.customers.find(customer_id)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load customer {customer_id}: {e}")
            raise PersistenceError(f"Could not load customer {customer_id}") from e

    async def find_all(self) -> List[Customer]:
        try:
            async with create_uow(self._session_factory) as uow:
                return await uow.customers.find_all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to list customers: {e}")
            raise PersistenceError("Could not list customers") from e

    async def update(self, customer: Customer) -> None:
        """Raises CustomerNotFoundError when absent."""
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.customers.update(customer)
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to update customer {customer.id}: {e}")
            raise PersistenceError(f"Could not update customer {customer.id}") from e

        logger.info(f"✅ Updated customer: {customer.id}")

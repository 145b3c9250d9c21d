"""Application service persisting Product aggregates."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from core.data.uow import create_uow
from core.domain.entities.product import Product
from core.domain.exceptions import PersistenceError


logger = logging.getLogger(__name__)


class ProductStore:
    """Store for products, one transaction per operation."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def create(self, product: Product) -> None:
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.products.create(product)
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to create product {product.id}: {e}")
            raise PersistenceError(f"Could not create product {product.id}") from e

        logger.info(f"✅ Created product: {product.id}")

    async def find(self, product_id: str) -> Product:
        """Raises ProductNotFoundError when absent."""
        try:
            async with create_uow(self._session_factory) as uow:
                return await uow.products.find(product_id)
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to load product {product_id}: {e}")
            raise PersistenceError(f"Could not load product {product_id}") from e

    async def find_all(self) -> List[Product]:
        try:
            async with create_uow(self._session_factory) as uow:
                return await uow.products.find_all()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to list products: {e}")
            raise PersistenceError("Could not list products") from e

    async def update(self, product: Product) -> None:
        """Raises ProductNotFoundError when absent."""
        try:
            async with create_uow(self._session_factory) as uow:
                await uow.products.update(product)
                await uow.commit()
        except SQLAlchemyError as e:
            logger.error(f"❌ Failed to update product {product.id}: {e}")
            raise PersistenceError(f"Could not update product {product.id}") from e

        logger.info(f"✅ Updated product: {product.id}")

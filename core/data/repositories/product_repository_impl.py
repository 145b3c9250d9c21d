"""SQLAlchemy implementation of ProductRepository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.product import Product
from core.domain.exceptions import ProductNotFoundError
from core.domain.repositories.product_repository import ProductRepository

from ..mappers import ProductMapper
from ..models.product_model import ProductModel


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        self._session.add(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def find(self, product_id: str) -> Product:
        model = await self._session.get(ProductModel, product_id)
        if model is None:
            raise ProductNotFoundError(product_id)
        return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        result = await self._session.execute(select(ProductModel))
        return [ProductMapper.to_domain(model) for model in result.scalars().all()]

    async def update(self, product: Product) -> None:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            raise ProductNotFoundError(product.id)
        ProductMapper.update_persistence(product, model)
        await self._session.flush()

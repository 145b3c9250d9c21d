"""SQLAlchemy implementation of CustomerRepository."""

from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.customer import Customer
from core.domain.exceptions import CustomerNotFoundError
from core.domain.repositories.customer_repository import CustomerRepository

from ..mappers import CustomerMapper
from ..models.customer_model import CustomerModel


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, customer: Customer) -> None:
        self._session.add(CustomerMapper.to_persistence(customer))
        await self._session.flush()

    async def find(self, customer_id: str) -> Customer:
        model = await self._session.get(CustomerModel, customer_id)
        if model is None:
            raise CustomerNotFoundError(customer_id)
        return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        result = await self._session.execute(select(CustomerModel))
        return [CustomerMapper.to_domain(model) for model in result.scalars().all()]

    async def update(self, customer: Customer) -> None:
        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            raise CustomerNotFoundError(customer.id)
        CustomerMapper.update_persistence(customer, model)
        await self._session.flush()

"""Pytest configuration and fixtures shared by the test suite."""

from decimal import Decimal
from typing import List

import pytest_asyncio

from core.application.services import CustomerStore, OrderStore, ProductStore
from core.domain.entities import Customer, Order, OrderItem, Product
from core.domain.value_objects import Address
from core.infrastructure.database import create_engine, get_session_factory
from core.data.models import Base
from core.settings import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine with a fresh schema."""
    engine = create_engine(DatabaseSettings(url=TEST_DATABASE_URL))

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield get_session_factory(test_engine)


@pytest_asyncio.fixture
async def order_store(test_session_factory) -> OrderStore:
    return OrderStore(session_factory=test_session_factory)


@pytest_asyncio.fixture
async def customer_store(test_session_factory) -> CustomerStore:
    return CustomerStore(session_factory=test_session_factory)


@pytest_asyncio.fixture
async def product_store(test_session_factory) -> ProductStore:
    return ProductStore(session_factory=test_session_factory)


# =============================================================================
# SEED HELPERS
# =============================================================================

class Seeder:
    """Creates customers, products and orders through the stores."""

    def __init__(self, customer_store: CustomerStore, product_store: ProductStore, order_store: OrderStore):
        self.customer_store = customer_store
        self.product_store = product_store
        self.order_store = order_store

    async def customers(self, quantity: int) -> List[Customer]:
        customers = []
        for i in range(quantity):
            customer = Customer(id=f"{i}", name=f"Customer {i}")
            customer.change_address(Address(f"Street {i}", i + 1, f"ZipCode {i}", f"City {i}"))
            await self.customer_store.create(customer)
            customers.append(customer)
        return customers

    async def products(self, quantity: int) -> List[Product]:
        products = []
        for i in range(quantity):
            product = Product(id=f"{i}", name=f"Product {i}", price=Decimal("10.50") * (i + 1))
            await self.product_store.create(product)
            products.append(product)
        return products

    async def orders(self, products: List[Product]) -> List[Order]:
        """Create one order per product, order i belonging to customer i."""
        if not products:
            raise ValueError("Products length must be greater than zero.")

        orders = []
        for i, product in enumerate(products):
            item = OrderItem(
                id=f"{i}",
                name=product.name,
                price=product.price,
                product_id=product.id,
                quantity=i + 1,
            )
            order = Order(id=f"{i}", customer_id=f"{i}", items=[item])
            await self.order_store.create(order)
            orders.append(order)
        return orders


@pytest_asyncio.fixture
async def seed(customer_store, product_store, order_store) -> Seeder:
    return Seeder(customer_store, product_store, order_store)

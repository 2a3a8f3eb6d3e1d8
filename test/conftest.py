from __future__ import annotations

from pathlib import Path
from typing import AsyncGenerator

import pytest
from dotenv import load_dotenv

# Load dotenv files early so settings pick up test overrides on import
TEST_ROOT = Path(__file__).resolve().parent
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker  # noqa: E402

from shopmesh.database import (  # noqa: E402
    SqlRepoBundle,
    build_sql_repos,
    create_all,
    create_engine,
    create_sessionmaker,
)
from shopmesh.domain import Address, Customer, Order, OrderItem, Product  # noqa: E402


@pytest.fixture
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Create a file-backed SQLite database with all tables."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'shopmesh_test.db'}")
    await create_all(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return create_sessionmaker(db_engine)


@pytest.fixture
def repos(session_factory: async_sessionmaker[AsyncSession]) -> SqlRepoBundle:
    """Create repository bundle bound to the test database."""
    return build_sql_repos(session_factory=session_factory)


@pytest.fixture
def customer() -> Customer:
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address(street="Street 1", number=1, zip="Zipcode 1", city="City 1"))
    return customer


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(id="123", name="Product 1", price=100),
        Product(id="456", name="Product 2", price=200),
        Product(id="789", name="Product 3", price=300),
    ]


@pytest.fixture
async def seeded_repos(repos: SqlRepoBundle, customer: Customer, products: list[Product]) -> SqlRepoBundle:
    """Repositories with the customer and products an order needs already stored."""
    await repos.customers.create(customer)
    for product in products:
        await repos.products.create(product)
    return repos


def _item(item_id: str, product: Product, quantity: int) -> OrderItem:
    return OrderItem(id=item_id, name=product.name, price=product.price, product_id=product.id, quantity=quantity)


@pytest.fixture
def make_item():
    """Build an OrderItem snapshotting the given product."""
    return _item


@pytest.fixture
def single_item_order(products: list[Product]) -> Order:
    return Order(id="123", customer_id="123", items=[_item("1", products[0], 2)])

"""
Repository bundle for dependency injection.

This module provides a convenience bundle of all repository instances
for easy dependency injection in services and application components.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .customers import SqlCustomerRepository
from .orders import SqlOrderRepository
from .products import SqlProductRepository


@dataclass(frozen=True)
class SqlRepoBundle:
    """Convenience bundle of all SQL repositories for dependency injection."""

    customers: SqlCustomerRepository
    products: SqlProductRepository
    orders: SqlOrderRepository


def build_sql_repos(*, session_factory: async_sessionmaker[AsyncSession]) -> SqlRepoBundle:
    """Build a SqlRepoBundle from a session factory.

    Args:
        session_factory: Async session factory; each repository call opens its own session from it

    Returns:
        Bundle containing all repository instances
    """
    return SqlRepoBundle(
        customers=SqlCustomerRepository(session_factory),
        products=SqlProductRepository(session_factory),
        orders=SqlOrderRepository(session_factory),
    )

"""Product repository implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from shopmesh.core.errors import NotFoundError
from shopmesh.domain import Product

from ..entities.products import ProductRecord
from .interfaces import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SqlProductRepository(ProductRepository):
    """SQL implementation of ``ProductRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, product: Product) -> None:
        async with self.session_factory() as s:
            s.add(ProductRecord(id=product.id, name=product.name, price=product.price))
            await s.commit()
        logger.info(f"Created product: id={product.id}")

    async def update(self, product: Product) -> None:
        async with self.session_factory() as s:
            row = await s.get(ProductRecord, product.id)
            if row is None:
                raise NotFoundError("Product", product.id)
            row.name = product.name
            row.price = product.price
            await s.commit()
        logger.info(f"Updated product: id={product.id}")

    async def find(self, product_id: str) -> Product:
        async with self.session_factory() as s:
            row = await s.get(ProductRecord, product_id)
            if row is None:
                logger.debug(f"Product lookup missed: id={product_id}")
                raise NotFoundError("Product", product_id)
            return Product(id=row.id, name=row.name, price=row.price)

    async def find_all(self) -> List[Product]:
        async with self.session_factory() as s:
            result = await s.execute(select(ProductRecord))
            return [Product(id=row.id, name=row.name, price=row.price) for row in result.scalars().all()]

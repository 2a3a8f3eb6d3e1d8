"""SQLAlchemy async repository for the ``Order`` aggregate.

Transaction model
-----------------

Each method opens an ``AsyncSession``, performs its reads/writes and commits
once. Leaving the session without a commit rolls back, so an order row and its
item rows are written all-or-nothing.

Read path
---------

Items are loaded with an explicit query filtered by ``order_id`` and sorted by
``position``, then assembled with their order row in memory. ``find_all`` does
the same with one query for all orders and one for all of their items.

Update strategy
---------------

``update`` replaces the item set wholesale: it deletes every item row of the
order and inserts the incoming items. Item rows have no identity outside their
order, so this yields the same end state as a diff-based upsert.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from shopmesh.core.errors import NotFoundError
from shopmesh.domain import Order, OrderItem

from ..entities.orders import OrderItemRecord, OrderRecord
from .interfaces import OrderRepository

logger = logging.getLogger(__name__)


def order_to_records(order: Order) -> Tuple[OrderRecord, List[OrderItemRecord]]:
    """Split an aggregate into its order row and its item rows."""
    header = OrderRecord(id=order.id, customer_id=order.customer_id, total=order.total())
    items = [
        OrderItemRecord(
            id=item.id,
            order_id=order.id,
            product_id=item.product_id,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            position=position,
        )
        for position, item in enumerate(order.items)
    ]
    return header, items


def order_from_records(header: OrderRecord, items: Sequence[OrderItemRecord]) -> Order:
    """Rebuild an aggregate from its order row and item rows.

    ``header.total`` is ignored: the aggregate recomputes its total from the
    items.
    """
    ordered = sorted(items, key=lambda row: row.position)
    return Order(
        id=header.id,
        customer_id=header.customer_id,
        items=[
            OrderItem(
                id=row.id,
                name=row.name,
                price=row.price,
                product_id=row.product_id,
                quantity=row.quantity,
            )
            for row in ordered
        ],
    )


@dataclass(frozen=True)
class SqlOrderRepository(OrderRepository):
    """SQL implementation of ``OrderRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, order: Order) -> None:
        """
        Persist a new order and its items.

        Args:
            order: The aggregate to insert.

        Raises:
            sqlalchemy.exc.IntegrityError: Duplicate order/item id, or an
                unknown customer or product.
        """
        header, items = order_to_records(order)
        async with self.session_factory() as s:
            s.add(header)
            # items reference the order row, so it has to reach the store first
            await s.flush()
            s.add_all(items)
            await s.commit()
        logger.info(f"Created order: id={order.id}, items={len(items)}, total={header.total}")

    async def update(self, order: Order) -> None:
        """
        Replace the stored order with the given aggregate.

        Args:
            order: The aggregate carrying the new state.

        Raises:
            NotFoundError: No order with ``order.id`` exists.
            sqlalchemy.exc.IntegrityError: Unknown customer or product.
        """
        header, items = order_to_records(order)
        async with self.session_factory() as s:
            row = await s.get(OrderRecord, order.id)
            if row is None:
                raise NotFoundError("Order", order.id)
            row.customer_id = header.customer_id
            row.total = header.total
            await s.execute(delete(OrderItemRecord).where(OrderItemRecord.order_id == order.id))
            s.add_all(items)
            await s.commit()
        logger.info(f"Updated order: id={order.id}, items={len(items)}, total={header.total}")

    async def find(self, order_id: str) -> Order:
        """
        Retrieve an order with its items.

        Args:
            order_id: The order identifier.

        Returns:
            The rebuilt Order.

        Raises:
            NotFoundError: No order with ``order_id`` exists.
        """
        async with self.session_factory() as s:
            header = await s.get(OrderRecord, order_id)
            if header is None:
                logger.debug(f"Order lookup missed: id={order_id}")
                raise NotFoundError("Order", order_id)
            stmt = (
                select(OrderItemRecord)
                .where(OrderItemRecord.order_id == order_id)
                .order_by(OrderItemRecord.position)
            )
            result = await s.execute(stmt)
            return order_from_records(header, result.scalars().all())

    async def find_all(self) -> List[Order]:
        """
        List every stored order with its items.

        Returns:
            Orders in the store's natural order.
        """
        async with self.session_factory() as s:
            headers = (await s.execute(select(OrderRecord))).scalars().all()
            if not headers:
                return []
            stmt = (
                select(OrderItemRecord)
                .where(OrderItemRecord.order_id.in_([h.id for h in headers]))  # type: ignore[attr-defined]
                .order_by(OrderItemRecord.order_id, OrderItemRecord.position)
            )
            items_by_order: Dict[str, List[OrderItemRecord]] = {h.id: [] for h in headers}
            for item in (await s.execute(stmt)).scalars().all():
                items_by_order[item.order_id].append(item)
            return [order_from_records(h, items_by_order[h.id]) for h in headers]

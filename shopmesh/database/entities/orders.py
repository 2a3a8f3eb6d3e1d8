"""
Order entity models.

This module contains the two tables behind the ``Order`` aggregate: one row per
order and one row per order item. Items point at their order through
``order_id`` and at the catalog through ``product_id``.

No ORM relationship is declared between them. The repository reads items with
an explicit query filtered by ``order_id`` and replaces them wholesale on
update.
"""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class OrderRecord(Base, table=True):
    """Persistent order header.

    ``total`` is a denormalized copy of ``Order.total()`` taken at save time.

    Table: orders
    """

    __tablename__ = "orders"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=64)
    customer_id: str = Field(foreign_key="customers.id", index=True, max_length=64)
    total: float

    def __repr__(self) -> str:
        return f"OrderRecord(id={self.id}, customer_id={self.customer_id}, total={self.total})"


class OrderItemRecord(Base, table=True):
    """Persistent order item.

    ``name`` and ``price`` are snapshots of the product at the time the item
    was added. ``position`` keeps the aggregate's item order.

    Table: order_items
    """

    __tablename__ = "order_items"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=64)
    order_id: str = Field(foreign_key="orders.id", index=True, max_length=64)
    product_id: str = Field(foreign_key="products.id", max_length=64)
    name: str = Field(max_length=255)
    price: float
    quantity: int
    position: int = Field(default=0)

    def __repr__(self) -> str:
        return f"OrderItemRecord(id={self.id}, order_id={self.order_id}, quantity={self.quantity})"

"""Checkout aggregate: an ``Order`` and the ``OrderItem`` rows it owns.

``Order.total()`` is always derived from the current items. The persisted
``orders.total`` column is only a copy taken at save time.
"""

from __future__ import annotations

from typing import List

from pydantic import Field, field_validator

from shopmesh.core.errors import DomainValidationError

from .base import BaseSchema


class OrderItem(BaseSchema):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: float = Field(ge=0)
    product_id: str = Field(min_length=1)
    quantity: int = Field(gt=0)

    def total(self) -> float:
        return self.price * self.quantity


class Order(BaseSchema):
    id: str = Field(min_length=1)
    customer_id: str = Field(min_length=1)
    items: List[OrderItem] = Field(min_length=1)

    @field_validator("items")
    @classmethod
    def _unique_item_ids(cls, items: List[OrderItem]) -> List[OrderItem]:
        ids = [item.id for item in items]
        if len(ids) != len(set(ids)):
            raise ValueError("Order item ids must be unique within an order")
        return items

    def total(self) -> float:
        return sum(item.total() for item in self.items)

    def change_items(self, items: List[OrderItem]) -> None:
        """Replace the whole item list; the new list must satisfy the same rules."""
        if not items:
            raise DomainValidationError("Items are required")
        self.items = list(items)

    def add_item(self, item: OrderItem) -> None:
        if any(existing.id == item.id for existing in self.items):
            raise DomainValidationError(f"Order already has an item with id '{item.id}'")
        self.items = [*self.items, item]

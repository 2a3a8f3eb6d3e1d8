"""Repository interface contracts.

Callers depend on these Protocols instead of concrete persistence
implementations.

Contract guidelines
-------------------

- All methods are async.
- Implementations must not leak SQLAlchemy sessions/transactions; every call
  is its own unit of work.
- ``find``/``update`` raise ``NotFoundError`` for an unknown id.
- Storage constraint violations (duplicate id, dangling foreign key) surface
  unchanged to the caller.
"""

from __future__ import annotations

from typing import List, Protocol

from shopmesh.domain import Customer, Order, Product


class CustomerRepository(Protocol):
    """Persist and query customers."""

    async def create(self, customer: Customer) -> None:
        """
        Insert a new customer.

        Args:
            customer: The customer to persist.
        """
        ...

    async def update(self, customer: Customer) -> None:
        """
        Overwrite an existing customer with the given state.

        Args:
            customer: The customer carrying the new state.
        """
        ...

    async def find(self, customer_id: str) -> Customer:
        """
        Retrieve a customer by its ID.

        Args:
            customer_id: The customer identifier.

        Returns:
            The rebuilt Customer.
        """
        ...

    async def find_all(self) -> List[Customer]:
        """Return every stored customer."""
        ...


class ProductRepository(Protocol):
    """Persist and query catalog products."""

    async def create(self, product: Product) -> None:
        """Insert a new product."""
        ...

    async def update(self, product: Product) -> None:
        """Overwrite an existing product with the given state."""
        ...

    async def find(self, product_id: str) -> Product:
        """Retrieve a product by its ID."""
        ...

    async def find_all(self) -> List[Product]:
        """Return every stored product."""
        ...


class OrderRepository(Protocol):
    """Persist and query ``Order`` aggregates together with their items."""

    async def create(self, order: Order) -> None:
        """
        Insert an order and all of its items as one write.

        Args:
            order: The aggregate to persist.
        """
        ...

    async def update(self, order: Order) -> None:
        """
        Replace the stored state of an order with the given aggregate.

        The persisted item set ends up exactly equal to ``order.items``.

        Args:
            order: The aggregate carrying the new state.
        """
        ...

    async def find(self, order_id: str) -> Order:
        """
        Retrieve an order and its items by order ID.

        Args:
            order_id: The order identifier.

        Returns:
            The rebuilt Order, items in their saved order.
        """
        ...

    async def find_all(self) -> List[Order]:
        """Return every stored order with its items."""
        ...

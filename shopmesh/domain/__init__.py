"""
Domain aggregates.

Plain pydantic models with their own validation and behaviour. Persistence
lives in ``shopmesh.database``; nothing here imports it.
"""

from .checkout import Order, OrderItem
from .customer import Address, Customer
from .product import Product

__all__ = [
    "Address",
    "Customer",
    "Order",
    "OrderItem",
    "Product",
]

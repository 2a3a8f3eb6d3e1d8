"""
Database entity models.

This package contains the record shapes persisted for each aggregate. Each
module maps one business domain to its table(s):

- customers: Customer rows with the address flattened into columns
- products: Product catalog rows
- orders: Order rows and the order item rows they own
"""

from .customers import CustomerRecord
from .orders import OrderItemRecord, OrderRecord
from .products import ProductRecord

__all__ = [
    "CustomerRecord",
    "OrderItemRecord",
    "OrderRecord",
    "ProductRecord",
]

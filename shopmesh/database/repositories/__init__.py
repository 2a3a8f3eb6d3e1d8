"""
Database repository layer.

Each module maps one aggregate to its SQLModel records and back:

- interfaces: Protocol contracts callers depend on
- customers: Customer store
- products: Product store
- orders: Order repository (order rows plus owned item rows)
- bundle: SqlRepoBundle and build_sql_repos for wiring
"""

from .bundle import SqlRepoBundle, build_sql_repos
from .customers import SqlCustomerRepository
from .interfaces import CustomerRepository, OrderRepository, ProductRepository
from .orders import SqlOrderRepository
from .products import SqlProductRepository

__all__ = [
    "CustomerRepository",
    "OrderRepository",
    "ProductRepository",
    "SqlCustomerRepository",
    "SqlOrderRepository",
    "SqlProductRepository",
    "SqlRepoBundle",
    "build_sql_repos",
]

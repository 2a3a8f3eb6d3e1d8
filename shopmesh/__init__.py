"""ShopMesh.

Persistence layer for a small e-commerce domain, built on the repository
pattern.

High-level architecture
-----------------------

- ``shopmesh.domain``: pydantic aggregates (``Customer``, ``Product``,
  ``Order`` with its ``OrderItem`` children). They validate themselves and
  know nothing about storage.
- ``shopmesh.database``: SQLModel record schema, async engine/session helpers
  and the SQL repositories that map aggregates to rows and back.
- ``shopmesh.core``: configuration, logging and the error hierarchy shared by
  the other packages.

Typical workflow
----------------

1. Build an engine with ``create_engine`` and create the tables with
   ``create_all`` (tests/dev).
2. Build the repositories with ``build_sql_repos``.
3. Persist customers and products, then create, update and read orders.
"""

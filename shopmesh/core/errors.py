"""Error types for the ShopMesh package.

Defines a small hierarchy of exceptions raised by domain models and
repositories. Storage constraint violations are not part of it: SQLAlchemy's
``IntegrityError`` reaches the caller unchanged.
"""

from __future__ import annotations


class ShopMeshError(Exception):
    """Base error for all ShopMesh exceptions."""


class NotFoundError(ShopMeshError, LookupError):
    """Raised when no record exists for the requested identifier."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: '{entity_id}'")


class DomainValidationError(ShopMeshError, ValueError):
    """Raised when a domain behaviour would break an aggregate invariant."""

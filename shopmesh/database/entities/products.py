"""Product entity model."""

from __future__ import annotations

from sqlmodel import Field

from ..base import Base


class ProductRecord(Base, table=True):
    """Persistent catalog product.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)
    price: float

    def __repr__(self) -> str:
        return f"ProductRecord(id={self.id}, name={self.name}, price={self.price})"

"""
Customer entity model.

The ``Address`` value object has no table of its own; its fields are stored as
nullable columns on the customer row.
"""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field

from ..base import Base


class CustomerRecord(Base, table=True):
    """Persistent customer.

    Table: customers
    """

    __tablename__ = "customers"
    __table_args__ = ({"extend_existing": True},)

    id: str = Field(primary_key=True, max_length=64)
    name: str = Field(max_length=255)

    # Address (all set or all NULL)
    street: Optional[str] = Field(default=None, max_length=255)
    number: Optional[int] = Field(default=None)
    zipcode: Optional[str] = Field(default=None, max_length=32)
    city: Optional[str] = Field(default=None, max_length=128)

    active: bool = Field(default=False)
    reward_points: float = Field(default=0)

    def __repr__(self) -> str:
        return f"CustomerRecord(id={self.id}, name={self.name}, active={self.active})"

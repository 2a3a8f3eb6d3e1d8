from __future__ import annotations

from pydantic import Field

from shopmesh.core.errors import DomainValidationError

from .base import BaseSchema


class Product(BaseSchema):
    """Catalog product. Order items copy its name and price when added."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    price: float = Field(ge=0)

    def change_name(self, name: str) -> None:
        if not name:
            raise DomainValidationError("Name is required")
        self.name = name

    def change_price(self, price: float) -> None:
        if price < 0:
            raise DomainValidationError("Price must be greater or equal to zero")
        self.price = price

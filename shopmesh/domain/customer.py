from __future__ import annotations

from typing import Optional

from pydantic import ConfigDict, Field

from shopmesh.core.errors import DomainValidationError

from .base import BaseSchema


class Address(BaseSchema):
    """Postal address value object. Immutable; replace it to change it."""

    model_config = ConfigDict(frozen=True)

    street: str = Field(min_length=1)
    number: int = Field(gt=0)
    zip: str = Field(min_length=1)
    city: str = Field(min_length=1)

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"


class Customer(BaseSchema):
    """
    Customer aggregate.

    A customer can only be activated once an address is known. Reward points
    only ever grow.
    """

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    address: Optional[Address] = None
    active: bool = False
    reward_points: float = Field(default=0, ge=0)

    def change_name(self, name: str) -> None:
        if not name:
            raise DomainValidationError("Name is required")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise DomainValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points: float) -> None:
        if points < 0:
            raise DomainValidationError("Reward points must be positive")
        self.reward_points += points

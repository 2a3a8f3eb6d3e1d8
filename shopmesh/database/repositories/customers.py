"""
Customer repository implementation.

Maps the ``Customer`` aggregate (with its optional ``Address`` value object)
to a single ``customers`` row.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from shopmesh.core.errors import NotFoundError
from shopmesh.domain import Address, Customer

from ..entities.customers import CustomerRecord
from .interfaces import CustomerRepository

logger = logging.getLogger(__name__)


def customer_to_record(customer: Customer) -> CustomerRecord:
    address = customer.address
    return CustomerRecord(
        id=customer.id,
        name=customer.name,
        street=address.street if address else None,
        number=address.number if address else None,
        zipcode=address.zip if address else None,
        city=address.city if address else None,
        active=customer.active,
        reward_points=customer.reward_points,
    )


def customer_from_record(row: CustomerRecord) -> Customer:
    address = None
    if row.street is not None and row.number is not None and row.zipcode is not None and row.city is not None:
        address = Address(street=row.street, number=row.number, zip=row.zipcode, city=row.city)
    return Customer(
        id=row.id,
        name=row.name,
        address=address,
        active=row.active,
        reward_points=row.reward_points,
    )


@dataclass(frozen=True)
class SqlCustomerRepository(CustomerRepository):
    """SQL implementation of ``CustomerRepository``."""

    session_factory: async_sessionmaker[AsyncSession]

    async def create(self, customer: Customer) -> None:
        async with self.session_factory() as s:
            s.add(customer_to_record(customer))
            await s.commit()
        logger.info(f"Created customer: id={customer.id}")

    async def update(self, customer: Customer) -> None:
        async with self.session_factory() as s:
            row = await s.get(CustomerRecord, customer.id)
            if row is None:
                raise NotFoundError("Customer", customer.id)
            fresh = customer_to_record(customer)
            row.name = fresh.name
            row.street = fresh.street
            row.number = fresh.number
            row.zipcode = fresh.zipcode
            row.city = fresh.city
            row.active = fresh.active
            row.reward_points = fresh.reward_points
            await s.commit()
        logger.info(f"Updated customer: id={customer.id}")

    async def find(self, customer_id: str) -> Customer:
        async with self.session_factory() as s:
            row = await s.get(CustomerRecord, customer_id)
            if row is None:
                logger.debug(f"Customer lookup missed: id={customer_id}")
                raise NotFoundError("Customer", customer_id)
            return customer_from_record(row)

    async def find_all(self) -> List[Customer]:
        async with self.session_factory() as s:
            result = await s.execute(select(CustomerRecord))
            return [customer_from_record(row) for row in result.scalars().all()]

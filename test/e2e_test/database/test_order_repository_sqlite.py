"""End-to-end tests for the SQL order repository.

Runs ``SqlOrderRepository`` against a real SQLite database through aiosqlite
and checks both the rebuilt aggregates and the raw persisted rows.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from shopmesh.core.errors import NotFoundError
from shopmesh.database.entities import OrderItemRecord, OrderRecord
from shopmesh.domain import Order, Product


async def _stored_rows(session_factory, order_id: str) -> dict:
    """Read back the order row with its items, shaped like a JSON dump."""
    async with session_factory() as s:
        header = await s.get(OrderRecord, order_id)
        result = await s.execute(
            select(OrderItemRecord).where(OrderItemRecord.order_id == order_id).order_by(OrderItemRecord.position)
        )
        items = result.scalars().all()
    return {
        "id": header.id,
        "customer_id": header.customer_id,
        "total": header.total,
        "items": [
            {
                "id": item.id,
                "name": item.name,
                "price": item.price,
                "quantity": item.quantity,
                "order_id": item.order_id,
                "product_id": item.product_id,
            }
            for item in items
        ],
    }


class TestCreateOrder:
    async def test_create_persists_order_and_items(self, seeded_repos, session_factory, products, make_item) -> None:
        item = make_item("1", products[0], 2)
        order = Order(id="123", customer_id="123", items=[item])

        await seeded_repos.orders.create(order)

        assert await _stored_rows(session_factory, "123") == {
            "id": "123",
            "customer_id": "123",
            "total": order.total(),
            "items": [
                {
                    "id": "1",
                    "name": "Product 1",
                    "price": 100,
                    "quantity": 2,
                    "order_id": "123",
                    "product_id": "123",
                }
            ],
        }

    async def test_persisted_total_matches_price_times_quantity(self, seeded_repos, session_factory, make_item) -> None:
        product = Product(id="p-10", name="Product 1", price=10)
        await seeded_repos.products.create(product)
        order = Order(id="123", customer_id="123", items=[make_item("1", product, 2)])

        await seeded_repos.orders.create(order)

        rows = await _stored_rows(session_factory, "123")
        assert rows["total"] == 20
        assert (await seeded_repos.orders.find("123")).total() == 20

    async def test_create_duplicate_id_fails(self, seeded_repos, single_item_order) -> None:
        await seeded_repos.orders.create(single_item_order)

        with pytest.raises(IntegrityError):
            await seeded_repos.orders.create(single_item_order)

    async def test_create_with_unknown_customer_fails(self, seeded_repos, products, make_item) -> None:
        order = Order(id="123", customer_id="missing", items=[make_item("1", products[0], 1)])

        with pytest.raises(IntegrityError):
            await seeded_repos.orders.create(order)

        assert await seeded_repos.orders.find_all() == []

    async def test_create_with_unknown_product_leaves_nothing_behind(
        self, seeded_repos, session_factory, products, make_item
    ) -> None:
        ghost = Product(id="ghost", name="Ghost", price=1)
        order = Order(id="123", customer_id="123", items=[make_item("1", products[0], 1), make_item("2", ghost, 1)])

        with pytest.raises(IntegrityError):
            await seeded_repos.orders.create(order)

        async with session_factory() as s:
            assert await s.get(OrderRecord, "123") is None
            assert (await s.execute(select(OrderItemRecord))).scalars().all() == []


class TestUpdateOrder:
    async def test_update_changes_quantity_in_place(self, seeded_repos, session_factory, products, make_item) -> None:
        await seeded_repos.orders.create(Order(id="123", customer_id="123", items=[make_item("1", products[0], 2)]))

        updated = Order(id="123", customer_id="123", items=[make_item("1", products[0], 5)])
        await seeded_repos.orders.update(updated)

        rows = await _stored_rows(session_factory, "123")
        assert rows["total"] == updated.total() == 500
        assert [(i["id"], i["quantity"]) for i in rows["items"]] == [("1", 5)]

        found = await seeded_repos.orders.find("123")
        assert found == updated
        assert found.total() == 500

    async def test_update_replaces_item_set(self, seeded_repos, session_factory, products, make_item) -> None:
        await seeded_repos.orders.create(Order(id="123", customer_id="123", items=[make_item("1", products[0], 2)]))

        replacement = Order(
            id="123",
            customer_id="123",
            items=[make_item("2", products[1], 3), make_item("3", products[2], 4)],
        )
        await seeded_repos.orders.update(replacement)

        rows = await _stored_rows(session_factory, "123")
        assert rows == {
            "id": "123",
            "customer_id": "123",
            "total": 200 * 3 + 300 * 4,
            "items": [
                {"id": "2", "name": "Product 2", "price": 200, "quantity": 3, "order_id": "123", "product_id": "456"},
                {"id": "3", "name": "Product 3", "price": 300, "quantity": 4, "order_id": "123", "product_id": "789"},
            ],
        }
        found = await seeded_repos.orders.find("123")
        assert [item.id for item in found.items] == ["2", "3"]

    async def test_update_sequence_leaves_no_stale_rows(self, seeded_repos, session_factory, products, make_item) -> None:
        await seeded_repos.orders.create(Order(id="123", customer_id="123", items=[make_item("1", products[0], 2)]))
        await seeded_repos.orders.update(Order(id="123", customer_id="123", items=[make_item("1", products[0], 5)]))
        await seeded_repos.orders.update(
            Order(id="123", customer_id="123", items=[make_item("2", products[1], 3), make_item("3", products[2], 4)])
        )

        async with session_factory() as s:
            ids = (await s.execute(select(OrderItemRecord.id).order_by(OrderItemRecord.id))).scalars().all()
        assert ids == ["2", "3"]

    async def test_update_missing_order_raises_not_found(self, seeded_repos, single_item_order) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await seeded_repos.orders.update(single_item_order)

        assert exc_info.value.entity == "Order"
        assert exc_info.value.entity_id == "123"

    async def test_failed_update_rolls_back(self, seeded_repos, single_item_order, make_item) -> None:
        await seeded_repos.orders.create(single_item_order)
        ghost = Product(id="ghost", name="Ghost", price=1)

        with pytest.raises(IntegrityError):
            await seeded_repos.orders.update(Order(id="123", customer_id="123", items=[make_item("9", ghost, 1)]))

        assert await seeded_repos.orders.find("123") == single_item_order


class TestFindOrder:
    async def test_find_round_trips_aggregate(self, seeded_repos, single_item_order) -> None:
        await seeded_repos.orders.create(single_item_order)

        result = await seeded_repos.orders.find(single_item_order.id)

        assert result is not None
        assert result == single_item_order
        assert result.total() == single_item_order.total()

    async def test_find_keeps_item_order(self, seeded_repos, products, make_item) -> None:
        order = Order(
            id="123",
            customer_id="123",
            items=[make_item("z", products[2], 1), make_item("a", products[0], 1), make_item("m", products[1], 1)],
        )
        await seeded_repos.orders.create(order)

        result = await seeded_repos.orders.find("123")

        assert [item.id for item in result.items] == ["z", "a", "m"]

    async def test_find_missing_raises_not_found(self, repos) -> None:
        with pytest.raises(NotFoundError, match="Order not found"):
            await repos.orders.find("nope")


class TestFindAllOrders:
    async def test_find_all_on_empty_store(self, repos) -> None:
        assert await repos.orders.find_all() == []

    async def test_find_all_returns_single_order(self, seeded_repos, single_item_order) -> None:
        await seeded_repos.orders.create(single_item_order)

        result = await seeded_repos.orders.find_all()

        assert len(result) == 1
        assert result[0] == single_item_order

    async def test_find_all_returns_every_order_with_its_items(self, seeded_repos, products, make_item) -> None:
        orders = [
            Order(id="o-1", customer_id="123", items=[make_item("o1-1", products[0], 1)]),
            Order(id="o-2", customer_id="123", items=[make_item("o2-1", products[1], 2), make_item("o2-2", products[2], 3)]),
            Order(id="o-3", customer_id="123", items=[make_item("o3-1", products[2], 4)]),
        ]
        for order in orders:
            await seeded_repos.orders.create(order)

        result = await seeded_repos.orders.find_all()

        assert len(result) == len(orders)
        assert {o.id: o for o in result} == {o.id: o for o in orders}

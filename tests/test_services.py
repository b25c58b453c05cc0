# tests/test_services.py

import asyncio
import re

import pytest

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.core.ids import generate_id
from tennisbot_api.app.schemas.order import OrderCreate, OrderStatus
from tennisbot_api.app.services.order_service import OrderService
from tennisbot_api.app.services.statistics_service import StatisticsService


def _create(email="serena@example.com"):
    data = OrderCreate(name="Serena", email=email, phone="+1 555 0100")
    order_id, created = asyncio.run(OrderService.create_order(data))
    assert created
    return order_id


def test_generate_id_format() -> None:
    assert re.fullmatch(r"order_\d{13}_[0-9a-z]{9}", generate_id("order"))
    assert generate_id("order") != generate_id("order")


def test_create_order_writes_record_and_both_indices() -> None:
    order_id = _create()
    assert kv_store.get_value(f"order:{order_id}")["status"] == "pending"
    assert kv_store.get_value("orders:all") == [order_id]
    assert kv_store.get_value("customer:serena@example.com:orders") == [order_id]


def test_create_order_rejects_missing_phone() -> None:
    with pytest.raises(ValueError):
        asyncio.run(OrderService.create_order(OrderCreate(name="Serena", email="s@example.com")))
    assert kv_store.get_value("orders:all") is None


def test_update_status_returns_none_for_unknown_order() -> None:
    assert asyncio.run(OrderService.update_status("order_0_missing", "shipped")) is None


def test_update_status_validates_before_lookup() -> None:
    with pytest.raises(ValueError, match="Status is required"):
        asyncio.run(OrderService.update_status("order_0_missing", ""))


def test_update_status_persists() -> None:
    order_id = _create()
    updated = asyncio.run(OrderService.update_status(order_id, "confirmed"))
    assert updated.status == OrderStatus.CONFIRMED.value
    reloaded = asyncio.run(OrderService.get_order(order_id))
    assert reloaded == updated


def test_stats_count_dangling_index_entries_as_orders() -> None:
    _create()
    kv_store.append_to_list("orders:all", "order_0_lost")

    stats = asyncio.run(StatisticsService.overview())
    assert stats.total_orders == 2
    assert stats.total_revenue == 5000
    assert stats.average_order_value == 2500


def test_create_order_strips_whitespace_and_indexes_trimmed_email() -> None:
    data = OrderCreate(name=" Serena ", email=" serena@example.com ", phone=" 555 ")
    order_id, _ = asyncio.run(OrderService.create_order(data))

    stored = kv_store.get_value(f"order:{order_id}")
    assert (stored["name"], stored["email"], stored["phone"]) == ("Serena", "serena@example.com", "555")
    assert kv_store.get_value("customer:serena@example.com:orders") == [order_id]
    assert kv_store.get_value("customer: serena@example.com :orders") is None


def test_resolve_skips_records_that_fail_validation() -> None:
    order_id = _create()
    kv_store.set_value("order:order_0_broken", {"id": "order_0_broken"})
    kv_store.append_to_list("orders:all", "order_0_broken")

    orders = asyncio.run(OrderService.list_orders())
    assert [o.id for o in orders] == [order_id]


def test_stats_count_unknown_status_under_raw_value() -> None:
    order_id = _create()
    _create()
    record = kv_store.get_value(f"order:{order_id}")
    record["status"] = "completed"
    kv_store.set_value(f"order:{order_id}", record)

    stats = asyncio.run(StatisticsService.overview())
    assert stats.orders_by_status["completed"] == 1
    assert stats.pending_orders == 1
    assert stats.completed_orders == 0
    assert stats.total_revenue == 10000

# tests/test_kv_store.py

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.core.db import init_db


def test_get_missing_key_returns_none() -> None:
    assert kv_store.get_value("order:does-not-exist") is None


def test_set_then_get_roundtrips_json_documents() -> None:
    kv_store.set_value("order:1", {"id": "1", "price": 5000})
    assert kv_store.get_value("order:1") == {"id": "1", "price": 5000}


def test_set_overwrites_existing_value() -> None:
    kv_store.set_value("orders:all", ["a"])
    kv_store.set_value("orders:all", ["a", "b"])
    assert kv_store.get_value("orders:all") == ["a", "b"]


def test_get_values_preserves_order_and_reports_missing() -> None:
    kv_store.set_value("k1", 1)
    kv_store.set_value("k3", 3)
    assert kv_store.get_values(["k3", "k2", "k1"]) == [3, None, 1]
    assert kv_store.get_values([]) == []


def test_get_values_handles_large_batches() -> None:
    keys = [f"k{i}" for i in range(1200)]
    for i in range(0, 1200, 100):
        kv_store.set_value(keys[i], i)
    values = kv_store.get_values(keys)
    assert len(values) == 1200
    assert values[0] == 0
    assert values[1100] == 1100
    assert values[1] is None


def test_append_to_list_starts_new_list() -> None:
    kv_store.append_to_list("customer:a@example.com:orders", "order_1")
    kv_store.append_to_list("customer:a@example.com:orders", "order_2")
    assert kv_store.get_value("customer:a@example.com:orders") == ["order_1", "order_2"]


def test_init_db_is_idempotent() -> None:
    kv_store.set_value("keep", True)
    init_db()
    init_db()
    assert kv_store.get_value("keep") is True

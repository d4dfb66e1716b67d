"""Tests for cart slot persistence"""
import json
import pytest
from decimal import Decimal
from unittest.mock import Mock

from medshop.cart import (
    CartItem,
    FileCartStorage,
    MemoryCartStorage,
    RedisCartStorage,
    get_cart_storage,
)
from medshop.cart.storage import deserialize_items, serialize_items


@pytest.fixture
def items():
    return [
        CartItem(id="p1", name="Gloves", price=Decimal("10.50"), stock=5, quantity=2,
                 description="Nitrile", image_urls=["a.jpg", "b.jpg"]),
        CartItem(id="p2", name="Masks", price=3, stock=40, quantity=10),
    ]


class TestSerialization:

    def test_json_shape(self, items):
        data = json.loads(serialize_items(items))
        assert data[0] == {
            "id": "p1",
            "name": "Gloves",
            "description": "Nitrile",
            "price": 10.5,
            "stock": 5,
            "image_urls": ["a.jpg", "b.jpg"],
            "quantity": 2,
        }
        assert data[1]["description"] is None

    def test_round_trip_preserves_order_and_values(self, items):
        assert deserialize_items(serialize_items(items)) == items

    def test_duplicate_ids_rejected(self):
        raw = json.dumps([
            {"id": "p1", "name": "A", "price": 1, "stock": 2, "quantity": 1},
            {"id": "p1", "name": "A", "price": 1, "stock": 2, "quantity": 1},
        ])
        with pytest.raises(ValueError):
            deserialize_items(raw)

    def test_quantity_above_stock_rejected(self):
        raw = json.dumps([{"id": "p1", "name": "A", "price": 1, "stock": 2, "quantity": 3}])
        with pytest.raises(ValueError, match="exceeds its stock"):
            deserialize_items(raw)

    def test_quantity_equal_to_stock_loads(self):
        raw = json.dumps([{"id": "p1", "name": "A", "price": 1, "stock": 2, "quantity": 2}])
        assert deserialize_items(raw)[0].quantity == 2


class TestMemoryCartStorage:

    def test_absent_slot_loads_empty(self):
        assert MemoryCartStorage("cart", slots={}).load() == []

    def test_save_then_load(self, items):
        storage = MemoryCartStorage("cart", slots={})
        storage.save(items)
        assert storage.load() == items

    @pytest.mark.parametrize("raw", [
        "{not json",
        "",
        "null",
        '{"id": "p1"}',
        '[{"id": "p1"}]',
        '[1, 2, 3]',
        '[{"id": "p1", "name": "G", "price": NaN, "stock": 5, "quantity": 1}]',
        '[{"id": "p1", "name": "G", "price": Infinity, "stock": 5, "quantity": 1}]',
        '[{"id": "p1", "name": "G", "price": -3, "stock": 5, "quantity": 1}]',
        '[{"id": "p1", "name": "G", "price": 3, "stock": -5, "quantity": 1}]',
        '[{"id": "p1", "name": "G", "price": 3, "stock": 2, "quantity": 50}]',
    ])
    def test_malformed_slot_loads_empty(self, raw):
        assert MemoryCartStorage("cart", slots={"cart": raw}).load() == []

    def test_keys_are_isolated(self, items):
        slots = {}
        MemoryCartStorage("a", slots=slots).save(items)
        assert MemoryCartStorage("b", slots=slots).load() == []

    def test_clear_removes_slot(self, items):
        slots = {}
        storage = MemoryCartStorage("cart", slots=slots)
        storage.save(items)
        storage.clear()
        assert "cart" not in slots


class TestFileCartStorage:

    def test_save_then_load(self, tmp_path, items):
        storage = FileCartStorage("cart", directory=tmp_path)
        storage.save(items)

        assert (tmp_path / "cart.json").exists()
        assert FileCartStorage("cart", directory=tmp_path).load() == items

    def test_missing_directory_loads_empty(self, tmp_path):
        assert FileCartStorage("cart", directory=tmp_path / "nope").load() == []

    def test_invalid_json_loads_empty(self, tmp_path):
        (tmp_path / "cart.json").write_text("[{broken", encoding="utf-8")
        assert FileCartStorage("cart", directory=tmp_path).load() == []

    def test_save_overwrites(self, tmp_path, items):
        storage = FileCartStorage("cart", directory=tmp_path)
        storage.save(items)
        storage.save(items[:1])
        assert storage.load() == items[:1]

    def test_clear(self, tmp_path, items):
        storage = FileCartStorage("cart", directory=tmp_path)
        storage.save(items)
        storage.clear()
        storage.clear()
        assert storage.load() == []

    @pytest.mark.parametrize("key", ["../escape", "a/b", "", "x" * 200])
    def test_unsafe_key_rejected(self, tmp_path, key):
        with pytest.raises(ValueError):
            FileCartStorage(key, directory=tmp_path)


class TestRedisCartStorage:

    def test_uses_cart_prefix_without_ttl(self, items):
        redis = Mock()
        storage = RedisCartStorage("abc", redis=redis)

        storage.save(items)

        key, raw = redis.set.call_args.args
        assert key == "cart:abc"
        assert json.loads(raw)[0]["id"] == "p1"
        assert "ex" not in redis.set.call_args.kwargs

    def test_load(self, items):
        redis = Mock()
        redis.get.return_value = serialize_items(items)
        assert RedisCartStorage("abc", redis=redis).load() == items
        redis.get.assert_called_once_with("cart:abc")

    def test_read_failure_loads_empty(self):
        redis = Mock()
        redis.get.side_effect = ConnectionError("down")
        assert RedisCartStorage("abc", redis=redis).load() == []

    def test_write_failure_raises_value_error(self, items):
        redis = Mock()
        redis.set.side_effect = ConnectionError("down")
        with pytest.raises(ValueError, match="Cart service unavailable"):
            RedisCartStorage("abc", redis=redis).save(items)


class TestGetCartStorage:

    def test_backends(self):
        assert isinstance(get_cart_storage("k", backend="memory"), MemoryCartStorage)
        assert isinstance(get_cart_storage("k", backend="file"), FileCartStorage)
        assert isinstance(get_cart_storage("k", backend="redis"), RedisCartStorage)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            get_cart_storage("k", backend="sqlite")

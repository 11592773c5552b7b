"""
Tests for the cart persistence adapters.
"""
import json

import pytest

from schemas.cart import CartLineItem
from utils.cart_store import JsonFileCartStore, MemoryCartStore, dump_items


def _items():
    return [
        CartLineItem(id="1", product_code="A01", name="Speaker", price=890.0, category="Audio",
                     quantity=2, image="/s.jpg", is_used=False),
        CartLineItem(id="2", name="Cable", price=190.0, category="Accessories", quantity=1,
                     images=["/c1.jpg", "/c2.jpg"]),
    ]


class TestSerializedFormat:

    def test_uses_camel_case_and_omits_missing_fields(self):
        data = json.loads(dump_items(_items()))

        assert data[0] == {
            "id": "1", "productCode": "A01", "name": "Speaker", "price": 890.0,
            "image": "/s.jpg", "category": "Audio", "quantity": 2, "isUsed": False,
        }
        assert "productCode" not in data[1]
        assert data[1]["images"] == ["/c1.jpg", "/c2.jpg"]


class TestMemoryCartStore:

    def test_empty_slot_loads_empty_list(self):
        assert MemoryCartStore().load() == []

    def test_save_then_load(self):
        store = MemoryCartStore()
        store.save(_items())
        assert store.load() == _items()

    def test_duplicate_ids_load_empty_list(self):
        row = {"id": "1", "name": "Speaker", "price": 890, "category": "Audio", "quantity": 1}
        raw = json.dumps([row, row])

        assert MemoryCartStore(raw).load() == []

    @pytest.mark.parametrize("raw", [
        "not json",
        '{"id": "1"}',
        '[{"id": "1"}]',
        '[{"id": "1", "name": "x", "price": 1, "category": "c", "quantity": 0}]',
    ])
    def test_unreadable_content_loads_empty_list(self, raw):
        assert MemoryCartStore(raw).load() == []


class TestJsonFileCartStore:

    def test_missing_file_loads_empty_list(self, tmp_path):
        assert JsonFileCartStore(tmp_path / "storage.json").load() == []

    def test_round_trip_through_new_instance(self, tmp_path):
        path = tmp_path / "storage.json"
        JsonFileCartStore(path).save(_items())

        assert JsonFileCartStore(path).load() == _items()

    def test_cart_is_stored_under_well_known_key(self, tmp_path):
        path = tmp_path / "storage.json"
        JsonFileCartStore(path).save(_items())

        slots = json.loads(path.read_text(encoding="utf-8"))
        assert list(slots) == ["eddyshop_cart"]
        assert json.loads(slots["eddyshop_cart"])[0]["id"] == "1"

    def test_save_keeps_other_keys(self, tmp_path):
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"eddyshop_theme": "dark"}), encoding="utf-8")

        JsonFileCartStore(path).save(_items())

        slots = json.loads(path.read_text(encoding="utf-8"))
        assert slots["eddyshop_theme"] == "dark"

    def test_duplicate_ids_in_file_load_empty_list(self, tmp_path):
        row = {"id": "1", "name": "Speaker", "price": 890, "category": "Audio", "quantity": 1}
        path = tmp_path / "storage.json"
        path.write_text(json.dumps({"eddyshop_cart": json.dumps([row, row])}), encoding="utf-8")

        assert JsonFileCartStore(path).load() == []

    def test_save_overwrites_previous_cart(self, tmp_path):
        store = JsonFileCartStore(tmp_path / "storage.json")
        store.save(_items())
        store.save([])

        assert store.load() == []

    @pytest.mark.parametrize("content", ["{broken", "[1, 2, 3]", json.dumps({"eddyshop_cart": "[{]"})])
    def test_corrupt_content_loads_empty_list(self, tmp_path, content):
        path = tmp_path / "storage.json"
        path.write_text(content, encoding="utf-8")

        assert JsonFileCartStore(path).load() == []

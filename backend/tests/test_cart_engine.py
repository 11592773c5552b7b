"""
Unit tests for the pure cart operations and CartSession.
"""
import pytest

from models.product import Product
from schemas.cart import CartLineItem
from utils import cart_engine
from utils.cart_engine import CartSession
from utils.cart_store import MemoryCartStore


def _product(**overrides):
    data = dict(
        id="1",
        product_code="P01",
        name="Test Product",
        description="Test description",
        price=100.0,
        category="Test",
        image="/test.jpg",
    )
    data.update(overrides)
    return Product(**data)


def _line(id="1", price=100.0, quantity=1, **overrides):
    return CartLineItem(id=id, name=f"Item {id}", price=price, category="Test", quantity=quantity, **overrides)


SAMPLE_CARTS = [
    [],
    [_line("1", quantity=1)],
    [_line("1", quantity=2), _line("2", price=50.0, quantity=3)],
    [_line("7", price=19.99, quantity=4), _line("8", price=0.0, quantity=1), _line("9", quantity=10)],
]


class TestAddItem:

    def test_adds_new_item_to_empty_cart(self):
        result = cart_engine.add_item([], _product())

        assert len(result) == 1
        assert result[0].id == "1"
        assert result[0].quantity == 1

    def test_snapshots_display_fields(self):
        product = _product(images=["/a.jpg", "/b.jpg"], is_used=True)

        item = cart_engine.add_item([], product)[0]

        assert item.name == "Test Product"
        assert item.price == 100.0
        assert item.product_code == "P01"
        assert item.image == "/test.jpg"
        assert item.images == ["/a.jpg", "/b.jpg"]
        assert item.category == "Test"
        assert item.is_used is True

    def test_later_catalog_edits_do_not_change_snapshot(self):
        product = _product()
        items = cart_engine.add_item([], product)

        product.price = 999.0
        product.name = "Renamed"

        assert items[0].price == 100.0
        assert items[0].name == "Test Product"

    def test_increments_quantity_for_existing_item(self):
        items = [_line("1", quantity=1)]

        result = cart_engine.add_item(items, _product())

        assert len(result) == 1
        assert result[0].quantity == 2

    def test_does_not_mutate_input(self):
        items = [_line("1", quantity=1)]

        result = cart_engine.add_item(items, _product())

        assert result is not items
        assert items[0].quantity == 1

    def test_keeps_other_items_and_order(self):
        items = [_line("1"), _line("2"), _line("3")]

        result = cart_engine.add_item(items, _product(id="2"))

        assert [i.id for i in result] == ["1", "2", "3"]
        assert [i.quantity for i in result] == [1, 2, 1]

    def test_appends_new_product_at_end(self):
        result = cart_engine.add_item([_line("1")], _product(id="5"))
        assert [i.id for i in result] == ["1", "5"]

    @pytest.mark.parametrize("items", [c for c in SAMPLE_CARTS if c])
    def test_repeat_add_grows_total_by_one_and_keeps_length(self, items):
        existing_id = items[0].id

        result = cart_engine.add_item(items, _product(id=existing_id))

        assert cart_engine.get_total_items(result) == cart_engine.get_total_items(items) + 1
        assert len(result) == len(items)

    def test_add_twice_scenario(self):
        # Arrange
        product = _product(id="1", price=100.0)

        # Act
        cart = cart_engine.add_item([], product)
        cart = cart_engine.add_item(cart, product)

        # Assert
        assert [(i.id, i.quantity) for i in cart] == [("1", 2)]
        assert cart_engine.get_total_items(cart) == 2
        assert cart_engine.get_total_price(cart) == 200


class TestRemoveItem:

    def test_removes_item(self):
        assert cart_engine.remove_item([_line("1")], "1") == []

    @pytest.mark.parametrize("items", SAMPLE_CARTS)
    def test_unknown_id_is_a_no_op(self, items):
        assert cart_engine.remove_item(items, "non-existent") == items

    def test_returns_new_list(self):
        items = [_line("1"), _line("2")]

        result = cart_engine.remove_item(items, "1")

        assert [i.id for i in result] == ["2"]
        assert len(items) == 2


class TestUpdateQuantity:

    def test_sets_quantity_exactly(self):
        result = cart_engine.update_quantity([_line("1", quantity=1)], "1", 5)

        assert len(result) == 1
        assert result[0].id == "1"
        assert result[0].quantity == 5

    def test_does_not_mutate_input(self):
        items = [_line("1", quantity=3)]

        cart_engine.update_quantity(items, "1", 7)

        assert items[0].quantity == 3

    @pytest.mark.parametrize("quantity", [0, -1, -10])
    def test_non_positive_quantity_removes_item(self, quantity):
        assert cart_engine.update_quantity([_line("1")], "1", quantity) == []

    @pytest.mark.parametrize("items", SAMPLE_CARTS)
    @pytest.mark.parametrize("product_id", ["1", "2", "missing"])
    def test_zero_matches_remove(self, items, product_id):
        assert cart_engine.update_quantity(items, product_id, 0) == cart_engine.remove_item(items, product_id)

    def test_unknown_id_is_a_no_op(self):
        items = [_line("1", quantity=2)]
        assert cart_engine.update_quantity(items, "missing", 4) == items


class TestAggregates:

    def test_empty_cart_totals_are_zero(self):
        assert cart_engine.get_total_items([]) == 0
        assert cart_engine.get_total_price([]) == 0

    def test_calculates_totals(self):
        items = [_line("1", price=100.0, quantity=2), _line("2", price=50.0, quantity=3)]

        assert cart_engine.get_total_price(items) == 350
        assert cart_engine.get_total_items(items) == 5

    def test_clear_items(self):
        assert cart_engine.clear_items() == []

    def test_contains(self):
        items = [_line("1")]
        assert cart_engine.contains(items, "1")
        assert not cart_engine.contains(items, "2")


class TestCartSession:
    """
    CartSession loads once from its store and saves after every change.
    """

    def test_open_loads_saved_items(self):
        store = MemoryCartStore()
        store.save([_line("1", quantity=2)])

        session = CartSession.open(store)

        assert session.total_items == 2
        assert session.contains("1")

    def test_open_with_empty_store(self):
        session = CartSession.open(MemoryCartStore())
        assert session.items == []
        assert session.total_price == 0

    def test_every_mutation_is_persisted(self):
        store = MemoryCartStore()
        session = CartSession.open(store)

        session.add(_product(id="1", price=100.0))
        session.add(_product(id="1", price=100.0))
        session.add(_product(id="2", price=50.0))
        assert [(i.id, i.quantity) for i in store.load()] == [("1", 2), ("2", 1)]

        session.update_quantity("2", 3)
        assert store.load()[1].quantity == 3
        assert session.total_price == 350

        session.remove("1")
        assert [i.id for i in store.load()] == ["2"]

        session.clear()
        assert store.load() == []

    def test_items_property_is_a_copy(self):
        session = CartSession(MemoryCartStore(), [_line("1")])

        session.items.append(_line("2"))

        assert len(session.items) == 1

    def test_checkout_builds_message_and_clears(self):
        store = MemoryCartStore()
        session = CartSession(store, [_line("1", price=100.0, quantity=2, product_code="A01")])

        message = session.checkout()

        assert "A01 Item 1 x2 = ฿200" in message
        assert message.endswith("Total: ฿200")
        assert session.items == []
        assert store.load() == []

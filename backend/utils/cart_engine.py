# backend/utils/cart_engine.py
"""Client cart operations.

Every function here is pure: the incoming list is never mutated and a new
list is returned, so callers can detect changes with a plain equality check.
A cart holds at most one line item per product id; adding the same product
again bumps its quantity instead of appending a duplicate row.
"""
from typing import List, Optional

from schemas.cart import CartLineItem
from utils.cart_store import CartStore
from utils.pricing import build_order_message


def _snapshot(product) -> CartLineItem:
    # Copy the display fields as they are right now
    images = getattr(product, "images", None)
    return CartLineItem(
        id=product.id,
        product_code=getattr(product, "product_code", None),
        name=product.name,
        price=product.price,
        image=getattr(product, "image", None),
        images=list(images) if images is not None else None,
        category=product.category,
        quantity=1,
        is_used=getattr(product, "is_used", None),
    )


def add_item(items: List[CartLineItem], product) -> List[CartLineItem]:
    """Add one unit of `product`; increments the existing row if present."""
    if contains(items, product.id):
        return [
            item.model_copy(update={"quantity": item.quantity + 1}) if item.id == product.id else item
            for item in items
        ]
    return [*items, _snapshot(product)]


def remove_item(items: List[CartLineItem], product_id: str) -> List[CartLineItem]:
    return [item for item in items if item.id != product_id]


def update_quantity(items: List[CartLineItem], product_id: str, quantity: int) -> List[CartLineItem]:
    """Set the quantity exactly; zero or less removes the row."""
    if quantity <= 0:
        return remove_item(items, product_id)
    return [
        item.model_copy(update={"quantity": quantity}) if item.id == product_id else item
        for item in items
    ]


def clear_items() -> List[CartLineItem]:
    return []


def contains(items: List[CartLineItem], product_id: str) -> bool:
    return any(item.id == product_id for item in items)


def get_total_items(items: List[CartLineItem]) -> int:
    return sum(item.quantity for item in items)


def get_total_price(items: List[CartLineItem]) -> float:
    # Plain float arithmetic; rounding is left to presentation
    return sum((item.price * item.quantity for item in items), 0.0)


class CartSession:
    """One shopper's cart: the current list plus the store it is saved to.

    The pure functions above are the only mutators. The list is loaded once
    when the session opens and written back wholesale after every change.
    """

    def __init__(self, store: CartStore, items: Optional[List[CartLineItem]] = None):
        self.store = store
        self._items: List[CartLineItem] = list(items or [])

    @classmethod
    def open(cls, store: CartStore) -> "CartSession":
        return cls(store, store.load())

    @property
    def items(self) -> List[CartLineItem]:
        return list(self._items)

    @property
    def total_items(self) -> int:
        return get_total_items(self._items)

    @property
    def total_price(self) -> float:
        return get_total_price(self._items)

    def contains(self, product_id: str) -> bool:
        return contains(self._items, product_id)

    def _replace(self, items: List[CartLineItem]) -> List[CartLineItem]:
        self._items = items
        self.store.save(items)
        return self.items

    def add(self, product) -> List[CartLineItem]:
        return self._replace(add_item(self._items, product))

    def remove(self, product_id: str) -> List[CartLineItem]:
        return self._replace(remove_item(self._items, product_id))

    def update_quantity(self, product_id: str, quantity: int) -> List[CartLineItem]:
        return self._replace(update_quantity(self._items, product_id, quantity))

    def clear(self) -> List[CartLineItem]:
        return self._replace(clear_items())

    def checkout(self) -> str:
        """Build the order message for the current cart, then empty it."""
        message = build_order_message(self._items)
        self.clear()
        return message

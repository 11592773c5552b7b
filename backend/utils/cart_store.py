# backend/utils/cart_store.py
import json
import logging
from pathlib import Path
from typing import List, Optional, Protocol, Union

from pydantic import TypeAdapter, ValidationError

from config import settings
from schemas.cart import CartItems, CartLineItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(CartItems)


class CartStore(Protocol):
    def load(self) -> List[CartLineItem]: ...

    def save(self, items: List[CartLineItem]) -> None: ...


def dump_items(items: List[CartLineItem]) -> str:
    return _items_adapter.dump_json(items, by_alias=True, exclude_none=True).decode()


def parse_items(raw: Union[str, bytes, None]) -> List[CartLineItem]:
    # Anything that is not a valid list of line items counts as an empty cart
    if not raw:
        return []
    try:
        return _items_adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning("Discarding unreadable cart state: %s", e.errors()[:1])
        return []


class MemoryCartStore:
    """Keeps the serialized cart in a single in-process slot."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw

    def load(self) -> List[CartLineItem]:
        return parse_items(self.raw)

    def save(self, items: List[CartLineItem]) -> None:
        self.raw = dump_items(items)


class JsonFileCartStore:
    """A JSON object file used as a small key/value store.

    The cart lives under one well-known key; other keys in the file are kept
    untouched on save.
    """

    def __init__(self, path: Union[str, Path], key: Optional[str] = None):
        self.path = Path(path)
        self.key = key or settings.CART_STORAGE_KEY

    def _read_slots(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            slots = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Cart store %s is unreadable: %s", self.path, e)
            return {}
        return slots if isinstance(slots, dict) else {}

    def load(self) -> List[CartLineItem]:
        raw = self._read_slots().get(self.key)
        return parse_items(raw if isinstance(raw, str) else None)

    def save(self, items: List[CartLineItem]) -> None:
        slots = self._read_slots()
        slots[self.key] = dump_items(items)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(slots, ensure_ascii=False, indent=2), encoding="utf-8")

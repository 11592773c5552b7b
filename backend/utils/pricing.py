# backend/utils/pricing.py
from typing import List
from urllib.parse import quote

from config import settings

CURRENCY_SYMBOLS = {"THB": "฿", "USD": "$", "EUR": "€"}

ORDER_MESSAGE_HEADER = "Order request:"


def format_price(amount: float, currency: str = None) -> str:
    """Format like `฿1,234` (no forced decimals, at most two)."""
    currency = currency or settings.CURRENCY
    text = f"{amount:,.2f}".rstrip("0").rstrip(".")
    symbol = CURRENCY_SYMBOLS.get(currency)
    return f"{symbol}{text}" if symbol else f"{currency} {text}"


# Shipping is free once the cart total reaches the threshold
def calculate_shipping(total: float) -> float:
    if total <= 0:
        return 0.0
    return 0.0 if total >= settings.FREE_SHIPPING_THRESHOLD else float(settings.SHIPPING_FEE)


def amount_for_free_shipping(total: float) -> float:
    remaining = settings.FREE_SHIPPING_THRESHOLD - total
    return remaining if remaining > 0 else 0.0


def build_order_message(items: List) -> str:
    lines = [ORDER_MESSAGE_HEADER]
    total = 0.0
    for item in items:
        line_total = item.price * item.quantity
        total += line_total
        lines.append(f"{item.product_code or ''} {item.name} x{item.quantity} = {format_price(line_total)}".strip())
    lines.append(f"Total: {format_price(total)}")
    return "\n".join(lines)


def order_link(message: str) -> str:
    return f"{settings.ORDER_CHAT_URL}?{quote(message)}"

# backend/routes/cart.py
# The cart lives on the client. These endpoints only transform the list the
# client sends and return the result with totals; nothing is stored.
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from database import get_db
from utils.catalog import get_product_by_id
from utils import cart_engine
from utils.pricing import calculate_shipping, order_link
from utils.cart_store import MemoryCartStore
from schemas.cart import (
    CartLineItem, CartPayload, CartAddItem, CartUpdateItem, CartRemoveItem, CartOut, CheckoutOut,
)

router = APIRouter(prefix="/cart", tags=["Cart"])

def _cart_to_out(items: List[CartLineItem]) -> CartOut:
    total_price = cart_engine.get_total_price(items)
    shipping = calculate_shipping(total_price)
    return CartOut(
        items=items,
        total_items=cart_engine.get_total_items(items),
        total_price=round(total_price, 2),
        shipping_fee=shipping,
        grand_total=round(total_price + shipping, 2),
    )

@router.post("/summary", response_model=CartOut)
def cart_summary(payload: CartPayload):
    return _cart_to_out(payload.items)

@router.post("/add", response_model=CartOut)
def add_to_cart(payload: CartAddItem, db: Session = Depends(get_db)):
    product = get_product_by_id(db, payload.product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _cart_to_out(cart_engine.add_item(payload.items, product))

@router.post("/update", response_model=CartOut)
def update_cart_item(payload: CartUpdateItem):
    return _cart_to_out(cart_engine.update_quantity(payload.items, payload.product_id, payload.quantity))

@router.post("/remove", response_model=CartOut)
def remove_cart_item(payload: CartRemoveItem):
    return _cart_to_out(cart_engine.remove_item(payload.items, payload.product_id))

@router.post("/checkout", response_model=CheckoutOut)
def checkout(payload: CartPayload):
    if not payload.items:
        raise HTTPException(status_code=400, detail="Cart is empty")
    session = cart_engine.CartSession(MemoryCartStore(), payload.items)
    message = session.checkout()
    return CheckoutOut(message=message, order_url=order_link(message), items=session.items)

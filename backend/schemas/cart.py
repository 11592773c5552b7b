from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, List, Optional


# Shared config: camelCase on the wire, snake_case in Python
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# A single cart row. Display fields are a snapshot taken when the product was
# first added; later catalog edits do not change them.
class CartLineItem(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    product_code: Optional[str] = None
    name: str
    price: float = Field(ge=0)
    image: Optional[str] = None
    images: Optional[List[str]] = None
    category: str
    quantity: int = Field(gt=0)
    is_used: Optional[bool] = None


def _unique_ids(items: List[CartLineItem]) -> List[CartLineItem]:
    seen = set()
    for item in items:
        if item.id in seen:
            raise ValueError(f"duplicate line item for product {item.id}")
        seen.add(item.id)
    return items


# A whole cart: at most one row per product id
CartItems = Annotated[List[CartLineItem], AfterValidator(_unique_ids)]


# Request schema: the client's current cart
class CartPayload(CamelModel):
    items: CartItems = Field(default_factory=list)

# Request schema for adding a product to the cart
class CartAddItem(CartPayload):
    product_id: str

# Request schema for replacing a line item quantity (<= 0 removes the row)
class CartUpdateItem(CartPayload):
    product_id: str
    quantity: int

# Request schema for removing a line item
class CartRemoveItem(CartPayload):
    product_id: str

# Response schema for the whole cart with aggregates
class CartOut(CamelModel):
    items: List[CartLineItem]
    total_items: int
    total_price: float
    shipping_fee: float
    grand_total: float

# Response schema for checkout intent (cart is cleared afterwards)
class CheckoutOut(CamelModel):
    message: str
    order_url: str
    items: List[CartLineItem]

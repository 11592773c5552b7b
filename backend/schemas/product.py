# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime


# Base configuration: camelCase JSON, ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


# Shared base attributes for product entities
class ProductBase(ORMBase):
    product_code: Optional[str] = Field(default=None, max_length=3)
    name: str = Field(min_length=1)
    description: str = ""
    price: float = Field(ge=0)
    category: str = Field(min_length=1)
    stock: Optional[int] = Field(default=None, ge=0)
    featured: bool = False
    is_used: bool = False
    sold: bool = False


# Schema for creating a new product
class ProductCreate(ProductBase):
    # Either a gallery or a single image; images[0] becomes the canonical image
    images: Optional[List[str]] = None
    image: Optional[str] = None


# Schema for partial product updates
class ProductUpdate(ORMBase):
    """Schema for PUT requests - omitted fields keep their current value."""
    product_code: Optional[str] = Field(None, max_length=3)
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    category: Optional[str] = Field(None, min_length=1)
    stock: Optional[int] = Field(None, ge=0)
    featured: Optional[bool] = None
    is_used: Optional[bool] = None
    sold: Optional[bool] = None
    images: Optional[List[str]] = None
    image: Optional[str] = None


# Full product representation including ID
class ProductOut(ProductBase):
    id: str
    image: Optional[str] = None
    images: Optional[List[str]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Catalog query filters; every field optional
class ProductFilters(BaseModel):
    category: Optional[str] = None
    search: Optional[str] = None
    featured: Optional[bool] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)

# backend/models/product.py
import uuid

from sqlalchemy import Column, String, Float, Integer, Boolean, DateTime, JSON, CheckConstraint, func
from database import Base


def _new_id() -> str:
    return uuid.uuid4().hex


# Model Product
# A single catalog item shown in the storefront.
# `category` stores the category *name* (not a foreign key), so renaming or
# deleting categories is guarded at the route level instead of by the database.
class Product(Base):
    __tablename__ = "products"

    id = Column(String(32), primary_key=True, index=True, default=_new_id)
    product_code = Column(String(3), nullable=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(String, nullable=False, default="")
    category = Column(String, nullable=False, index=True)

    price = Column(Float, CheckConstraint("price >= 0"), nullable=False)
    stock = Column(Integer, CheckConstraint("stock IS NULL OR stock >= 0"), nullable=True)

    # Primary image (kept for older clients) plus the ordered gallery.
    image = Column(String, nullable=True)
    images = Column(JSON, nullable=True)

    featured = Column(Boolean, nullable=False, default=False)
    is_used = Column(Boolean, nullable=False, default=False)
    sold = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

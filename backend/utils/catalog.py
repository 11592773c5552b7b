# backend/utils/catalog.py
"""Read-only catalog queries shared by the storefront and admin routes.

Lookups that miss return ``None``; turning that into a 404 is up to the caller.
"""
from typing import List, Optional

from sqlalchemy import or_, func
from sqlalchemy.orm import Session

from models.product import Product
from models.category import Category
from schemas.product import ProductFilters


def _escape_like(text: str) -> str:
    # Match % and _ literally
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def list_products(db: Session, filters: Optional[ProductFilters] = None) -> List[Product]:
    query = db.query(Product)
    filters = filters or ProductFilters()

    # Exact category name
    if filters.category:
        query = query.filter(Product.category == filters.category)

    # Case-insensitive substring over the text fields
    if filters.search:
        like = f"%{_escape_like(filters.search.strip())}%"
        query = query.filter(
            or_(
                Product.name.ilike(like, escape="\\"),
                Product.description.ilike(like, escape="\\"),
                Product.category.ilike(like, escape="\\"),
                Product.product_code.ilike(like, escape="\\"),
            )
        )

    if filters.featured:
        query = query.filter(Product.featured.is_(True))
    if filters.min_price is not None:
        query = query.filter(Product.price >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(Product.price <= filters.max_price)

    return query.order_by(Product.created_at.asc(), Product.id.asc()).all()


def get_product_by_id(db: Session, product_id: str) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()


def list_categories(db: Session) -> List[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def get_category_by_id(db: Session, category_id: str) -> Optional[Category]:
    return db.query(Category).filter(Category.id == category_id).first()


def get_category_by_name(db: Session, name: str) -> Optional[Category]:
    return db.query(Category).filter(Category.name == name).first()


def count_products_in_category(db: Session, name: str) -> int:
    return db.query(func.count(Product.id)).filter(Product.category == name).scalar() or 0


def product_images(product) -> List[str]:
    """Gallery images, falling back to the single primary image."""
    if product.images:
        return list(product.images)
    return [product.image] if product.image else []

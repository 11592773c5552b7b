# backend/routes/categories.py
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from utils.tokenJWT import require_admin
from utils.catalog import (
    list_categories, get_category_by_id, get_category_by_name, count_products_in_category,
)
from models.category import Category
from schemas.category import CategoryCreate, CategoryUpdate, CategoryOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["Categories"])


def _name_taken(db: Session, name: str, exclude_id: str = None) -> bool:
    existing = get_category_by_name(db, name)
    return existing is not None and existing.id != exclude_id


@router.get("", response_model=List[CategoryOut])
def get_categories(db: Session = Depends(get_db)):
    return list_categories(db)


@router.get("/{category_id}", response_model=CategoryOut)
def get_category(category_id: str, db: Session = Depends(get_db)):
    category = get_category_by_id(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


@router.post("", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
def create_category(
    payload: CategoryCreate,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    name = payload.name.strip()
    if _name_taken(db, name):
        raise HTTPException(status_code=409, detail="Category name already exists")

    category = Category(name=name, icon=payload.icon or "📦", description=payload.description or "")
    db.add(category)
    db.commit()
    db.refresh(category)

    logger.info("Category created id=%s name=%s", category.id, category.name)
    return category


@router.put("/{category_id}", response_model=CategoryOut)
def update_category(
    category_id: str,
    payload: CategoryUpdate,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    category = get_category_by_id(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    # Uniqueness check ignores the category being edited
    if payload.name is not None:
        name = payload.name.strip()
        if _name_taken(db, name, exclude_id=category.id):
            raise HTTPException(status_code=409, detail="Category name already exists")
        category.name = name
    if payload.icon is not None:
        category.icon = payload.icon
    if payload.description is not None:
        category.description = payload.description

    db.commit()
    db.refresh(category)

    logger.info("Category updated id=%s", category.id)
    return category


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    category = get_category_by_id(db, category_id)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")

    # Products reference categories by name, so check before deleting
    in_use = count_products_in_category(db, category.name)
    if in_use > 0:
        logger.warning("Category delete blocked id=%s products=%d", category.id, in_use)
        raise HTTPException(
            status_code=400,
            detail=f"Cannot delete category: {in_use} products reference this category",
        )

    deleted = CategoryOut.model_validate(category)
    db.delete(category)
    db.commit()

    logger.info("Category deleted id=%s", deleted.id)
    return {"detail": "Category deleted", "category": deleted}

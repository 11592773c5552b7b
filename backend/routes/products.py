# backend/routes/products.py
import logging
from typing import Optional, List
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from database import get_db
from utils.tokenJWT import require_admin
from utils.catalog import list_products, get_product_by_id, product_images
from models.product import Product
import schemas.product as product_schemas

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])

PLACEHOLDER_IMAGE = "/images/products/placeholder.jpg"

# ---- HELPERS ----
def _norm_code(code: Optional[str]) -> Optional[str]:
    if code is None:
        return None
    c = code.strip().upper()
    return c if c else None

def _images_from(payload) -> Optional[List[str]]:
    # Accept either a gallery or a single image
    if payload.images:
        return list(payload.images)
    if payload.image:
        return [payload.image]
    return None

def _to_out(p: Product) -> product_schemas.ProductOut:
    out = product_schemas.ProductOut.model_validate(p)
    return out.model_copy(update={"images": product_images(p) or None})


# =========================
# LISTA PRODUKTÓW
# =========================
@router.get("/products", response_model=List[product_schemas.ProductOut])
def get_products(
    category: Optional[str] = Query(None, description="Exact category name"),
    search: Optional[str] = Query(None, description="Search name, description, category or code"),
    featured: Optional[bool] = Query(None),
    min_price: Optional[float] = Query(None, ge=0),
    max_price: Optional[float] = Query(None, ge=0),
    db: Session = Depends(get_db),
):
    filters = product_schemas.ProductFilters(
        category=category, search=search, featured=featured,
        min_price=min_price, max_price=max_price,
    )
    return [_to_out(p) for p in list_products(db, filters)]


@router.get("/products/featured", response_model=List[product_schemas.ProductOut])
def get_featured_products(db: Session = Depends(get_db)):
    return [_to_out(p) for p in list_products(db, product_schemas.ProductFilters(featured=True))]


# =========================
# POJEDYNCZY PRODUKT
# =========================
@router.get("/products/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: str, db: Session = Depends(get_db)):
    product = get_product_by_id(db, product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return _to_out(product)


# =========================
# DODAWANIE PRODUKTU
# =========================
@router.post("/products", response_model=product_schemas.ProductOut, status_code=status.HTTP_201_CREATED)
def add_product(
    payload: product_schemas.ProductCreate,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    images = _images_from(payload)
    new_product = Product(
        product_code=_norm_code(payload.product_code),
        name=payload.name.strip(),
        description=payload.description,
        price=payload.price,
        category=payload.category,
        image=images[0] if images else PLACEHOLDER_IMAGE,
        images=images,
        stock=payload.stock,
        featured=payload.featured,
        is_used=payload.is_used,
        sold=payload.sold,
    )

    db.add(new_product)
    db.commit()
    db.refresh(new_product)

    logger.info("Product created id=%s name=%s", new_product.id, new_product.name)
    return _to_out(new_product)


# =========================
# AKTUALIZACJA PRODUKTU
# =========================
@router.put("/products/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: str,
    payload: product_schemas.ProductUpdate,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    p = get_product_by_id(db, product_id)
    if not p:
        raise HTTPException(status_code=404, detail="Product not found")

    changes = payload.model_dump(exclude_unset=True, exclude={"images", "image"})
    if "product_code" in changes:
        changes["product_code"] = _norm_code(changes["product_code"])
    for key, value in changes.items():
        if value is None and key not in {"product_code", "stock"}:
            continue
        setattr(p, key, value)

    images = _images_from(payload)
    if images is not None:
        p.images = images
        p.image = images[0]

    db.commit()
    db.refresh(p)

    logger.info("Product updated id=%s fields=%s", p.id, sorted(changes))
    return _to_out(p)


# =========================
# USUWANIE
# =========================
@router.delete("/products/{product_id}")
def delete_product(
    product_id: str,
    db: Session = Depends(get_db),
    _admin: bool = Depends(require_admin),
):
    product = get_product_by_id(db, product_id)
    if not product: raise HTTPException(404, "Product not found")
    pid, pname = product.id, product.name
    db.delete(product)
    db.commit()
    logger.info("Product deleted id=%s", pid)
    return {"detail": f"Product '{pname}' deleted", "id": pid}

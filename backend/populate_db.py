import os
import json

# Database models and setup
from models.product import Product
from models.category import Category
from database import SessionLocal, init_db

# Configuration
DATA_DIR = os.path.join(os.path.dirname(__file__), "data")
# End Configuration


def _read_json(path):
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def _keep_id(row):
    # Reuse exported ids so links and carts keep working
    return {"id": str(row["id"])} if row.get("id") else {}


def seed_catalog(session, data_dir=DATA_DIR):
    """Loads categories.json and products.json into empty tables.

    Returns (categories_added, products_added). Tables that already hold rows
    are left alone so the script can be re-run safely.
    """
    categories_added = products_added = 0

    categories_path = os.path.join(data_dir, "categories.json")
    if os.path.exists(categories_path) and session.query(Category).count() == 0:
        for row in _read_json(categories_path):
            session.add(Category(
                **_keep_id(row),
                name=row["name"],
                icon=row.get("icon") or "📦",
                description=row.get("description") or "",
            ))
            categories_added += 1

    products_path = os.path.join(data_dir, "products.json")
    if os.path.exists(products_path) and session.query(Product).count() == 0:
        for row in _read_json(products_path):
            # Older exports only carry a single image
            images = row.get("images") or ([row["image"]] if row.get("image") else None)
            session.add(Product(
                **_keep_id(row),
                product_code=row.get("productCode") or None,
                name=row["name"],
                description=row.get("description") or "",
                price=float(row["price"]),
                category=row["category"],
                image=images[0] if images else None,
                images=images,
                stock=row.get("stock"),
                featured=bool(row.get("featured", False)),
                is_used=bool(row.get("isUsed", False)),
                sold=bool(row.get("sold", False)),
            ))
            products_added += 1

    session.commit()
    return categories_added, products_added


if __name__ == "__main__":
    init_db()
    session = SessionLocal()
    try:
        categories_added, products_added = seed_catalog(session)
        print(f"Dodano {categories_added} kategorii i {products_added} produktów.")
    finally:
        session.close()

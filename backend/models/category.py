# backend/models/category.py
from sqlalchemy import Column, String, DateTime, func
from database import Base
from models.product import _new_id

# Represents a storefront category; products reference it by name
class Category(Base):
    __tablename__ = "categories"

    id = Column(String(32), primary_key=True, index=True, default=_new_id)
    name = Column(String, unique=True, nullable=False, index=True)
    icon = Column(String(16), nullable=False, default="📦")
    description = Column(String, nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

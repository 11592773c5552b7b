from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class CategoryBase(BaseModel):
    name: str = Field(min_length=1)
    icon: str = "📦"
    description: str = ""


# Schema for creating a new category
class CategoryCreate(CategoryBase):
    pass


# Schema for partial category updates
class CategoryUpdate(BaseModel):
    """All fields optional; omitted fields keep their current value."""
    name: Optional[str] = Field(None, min_length=1)
    icon: Optional[str] = None
    description: Optional[str] = None


class CategoryOut(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: str

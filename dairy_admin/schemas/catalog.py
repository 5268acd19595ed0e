from typing import List, Optional

from pydantic import BaseModel, field_validator

from dairy_admin.schemas.common import Reference, coerce_reference, id_field


class Category(BaseModel):
    id: Optional[str] = id_field()
    name: str = ""
    description: Optional[str] = None
    isActive: bool = True


class CategoryCreate(BaseModel):
    name: str
    description: Optional[str] = None
    isActive: bool = True


class Subcategory(BaseModel):
    id: Optional[str] = id_field()
    name: str = ""
    category: Optional[Reference] = None
    price: float = 0.0
    description: Optional[str] = None
    isActive: bool = True

    @field_validator("category", mode="before")
    @classmethod
    def _populate_category(cls, value):
        return coerce_reference(value)


class SubcategoryCreate(BaseModel):
    name: str
    category: str
    price: float = 0.0
    description: Optional[str] = None
    isActive: bool = True


class CatalogOptions(BaseModel):
    categories: List[Category]
    subcategories: List[Subcategory]

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from dairy_admin.schemas.common import Reference, coerce_reference, id_field

EntryType = Literal["in", "out"]


class StockEntry(BaseModel):
    id: Optional[str] = id_field()
    entryType: EntryType
    quantity: float
    category: Optional[Reference] = None
    entryDate: Optional[datetime] = None
    notes: Optional[str] = None

    @field_validator("category", mode="before")
    @classmethod
    def _populate_category(cls, value):
        return coerce_reference(value)


class StockEntryCreate(BaseModel):
    entryType: EntryType = "in"
    quantity: float = Field(..., ge=0)
    category: str
    entryDate: Optional[datetime] = None
    notes: Optional[str] = None


class CategoryStock(BaseModel):
    categoryId: Optional[str] = None
    category: Optional[Reference] = None
    categoryName: Optional[str] = None
    currentStock: float = 0.0
    stockIn: float = Field(default=0.0, validation_alias=AliasChoices("stockIn", "totalIn"))
    stockOut: float = Field(default=0.0, validation_alias=AliasChoices("stockOut", "totalOut"))

    @field_validator("category", mode="before")
    @classmethod
    def _populate_category(cls, value):
        return coerce_reference(value)

    @field_validator("categoryId", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return str(value) if value is not None else None

    @field_validator("currentStock", "stockIn", "stockOut", mode="before")
    @classmethod
    def _missing_quantity(cls, value):
        return 0.0 if value is None else value


class StockValidation(BaseModel):
    isValid: bool
    error: Optional[str] = None
    availableStock: Optional[float] = None


class StockFilters(BaseModel):
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    category: Optional[str] = None


class StockOverview(BaseModel):
    entries: List[StockEntry]
    summary: dict
    categoryStock: List[CategoryStock]

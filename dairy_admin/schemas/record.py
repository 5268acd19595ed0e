from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from dairy_admin.schemas.common import Reference, coerce_reference, id_field

DeliveryTime = Literal["morning", "evening"]
EditableField = Literal["quantity", "pricePerUnit"]


class MilkItem(BaseModel):
    milkType: Optional[Reference] = None
    subcategory: Optional[Reference] = None
    quantity: float = 0.0
    pricePerUnit: float = 0.0
    totalPrice: float = 0.0

    @field_validator("milkType", "subcategory", mode="before")
    @classmethod
    def _populate_reference(cls, value):
        return coerce_reference(value)


class Delivery(BaseModel):
    time: DeliveryTime
    milkItems: List[MilkItem] = Field(default_factory=list)
    totalQuantity: float = 0.0
    totalPrice: float = 0.0


class Record(BaseModel):
    id: Optional[str] = id_field()
    date: Optional[datetime] = None
    customer: Optional[Reference] = None
    deliverySchedule: List[Delivery] = Field(default_factory=list)
    totalDailyQuantity: float = 0.0
    totalDailyPrice: float = 0.0

    @field_validator("customer", mode="before")
    @classmethod
    def _populate_customer(cls, value):
        return coerce_reference(value)


class RecordEdit(BaseModel):
    """One operator change to a milk item of a record."""
    time: DeliveryTime
    index: int = Field(..., ge=0)
    field: EditableField
    value: Any = None


class RecordUpdate(BaseModel):
    deliverySchedule: List[Delivery]
    totalDailyQuantity: float
    totalDailyPrice: float


class RecordPage(BaseModel):
    records: List[Record] = Field(default_factory=list)
    currentPage: int = 1
    totalPages: int = 1
    totalRecords: int = 0


class RecordFilters(BaseModel):
    startDate: Optional[str] = None
    endDate: Optional[str] = None
    customerId: Optional[str] = None
    customerNo: Optional[str] = None
    searchTerm: Optional[str] = None

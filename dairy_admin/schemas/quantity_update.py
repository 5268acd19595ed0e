from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from dairy_admin.schemas.common import Reference, coerce_reference, id_field
from dairy_admin.schemas.invoice import InvoiceCustomer
from dairy_admin.schemas.record import DeliveryTime

ReviewStatus = Literal["pending", "accepted", "rejected"]


class QuantityUpdate(BaseModel):
    """A customer's request to change one delivery's quantity."""
    id: Optional[str] = id_field()
    date: Optional[datetime] = None
    customer: Optional[InvoiceCustomer] = None
    time: Optional[DeliveryTime] = None
    milkType: Optional[Reference] = None
    subcategory: Optional[Reference] = None
    oldQuantity: float = 0.0
    newQuantity: float = 0.0
    difference: float = 0.0
    reason: Optional[str] = None
    status: Optional[str] = None
    isAccept: bool = False
    reviewStatus: ReviewStatus = "pending"

    @field_validator("customer", "milkType", "subcategory", mode="before")
    @classmethod
    def _populate_reference(cls, value):
        return coerce_reference(value)

    @field_validator("oldQuantity", "newQuantity", "difference", mode="before")
    @classmethod
    def _missing_quantity(cls, value):
        return 0.0 if value is None else value

    @model_validator(mode="after")
    def _derive_review_status(self):
        # Older upstream rows only carry isAccept
        if self.isAccept or self.status == "accepted":
            self.reviewStatus = "accepted"
        elif self.status == "rejected":
            self.reviewStatus = "rejected"
        else:
            self.reviewStatus = "pending"
        return self


class QuantityUpdateCreate(BaseModel):
    customerId: str
    date: str
    updateType: DeliveryTime
    newQuantity: float = Field(..., ge=0)
    reason: Optional[str] = None


class QuantityUpdateAccept(BaseModel):
    lastUpdated: float = Field(..., ge=0)


class QuantityUpdateReject(BaseModel):
    reason: str = ""

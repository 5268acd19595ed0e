from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from dairy_admin.schemas.common import id_field


class Customer(BaseModel):
    id: Optional[str] = id_field()
    customerNo: Optional[Any] = None
    name: str = ""
    phoneNo: Optional[str] = None
    address: Optional[str] = None
    joinedDate: Optional[str] = None
    isActive: bool = True
    advance: float = 0.0
    # Standing order, same shape as a record's delivery schedule
    deliverySchedule: List[Dict[str, Any]] = Field(default_factory=list)


class CustomerCreate(BaseModel):
    name: str
    phoneNo: str
    address: Optional[str] = None
    joinedDate: Optional[str] = None
    isActive: bool = True
    deliverySchedule: List[Dict[str, Any]] = Field(default_factory=list)


class CustomerPage(BaseModel):
    customers: List[Customer] = Field(default_factory=list)
    totalPages: int = 1
    totalCustomers: int = 0


class AdvancePaymentCreate(BaseModel):
    customerId: str
    amount: float = Field(..., gt=0)


class AdvanceAmountUpdate(BaseModel):
    amount: float = Field(..., ge=0)


class AdvanceOverview(BaseModel):
    customers: List[Customer]
    totalAdvance: float

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, Field, field_validator

from dairy_admin.schemas.common import coerce_reference, id_field

InvoiceStatus = Literal["pending", "partially_paid", "paid", "overdue"]
PaymentMethod = Literal["cash", "online"]


class InvoiceCustomer(BaseModel):
    id: Optional[str] = id_field()
    name: Optional[str] = None
    customerNo: Optional[Any] = None
    phoneNo: Optional[str] = None
    address: Optional[str] = None


class BillingPeriod(BaseModel):
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None


class Payment(BaseModel):
    amount: float
    paymentMethod: PaymentMethod = "cash"
    transactionId: Optional[str] = None
    notes: Optional[str] = None
    paymentDate: Optional[datetime] = None


class Invoice(BaseModel):
    id: Optional[str] = id_field()
    invoiceNumber: Optional[str] = None
    customer: Optional[InvoiceCustomer] = None
    billingPeriod: Optional[BillingPeriod] = None
    # Per-day delivery snapshots, passed through as the upstream sends them
    items: List[Dict[str, Any]] = Field(default_factory=list)
    totalAmount: float = 0.0
    amountPaid: float = 0.0
    dueAmount: float = 0.0
    status: Optional[InvoiceStatus] = None
    dueDate: Optional[datetime] = None
    payments: Optional[List[Payment]] = None
    advanceUsed: float = 0.0
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    @field_validator("customer", mode="before")
    @classmethod
    def _populate_customer(cls, value):
        return coerce_reference(value)

    @field_validator("totalAmount", "amountPaid", "dueAmount", "advanceUsed", mode="before")
    @classmethod
    def _missing_amount(cls, value):
        return 0.0 if value is None else value


class InvoicePage(BaseModel):
    invoices: List[Invoice] = Field(default_factory=list)
    totalPages: int = 1
    total: int = 0


class PaymentCreate(BaseModel):
    amount: float = Field(..., gt=0)
    paymentMethod: PaymentMethod = "cash"
    notes: Optional[str] = None
    transactionId: Optional[str] = None


class PaymentFormInput(BaseModel):
    """Raw form values as typed by the operator."""
    amount: str = ""
    paymentMethod: PaymentMethod = "cash"
    transactionId: str = ""
    notes: str = ""


class PaymentResult(BaseModel):
    success: bool
    message: str
    redirectTo: Optional[str] = None
    redirectDelaySeconds: Optional[float] = None
    invoice: Optional[Invoice] = None


class QuickAmount(BaseModel):
    label: str
    amount: str


class PaymentFormView(BaseModel):
    invoice: Invoice
    quickAmounts: List[QuickAmount]
    transactionIdHint: str
    defaults: PaymentFormInput
    showTransactionId: bool = False
    paymentPercentage: str = "0"
    # Part of the entered amount beyond the due amount, kept as advance
    advanceAmount: float = 0.0
    totalAmountDisplay: str = ""
    amountPaidDisplay: str = ""
    dueAmountDisplay: str = ""
    advanceAmountDisplay: str = ""


class GenerateInvoiceRequest(BaseModel):
    month: int = Field(..., ge=1, le=12)
    year: int
    updateExisting: bool = True


class GenerateCustomerInvoiceResult(BaseModel):
    invoice: Invoice
    message: str
    advanceUsed: float = 0.0
    redirectTo: str


class BatchGenerateResult(BaseModel):
    created: int = 0
    updated: int = 0
    failed: int = 0
    message: str
    error: Optional[str] = None
    redirectTo: str = "/invoices"


class ExistingInvoiceCheck(BaseModel):
    exists: bool = False
    invoice: Optional[Invoice] = None


class InvoiceStatusUpdate(BaseModel):
    status: InvoiceStatus


class InvoiceStats(BaseModel):
    totalInvoices: int = 0
    totalAmount: float = 0.0
    dueAmount: float = 0.0
    pendingCount: int = 0
    overdueCount: int = 0
    paidCount: int = 0


class StatusBadge(BaseModel):
    label: str
    color: str


class InvoiceRow(BaseModel):
    invoice: Invoice
    badge: StatusBadge
    canDelete: bool


class InvoiceListView(BaseModel):
    rows: List[InvoiceRow]
    page: int
    totalPages: int
    total: int
    pageNumbers: List[Any]
    source: Literal["server", "client"]
    stats: InvoiceStats
    month: int
    year: int
    quickFilter: str
    hasActiveFilters: bool
    summary: Optional[Dict[str, Any]] = None


class DueCustomer(BaseModel):
    customerId: Optional[str] = None
    customerNo: Optional[Any] = None
    name: Optional[str] = None
    phone: Optional[str] = Field(default=None, validation_alias=AliasChoices("phoneNo", "phone"))
    totalDue: float = 0.0
    invoiceCount: int = 0


class DueCustomerPage(BaseModel):
    customers: List[DueCustomer] = Field(default_factory=list)
    totalPages: int = 1
    totalCustomers: int = 0
    grandTotalDue: float = 0.0


class DueCustomersView(BaseModel):
    rows: List[DueCustomer]
    page: int
    totalPages: int
    totalCustomers: int
    grandTotalDue: float
    searching: bool

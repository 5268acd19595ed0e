from typing import List, Literal

from pydantic import BaseModel, Field

from dairy_admin.schemas.quantity_update import QuantityUpdate

TimeFilter = Literal["today", "yesterday", "thisWeek", "thisMonth", "lastMonth", "custom"]


class DateRange(BaseModel):
    startDate: str
    endDate: str
    label: str


class DashboardView(BaseModel):
    timeFilter: TimeFilter
    dateRange: DateRange
    activeCustomers: int = 0
    totalMilkStock: float = 0.0
    remainingMilkStock: float = 0.0
    totalRevenue: float = 0.0
    remainingPayments: float = 0.0
    totalRevenueDisplay: str = ""
    remainingPaymentsDisplay: str = ""
    recordCount: int = 0
    deliveredQuantity: float = 0.0
    deliveredValue: float = 0.0
    quantityUpdates: List[QuantityUpdate] = Field(default_factory=list)
    # Sections whose upstream fetch failed; the rest of the view is still filled
    unavailable: List[str] = Field(default_factory=list)

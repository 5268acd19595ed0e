from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from dairy_admin.api.deps import (
    get_customer_service,
    get_invoice_service,
    get_quantity_update_service,
    get_record_service,
    get_stock_service,
)
from dairy_admin.schemas.dashboard import DashboardView, TimeFilter
from dairy_admin.services.customer_service import CustomerService
from dairy_admin.services.dashboard import build_dashboard
from dairy_admin.services.invoice_service import InvoiceService
from dairy_admin.services.quantity_update_service import QuantityUpdateService
from dairy_admin.services.record_service import RecordService
from dairy_admin.services.stock_service import StockService

router = APIRouter()


@router.get("", response_model=DashboardView)
async def get_dashboard(
    timeFilter: TimeFilter = Query("today", description="today, yesterday, thisWeek, thisMonth, lastMonth or custom"),
    startDate: Optional[str] = Query(None, description="Start of a custom range (YYYY-MM-DD)"),
    endDate: Optional[str] = Query(None, description="End of a custom range (YYYY-MM-DD)"),
    customers: CustomerService = Depends(get_customer_service),
    invoices: InvoiceService = Depends(get_invoice_service),
    stock: StockService = Depends(get_stock_service),
    records: RecordService = Depends(get_record_service),
    quantity_updates: QuantityUpdateService = Depends(get_quantity_update_service),
):
    """
    Active customers, milk stock, revenue and pending payments for a period,
    with the quantity update requests raised in it.
    """
    if timeFilter == "custom" and not (startDate and endDate):
        raise HTTPException(status_code=422, detail="A custom range needs both startDate and endDate")

    return await build_dashboard(
        customers,
        invoices,
        stock,
        records,
        quantity_updates,
        time_filter=timeFilter,
        custom_range=(startDate, endDate) if timeFilter == "custom" else (),
    )

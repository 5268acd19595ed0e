"""Home dashboard: period totals for customers, stock, revenue and deliveries.

Every section is fetched concurrently and independently. A section whose
upstream call fails is logged, named in ``unavailable`` and left at zero.
"""
import asyncio
import logging
from datetime import date
from typing import Any, Awaitable, List, Optional, Sequence

from dairy_admin.core.config import settings
from dairy_admin.core.errors import ApiError
from dairy_admin.schemas.dashboard import DashboardView, DateRange
from dairy_admin.schemas.record import RecordFilters
from dairy_admin.schemas.stock import StockFilters
from dairy_admin.services.customer_service import CustomerService
from dairy_admin.services.formatters import format_currency, get_date_range
from dairy_admin.services.invoice_service import InvoiceService
from dairy_admin.services.quantity_update_service import QuantityUpdateService
from dairy_admin.services.record_service import RecordService
from dairy_admin.services.stock_service import StockService

logger = logging.getLogger(__name__)


async def _section(name: str, call: Awaitable[Any], unavailable: List[str]) -> Optional[Any]:
    try:
        return await call
    except ApiError as e:
        logger.warning(f"Failed to load dashboard {name}: {e.message}")
        unavailable.append(name)
        return None


async def build_dashboard(
    customers: CustomerService,
    invoices: InvoiceService,
    stock: StockService,
    records: RecordService,
    quantity_updates: QuantityUpdateService,
    time_filter: str = "today",
    custom_range: Sequence[str] = (),
    today: Optional[date] = None,
) -> DashboardView:
    period = get_date_range(time_filter, custom_range, today=today)
    start, end = period["startDate"], period["endDate"]
    unavailable: List[str] = []

    customer_page, summary, stock_summary, record_page, updates = await asyncio.gather(
        _section("customers", customers.list_customers(), unavailable),
        _section("invoices", invoices.get_dashboard(), unavailable),
        _section("stock", stock.get_summary(StockFilters(startDate=start, endDate=end)), unavailable),
        _section(
            "records",
            records.list_records(
                page=1,
                limit=settings.SEARCH_SUPERSET_LIMIT,
                filters=RecordFilters(startDate=start, endDate=end),
            ),
            unavailable,
        ),
        _section("quantityUpdates", quantity_updates.list_updates(start, end), unavailable),
    )

    summary = summary or {}
    totals = (stock_summary or {}).get("totals") or {}
    delivered = record_page.records if record_page else []
    revenue = summary.get("totalAmount") or 0
    pending = summary.get("totalDue") or 0

    return DashboardView(
        timeFilter=time_filter,
        dateRange=DateRange(**period),
        activeCustomers=sum(1 for c in customer_page.customers if c.isActive) if customer_page else 0,
        totalMilkStock=totals.get("stockIn") or 0,
        remainingMilkStock=totals.get("currentStock") or 0,
        totalRevenue=revenue,
        remainingPayments=pending,
        totalRevenueDisplay=format_currency(revenue),
        remainingPaymentsDisplay=format_currency(pending),
        recordCount=len(delivered),
        deliveredQuantity=sum(record.totalDailyQuantity for record in delivered),
        deliveredValue=sum(record.totalDailyPrice for record in delivered),
        quantityUpdates=updates or [],
        unavailable=unavailable,
    )

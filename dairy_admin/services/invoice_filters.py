"""Invoice list state: month/year scope, quick filter, manual filters, search.

The axes are independent, except that choosing a quick filter drops the manual
customer/status filters and touching a manual filter drops the quick filter.
When a search term is set, rows come from the locally held superset of the
scope's invoices rather than from the server page.
"""
from typing import Any, Dict, Iterable, List, Literal, Optional

from pydantic import BaseModel

from dairy_admin.core.config import settings
from dairy_admin.schemas.invoice import Invoice, InvoicePage, InvoiceStats, StatusBadge
from dairy_admin.services.formatters import status_label
from dairy_admin.services.pagination import ClientFilteredPage, PageSource, ServerPage

QuickFilter = Literal["all", "pending", "paid", "overdue"]

STATUS_COLORS = {
    "pending": "yellow",
    "paid": "green",
    "partially_paid": "blue",
    "overdue": "red",
}
DELETABLE_STATUSES = ("pending", "overdue")


class InvoiceListState(BaseModel):
    selectedMonth: int
    selectedYear: int
    quickFilter: QuickFilter = "all"
    customerId: str = ""
    status: str = ""
    month: Optional[int] = None
    year: Optional[int] = None
    searchTerm: str = ""
    page: int = 1

    @classmethod
    def for_scope(cls, month: int, year: int) -> "InvoiceListState":
        return cls(selectedMonth=month, selectedYear=year, month=month, year=year)

    def change_scope(self, month: int, year: int) -> "InvoiceListState":
        return self.model_copy(
            update={"selectedMonth": month, "selectedYear": year, "month": month, "year": year, "page": 1}
        )

    def apply_quick_filter(self, quick_filter: QuickFilter) -> "InvoiceListState":
        return self.model_copy(
            update={
                "quickFilter": quick_filter,
                "customerId": "",
                "status": "",
                "month": self.selectedMonth,
                "year": self.selectedYear,
                "page": 1,
            }
        )

    def change_filter(self, key: str, value: Any) -> "InvoiceListState":
        if key not in ("customerId", "status", "month", "year"):
            raise ValueError(f"Unknown invoice filter: {key}")
        return self.model_copy(update={key: value, "quickFilter": "all", "page": 1})

    def reset_filters(self) -> "InvoiceListState":
        return InvoiceListState.for_scope(self.selectedMonth, self.selectedYear)

    def set_search(self, term: str) -> "InvoiceListState":
        return self.model_copy(update={"searchTerm": term or "", "page": 1})

    def go_to_page(self, page: int) -> "InvoiceListState":
        return self.model_copy(update={"page": max(1, page)})

    @property
    def is_searching(self) -> bool:
        return bool(self.searchTerm)

    def has_active_filters(self) -> bool:
        manual_period = (self.month, self.year) != (self.selectedMonth, self.selectedYear) and bool(
            self.month and self.year
        )
        return bool(
            self.customerId or self.status or manual_period or self.quickFilter != "all" or self.searchTerm
        )

    def build_query_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"page": self.page, "limit": settings.PAGE_SIZE}

        if self.customerId:
            params["customerId"] = self.customerId
        if self.status:
            params["status"] = self.status
        if self.quickFilter != "all":
            params["status"] = self.quickFilter

        params["month"] = self.selectedMonth
        params["year"] = self.selectedYear
        # Advanced filters override the header scope only as a month/year pair
        if self.month and self.year:
            params["month"] = self.month
            params["year"] = self.year

        return params


def matches_search(invoice: Invoice, term: str) -> bool:
    needle = term.lower()
    number = (invoice.invoiceNumber or "").lower()
    name = ((invoice.customer.name if invoice.customer else None) or "").lower()
    return needle in number or needle in name


def search_invoices(invoices: Iterable[Invoice], term: str) -> List[Invoice]:
    return [invoice for invoice in invoices if matches_search(invoice, term)]


def page_source(state: InvoiceListState, server_page: InvoicePage, scope_invoices: List[Invoice]) -> PageSource:
    if state.is_searching:
        return ClientFilteredPage(all_items=search_invoices(scope_invoices, state.searchTerm), page=state.page)
    return ServerPage(
        items=server_page.invoices,
        page=state.page,
        total_pages=server_page.totalPages,
        total=server_page.total,
    )


def compute_stats(invoices: Iterable[Invoice]) -> InvoiceStats:
    stats = InvoiceStats()
    for invoice in invoices:
        stats.totalInvoices += 1
        stats.totalAmount += invoice.totalAmount or 0
        stats.dueAmount += invoice.dueAmount or 0
        if invoice.status == "pending":
            stats.pendingCount += 1
        elif invoice.status == "overdue":
            stats.overdueCount += 1
        elif invoice.status == "paid":
            stats.paidCount += 1
    return stats


def can_delete_invoice(invoice: Optional[Invoice]) -> bool:
    return bool(invoice) and invoice.status in DELETABLE_STATUSES and not invoice.payments


def status_badge(status: Optional[str]) -> StatusBadge:
    return StatusBadge(label=status_label(status), color=STATUS_COLORS.get(status or "", "gray"))

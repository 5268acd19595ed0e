import asyncio
from unittest.mock import AsyncMock, MagicMock

from conftest import make_invoice
from dairy_admin.core.errors import ServerError
from dairy_admin.schemas.invoice import DueCustomer, DueCustomerPage, InvoicePage
from dairy_admin.services.due_customers import due_customers_view
from dairy_admin.services.formatters import previous_month
from dairy_admin.services.invoice_filters import InvoiceListState
from dairy_admin.services.invoice_views import build_invoice_list_view, load_scope


def _invoice_service(server_page, scope_invoices, summary=None, summary_error=None):
    service = MagicMock()
    service.list_invoices = AsyncMock(return_value=server_page)
    service.list_scope_invoices = AsyncMock(return_value=scope_invoices)
    service.get_dashboard = AsyncMock(return_value=summary, side_effect=summary_error)
    return service


def test_scope_defaults_to_previous_month():
    preferences = MagicMock()
    preferences.get_invoice_scope.return_value = None
    assert load_scope(preferences) == previous_month()

    preferences.get_invoice_scope.return_value = (6, 2023)
    assert load_scope(preferences) == (6, 2023)


def test_list_view_stats_cover_whole_scope():
    scope = [
        make_invoice("a", status="paid", total=100, due=0),
        make_invoice("b", status="pending", total=200, due=200),
        make_invoice("c", status="overdue", total=300, due=300),
    ]
    server_page = InvoicePage(invoices=[scope[1]], totalPages=1, total=1)
    service = _invoice_service(server_page, scope, summary={"totalDue": 500})
    state = InvoiceListState.for_scope(3, 2024).apply_quick_filter("pending")

    view = asyncio.run(build_invoice_list_view(service, state))

    assert view.source == "server"
    assert [row.invoice.id for row in view.rows] == ["b"]
    assert view.rows[0].canDelete
    assert view.stats.totalInvoices == 3
    assert view.stats.dueAmount == 500
    assert view.summary == {"totalDue": 500}
    assert view.hasActiveFilters
    service.list_scope_invoices.assert_awaited_once_with(3, 2024)
    assert service.list_invoices.await_args.args[0]["status"] == "pending"


def test_list_view_without_dashboard_summary():
    service = _invoice_service(InvoicePage(), [], summary_error=ServerError("Server error occurred", status=500))
    view = asyncio.run(build_invoice_list_view(service, InvoiceListState.for_scope(1, 2024)))
    assert view.summary is None
    assert view.rows == []
    assert view.totalPages == 1


def _due(n):
    return [DueCustomer(customerId=f"c{i}", name=f"Customer {i}", totalDue=10) for i in range(n)]


def test_due_customers_search_pages_locally():
    service = MagicMock()
    service.search_due_customers = AsyncMock(
        return_value=DueCustomerPage(customers=_due(12), totalCustomers=12, grandTotalDue=120)
    )

    view = asyncio.run(due_customers_view(service, page=2, search="  cust "))

    service.search_due_customers.assert_awaited_once_with("cust")
    assert view.searching
    assert len(view.rows) == 2
    assert (view.totalPages, view.totalCustomers, view.grandTotalDue) == (2, 12, 120)


def test_due_customers_server_paging():
    service = MagicMock()
    service.get_due_customers = AsyncMock(
        return_value=DueCustomerPage(customers=_due(10), totalPages=4, totalCustomers=35, grandTotalDue=9000)
    )

    view = asyncio.run(due_customers_view(service, page=3))

    assert not view.searching
    assert (view.page, view.totalPages, view.totalCustomers, view.grandTotalDue) == (3, 4, 35, 9000)

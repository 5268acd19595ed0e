import pytest

from conftest import make_invoice
from dairy_admin.core.config import settings
from dairy_admin.schemas.invoice import InvoicePage, Payment
from dairy_admin.services.invoice_filters import (
    InvoiceListState,
    can_delete_invoice,
    compute_stats,
    page_source,
    search_invoices,
    status_badge,
)
from dairy_admin.services.pagination import paginate


@pytest.fixture
def state():
    return InvoiceListState.for_scope(3, 2024)


def test_scope_params(state):
    assert state.build_query_params() == {"page": 1, "limit": settings.PAGE_SIZE, "month": 3, "year": 2024}


def test_quick_filter_clears_manual_filters(state):
    state = state.change_filter("customerId", "c1").change_filter("status", "paid")
    state = state.apply_quick_filter("overdue")

    assert state.customerId == ""
    assert state.status == ""
    params = state.build_query_params()
    assert params["status"] == "overdue"
    assert "customerId" not in params


def test_manual_filter_clears_quick_filter(state):
    state = state.apply_quick_filter("paid").go_to_page(4)
    state = state.change_filter("customerId", "c9")

    assert state.quickFilter == "all"
    assert state.page == 1
    assert state.build_query_params()["customerId"] == "c9"


def test_manual_period_needs_month_and_year(state):
    only_month = state.change_filter("month", 5).change_filter("year", None)
    assert only_month.build_query_params()["month"] == 3

    both = state.change_filter("month", 5).change_filter("year", 2023)
    params = both.build_query_params()
    assert (params["month"], params["year"]) == (5, 2023)


def test_unknown_filter(state):
    with pytest.raises(ValueError):
        state.change_filter("amount", 10)


def test_transitions_return_copies(state):
    state.change_filter("status", "paid")
    assert state.status == ""


def test_search_resets_page(state):
    assert state.go_to_page(3).set_search("asha").page == 1


def test_reset_filters_keeps_scope(state):
    reset = state.change_filter("status", "paid").set_search("x").reset_filters()
    assert reset == InvoiceListState.for_scope(3, 2024)
    assert not reset.has_active_filters()


def test_active_filters(state):
    assert not state.has_active_filters()
    assert state.set_search("asha").has_active_filters()
    assert state.apply_quick_filter("pending").has_active_filters()


def test_search_matches_number_or_customer():
    invoices = [make_invoice("a", "INV-100", "Asha"), make_invoice("b", "INV-200", "Ravi")]
    assert [i.id for i in search_invoices(invoices, "asha")] == ["a"]
    assert [i.id for i in search_invoices(invoices, "inv-2")] == ["b"]


def test_search_pages_from_scope_superset_not_server_page(state):
    scope = [make_invoice(f"s{i}", f"INV-{i:03d}", "Asha Patil") for i in range(12)]
    scope.append(make_invoice("other", "INV-999", "Ravi"))
    stale = InvoicePage(invoices=[make_invoice("stale", "INV-500", "Ravi")], totalPages=5, total=50)

    view = paginate(page_source(state.set_search("asha"), stale, scope))

    assert view.source == "client"
    assert view.total == 12
    assert view.total_pages == 2
    assert len(view.rows) == 10
    assert all("Asha" in row.customer.name for row in view.rows)

    second = paginate(page_source(state.set_search("asha").go_to_page(2), stale, scope))
    assert len(second.rows) == 2


def test_server_page_used_without_search(state):
    server = InvoicePage(invoices=[make_invoice()], totalPages=3, total=25)
    view = paginate(page_source(state.go_to_page(2), server, []))
    assert view.source == "server"
    assert (view.page, view.total_pages, view.total) == (2, 3, 25)


def test_stats():
    stats = compute_stats(
        [
            make_invoice("a", status="pending", total=100, due=100),
            make_invoice("b", status="paid", total=200, due=0),
            make_invoice("c", status="overdue", total=300, due=300),
            make_invoice("d", status="partially_paid", total=400, due=150),
        ]
    )
    assert stats.totalInvoices == 4
    assert stats.totalAmount == 1000
    assert stats.dueAmount == 550
    assert (stats.pendingCount, stats.paidCount, stats.overdueCount) == (1, 1, 1)


def test_delete_gating():
    assert can_delete_invoice(make_invoice(status="pending"))
    assert can_delete_invoice(make_invoice(status="overdue", payments=[]))
    assert not can_delete_invoice(make_invoice(status="paid"))
    assert not can_delete_invoice(make_invoice(status="partially_paid"))
    assert not can_delete_invoice(
        make_invoice(status="pending", payments=[Payment(amount=10).model_dump()])
    )
    assert not can_delete_invoice(None)


def test_status_badge():
    badge = status_badge("partially_paid")
    assert (badge.label, badge.color) == ("PARTIALLY PAID", "blue")
    assert status_badge("refunded").color == "gray"

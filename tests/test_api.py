from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from conftest import make_invoice
from dairy_admin.api.deps import (
    get_customer_service,
    get_invoice_service,
    get_preferences,
    get_quantity_update_service,
    get_record_service,
    get_stock_service,
)
from dairy_admin.core.errors import NetworkError, ServerError
from dairy_admin.main import app
from dairy_admin.schemas.invoice import InvoicePage
from dairy_admin.schemas.record import Record
from dairy_admin.services.customer_service import CustomerService
from dairy_admin.services.quantity_update_service import QuantityUpdateService


@pytest.fixture
def invoice_service():
    service = MagicMock()
    service.list_invoices = AsyncMock(return_value=InvoicePage())
    service.list_scope_invoices = AsyncMock(return_value=[])
    service.get_dashboard = AsyncMock(return_value={})
    service.get_invoice = AsyncMock(return_value=make_invoice(due=1000))
    service.add_payment = AsyncMock(return_value=make_invoice(due=0, status="paid"))
    service.delete_invoice = AsyncMock(return_value={})
    service.get_invoice_pdf = AsyncMock(return_value=b"%PDF-1.4")
    return service


@pytest.fixture
def preferences():
    preferences = MagicMock()
    preferences.get_invoice_scope.return_value = (3, 2024)
    return preferences


@pytest.fixture
def client(invoice_service, preferences):
    app.dependency_overrides[get_invoice_service] = lambda: invoice_service
    app.dependency_overrides[get_preferences] = lambda: preferences
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    assert client.get("/").status_code == 200


def test_invoice_search_uses_scope_superset(client, invoice_service):
    invoice_service.list_invoices.return_value = InvoicePage(
        invoices=[make_invoice("stale", "INV-500", "Ravi")], totalPages=3, total=30
    )
    invoice_service.list_scope_invoices.return_value = [
        make_invoice("a", "INV-001", "Asha Patil"),
        make_invoice("b", "INV-002", "Ravi"),
    ]

    body = client.get("/api/v1/invoices", params={"search": "asha"}).json()

    assert body["source"] == "client"
    assert [row["invoice"]["id"] for row in body["rows"]] == ["a"]
    assert body["stats"]["totalInvoices"] == 2
    assert (body["month"], body["year"]) == (3, 2024)


def test_scope_change_is_saved(client, preferences):
    body = client.get("/api/v1/invoices", params={"month": 4, "year": 2024}).json()
    assert (body["month"], body["year"]) == (4, 2024)
    preferences.set_invoice_scope.assert_called_once_with(4, 2024)


@pytest.mark.parametrize(
    "params",
    [
        {"quickFilter": "overdue", "customerId": "c1"},
        {"quickFilter": "paid", "status": "pending"},
        {"quickFilter": "pending", "filterMonth": 2, "filterYear": 2024},
        {"filterMonth": 2},
        {"month": 4},
        {"year": 2024},
    ],
)
def test_conflicting_or_partial_filters_are_rejected(client, invoice_service, preferences, params):
    response = client.get("/api/v1/invoices", params=params)

    assert response.status_code == 422
    invoice_service.list_invoices.assert_not_awaited()
    preferences.set_invoice_scope.assert_not_called()


def test_quick_filter_alone_is_sent_as_status(client, invoice_service):
    response = client.get("/api/v1/invoices", params={"quickFilter": "overdue"})

    assert response.status_code == 200
    assert response.json()["quickFilter"] == "overdue"
    assert invoice_service.list_invoices.await_args.args[0]["status"] == "overdue"


def test_overpayment_is_accepted(client, invoice_service):
    response = client.post("/api/v1/invoices/inv1/payment", json={"amount": "1500", "paymentMethod": "cash"})

    body = response.json()
    assert response.status_code == 200
    assert body["success"]
    assert body["redirectTo"] == "/invoices/view/inv1"
    assert invoice_service.add_payment.await_args.args[1].amount == 1500


def test_payment_form_view(client):
    body = client.get("/api/v1/invoices/inv1/payment-form").json()
    assert [quick["amount"] for quick in body["quickAmounts"]] == ["250.00", "500.00", "750.00", "1000.00"]


def test_payment_form_previews_typed_amount(client):
    body = client.get(
        "/api/v1/invoices/inv1/payment-form", params={"amount": "1500", "paymentMethod": "online"}
    ).json()
    assert body["advanceAmount"] == 500
    assert body["advanceAmountDisplay"] == "₹500.00"
    assert body["paymentPercentage"] == "150.0"
    assert body["showTransactionId"]


def test_paid_invoice_cannot_be_deleted(client, invoice_service):
    invoice_service.get_invoice.return_value = make_invoice(status="paid", due=0)
    response = client.delete("/api/v1/invoices/inv1")
    assert response.status_code == 409
    invoice_service.delete_invoice.assert_not_awaited()


def test_pending_invoice_is_deleted(client, invoice_service):
    response = client.delete("/api/v1/invoices/inv1")
    assert response.status_code == 200
    invoice_service.delete_invoice.assert_awaited_once_with("inv1")


def test_pdf_download(client):
    response = client.get("/api/v1/invoices/inv1/pdf")
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="invoice-inv1.pdf"'

    inline = client.get("/api/v1/invoices/inv1/pdf", params={"download": False})
    assert inline.headers["content-disposition"].startswith("inline")


def test_upstream_error_is_passed_through(client, invoice_service):
    invoice_service.get_invoice.side_effect = ServerError("Invoice not found", status=404)
    response = client.get("/api/v1/invoices/missing")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Invoice not found"}


def test_network_error_is_bad_gateway(client, invoice_service):
    invoice_service.get_invoice.side_effect = NetworkError()
    assert client.get("/api/v1/invoices/inv1").status_code == 502


def test_validation_error_names_the_field(client):
    api = MagicMock()
    api.request = AsyncMock()
    app.dependency_overrides[get_customer_service] = lambda: CustomerService(api)

    response = client.post("/api/v1/customers", json={"name": "Asha", "phoneNo": "12345"})

    assert response.status_code == 422
    assert response.json()["field"] == "phoneNo"
    api.request.assert_not_awaited()


def test_record_preview_does_not_save(client):
    service = MagicMock()
    service.get_record = AsyncMock(
        return_value=Record.model_validate(
            {
                "_id": "r1",
                "deliverySchedule": [
                    {"time": "morning", "milkItems": [{"quantity": 1, "pricePerUnit": 50, "totalPrice": 50}]}
                ],
            }
        )
    )
    service.edit_record = AsyncMock()
    app.dependency_overrides[get_record_service] = lambda: service

    response = client.post(
        "/api/v1/records/r1/preview",
        json=[{"time": "morning", "index": 0, "field": "quantity", "value": "2"}],
    )

    assert response.json()["totalDailyPrice"] == 100
    service.edit_record.assert_not_awaited()


def test_client_settings(client):
    body = client.get("/api/v1/config/client").json()
    assert set(body) == {"pageSize", "searchDebounceMs", "paymentRedirectDelaySeconds"}


def test_rejecting_quantity_update_without_reason(client, api):
    app.dependency_overrides[get_quantity_update_service] = lambda: QuantityUpdateService(api)

    response = client.patch("/api/v1/updates/quantity/q1/reject", json={"reason": "  "})

    assert response.status_code == 422
    assert response.json() == {"success": False, "message": "Please enter a reason for rejection.", "field": "reason"}
    api.patch.assert_not_awaited()


def test_dashboard_custom_range_needs_both_dates(client, invoice_service):
    response = client.get("/api/v1/dashboard", params={"timeFilter": "custom", "startDate": "2024-05-01"})

    assert response.status_code == 422
    invoice_service.get_dashboard.assert_not_awaited()


def test_dashboard_lists_unavailable_sections(client, api, invoice_service):
    invoice_service.get_dashboard.return_value = {"totalAmount": 500, "totalDue": 100}
    app.dependency_overrides[get_customer_service] = lambda: CustomerService(api)
    app.dependency_overrides[get_quantity_update_service] = lambda: QuantityUpdateService(api)
    records = MagicMock()
    records.list_records = AsyncMock(side_effect=NetworkError())
    app.dependency_overrides[get_record_service] = lambda: records
    stock = MagicMock()
    stock.get_summary = AsyncMock(return_value={"totals": {"stockIn": 80, "currentStock": 12}})
    app.dependency_overrides[get_stock_service] = lambda: stock
    api.get.return_value = []

    response = client.get("/api/v1/dashboard", params={"timeFilter": "thisMonth"})

    assert response.status_code == 200
    body = response.json()
    assert body["timeFilter"] == "thisMonth"
    assert body["dateRange"]["label"] == "This Month"
    assert body["totalRevenueDisplay"] == "₹500.00"
    assert body["remainingMilkStock"] == 12
    assert body["unavailable"] == ["records"]

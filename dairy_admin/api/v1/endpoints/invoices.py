import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from dairy_admin.api.deps import get_invoice_service, get_preferences
from dairy_admin.repositories.preference_repository import PreferenceRepository
from dairy_admin.schemas.common import MessageResponse
from dairy_admin.schemas.invoice import (
    BatchGenerateResult,
    DueCustomersView,
    ExistingInvoiceCheck,
    GenerateCustomerInvoiceResult,
    GenerateInvoiceRequest,
    Invoice,
    InvoiceListView,
    InvoiceStatusUpdate,
    PaymentFormInput,
    PaymentFormView,
    PaymentMethod,
    PaymentResult,
)
from dairy_admin.services.due_customers import due_customers_view
from dairy_admin.services.formatters import format_currency
from dairy_admin.services.invoice_filters import InvoiceListState, QuickFilter, can_delete_invoice, status_badge
from dairy_admin.services.invoice_service import InvoiceService, pdf_filename
from dairy_admin.services.invoice_views import build_invoice_list_view, load_scope, save_scope
from dairy_admin.services.payment_form import PaymentForm

router = APIRouter()
logger = logging.getLogger(__name__)


def _check_filter_combination(
    month: Optional[int],
    year: Optional[int],
    quick_filter: str,
    customer_id: str,
    status: str,
    filter_month: Optional[int],
    filter_year: Optional[int],
) -> None:
    if (month is None) != (year is None):
        raise HTTPException(status_code=422, detail="month and year must be given together")
    if (filter_month is None) != (filter_year is None):
        raise HTTPException(status_code=422, detail="filterMonth and filterYear must be given together")
    # A quick filter replaces the manual customer/status/period filters
    if quick_filter != "all" and (customer_id or status or filter_month is not None):
        raise HTTPException(
            status_code=422,
            detail="quickFilter cannot be combined with customerId, status or filterMonth/filterYear",
        )


@router.get("", response_model=InvoiceListView)
async def list_invoices(
    month: Optional[int] = Query(None, ge=1, le=12, description="Change the saved month scope"),
    year: Optional[int] = Query(None, description="Change the saved year scope"),
    quickFilter: QuickFilter = "all",
    customerId: str = "",
    status: str = "",
    filterMonth: Optional[int] = Query(None, ge=1, le=12),
    filterYear: Optional[int] = None,
    search: str = "",
    page: int = Query(1, ge=1),
    service: InvoiceService = Depends(get_invoice_service),
    preferences: PreferenceRepository = Depends(get_preferences),
):
    """
    Invoices of the selected billing month with statistics for the whole month.

    - **month/year**: switch the saved scope (kept across reloads)
    - **quickFilter**: all, pending, paid or overdue; not combinable with the
      customerId, status or filterMonth/filterYear filters (422)
    - **filterMonth/filterYear**: billing period override, given as a pair
    - **search**: matches invoice number or customer name within the scope
    """
    _check_filter_combination(month, year, quickFilter, customerId, status, filterMonth, filterYear)

    saved_month, saved_year = load_scope(preferences)
    state = InvoiceListState.for_scope(saved_month, saved_year)

    if month is not None and (month, year) != (saved_month, saved_year):
        state = state.change_scope(month, year)
        save_scope(preferences, state)

    if customerId:
        state = state.change_filter("customerId", customerId)
    if status:
        state = state.change_filter("status", status)
    if filterMonth is not None:
        state = state.change_filter("month", filterMonth).change_filter("year", filterYear)
    if quickFilter != "all":
        state = state.apply_quick_filter(quickFilter)
    if search:
        state = state.set_search(search)
    state = state.go_to_page(page)

    return await build_invoice_list_view(service, state)


@router.get("/scope", response_model=Dict[str, int])
async def get_scope(preferences: PreferenceRepository = Depends(get_preferences)):
    month, year = load_scope(preferences)
    return {"month": month, "year": year}


@router.put("/scope", response_model=Dict[str, int])
async def set_scope(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
    preferences: PreferenceRepository = Depends(get_preferences),
):
    preferences.set_invoice_scope(month, year)
    logger.info(f"Invoice scope set to {month}/{year}")
    return {"month": month, "year": year}


@router.get("/check-existing", response_model=ExistingInvoiceCheck)
async def check_existing_invoice(
    customerId: str,
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.check_existing(customerId, month, year)


@router.post("/generate/customer/{customer_id}", response_model=GenerateCustomerInvoiceResult)
async def generate_customer_invoice(
    customer_id: str,
    request: GenerateInvoiceRequest,
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.generate_customer_invoice(
        customer_id, request.month, request.year, update_existing=request.updateExisting
    )


@router.post("/generate/batch", response_model=BatchGenerateResult)
async def generate_batch_invoices(
    request: GenerateInvoiceRequest,
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.generate_batch(request.month, request.year, update_existing=request.updateExisting)


@router.get("/due/customers", response_model=DueCustomersView)
async def list_due_customers(
    page: int = Query(1, ge=1),
    search: str = "",
    service: InvoiceService = Depends(get_invoice_service),
):
    return await due_customers_view(service, page=page, search=search)


@router.get("/customer/{customer_id}/summary", response_model=Dict[str, Any])
async def customer_invoice_summary(customer_id: str, service: InvoiceService = Depends(get_invoice_service)):
    return await service.get_customer_summary(customer_id)


@router.get("/{invoice_id}", response_model=Dict[str, Any])
async def get_invoice(invoice_id: str, service: InvoiceService = Depends(get_invoice_service)):
    invoice = await service.get_invoice(invoice_id)
    return {
        "invoice": invoice.model_dump(mode="json"),
        "badge": status_badge(invoice.status).model_dump(),
        "canDelete": can_delete_invoice(invoice),
        "canAddPayment": invoice.status != "paid",
        "amounts": {
            "total": format_currency(invoice.totalAmount),
            "paid": format_currency(invoice.amountPaid),
            "due": format_currency(invoice.dueAmount),
        },
    }


@router.put("/{invoice_id}/status", response_model=Invoice)
async def update_invoice_status(
    invoice_id: str,
    request: InvoiceStatusUpdate,
    service: InvoiceService = Depends(get_invoice_service),
):
    return await service.update_status(invoice_id, request.status)


@router.get("/{invoice_id}/payment-form", response_model=PaymentFormView)
async def payment_form(
    invoice_id: str,
    amount: str = Query("", description="Amount typed so far, to preview percentage and advance"),
    paymentMethod: PaymentMethod = "cash",
    service: InvoiceService = Depends(get_invoice_service),
):
    invoice = await service.get_invoice(invoice_id)
    return PaymentForm(invoice, PaymentFormInput(amount=amount, paymentMethod=paymentMethod)).view()


@router.post("/{invoice_id}/payment", response_model=PaymentResult)
async def add_payment(
    invoice_id: str,
    values: PaymentFormInput,
    service: InvoiceService = Depends(get_invoice_service),
):
    """
    Record a payment. Amounts above the due amount are accepted and kept as
    the customer's advance.
    """
    invoice = await service.get_invoice(invoice_id)
    form = PaymentForm(invoice, values)
    result = await form.submit(service)
    if not result.success:
        logger.error(f"Payment on invoice {invoice_id} failed: {result.message}")
    return result


@router.delete("/{invoice_id}", response_model=MessageResponse)
async def delete_invoice(invoice_id: str, service: InvoiceService = Depends(get_invoice_service)):
    invoice = await service.get_invoice(invoice_id)
    if not can_delete_invoice(invoice):
        raise HTTPException(
            status_code=409,
            detail="Only pending or overdue invoices without payments can be deleted",
        )
    await service.delete_invoice(invoice_id)
    logger.info(f"Deleted invoice {invoice.invoiceNumber}")
    return MessageResponse(success=True, message=f"Invoice {invoice.invoiceNumber} deleted")


@router.get("/{invoice_id}/pdf")
async def invoice_pdf(
    invoice_id: str,
    download: bool = True,
    service: InvoiceService = Depends(get_invoice_service),
):
    """PDF as an attachment, or inline (``download=false``) for printing."""
    content = await service.get_invoice_pdf(invoice_id)
    disposition = "attachment" if download else "inline"
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'{disposition}; filename="{pdf_filename(invoice_id)}"'},
    )

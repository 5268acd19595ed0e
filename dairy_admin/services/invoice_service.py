import logging
from typing import Any, Dict, List, Optional

from dairy_admin.core.config import settings
from dairy_admin.core.errors import ServerError
from dairy_admin.schemas.invoice import (
    BatchGenerateResult,
    DueCustomer,
    DueCustomerPage,
    ExistingInvoiceCheck,
    GenerateCustomerInvoiceResult,
    Invoice,
    InvoicePage,
    PaymentCreate,
)
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)


def _was_updated(invoice: Invoice) -> bool:
    return bool(invoice.createdAt and invoice.updatedAt and invoice.updatedAt > invoice.createdAt)


def batch_message(created: int, updated: int) -> str:
    if updated > 0 and created > 0:
        return f"Generated {created} new invoices and updated {updated} existing invoices!"
    if updated > 0:
        return f"Updated {updated} existing invoices!"
    if created > 0:
        return f"Generated {created} new invoices!"
    return "No invoices were processed."


class InvoiceService(UpstreamService):
    """Invoices, payments, PDFs and due balances on the upstream API."""

    async def list_invoices(self, params: Optional[Dict[str, Any]] = None) -> InvoicePage:
        payload = await self.api.get("/invoices", params=params or {})
        if isinstance(payload, list):
            return InvoicePage(invoices=payload, totalPages=1, total=len(payload))
        return InvoicePage(
            invoices=self._items(payload, "invoices"),
            totalPages=payload.get("totalPages") or 1,
            total=payload.get("total") or 0,
        )

    async def list_scope_invoices(self, month: int, year: int) -> List[Invoice]:
        """Every invoice of one billing month, used for search and statistics."""
        page = await self.list_invoices(
            {"page": 1, "limit": settings.SEARCH_SUPERSET_LIMIT, "month": month, "year": year}
        )
        return page.invoices

    async def get_dashboard(self) -> Dict[str, Any]:
        payload = await self.api.get("/invoices/dashboard")
        return (payload or {}).get("summary") or {}

    async def check_existing(self, customer_id: str, month: int, year: int) -> ExistingInvoiceCheck:
        try:
            payload = await self.api.get(
                "/invoices/check-existing",
                params={"customerId": customer_id, "month": month, "year": year},
            )
        except ServerError as e:
            if e.status == 404:
                return ExistingInvoiceCheck(exists=False)
            raise
        payload = payload or {}
        return ExistingInvoiceCheck(exists=bool(payload.get("exists")), invoice=payload.get("invoice"))

    async def generate_customer_invoice(
        self, customer_id: str, month: int, year: int, update_existing: bool = True
    ) -> GenerateCustomerInvoiceResult:
        payload = await self.api.post(
            f"/invoices/generate/customer/{customer_id}",
            json={"month": month, "year": year, "updateExisting": update_existing},
        )
        invoice = Invoice.model_validate(self._document(payload))
        action = "updated" if _was_updated(invoice) else "generated"
        logger.info(f"Invoice {invoice.invoiceNumber} {action} for customer {customer_id}")
        return GenerateCustomerInvoiceResult(
            invoice=invoice,
            message=f"Invoice {invoice.invoiceNumber} {action} successfully!",
            advanceUsed=invoice.advanceUsed,
            redirectTo=f"/invoices/view/{invoice.id}",
        )

    async def generate_batch(self, month: int, year: int, update_existing: bool = True) -> BatchGenerateResult:
        payload = await self.api.post(
            "/invoices/generate/batch",
            json={"month": month, "year": year, "updateExisting": update_existing},
        ) or {}
        created = payload.get("created") or 0
        updated = payload.get("updated") or 0
        failed = payload.get("failed") or 0
        logger.info(f"Batch invoices for {month}/{year}: {created} created, {updated} updated, {failed} failed")
        return BatchGenerateResult(
            created=created,
            updated=updated,
            failed=failed,
            message=batch_message(created, updated),
            error=f"{failed} invoices failed to process." if failed > 0 else None,
        )

    async def get_customer_summary(self, customer_id: str) -> Dict[str, Any]:
        return await self.api.get(f"/invoices/customer/{customer_id}/summary") or {}

    async def get_invoice(self, invoice_id: str) -> Invoice:
        payload = await self.api.get(f"/invoices/{invoice_id}")
        return Invoice.model_validate(self._document(payload))

    async def update_status(self, invoice_id: str, status: str) -> Invoice:
        payload = await self.api.put(f"/invoices/{invoice_id}/status", json={"status": status})
        return Invoice.model_validate(self._document(payload))

    async def add_payment(self, invoice_id: str, payment: PaymentCreate) -> Optional[Invoice]:
        payload = await self.api.post(
            f"/invoices/{invoice_id}/payment",
            json=payment.model_dump(exclude_none=True),
        )
        document = self._document(payload)
        if isinstance(document, dict) and isinstance(document.get("invoice"), dict):
            document = document["invoice"]
        return Invoice.model_validate(document) if document else None

    async def delete_invoice(self, invoice_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/invoices/{invoice_id}") or {}

    async def get_invoice_pdf(self, invoice_id: str) -> bytes:
        return await self.api.get_bytes(f"/invoices/{invoice_id}/pdf")

    async def get_due_customers(self, page: int = 1, limit: Optional[int] = None) -> DueCustomerPage:
        payload = await self.api.get(
            "/invoices/due/customers",
            params={"page": page, "limit": limit or settings.PAGE_SIZE},
        )
        return self._due_page(payload)

    async def search_due_customers(self, q: str) -> DueCustomerPage:
        payload = await self.api.get("/invoices/due/customers/search", params={"q": q})
        return self._due_page(payload)

    def _due_page(self, payload: Any) -> DueCustomerPage:
        if isinstance(payload, list):
            customers = [DueCustomer.model_validate(row) for row in payload]
            return DueCustomerPage(
                customers=customers,
                totalCustomers=len(customers),
                grandTotalDue=sum(customer.totalDue for customer in customers),
            )
        payload = payload or {}
        return DueCustomerPage(
            customers=self._items(payload, "customers"),
            totalPages=payload.get("totalPages") or 1,
            totalCustomers=payload.get("totalCustomers") or 0,
            grandTotalDue=payload.get("grandTotalDue") or 0,
        )


def pdf_filename(invoice_id: str) -> str:
    return f"invoice-{invoice_id}.pdf"

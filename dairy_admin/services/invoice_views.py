import asyncio
import logging
from typing import Optional, Tuple

from dairy_admin.core.errors import ApiError
from dairy_admin.repositories.preference_repository import PreferenceRepository
from dairy_admin.schemas.invoice import InvoiceListView, InvoiceRow
from dairy_admin.services.formatters import previous_month
from dairy_admin.services.invoice_filters import (
    InvoiceListState,
    can_delete_invoice,
    compute_stats,
    page_source,
    status_badge,
)
from dairy_admin.services.invoice_service import InvoiceService
from dairy_admin.services.pagination import page_numbers, paginate

logger = logging.getLogger(__name__)


def load_scope(preferences: PreferenceRepository) -> Tuple[int, int]:
    """Saved invoice month/year, or the previous calendar month."""
    return preferences.get_invoice_scope() or previous_month()


def save_scope(preferences: PreferenceRepository, state: InvoiceListState) -> None:
    preferences.set_invoice_scope(state.selectedMonth, state.selectedYear)


async def _dashboard_summary(service: InvoiceService) -> Optional[dict]:
    try:
        return await service.get_dashboard()
    except ApiError as e:
        # The summary card is optional; the list still renders without it
        logger.warning(f"Failed to fetch invoice dashboard: {e}")
        return None


async def build_invoice_list_view(service: InvoiceService, state: InvoiceListState) -> InvoiceListView:
    server_page, scope_invoices, summary = await asyncio.gather(
        service.list_invoices(state.build_query_params()),
        service.list_scope_invoices(state.selectedMonth, state.selectedYear),
        _dashboard_summary(service),
    )

    view = paginate(page_source(state, server_page, scope_invoices))

    return InvoiceListView(
        rows=[
            InvoiceRow(invoice=invoice, badge=status_badge(invoice.status), canDelete=can_delete_invoice(invoice))
            for invoice in view.rows
        ],
        page=view.page,
        totalPages=view.total_pages,
        total=view.total,
        pageNumbers=page_numbers(view.page, view.total_pages),
        source=view.source,
        stats=compute_stats(scope_invoices),
        month=state.selectedMonth,
        year=state.selectedYear,
        quickFilter=state.quickFilter,
        hasActiveFilters=state.has_active_filters(),
        summary=summary,
    )

import logging

from dairy_admin.schemas.invoice import DueCustomersView
from dairy_admin.services.invoice_service import InvoiceService
from dairy_admin.services.pagination import ClientFilteredPage, ServerPage, paginate

logger = logging.getLogger(__name__)


async def due_customers_view(service: InvoiceService, page: int = 1, search: str = "") -> DueCustomersView:
    """Customers with unpaid balances, paged by the server or, while searching, locally.

    The header total follows the search results while a search is active and the
    server's grand total otherwise.
    """
    term = (search or "").strip()

    if term:
        results = await service.search_due_customers(term)
        view = paginate(ClientFilteredPage(all_items=results.customers, page=page))
        logger.info(f"Due customer search '{term}' matched {view.total} customers")
        return DueCustomersView(
            rows=view.rows,
            page=view.page,
            totalPages=view.total_pages,
            totalCustomers=view.total,
            grandTotalDue=results.grandTotalDue,
            searching=True,
        )

    data = await service.get_due_customers(page=page)
    view = paginate(ServerPage(items=data.customers, page=page, total_pages=data.totalPages, total=data.totalCustomers))
    return DueCustomersView(
        rows=view.rows,
        page=view.page,
        totalPages=view.total_pages,
        totalCustomers=data.totalCustomers,
        grandTotalDue=data.grandTotalDue,
        searching=False,
    )

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from dairy_admin.api.deps import get_customer_service
from dairy_admin.schemas.customer import (
    AdvanceAmountUpdate,
    AdvanceOverview,
    AdvancePaymentCreate,
    Customer,
    CustomerCreate,
    CustomerPage,
)
from dairy_admin.services.customer_service import CustomerService, filter_advance_customers

router = APIRouter()


@router.get("", response_model=CustomerPage)
async def list_customers(
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    search: str = "",
    service: CustomerService = Depends(get_customer_service),
):
    return await service.list_customers({"page": page, "limit": limit, "search": search})


@router.get("/with-advance", response_model=AdvanceOverview)
async def customers_with_advance(search: str = "", service: CustomerService = Depends(get_customer_service)):
    """Customers holding an advance; the total is over all of them, not only the matches."""
    overview = await service.list_with_advance()
    if search:
        overview.customers = filter_advance_customers(overview.customers, search)
    return overview


@router.post("/advancepayment", response_model=Dict[str, Any])
async def create_advance_payment(data: AdvancePaymentCreate, service: CustomerService = Depends(get_customer_service)):
    return await service.create_advance_payment(data.customerId, data.amount)


@router.put("/{customer_id}/advance", response_model=Dict[str, Any])
async def set_customer_advance(
    customer_id: str,
    data: AdvanceAmountUpdate,
    service: CustomerService = Depends(get_customer_service),
):
    return await service.set_advance(customer_id, data.amount)


@router.delete("/{customer_id}/advance", response_model=Dict[str, Any])
async def clear_customer_advance(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    return await service.clear_advance(customer_id)


@router.post("", response_model=Customer)
async def create_customer(data: CustomerCreate, service: CustomerService = Depends(get_customer_service)):
    return await service.create_customer(data)


@router.get("/{customer_id}", response_model=Customer)
async def get_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    return await service.get_customer(customer_id)


@router.put("/{customer_id}", response_model=Customer)
async def update_customer(
    customer_id: str,
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
):
    return await service.update_customer(customer_id, data)


@router.delete("/{customer_id}", response_model=Dict[str, Any])
async def delete_customer(customer_id: str, service: CustomerService = Depends(get_customer_service)):
    return await service.delete_customer(customer_id)

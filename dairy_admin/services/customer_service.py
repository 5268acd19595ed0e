import logging
import re
from typing import Any, Dict, List, Optional

from dairy_admin.core.errors import ServerError, ValidationFailed, is_duplicate_key
from dairy_admin.schemas.customer import AdvanceOverview, Customer, CustomerCreate, CustomerPage
from dairy_admin.services.upstream import UpstreamService

logger = logging.getLogger(__name__)

DUPLICATE_PHONE_MESSAGE = "A customer with this phone number already exists"
_MOBILE_NUMBER = re.compile(r"^[6-9]\d{9}$")


def validate_phone_number(phone_no: str) -> str:
    """Check a 10-digit Indian mobile number and return its digits."""
    if not (phone_no or "").strip():
        raise ValidationFailed("Phone number is required", field="phoneNo")

    digits = re.sub(r"\D", "", phone_no)
    if len(digits) != 10:
        raise ValidationFailed("Please enter a valid 10-digit mobile number", field="phoneNo")
    if not _MOBILE_NUMBER.match(digits):
        raise ValidationFailed(
            "Please enter a valid 10-digit mobile number starting with 6, 7, 8, or 9",
            field="phoneNo",
        )
    return digits


def filter_advance_customers(customers: List[Customer], term: str) -> List[Customer]:
    term = (term or "").strip()
    if not term:
        return customers
    needle = term.lower()
    return [
        customer
        for customer in customers
        if needle in customer.name.lower()
        or term in (customer.phoneNo or "")
        or term in str(customer.customerNo or "")
    ]


class CustomerService(UpstreamService):
    async def list_customers(self, params: Optional[Dict[str, Any]] = None) -> CustomerPage:
        payload = await self.api.get("/customers", params=params or {})
        if isinstance(payload, list):
            return CustomerPage(customers=payload, totalPages=1, totalCustomers=len(payload))
        return CustomerPage(
            customers=self._items(payload, "customers"),
            totalPages=payload.get("totalPages") or 1,
            totalCustomers=payload.get("totalCustomers") or 0,
        )

    async def get_customer(self, customer_id: str) -> Customer:
        payload = await self.api.get(f"/customers/{customer_id}")
        return Customer.model_validate(self._document(payload))

    async def create_customer(self, data: CustomerCreate) -> Customer:
        return await self._save("POST", "/customers", data)

    async def update_customer(self, customer_id: str, data: CustomerCreate) -> Customer:
        return await self._save("PUT", f"/customers/{customer_id}", data)

    async def _save(self, method: str, path: str, data: CustomerCreate) -> Customer:
        validate_phone_number(data.phoneNo)
        try:
            payload = await self.api.request(method, path, json=data.model_dump())
        except ServerError as e:
            if is_duplicate_key(e.message, "phone number already exists", "phoneNo_1 dup"):
                raise ValidationFailed(DUPLICATE_PHONE_MESSAGE, field="phoneNo") from e
            raise
        customer = Customer.model_validate(self._document(payload))
        logger.info(f"Saved customer {customer.customerNo} ({customer.name})")
        return customer

    async def delete_customer(self, customer_id: str) -> Dict[str, Any]:
        return await self.api.delete(f"/customers/{customer_id}") or {}

    async def list_with_advance(self) -> AdvanceOverview:
        payload = await self.api.get("/customers/with-advance")
        customers = [Customer.model_validate(row) for row in self._items(payload, "customers")]
        customers = [customer for customer in customers if customer.advance and customer.advance > 0]
        return AdvanceOverview(
            customers=customers,
            totalAdvance=sum(customer.advance for customer in customers),
        )

    async def create_advance_payment(self, customer_id: str, amount: float) -> Dict[str, Any]:
        payload = await self.api.post("/customers/advancepayment", json={"customerId": customer_id, "amount": amount})
        logger.info(f"Advance payment of {amount} added for customer {customer_id}")
        return payload or {}

    async def set_advance(self, customer_id: str, amount: float) -> Dict[str, Any]:
        return await self.api.put(f"/customers/{customer_id}/advance", json={"amount": amount}) or {}

    async def clear_advance(self, customer_id: str) -> Dict[str, Any]:
        return await self.api.put(f"/customers/{customer_id}/advance/clear") or {}

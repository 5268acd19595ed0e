import asyncio

import pytest

from dairy_admin.core.errors import ServerError, ValidationFailed
from dairy_admin.schemas.customer import CustomerCreate
from dairy_admin.services.customer_service import (
    DUPLICATE_PHONE_MESSAGE,
    CustomerService,
    filter_advance_customers,
    validate_phone_number,
)


@pytest.mark.parametrize(
    "phone, message",
    [
        ("", "Phone number is required"),
        ("98765", "Please enter a valid 10-digit mobile number"),
        ("5876543210", "Please enter a valid 10-digit mobile number starting with 6, 7, 8, or 9"),
    ],
)
def test_invalid_phone_numbers(phone, message):
    with pytest.raises(ValidationFailed) as exc:
        validate_phone_number(phone)
    assert exc.value.message == message
    assert exc.value.field == "phoneNo"


def test_valid_phone_number_is_normalised():
    assert validate_phone_number("98765 43210") == "9876543210"


def test_invalid_phone_is_not_sent(api):
    with pytest.raises(ValidationFailed):
        asyncio.run(CustomerService(api).create_customer(CustomerCreate(name="Asha", phoneNo="123")))
    api.request.assert_not_awaited()


def test_duplicate_phone_is_reported_on_the_field(api):
    api.request.side_effect = ServerError(
        "E11000 duplicate key error collection: dairy.customers index: phoneNo_1 dup key",
        status=400,
    )
    with pytest.raises(ValidationFailed) as exc:
        asyncio.run(CustomerService(api).create_customer(CustomerCreate(name="Asha", phoneNo="9876543210")))

    assert exc.value.message == DUPLICATE_PHONE_MESSAGE
    assert exc.value.field == "phoneNo"


def test_other_server_errors_propagate(api):
    api.request.side_effect = ServerError("Server error occurred", status=500)
    with pytest.raises(ServerError):
        asyncio.run(CustomerService(api).update_customer("c1", CustomerCreate(name="Asha", phoneNo="9876543210")))


def test_advance_overview(api):
    api.get.return_value = {
        "customers": [
            {"_id": "c1", "name": "Asha", "advance": 250, "phoneNo": "9876543210", "customerNo": 3},
            {"_id": "c2", "name": "Ravi", "advance": 0},
            {"_id": "c3", "name": "Meena", "advance": 100.5},
        ]
    }
    overview = asyncio.run(CustomerService(api).list_with_advance())

    assert [c.id for c in overview.customers] == ["c1", "c3"]
    assert overview.totalAdvance == 350.5
    assert [c.id for c in filter_advance_customers(overview.customers, "9876")] == ["c1"]
    assert [c.id for c in filter_advance_customers(overview.customers, "mee")] == ["c3"]

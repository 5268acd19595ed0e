import asyncio

import pytest

from dairy_admin.core.errors import ServerError, ValidationFailed
from dairy_admin.schemas.stock import CategoryStock, StockEntryCreate
from dairy_admin.services.stock_service import StockService
from dairy_admin.services.stock_validation import available_stock, validate_stock_availability

CATEGORY_STOCK = [
    CategoryStock.model_validate({"categoryId": "c1", "categoryName": "Cow Milk", "currentStock": 10}),
    CategoryStock.model_validate({"category": {"_id": "c2", "name": "Buffalo Milk"}, "currentStock": 4.5}),
]


def test_stock_in_is_always_valid():
    assert validate_stock_availability("in", 1000, "c1", CATEGORY_STOCK).isValid


def test_requesting_exactly_the_available_stock_is_valid():
    result = validate_stock_availability("out", 10, "c1", CATEGORY_STOCK)
    assert result.isValid
    assert result.availableStock == 10


def test_requesting_more_than_available():
    result = validate_stock_availability("out", 12, "c1", CATEGORY_STOCK)
    assert not result.isValid
    assert result.error == "Insufficient stock! Available: 10 units, Requested: 12 units"


def test_category_matched_through_populated_reference():
    assert available_stock(CATEGORY_STOCK, "c2") == 4.5
    result = validate_stock_availability("out", 5, "c2", CATEGORY_STOCK)
    assert result.error == "Insufficient stock! Available: 4.5 units, Requested: 5 units"


def test_unknown_category_has_no_stock():
    assert not validate_stock_availability("out", 1, "missing", CATEGORY_STOCK).isValid


def test_incomplete_entry_is_not_checked():
    assert validate_stock_availability("out", 0, "c1", []).isValid
    assert validate_stock_availability("out", 5, "", []).isValid


def test_service_caches_category_stock(api):
    api.get.return_value = {"categories": [{"categoryId": "c1", "currentStock": 5}]}
    service = StockService(api)

    assert asyncio.run(service.validate_entry(StockEntryCreate(entryType="out", quantity=3, category="c1"))).isValid
    assert not asyncio.run(service.validate_entry(StockEntryCreate(entryType="out", quantity=6, category="c1"))).isValid
    assert api.get.await_count == 1


def test_insufficient_stock_blocks_submission(api):
    api.get.return_value = {"categories": [{"categoryId": "c1", "currentStock": 5}]}
    service = StockService(api)

    with pytest.raises(ValidationFailed) as exc:
        asyncio.run(service.create_entry(StockEntryCreate(entryType="out", quantity=10, category="c1")))

    assert exc.value.field == "quantity"
    api.post.assert_not_awaited()


def test_successful_write_drops_cached_stock(api):
    api.get.return_value = {"categories": [{"categoryId": "c1", "currentStock": 5}]}
    api.post.return_value = {"_id": "e1", "entryType": "out", "quantity": 2, "category": "c1"}
    service = StockService(api)

    entry = asyncio.run(service.create_entry(StockEntryCreate(entryType="out", quantity=2, category="c1")))

    assert entry.id == "e1"
    assert service.category_stock is None


def test_overview_survives_category_stock_failure(api):
    async def get(path, params=None):
        if path == "/stock/categories":
            raise ServerError("Server error occurred", status=500)
        if path == "/stock/summary":
            return {"totalIn": 10}
        return {"entries": [{"_id": "e1", "entryType": "in", "quantity": 10, "category": "c1"}]}

    api.get.side_effect = get
    overview = asyncio.run(StockService(api).overview())

    assert len(overview.entries) == 1
    assert overview.summary == {"totalIn": 10}
    assert overview.categoryStock == []


def test_category_totals_fall_back_to_total_fields():
    stock = CategoryStock.model_validate({"categoryId": "c1", "totalIn": 40, "totalOut": 15, "currentStock": 25})
    assert (stock.stockIn, stock.stockOut) == (40, 15)

    preferred = CategoryStock.model_validate({"categoryId": "c1", "stockIn": 8, "totalIn": 40})
    assert preferred.stockIn == 8

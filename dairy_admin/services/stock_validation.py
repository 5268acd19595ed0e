from typing import Iterable, Optional

from dairy_admin.schemas.stock import CategoryStock, StockValidation


def find_category_stock(category_stock: Iterable[CategoryStock], category_id: Optional[str]) -> Optional[CategoryStock]:
    if not category_id:
        return None
    for stock in category_stock:
        if stock.categoryId and stock.categoryId == category_id:
            return stock
        if stock.category and stock.category.id == category_id:
            return stock
    return None


def available_stock(category_stock: Iterable[CategoryStock], category_id: Optional[str]) -> float:
    stock = find_category_stock(category_stock, category_id)
    return stock.currentStock if stock else 0


def validate_stock_availability(
    entry_type: str,
    quantity: Optional[float],
    category_id: Optional[str],
    category_stock: Iterable[CategoryStock],
) -> StockValidation:
    """Advisory stock-out check against the last loaded per-category summary.

    The upstream API re-checks on submit; a stale summary only means the
    rejection arrives from the server instead.
    """
    if entry_type != "out" or not quantity or not category_id:
        return StockValidation(isValid=True)

    available = available_stock(category_stock, category_id)
    if quantity > available:
        return StockValidation(
            isValid=False,
            error=f"Insufficient stock! Available: {_units(available)} units, Requested: {_units(quantity)} units",
            availableStock=available,
        )
    return StockValidation(isValid=True, availableStock=available)


def _units(value: float) -> str:
    # 12.0 -> "12", 12.5 -> "12.5"
    return str(int(value)) if float(value).is_integer() else str(value)

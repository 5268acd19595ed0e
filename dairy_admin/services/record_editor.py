import math
from typing import Any

from dairy_admin.schemas.record import Delivery, MilkItem, Record, RecordEdit, RecordUpdate
from dairy_admin.services.payment_form import parse_amount


def _to_number(value: Any) -> float:
    # Leading number of the typed value, 0 when there is none
    number = parse_amount(value) or 0.0
    return number if math.isfinite(number) else 0.0


def _recompute_item(item: MilkItem, field: str, value: Any) -> MilkItem:
    updated = item.model_copy(update={field: _to_number(value)})
    updated.totalPrice = updated.quantity * updated.pricePerUnit
    return updated


def _recompute_delivery(delivery: Delivery, items) -> Delivery:
    return delivery.model_copy(
        update={
            "milkItems": items,
            "totalQuantity": sum(item.quantity for item in items),
            "totalPrice": sum(item.totalPrice for item in items),
        }
    )


def recompute_record(record: Record, edit: RecordEdit) -> Record:
    """Apply one milk item edit and cascade the totals up to the record.

    The item's total price, the owning delivery's totals and the record's daily
    totals all come back in the same new Record; the input is left untouched.
    """
    schedule = []
    for delivery in record.deliverySchedule:
        if delivery.time != edit.time:
            schedule.append(delivery)
            continue
        if edit.index >= len(delivery.milkItems):
            raise IndexError(f"No milk item {edit.index} in {edit.time} delivery")
        items = [
            _recompute_item(item, edit.field, edit.value) if i == edit.index else item
            for i, item in enumerate(delivery.milkItems)
        ]
        schedule.append(_recompute_delivery(delivery, items))

    return record.model_copy(
        update={
            "deliverySchedule": schedule,
            "totalDailyQuantity": sum(delivery.totalQuantity for delivery in schedule),
            "totalDailyPrice": sum(delivery.totalPrice for delivery in schedule),
        }
    )


def apply_edits(record: Record, edits) -> Record:
    for edit in edits:
        record = recompute_record(record, edit)
    return record


def build_update_payload(record: Record) -> RecordUpdate:
    """Only the editable parts of a record are sent back upstream."""
    return RecordUpdate(
        deliverySchedule=record.deliverySchedule,
        totalDailyQuantity=record.totalDailyQuantity,
        totalDailyPrice=record.totalDailyPrice,
    )

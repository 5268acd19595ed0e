import calendar
from datetime import date, datetime, timedelta
from typing import Dict, Optional, Sequence, Tuple, Union

CURRENCY_SYMBOL = "₹"
DATE_FORMAT = "%Y-%m-%d"

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

# Time filters offered above record and stock tables
TODAY = "today"
YESTERDAY = "yesterday"
THIS_WEEK = "thisWeek"
THIS_MONTH = "thisMonth"
LAST_MONTH = "lastMonth"
CUSTOM = "custom"

DateLike = Union[date, datetime, str]


def _group_indian(digits: str) -> str:
    # 12345678 -> 1,23,45,678
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_currency(amount: Optional[float]) -> str:
    value = float(amount or 0)
    sign = "-" if value < 0 else ""
    whole, fraction = f"{abs(value):.2f}".split(".")
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(whole)}.{fraction}"


def _to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def format_date(value: Optional[DateLike], fmt: str = DATE_FORMAT) -> str:
    if not value:
        return ""
    return _to_date(value).strftime(fmt)


def status_label(status: Optional[str]) -> str:
    return (status or "").replace("_", " ").upper()


def previous_month(today: Optional[date] = None) -> Tuple[int, int]:
    today = today or date.today()
    first = today.replace(day=1) - timedelta(days=1)
    return first.month, first.year


def get_month_range(value: DateLike) -> Dict[str, str]:
    day = _to_date(value)
    last = calendar.monthrange(day.year, day.month)[1]
    return {
        "startDate": day.replace(day=1).strftime(DATE_FORMAT),
        "endDate": day.replace(day=last).strftime(DATE_FORMAT),
        "label": f"{MONTH_NAMES[day.month - 1]} {day.year}",
    }


def get_date_range(
    time_filter: str,
    custom_range: Sequence[DateLike] = (),
    today: Optional[date] = None,
) -> Dict[str, str]:
    today = today or date.today()

    if time_filter == CUSTOM and len(custom_range) == 2 and custom_range[0] and custom_range[1]:
        return {
            "startDate": format_date(custom_range[0]),
            "endDate": format_date(custom_range[1]),
            "label": "Custom Range",
        }

    if time_filter == YESTERDAY:
        yesterday = today - timedelta(days=1)
        return {"startDate": format_date(yesterday), "endDate": format_date(yesterday), "label": "Yesterday"}
    if time_filter == THIS_WEEK:
        # Weeks start on Sunday
        start = today - timedelta(days=(today.weekday() + 1) % 7)
        return {"startDate": format_date(start), "endDate": format_date(today), "label": "This Week"}
    if time_filter == THIS_MONTH:
        return {"startDate": format_date(today.replace(day=1)), "endDate": format_date(today), "label": "This Month"}
    if time_filter == LAST_MONTH:
        month_range = get_month_range(today.replace(day=1) - timedelta(days=1))
        month_range["label"] = "Last Month"
        return month_range

    return {"startDate": format_date(today), "endDate": format_date(today), "label": "Today"}

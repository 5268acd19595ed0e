from datetime import date, datetime

import pytest

from dairy_admin.services.formatters import (
    format_currency,
    format_date,
    get_date_range,
    get_month_range,
    previous_month,
    status_label,
)


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0.00"),
        (None, "₹0.00"),
        (999.5, "₹999.50"),
        (1500, "₹1,500.00"),
        (123456, "₹1,23,456.00"),
        (12345678, "₹1,23,45,678.00"),
        (-2500.75, "-₹2,500.75"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_date():
    assert format_date("2024-03-05T10:00:00.000Z") == "2024-03-05"
    assert format_date(datetime(2024, 1, 2, 23, 0)) == "2024-01-02"
    assert format_date(None) == ""
    assert format_date(date(2024, 12, 31), "%d/%m/%Y") == "31/12/2024"


def test_status_label():
    assert status_label("partially_paid") == "PARTIALLY PAID"
    assert status_label(None) == ""


def test_previous_month_wraps_year():
    assert previous_month(date(2024, 1, 15)) == (12, 2023)
    assert previous_month(date(2024, 3, 31)) == (2, 2024)


def test_month_range_leap_year():
    assert get_month_range(date(2024, 2, 10)) == {
        "startDate": "2024-02-01",
        "endDate": "2024-02-29",
        "label": "February 2024",
    }


def test_date_ranges():
    today = date(2024, 5, 15)  # a Wednesday
    assert get_date_range("today", today=today)["startDate"] == "2024-05-15"
    assert get_date_range("yesterday", today=today)["endDate"] == "2024-05-14"
    assert get_date_range("thisWeek", today=today)["startDate"] == "2024-05-12"
    assert get_date_range("thisMonth", today=today)["startDate"] == "2024-05-01"

    last = get_date_range("lastMonth", today=today)
    assert (last["startDate"], last["endDate"], last["label"]) == ("2024-04-01", "2024-04-30", "Last Month")

    custom = get_date_range("custom", ("2024-01-01", "2024-01-31"), today=today)
    assert custom["label"] == "Custom Range"
    assert get_date_range("custom", ("2024-01-01", None), today=today)["label"] == "Today"

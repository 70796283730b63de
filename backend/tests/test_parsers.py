import datetime as dt
from decimal import Decimal

import pytest

from receipt_points.core.errors import ParseError
from receipt_points.utils.parsers import parse_currency, parse_date, parse_time


@pytest.mark.parametrize(
    "value, expected",
    [("12.34", Decimal("12.34")), ("35", Decimal("35")), ("0.25", Decimal("0.25")), (".5", Decimal("0.5")), ("-1.00", Decimal("-1"))],
)
def test_parse_currency_accepts_plain_decimals(value, expected):
    assert parse_currency(value) == expected


@pytest.mark.parametrize("value", ["", "abc", "$12.34", "1,000.00", "1e3", "NaN", "Infinity", " 12.34", "12.34 ", None])
def test_parse_currency_rejects_everything_else(value):
    with pytest.raises(ParseError):
        parse_currency(value)


def test_parse_currency_error_names_field():
    with pytest.raises(ParseError) as excinfo:
        parse_currency("ten", field="total")
    assert excinfo.value.field == "total"
    assert "total" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_parse_date_day_of_month():
    assert parse_date("2022-01-01") == dt.date(2022, 1, 1)
    assert parse_date("2022-03-20").day == 20


@pytest.mark.parametrize("value", ["2022-1-1", "2022-02-30", "2022-13-01", "01/01/2022", "2022-01-01T10:00", "", None])
def test_parse_date_rejects_other_formats(value):
    with pytest.raises(ParseError):
        parse_date(value)


def test_parse_time_values_are_comparable():
    assert parse_time("14:01") > parse_time("14:00")
    assert parse_time("00:00") == dt.time(0, 0)
    assert parse_time("23:59") == dt.time(23, 59)


@pytest.mark.parametrize("value", ["2:01", "24:00", "14:60", "14:01:00", "2pm", "", None])
def test_parse_time_rejects_malformed(value):
    with pytest.raises(ParseError):
        parse_time(value)

"""Field parsers for the string values carried by a receipt.

Every parser accepts exactly one textual format and raises
:class:`~receipt_points.core.errors.ParseError` for anything else.
Whether a failure is fatal is decided by the caller, not here.
"""

from __future__ import annotations

import datetime as dt
import re
from decimal import Decimal

from receipt_points.core.errors import ParseError

# Optional sign, digits, optional fraction. No symbols, separators or exponents.
_CURRENCY_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def parse_currency(value: str | None, field: str = "amount") -> Decimal:
    """Parse a decimal currency string such as ``"12.34"`` into a :class:`Decimal`.

    Amounts are kept in fixed point so that checks for whole dollars or
    quarter multiples compare exactly.
    """
    if value is None or not _CURRENCY_RE.fullmatch(value):
        raise ParseError(field, value, "a decimal number like 12.34")
    return Decimal(value)


def parse_date(value: str | None, field: str = "date") -> dt.date:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    if value is None or not _DATE_RE.fullmatch(value):
        raise ParseError(field, value, "YYYY-MM-DD")
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        # Right shape, impossible date (e.g. 2022-02-30)
        raise ParseError(field, value, "a valid calendar date") from None


def parse_time(value: str | None, field: str = "time") -> dt.time:
    """Parse a 24-hour ``HH:MM`` wall-clock time."""
    if value is None or not _TIME_RE.fullmatch(value):
        raise ParseError(field, value, "HH:MM")
    try:
        return dt.datetime.strptime(value, "%H:%M").time()
    except ValueError:
        raise ParseError(field, value, "a 24-hour time") from None

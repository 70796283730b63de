"""Fixed rule engine that turns a receipt into loyalty points.

The engine applies eight independent rules to a :class:`Receipt` and
sums their contributions.  Each rule is a plain function taking the
receipt and its parsed total and returning a :class:`RuleResult`: the
points it awards plus a short reasoning string.  Rules never mutate
the receipt and do not depend on each other, so the order in
``RULES`` only affects the order of the breakdown.

Rules:

* ``retailer_name`` – one point per ASCII letter or digit in the
  retailer name.
* ``round_dollar`` – 50 points if the total has no cents.
* ``quarter_multiple`` – 25 points if the total is a multiple of 0.25.
* ``item_pairs`` – 5 points for every two items.
* ``description_length`` – for each item whose trimmed description
  length in UTF-8 bytes is a non-zero multiple of 3, ``ceil(price * 0.2)`` points.
* ``high_total`` – 5 points if the total is greater than 10.00.
* ``odd_day`` – 6 points if the purchase day is odd.
* ``afternoon_window`` – 10 points if the purchase time is after 14:00
  and before 16:00.

The total is the only mandatory field: if it cannot be parsed the whole
computation fails with :class:`ParseError`.  Every other rule that reads
an optional field catches its own ``ParseError`` and awards zero.
"""

from __future__ import annotations

import datetime as dt
import logging
from decimal import ROUND_CEILING, Decimal, localcontext
from typing import Callable, Dict, List, NamedTuple

from receipt_points.core.errors import ParseError
from receipt_points.models.enums import ScoringRule
from receipt_points.models.schemas import Receipt
from receipt_points.utils.parsers import parse_currency, parse_date, parse_time

logger = logging.getLogger(__name__)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
QUARTERS_PER_DOLLAR = Decimal(4)
POINTS_PER_ITEM_PAIR = 5
DESCRIPTION_PRICE_MULTIPLIER = Decimal("0.2")
HIGH_TOTAL_THRESHOLD = Decimal("10.00")
HIGH_TOTAL_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_START = dt.time(14, 0)
AFTERNOON_END = dt.time(16, 0)
AFTERNOON_POINTS = 10


class RuleResult(NamedTuple):
    points: int
    reason: str


class ScoreBreakdown(NamedTuple):
    """Per-rule contributions for one receipt."""

    results: Dict[ScoringRule, RuleResult]

    @property
    def total(self) -> int:
        return sum(result.points for result in self.results.values())

    def reasons(self) -> List[str]:
        return [f"{rule.value}: {result.reason}" for rule, result in self.results.items()]


def _is_whole(amount: Decimal) -> bool:
    return amount == amount.to_integral_value()


def _scale(amount: Decimal, factor: Decimal) -> Decimal:
    # Enough precision that the product is never rounded, however long the amount
    with localcontext() as ctx:
        ctx.prec = len(amount.as_tuple().digits) + len(factor.as_tuple().digits) + 1
        return amount * factor


def _retailer_name(receipt: Receipt, total: Decimal) -> RuleResult:
    count = sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())
    return RuleResult(count, f"{count} alphanumeric characters in {receipt.retailer!r}")


def _round_dollar(receipt: Receipt, total: Decimal) -> RuleResult:
    if _is_whole(total):
        return RuleResult(ROUND_DOLLAR_POINTS, f"total {total} has no cents")
    return RuleResult(0, f"total {total} has cents")


def _quarter_multiple(receipt: Receipt, total: Decimal) -> RuleResult:
    if _is_whole(_scale(total, QUARTERS_PER_DOLLAR)):
        return RuleResult(QUARTER_MULTIPLE_POINTS, f"total {total} is a multiple of 0.25")
    return RuleResult(0, f"total {total} is not a multiple of 0.25")


def _item_pairs(receipt: Receipt, total: Decimal) -> RuleResult:
    pairs = len(receipt.items) // 2
    return RuleResult(pairs * POINTS_PER_ITEM_PAIR, f"{len(receipt.items)} items -> {pairs} pairs")


def _description_length(receipt: Receipt, total: Decimal) -> RuleResult:
    points = 0
    matched: List[str] = []
    for index, item in enumerate(receipt.items):
        description = item.short_description.strip()
        # Length in UTF-8 bytes, not characters
        length = len(description.encode("utf-8"))
        if not length or length % 3:
            continue
        try:
            price = parse_currency(item.price, field=f"items[{index}].price")
        except ParseError as exc:
            # Only this item is skipped; the receipt still scores
            logger.debug("skipping description bonus: %s", exc)
            continue
        bonus = int(_scale(price, DESCRIPTION_PRICE_MULTIPLIER).to_integral_value(rounding=ROUND_CEILING))
        points += bonus
        matched.append(f"{description!r}+{bonus}")
    return RuleResult(points, f"matched {matched}" if matched else "no qualifying descriptions")


def _high_total(receipt: Receipt, total: Decimal) -> RuleResult:
    if total > HIGH_TOTAL_THRESHOLD:
        return RuleResult(HIGH_TOTAL_POINTS, f"total {total} > {HIGH_TOTAL_THRESHOLD}")
    return RuleResult(0, f"total {total} <= {HIGH_TOTAL_THRESHOLD}")


def _odd_day(receipt: Receipt, total: Decimal) -> RuleResult:
    try:
        purchase_date = parse_date(receipt.purchase_date, field="purchaseDate")
    except ParseError as exc:
        return RuleResult(0, str(exc))
    if purchase_date.day % 2 == 1:
        return RuleResult(ODD_DAY_POINTS, f"day {purchase_date.day} is odd")
    return RuleResult(0, f"day {purchase_date.day} is even")


def _afternoon_window(receipt: Receipt, total: Decimal) -> RuleResult:
    try:
        purchase_time = parse_time(receipt.purchase_time, field="purchaseTime")
    except ParseError as exc:
        return RuleResult(0, str(exc))
    if AFTERNOON_START < purchase_time < AFTERNOON_END:
        return RuleResult(AFTERNOON_POINTS, f"{purchase_time:%H:%M} is between 14:00 and 16:00")
    return RuleResult(0, f"{purchase_time:%H:%M} is outside 14:00-16:00")


RULES: Dict[ScoringRule, Callable[[Receipt, Decimal], RuleResult]] = {
    ScoringRule.RETAILER_NAME: _retailer_name,
    ScoringRule.ROUND_DOLLAR: _round_dollar,
    ScoringRule.QUARTER_MULTIPLE: _quarter_multiple,
    ScoringRule.ITEM_PAIRS: _item_pairs,
    ScoringRule.DESCRIPTION_LENGTH: _description_length,
    ScoringRule.HIGH_TOTAL: _high_total,
    ScoringRule.ODD_DAY: _odd_day,
    ScoringRule.AFTERNOON_WINDOW: _afternoon_window,
}


def score_breakdown(receipt: Receipt) -> ScoreBreakdown:
    """Apply every rule to ``receipt``.

    :param receipt: The decoded receipt document.
    :returns: A :class:`ScoreBreakdown` mapping each rule to its result.
    :raises ParseError: If the receipt total is not a decimal number.
    """
    total = parse_currency(receipt.total, field="total")
    return ScoreBreakdown({rule: handler(receipt, total) for rule, handler in RULES.items()})


def compute_score(receipt: Receipt) -> int:
    """Return the points awarded to ``receipt``.

    Deterministic: the result depends only on the receipt's field values.
    """
    return score_breakdown(receipt).total

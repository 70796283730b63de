"""Enumeration types used throughout the receipt points API.

Each member of ``ScoringRule`` names one of the fixed rules applied by
``receipt_points.services.rule_engine``.  The values double as the keys
of a score breakdown, so renaming a member changes what shows up in
the debug logs.
"""

from enum import Enum


class ScoringRule(str, Enum):
    """The fixed set of additive rules that make up a receipt's points."""

    RETAILER_NAME = "retailer_name"
    ROUND_DOLLAR = "round_dollar"
    QUARTER_MULTIPLE = "quarter_multiple"
    ITEM_PAIRS = "item_pairs"
    DESCRIPTION_LENGTH = "description_length"
    HIGH_TOTAL = "high_total"
    ODD_DAY = "odd_day"
    AFTERNOON_WINDOW = "afternoon_window"

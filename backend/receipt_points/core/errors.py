"""Domain errors raised by the parsers, the rule engine and the score store.

Malformed request documents never reach this layer: FastAPI rejects them
with ``RequestValidationError`` before a handler runs, and
``receipt_points.api.error_handlers`` turns that into a 400 response.
"""

from __future__ import annotations


class ParseError(ValueError):
    """A receipt field could not be parsed in its expected format."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"invalid {field} value {value!r} (expected {expected})")


class NotFound(KeyError):
    """No score has been recorded for the requested receipt id."""

    def __init__(self, receipt_id: str) -> None:
        self.receipt_id = receipt_id
        super().__init__(receipt_id)

    def __str__(self) -> str:
        return f"no points recorded for receipt {self.receipt_id!r}"

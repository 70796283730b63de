"""Pydantic schemas for request and response models.

Pydantic models validate data that crosses the boundary of the API.
The receipt document keeps every field as a string: the rule engine
decides which fields are mandatory and how a badly formatted value is
treated, so validation here is limited to the shape of the JSON.
Missing fields and explicit nulls default to empty values, which the
rule engine scores like any other unparsable input.
"""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Item(BaseModel):
    """Individual line item on a receipt."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    short_description: str = Field(default="", alias="shortDescription")
    price: str = ""

    @model_validator(mode="before")
    @classmethod
    def _null_item(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("short_description", "price", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Receipt(BaseModel):
    """Receipt document submitted for scoring."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    retailer: str = ""
    purchase_date: str = Field(default="", alias="purchaseDate")
    purchase_time: str = Field(default="", alias="purchaseTime")
    items: List[Item] = Field(default_factory=list)
    total: str = ""

    @field_validator("retailer", "purchase_date", "purchase_time", "total", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("items", mode="before")
    @classmethod
    def _null_as_no_items(cls, value: Any) -> Any:
        return [] if value is None else value


# ---------------------------------------------------------------------------
# API response schemas

class ReceiptProcessed(BaseModel):
    id: str = Field(description="Identifier to fetch the receipt's points with")


class ReceiptPoints(BaseModel):
    points: int

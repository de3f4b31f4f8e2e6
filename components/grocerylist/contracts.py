from __future__ import annotations

from typing import Dict, Literal

from pydantic import BaseModel, Field

# Quantities travel as signed 32-bit integers on the wire.
QUANTITY_MIN = -(2**31)
QUANTITY_MAX = 2**31 - 1

OutcomeKind = Literal["created", "ok"]

GroceryList = Dict[str, int]


class Item(BaseModel):
    name: str = Field(..., strict=True, description="Unique item key")
    quantity: int = Field(
        ..., strict=True, ge=QUANTITY_MIN, le=QUANTITY_MAX,
        description="Any signed value; zero and negatives are stored as-is",
    )


class Id(BaseModel):
    name: str = Field(..., strict=True)


class Outcome(BaseModel):
    """Result of a mutating handler; the HTTP layer maps kind to a status code."""
    kind: OutcomeKind
    message: str

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, field_validator

Money = Decimal


def to_money(v: int | float | str | Decimal) -> Money:
    # floats go through str so 50.0 stays Decimal("50.0") instead of the binary expansion
    try:
        if isinstance(v, Decimal):
            amount = v
        elif isinstance(v, float):
            amount = Decimal(str(v))
        else:
            amount = Decimal(v)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"not a money amount: {v!r}") from e
    if not amount.is_finite():
        raise ValueError(f"money amount must be finite, got {v!r}")
    return amount


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int
    unit_price: Money
    total_price: Money
    description: str = ""

    @field_validator("unit_price", "total_price", mode="before")
    @classmethod
    def coerce_money(cls, v):
        return to_money(v)

    def to_wire(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit_price": float(self.unit_price),
            "total_price": float(self.total_price),
            "description": self.description,
        }


class TaxLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    amount: Money

    @field_validator("amount", mode="before")
    @classmethod
    def coerce_money(cls, v):
        return to_money(v)

    def to_wire(self) -> Dict[str, Any]:
        return {"name": self.name, "amount": float(self.amount)}

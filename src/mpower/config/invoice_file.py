from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Literal

import yaml
from pydantic import BaseModel, Field, JsonValue

from ..gateway.invoice import CheckoutInvoice, Invoice, OnsiteInvoice
from ..gateway.setup import Setup
from ..gateway.store import Store


class ItemSpec(BaseModel):
    name: str
    quantity: int = 1
    unit_price: Decimal
    total_price: Decimal | None = None
    description: str = ""


class TaxSpec(BaseModel):
    name: str
    amount: Decimal


class ActionsSpec(BaseModel):
    cancel_url: str | None = None
    return_url: str | None = None


class InvoiceFile(BaseModel):
    kind: Literal["checkout", "onsite"] = "checkout"
    store: Store
    description: str | None = None
    total_amount: Decimal | None = None
    items: List[ItemSpec] = Field(default_factory=list)
    taxes: List[TaxSpec] = Field(default_factory=list)
    actions: ActionsSpec = Field(default_factory=ActionsSpec)
    custom_data: Dict[str, JsonValue] = Field(default_factory=dict)


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level, got {type(data).__name__}")
    return data


def load_invoice_file(path: str | Path) -> InvoiceFile:
    return InvoiceFile(**_load_yaml(Path(path)))


def build_invoice(spec: InvoiceFile, setup: Setup | None = None) -> Invoice:
    """Replay an invoice file through the builder.

    A missing ``total_amount`` defaults to the sum of item totals plus taxes.
    """
    setup = setup or Setup.from_settings()
    cls = OnsiteInvoice if spec.kind == "onsite" else CheckoutInvoice
    inv = cls(setup, spec.store)
    total = Decimal("0")
    for it in spec.items:
        line_total = it.total_price if it.total_price is not None else it.unit_price * it.quantity
        inv.add_item(it.name, it.quantity, it.unit_price, line_total, it.description)
        total += line_total
    for tx in spec.taxes:
        inv.add_tax(tx.name, tx.amount)
        total += tx.amount

    inv.set_total_amount(spec.total_amount if spec.total_amount is not None else total)
    if spec.description:
        inv.set_description(spec.description)
    if spec.actions.cancel_url:
        inv.set_cancel_url(spec.actions.cancel_url)
    if spec.actions.return_url:
        inv.set_return_url(spec.actions.return_url)
    for key, value in spec.custom_data.items():
        inv.set_custom_data(key, value)
    return inv

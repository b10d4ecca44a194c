"""The invoice handed to the request executor.

Example::

    checkout = CheckoutInvoice(Setup.from_settings(), Store(name="Awesome Store"))
    checkout.add_item("Yam Phone", 1, 50.00, 50.00, "Hello World")
    checkout.add_tax("VAT", 30.00)
    checkout.set_total_amount(80.00)
    checkout.set_description("Hello World")
    payload = build_request_payload(checkout)
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, Optional

from pydantic import JsonValue

from ..engine.builder import InvoiceBuilder
from ..engine.models import LineItem, Money, TaxLine
from ..engine.snapshot import InvoiceSnapshotter
from ..errors import PreconditionViolation
from .setup import Setup
from .store import Store

logger = logging.getLogger(__name__)


class Invoice:
    kind = "invoice"

    def __init__(self, setup: Setup, store: Store, snapshotter: InvoiceSnapshotter | None = None):
        self.setup = setup
        self.store = store
        self.builder = InvoiceBuilder()
        self._snapshotter = snapshotter or InvoiceSnapshotter()
        self._actions: Dict[str, str] = {}

    def add_item(
        self,
        name: str,
        quantity: int,
        unit_price: int | float | str | Decimal,
        total_price: int | float | str | Decimal,
        description: str,
    ) -> LineItem:
        return self.builder.add_item(name, quantity, unit_price, total_price, description)

    def remove_item(self, name: str) -> None:
        self.builder.remove_item(name)

    def clear_all_items(self) -> None:
        self.builder.clear_all_items()

    def add_tax(self, name: str, amount: int | float | str | Decimal) -> TaxLine:
        return self.builder.add_tax(name, amount)

    def remove_tax(self, name: str) -> None:
        self.builder.remove_tax(name)

    def clear_all_taxes(self) -> None:
        self.builder.clear_all_taxes()

    def clear(self) -> None:
        self.builder.clear()

    def set_description(self, text: str) -> None:
        self.builder.set_description(text)

    def set_total_amount(self, value: int | float | str | Decimal) -> None:
        self.builder.set_total_amount(value)

    def set_custom_data(self, key: str, value: JsonValue) -> None:
        self.builder.set_custom_data(key, value)

    def set_cancel_url(self, url: str) -> None:
        if not url:
            raise PreconditionViolation("provide the cancel_url argument")
        self._actions["cancel_url"] = url

    def set_return_url(self, url: str) -> None:
        if not url:
            raise PreconditionViolation("provide the return_url argument")
        self._actions["return_url"] = url

    def prepare_for_request(self) -> None:
        """Rebuild the ``item_N``/``tax_N`` maps from the current lists."""
        self._snapshotter.prepare_for_request(self.builder)

    @property
    def description(self) -> str:
        return self.builder.description

    @property
    def total_amount(self) -> Money:
        return self.builder.total_amount

    @property
    def custom_data(self) -> Dict[str, JsonValue]:
        return self.builder.custom_data

    @property
    def actions(self) -> Dict[str, str]:
        return dict(self._actions)

    def get_item(self, name: str) -> Optional[LineItem]:
        return self.builder.get_item(name)

    def get_tax(self, name: str) -> Optional[TaxLine]:
        return self.builder.get_tax(name)


class CheckoutInvoice(Invoice):
    """Invoice paid through the gateway's hosted checkout page."""

    kind = "checkout"


class OnsiteInvoice(Invoice):
    """Invoice paid on the merchant's own site."""

    kind = "onsite"

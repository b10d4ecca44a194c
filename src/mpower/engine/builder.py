"""Ordered, mutable invoice state.

Items and taxes are edited as ordered lists. The keyed maps the gateway wants
(``item_0``, ``tax_0``, ...) are derived from those lists by
:class:`mpower.engine.snapshot.InvoiceSnapshotter` and are never edited here,
except for being emptied by the clear operations.
"""

from __future__ import annotations

import copy
import logging
import threading
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import JsonValue, TypeAdapter

from ..errors import DuplicateNameError, PreconditionViolation
from .models import LineItem, Money, TaxLine, to_money

logger = logging.getLogger(__name__)

_JSON_VALUE = TypeAdapter(JsonValue)


class InvoiceBuilder:
    """Per-invoice editing state.

    ``lock`` is the invoice-wide guard. It is taken by ``set_custom_data`` and
    by the snapshotter; the item and tax mutators do not take it, so callers
    sharing an invoice across threads must serialize those themselves.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._items: List[LineItem] = []
        self._taxes: List[TaxLine] = []
        self._transmission_items: Dict[str, LineItem] = {}
        self._transmission_taxes: Dict[str, TaxLine] = {}
        self._description = ""
        self._total_amount: Money = Decimal("0")
        self._custom_data: Optional[Dict[str, JsonValue]] = None

    # -- items ---------------------------------------------------------------

    def add_item(
        self,
        name: str,
        quantity: int,
        unit_price: int | float | str | Decimal,
        total_price: int | float | str | Decimal,
        description: str,
    ) -> LineItem:
        for existing in self._items:
            if existing.name == name:
                raise DuplicateNameError("item", name)
        item = LineItem(
            name=name,
            quantity=quantity,
            unit_price=unit_price,
            total_price=total_price,
            description=description,
        )
        self._items.append(item)
        logger.debug("Added item %r (%d on invoice)", name, len(self._items))
        return item

    def remove_item(self, name: str) -> None:
        for ix, existing in enumerate(self._items):
            if existing.name == name:
                del self._items[ix]
                logger.debug("Removed item %r", name)
                return
        logger.debug("remove_item: no item named %r", name)

    def clear_all_items(self) -> None:
        self._items = []
        self._transmission_items = {}

    def get_item(self, name: str) -> Optional[LineItem]:
        return next((i for i in self._items if i.name == name), None)

    # -- taxes ---------------------------------------------------------------

    def add_tax(self, name: str, amount: int | float | str | Decimal) -> TaxLine:
        for existing in self._taxes:
            if existing.name == name:
                raise DuplicateNameError("tax", name)
        tax = TaxLine(name=name, amount=amount)
        self._taxes.append(tax)
        logger.debug("Added tax %r (%d on invoice)", name, len(self._taxes))
        return tax

    def remove_tax(self, name: str) -> None:
        for ix, existing in enumerate(self._taxes):
            if existing.name == name:
                del self._taxes[ix]
                logger.debug("Removed tax %r", name)
                return
        logger.debug("remove_tax: no tax named %r", name)

    def clear_all_taxes(self) -> None:
        self._taxes = []
        self._transmission_taxes = {}

    def get_tax(self, name: str) -> Optional[TaxLine]:
        return next((t for t in self._taxes if t.name == name), None)

    def clear(self) -> None:
        self.clear_all_items()
        self.clear_all_taxes()

    # -- scalar fields -------------------------------------------------------

    def set_description(self, text: str) -> None:
        if not text:
            raise PreconditionViolation("provide the description argument")
        self._description = text

    def set_total_amount(self, value: int | float | str | Decimal) -> None:
        amount = to_money(value)
        if amount == 0:
            raise PreconditionViolation("provide the totalAmount argument")
        self._total_amount = amount

    def set_custom_data(self, key: str, value: JsonValue) -> None:
        value = _JSON_VALUE.validate_python(value)
        with self.lock:
            if self._custom_data is None:
                self._custom_data = {}
            self._custom_data[key] = value

    # -- read side -----------------------------------------------------------

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    @property
    def taxes(self) -> tuple[TaxLine, ...]:
        return tuple(self._taxes)

    @property
    def transmission_items(self) -> Dict[str, LineItem]:
        return dict(self._transmission_items)

    @property
    def transmission_taxes(self) -> Dict[str, TaxLine]:
        return dict(self._transmission_taxes)

    @property
    def description(self) -> str:
        return self._description

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def custom_data(self) -> Dict[str, JsonValue]:
        with self.lock:
            return copy.deepcopy(self._custom_data or {})

    def replace_transmission(
        self, items: Dict[str, LineItem], taxes: Dict[str, TaxLine]
    ) -> None:
        """Install freshly derived maps. Caller must hold ``lock``."""
        self._transmission_items = items
        self._transmission_taxes = taxes

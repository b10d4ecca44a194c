from __future__ import annotations

import logging
from typing import Dict

from .builder import InvoiceBuilder
from .models import LineItem, TaxLine

logger = logging.getLogger(__name__)

ITEM_KEY = "item_{}"
TAX_KEY = "tax_{}"


class InvoiceSnapshotter:
    """Turns the ordered item/tax lists into the keyed maps sent on the wire.

    Keys are positional: removing an item shifts the keys of everything
    after it on the next call. The maps are rebuilt wholesale each time.
    """

    def prepare_for_request(self, builder: InvoiceBuilder) -> None:
        with builder.lock:
            items: Dict[str, LineItem] = {
                ITEM_KEY.format(ix): item.model_copy()
                for ix, item in enumerate(builder.items)
            }
            taxes: Dict[str, TaxLine] = {
                TAX_KEY.format(ix): tax.model_copy()
                for ix, tax in enumerate(builder.taxes)
            }
            builder.replace_transmission(items, taxes)
        logger.info("Prepared invoice with %d items and %d taxes", len(items), len(taxes))


_default = InvoiceSnapshotter()


def prepare_for_request(builder: InvoiceBuilder) -> None:
    _default.prepare_for_request(builder)

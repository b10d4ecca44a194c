"""mpower - invoice builder for the MPower payment gateway."""

from __future__ import annotations

from .errors import DuplicateNameError, MpowerError, PreconditionViolation
from .gateway.invoice import CheckoutInvoice, Invoice, OnsiteInvoice
from .gateway.setup import Setup
from .gateway.store import Store

__all__ = [
    "CheckoutInvoice",
    "DuplicateNameError",
    "Invoice",
    "MpowerError",
    "OnsiteInvoice",
    "PreconditionViolation",
    "Setup",
    "Store",
]

from __future__ import annotations
from typing import Dict, Any

from ..engine.validators import validate_invoice_payload
from .invoice import Invoice


def map_invoice(inv: Invoice) -> Dict[str, Any]:
    """Wire shape of an already prepared invoice.

    Reads the transmission maps as they were left by the last
    ``prepare_for_request``; it does not rebuild them.
    """
    with inv.builder.lock:
        items = inv.builder.transmission_items
        taxes = inv.builder.transmission_taxes
        custom_data = inv.custom_data
    body: Dict[str, Any] = {
        "items": {key: item.to_wire() for key, item in items.items()},
        "total_amount": float(inv.total_amount),
        "description": inv.description,
    }
    # taxes and actions are optional on the wire
    if taxes:
        body["taxes"] = {key: tax.to_wire() for key, tax in taxes.items()}
    actions = inv.actions
    if actions:
        body["actions"] = actions

    payload: Dict[str, Any] = {"invoice": body, "store": inv.store.to_wire()}
    if custom_data:
        payload["custom_data"] = custom_data
    return payload


def build_request_payload(inv: Invoice) -> Dict[str, Any]:
    inv.prepare_for_request()
    payload = map_invoice(inv)
    validate_invoice_payload(payload)
    return payload

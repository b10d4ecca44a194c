from typing import Any, Dict


def validate_invoice_payload(payload: Dict[str, Any]) -> None:
    inv = payload.get("invoice", {})
    if not inv.get("total_amount"):
        raise ValueError("invoice total_amount is required and must be non-zero")
    if not payload.get("store", {}).get("name"):
        raise ValueError("store name is required")
    for key, item in inv.get("items", {}).items():
        if not item.get("name"):
            raise ValueError(f"{key}: item name is required")
    for key, tax in inv.get("taxes", {}).items():
        if not tax.get("name"):
            raise ValueError(f"{key}: tax name is required")

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator


class Store(BaseModel):
    name: str
    tagline: Optional[str] = None
    phone: Optional[str] = None
    postal_address: Optional[str] = None
    logo_url: Optional[str] = None
    website_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v):
        if not v:
            raise ValueError("store name must not be empty")
        return v

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

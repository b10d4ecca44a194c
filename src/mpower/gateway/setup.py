from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from ..config.settings import Settings, settings as default_settings

LIVE_BASE = "https://app.mpowerpayments.com/api/v1"
SANDBOX_BASE = "https://app.mpowerpayments.com/sandbox-api/v1"


class Setup(BaseModel):
    """Credentials for the gateway.

    Invoices only hold a reference to this; building and freezing an invoice
    never reads it.
    """

    master_key: Optional[str] = None
    private_key: Optional[str] = None
    public_key: Optional[str] = None
    token: Optional[str] = None
    mode: Literal["test", "live"] = "test"

    @classmethod
    def from_settings(cls, s: Settings | None = None) -> Setup:
        s = s or default_settings
        return cls(
            master_key=s.mpower_master_key,
            private_key=s.mpower_private_key,
            public_key=s.mpower_public_key,
            token=s.mpower_token,
            mode=s.mpower_mode,
        )

    @property
    def base_url(self) -> str:
        return LIVE_BASE if self.mode == "live" else SANDBOX_BASE

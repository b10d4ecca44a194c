import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from mpower import Setup, Store
from mpower.gateway.invoice import CheckoutInvoice


@pytest.fixture
def invoice():
    return CheckoutInvoice(Setup(), Store(name="Awesome Store"))

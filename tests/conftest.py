from __future__ import annotations
from typing import List

import pytest

# Import project primitives
from rfq_math.core import FixedPoint
from rfq_math.limits import DEFAULT_BTC_PRICES_CENTS, INVOICE_AMOUNTS_MSAT


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def usd_price_5k() -> FixedPoint:
    """5,000.00 USD/BTC at decimal display 6."""
    return FixedPoint(5_000_00, 2).scale_to(6)


@pytest.fixture()
def usd_price_50k() -> FixedPoint:
    """50,702.12 USD/BTC at decimal display 6."""
    return FixedPoint(50_702_12, 2).scale_to(6)


@pytest.fixture()
def btc_prices_cents() -> List[int]:
    return list(DEFAULT_BTC_PRICES_CENTS)


@pytest.fixture()
def invoice_amounts_msat() -> List[int]:
    return list(INVOICE_AMOUNTS_MSAT)

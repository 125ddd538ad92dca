# Top-level API for rfq_math (integer-domain).
"""
Top-level API for rfq_math (integer-domain).

This module exposes the stable interface used by RFQ price negotiation:
  - FixedPoint: unsigned fixed-point decimal (value / 10^scale)
  - milli_satoshi_to_units / units_to_milli_satoshi: msat <-> asset unit conversion
  - convert_units: asset A -> msat -> asset B cross rate

Diagnostics for choosing an asset's decimal display live in `rfq_math.limits` and are
not imported at the top level.
"""

from __future__ import annotations


# Conversions
from .convert import (
    milli_satoshi_to_units,
    milli_satoshi_to_units_fp,
    units_to_milli_satoshi,
    convert_units,
)

# Core data types and errors
from .core import (
    ARITH_SCALE,
    MSAT_PER_BTC,
    FixedPoint,
    RfqMathError,
    AmountDomainError,
    InvalidScaleError,
    ScaleMismatchError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)

__all__ = [
    # conversions
    "milli_satoshi_to_units",
    "milli_satoshi_to_units_fp",
    "units_to_milli_satoshi",
    "convert_units",
    # core
    "ARITH_SCALE",
    "MSAT_PER_BTC",
    "FixedPoint",
    # errors
    "RfqMathError",
    "AmountDomainError",
    "InvalidScaleError",
    "ScaleMismatchError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
]

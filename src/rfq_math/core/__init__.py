"""
RFQ Math Core
=============

Unified exports for the integer-domain fixed-point primitive and utilities.
All arithmetic is scaled-integer with truncation toward zero.
Decimal helpers are provided *only* for I/O formatting.

Core exposes FixedPoint (value / 10^scale) as public API.
"""

# NOTE:
#   The `core` package defines the integer-domain primitive used by the
#   conversion functions. Decimal functions exist only for I/O and display.

# Integer-domain constants
from .constants import (
    SATOSHI_PER_BTC,
    MSAT_PER_SAT,
    MSAT_PER_BTC,
    ARITH_SCALE,
    UINT64_BITS,
    UINT64_MAX,
    DEFAULT_NUM_SHARDS,
    MIN_DECIMAL_DISPLAY,
    MAX_DECIMAL_DISPLAY,
)

# Fixed-point primitive
from .fixedpoint import (
    FixedPoint,
    narrow,
)

# Decimal formatting helpers (non-core arithmetic)
from .fmt import (
    fmt_fixed,
    fmt_msat,
    fixed_to_decimal,
    fixed_from_decimal,
)

# Core exceptions
from .exc import (
    RfqMathError,
    AmountDomainError,
    InvalidScaleError,
    ScaleMismatchError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)

__all__ = [
    # constants
    "SATOSHI_PER_BTC",
    "MSAT_PER_SAT",
    "MSAT_PER_BTC",
    "ARITH_SCALE",
    "UINT64_BITS",
    "UINT64_MAX",
    "DEFAULT_NUM_SHARDS",
    "MIN_DECIMAL_DISPLAY",
    "MAX_DECIMAL_DISPLAY",
    # fixed point
    "FixedPoint",
    "narrow",
    # fmt
    "fmt_fixed",
    "fmt_msat",
    "fixed_to_decimal",
    "fixed_from_decimal",
    # exceptions
    "RfqMathError",
    "AmountDomainError",
    "InvalidScaleError",
    "ScaleMismatchError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
]

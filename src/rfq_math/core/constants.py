"""
RFQ Math Core Constants (integer domain)
========================================

Only integer constants live here. Decimal helpers used for display are in
`fmt.py`.
"""

# NOTE: ARITH_SCALE is the working precision of the conversion pipeline; never
# the precision of a returned amount.

from typing import Final

# ---------------------------------------------------------------------------
# Base settlement currency (BTC / Lightning)
# ---------------------------------------------------------------------------

#: Number of satoshis per 1 BTC.
SATOSHI_PER_BTC: Final[int] = 100_000_000

#: Lightning amounts are denominated in milli-satoshis.
MSAT_PER_SAT: Final[int] = 1_000

#: Integer bridge: number of milli-satoshis per 1 BTC (1e11).
MSAT_PER_BTC: Final[int] = SATOSHI_PER_BTC * MSAT_PER_SAT


# ---------------------------------------------------------------------------
# Fixed-point working precision
# ---------------------------------------------------------------------------

#: Working scale for msat <-> asset unit conversions. 10^11 equals
#: MSAT_PER_BTC, so one msat expressed in BTC (1e-11) is exactly one step at
#: this scale and the msat -> BTC division never drops a whole msat. Prices up
#: to the uint64 range times 10^11 still fit comfortably in Python ints.
#: A msat -> units -> msat round trip loses at most 2 msat only while one asset
#: unit is worth at most one msat, i.e. price.value >= MSAT_PER_BTC at the
#: asset's decimal display; coarser prices lose up to one unit's worth of msat.
ARITH_SCALE: Final[int] = 11


# ---------------------------------------------------------------------------
# Wire width
# ---------------------------------------------------------------------------

#: Amounts (msat and asset units) travel as unsigned 64-bit integers.
UINT64_BITS: Final[int] = 64
UINT64_MAX: Final[int] = (1 << UINT64_BITS) - 1


# ---------------------------------------------------------------------------
# Diagnostics defaults (decimal display limits)
# ---------------------------------------------------------------------------

#: Number of MPP shards assumed when bounding cumulative rounding error.
DEFAULT_NUM_SHARDS: Final[int] = 16

#: Smallest and largest decimal display explored by the limits table.
MIN_DECIMAL_DISPLAY: Final[int] = 2
MAX_DECIMAL_DISPLAY: Final[int] = 8


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "SATOSHI_PER_BTC",
    "MSAT_PER_SAT",
    "MSAT_PER_BTC",
    "ARITH_SCALE",
    "UINT64_BITS",
    "UINT64_MAX",
    "DEFAULT_NUM_SHARDS",
    "MIN_DECIMAL_DISPLAY",
    "MAX_DECIMAL_DISPLAY",
]

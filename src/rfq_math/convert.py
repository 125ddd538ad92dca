"""
Conversions between milli-satoshi payments and asset units.

Prices are FixedPoints in asset units per 1 BTC, at the asset's decimal display
(e.g. 50,702.12 USD/BTC for an asset with decimal display 6 is
FixedPoint(50_702_120_000, 6)). Asset amounts are integer units at that same scale.

Both directions promote their operands to ARITH_SCALE, perform one division and one
multiplication, then rescale down. Each step truncates toward zero, so the two
functions are approximate inverses: msat -> units -> msat never gains any msat and
loses less than 1 + msat_per_unit + 1e11 / price@ARITH_SCALE. When one asset unit is
worth at most one msat (price.value >= MSAT_PER_BTC) that is at most 2 msat; coarser
prices lose up to one unit's worth of msat. Callers splitting a payment into N shards
must budget N such truncation steps.

Results are narrowed to uint64 (the width amounts travel with on the wire); anything
larger raises ArithmeticOverflowError rather than wrapping.
"""

from __future__ import annotations

from typing import Union

from .core.constants import ARITH_SCALE, MSAT_PER_BTC
from .core.exc import AmountDomainError, DivisionByZeroError
from .core.fixedpoint import FixedPoint, narrow

# Debug printing control
DEBUG_CONVERT = False

def _dbg(msg: str) -> None:
    if DEBUG_CONVERT:
        print(msg)


def _one_btc() -> FixedPoint:
    """MSAT_PER_BTC as a FixedPoint at ARITH_SCALE."""
    return FixedPoint.from_int(MSAT_PER_BTC, 0).scale_to(ARITH_SCALE)


def _check_price(price: FixedPoint) -> None:
    if not isinstance(price, FixedPoint):
        raise AmountDomainError("price must be a FixedPoint (asset units per BTC)")
    # A price finer than ARITH_SCALE truncates to zero in the working precision.
    if price.scale_to(ARITH_SCALE).is_zero():
        raise DivisionByZeroError(f"price {price} is zero at scale {ARITH_SCALE}")


def _check_amount(name: str, amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise AmountDomainError(f"{name} must be int, got {type(amount).__name__}")
    if amount < 0:
        raise AmountDomainError(f"{name} must be >= 0, got {amount}")


# ----------------------------
# msat -> asset units
# ----------------------------

def milli_satoshi_to_units_fp(msat: int, units_per_btc: FixedPoint) -> FixedPoint:
    """Convert `msat` to asset units, returned as a FixedPoint at `units_per_btc.scale`.

    The value of the result is the integer number of asset units; the scale records
    the decimal display they are expressed in.
    """
    _check_amount("msat", msat)
    _check_price(units_per_btc)

    msat_fp = FixedPoint.from_int(msat, 0).scale_to(ARITH_SCALE)
    price_fp = units_per_btc.scale_to(ARITH_SCALE)

    amount_btc = msat_fp.div(_one_btc())
    amount_units = amount_btc.mul(price_fp)
    _dbg(
        f"msat->units: msat={msat} price={units_per_btc} "
        f"btc={amount_btc} units@{ARITH_SCALE}={amount_units}"
    )
    return amount_units.scale_to(units_per_btc.scale)


def milli_satoshi_to_units(msat: int, units_per_btc: FixedPoint) -> int:
    """Convert `msat` to an integer number of asset units at the price's scale.

    Raises DivisionByZeroError for a zero price and ArithmeticOverflowError when the
    result exceeds uint64.
    """
    units = milli_satoshi_to_units_fp(msat, units_per_btc)
    return narrow(units.value)


# ----------------------------
# asset units -> msat
# ----------------------------

AssetUnits = Union[int, FixedPoint]


def units_to_milli_satoshi(asset_units: AssetUnits, units_per_btc: FixedPoint) -> int:
    """Convert asset units to an integer msat amount.

    `asset_units` is either a FixedPoint (at any scale) or a plain int, which is taken
    to be expressed at the price's scale (the asset's decimal display).
    """
    _check_price(units_per_btc)
    if isinstance(asset_units, FixedPoint):
        units_fp = asset_units
    else:
        _check_amount("asset_units", asset_units)
        units_fp = FixedPoint.from_int(asset_units, units_per_btc.scale)

    units_fp = units_fp.scale_to(ARITH_SCALE)
    price_fp = units_per_btc.scale_to(ARITH_SCALE)

    amount_btc = units_fp.div(price_fp)
    amount_msat = amount_btc.mul(_one_btc())
    _dbg(
        f"units->msat: units={asset_units} price={units_per_btc} "
        f"btc={amount_btc} msat@{ARITH_SCALE}={amount_msat}"
    )
    return amount_msat.scale_to(0).to_uint64()


# ----------------------------
# cross rate (asset A -> msat -> asset B)
# ----------------------------

def convert_units(asset_units: AssetUnits, from_price: FixedPoint,
                  to_price: FixedPoint) -> int:
    """Convert units of one asset into units of another via their BTC prices.

    The result is expressed at `to_price.scale`. Both legs truncate, so the result
    never exceeds the exact cross-rate value.
    """
    msat = units_to_milli_satoshi(asset_units, from_price)
    _dbg(f"cross: {asset_units} @ {from_price} -> {msat} msat -> @ {to_price}")
    return milli_satoshi_to_units(msat, to_price)


__all__ = [
    "AssetUnits",
    "milli_satoshi_to_units",
    "milli_satoshi_to_units_fp",
    "units_to_milli_satoshi",
    "convert_units",
]

"""
Decimal display limits (diagnostics).

For a given BTC price and asset decimal display, compute what the fixed-point
conversion can and cannot represent: how many BTC worth of units fit in a uint64
supply, the smallest invoice that buys at least one unit, and how much rounding a
multi-part payment can accumulate. These numbers help pick a decimal display for a
new asset; they are not part of the conversion contract itself.

Prices are given in cents per BTC (scale 2), as a fiat-pegged asset would quote them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence

from .core.constants import (
    ARITH_SCALE,
    DEFAULT_NUM_SHARDS,
    MAX_DECIMAL_DISPLAY,
    MIN_DECIMAL_DISPLAY,
    MSAT_PER_BTC,
    MSAT_PER_SAT,
    UINT64_MAX,
)
from .core.exc import AmountDomainError, DivisionByZeroError
from .core.fixedpoint import FixedPoint
from .convert import milli_satoshi_to_units, units_to_milli_satoshi

#: Sample BTC prices in USD cents, from 1k to 50M USD/BTC.
DEFAULT_BTC_PRICES_CENTS: tuple = (
    1_000_00,
    3_456_78,
    5_000_00,
    10_000_00,
    20_000_00,
    34_567_89,
    50_000_00,
    50_702_12,
    100_000_00,
    345_678_90,
    500_000_00,
    1_000_000_00,
    3_456_789_01,
    5_000_000_00,
    10_000_000_00,
    34_567_890_12,
    50_000_000_00,
)

#: Invoice ladder (msat) probed for the smallest payable amount.
INVOICE_AMOUNTS_MSAT: tuple = (
    1, 2, 3, 5,
    10, 34, 50,
    100, 345, 500,
    1_000, 3_456, 5_000,
    10_000, 34_567, 50_000,
    100_000, 345_678, 500_000,
    1_000_000, 3_456_789, 5_000_000,
    10_000_000, 20_000_000, 34_567_890, 50_000_000,
    100_000_000, 345_678_901, 500_000_000,
    1_000_000_000, 3_456_789_012, 5_000_000_000,
    10_000_000_000, 34_567_890_123, 50_000_000_000,
    100_000_000_000, 345_678_901_234, 500_000_000_000,
)


@dataclass(frozen=True)
class DecimalDisplayLimits:
    """Boundaries of the conversion at one (price, decimal display) pair.

    Fields:
    - price_scaled: units per BTC at the decimal display.
    - decimal_display: number of fractional digits of one asset unit.
    - max_units_btc: BTC value of a full uint64 supply of units.
    - smallest_payable_msat: smallest ladder invoice yielding >= 1 unit (None if none).
    - msat_per_unit: msat per single asset unit, at ARITH_SCALE.
    - max_mpp_rounding_msat: msat_per_unit * num_shards, truncated.
    - num_shards: shard count used for the MPP bound.
    - msat_per_whole_unit: msat for one whole unit (10^decimal_display units).
    - units_per_sat: asset units bought by 1 sat.
    """

    price_scaled: FixedPoint
    decimal_display: int
    max_units_btc: int
    smallest_payable_msat: Optional[int]
    msat_per_unit: FixedPoint
    max_mpp_rounding_msat: int
    num_shards: int
    msat_per_whole_unit: int
    units_per_sat: int

    def summary(self) -> str:
        return (
            f"decimalDisplay={self.decimal_display} "
            f"1 BTC={self.price_scaled.value} units "
            f"max supply={self.max_units_btc} BTC "
            f"min invoice={self.smallest_payable_msat} mSAT "
            f"max MPP rounding={self.max_mpp_rounding_msat} mSAT (@{self.num_shards} shards)"
        )


def smallest_payable_msat(price_scaled: FixedPoint,
                          ladder: Sequence[int] = INVOICE_AMOUNTS_MSAT) -> Optional[int]:
    """Return the smallest amount in `ladder` that converts to at least one unit."""
    for amount in sorted(ladder):
        if milli_satoshi_to_units(amount, price_scaled) > 0:
            return amount
    return None


def msat_per_unit(price_scaled: FixedPoint) -> FixedPoint:
    """Msat value of one asset unit at `price_scaled.scale`, truncated at ARITH_SCALE."""
    if price_scaled.is_zero():
        raise DivisionByZeroError("price must be non-zero")
    one_btc = FixedPoint.from_int(MSAT_PER_BTC).scale_to(ARITH_SCALE)
    units = FixedPoint.from_int(price_scaled.value).scale_to(ARITH_SCALE)
    return one_btc.div(units)


def calc_limits(price_cents_per_btc: int, decimal_display: int,
                num_shards: int = DEFAULT_NUM_SHARDS) -> DecimalDisplayLimits:
    """Compute the DecimalDisplayLimits for a BTC price given in cents."""
    if num_shards <= 0:
        raise AmountDomainError(f"num_shards must be > 0, got {num_shards}")

    price_scaled = FixedPoint.from_int(price_cents_per_btc, 2).scale_to(decimal_display)
    if price_scaled.is_zero():
        raise DivisionByZeroError(
            f"price {price_cents_per_btc} cents/BTC is zero at decimal display {decimal_display}"
        )

    per_unit = msat_per_unit(price_scaled)
    shards = FixedPoint.from_int(num_shards).scale_to(ARITH_SCALE)
    one_whole_unit = FixedPoint.from_int(1).scale_to(decimal_display)

    return DecimalDisplayLimits(
        price_scaled=price_scaled,
        decimal_display=decimal_display,
        max_units_btc=UINT64_MAX // price_scaled.value,
        smallest_payable_msat=smallest_payable_msat(price_scaled),
        msat_per_unit=per_unit,
        max_mpp_rounding_msat=per_unit.mul(shards).scale_to(0).value,
        num_shards=num_shards,
        msat_per_whole_unit=units_to_milli_satoshi(one_whole_unit, price_scaled),
        units_per_sat=milli_satoshi_to_units(MSAT_PER_SAT, price_scaled),
    )


def boundary_table(prices_cents: Iterable[int] = DEFAULT_BTC_PRICES_CENTS,
                   max_decimal_display: int = MAX_DECIMAL_DISPLAY,
                   num_shards: int = DEFAULT_NUM_SHARDS) -> Iterator[DecimalDisplayLimits]:
    """Yield limits for every price and every decimal display from 2 up to the max."""
    for cents in prices_cents:
        for decimal_display in range(MIN_DECIMAL_DISPLAY, max_decimal_display + 1):
            yield calc_limits(cents, decimal_display, num_shards)


__all__ = [
    "DEFAULT_BTC_PRICES_CENTS",
    "INVOICE_AMOUNTS_MSAT",
    "DecimalDisplayLimits",
    "smallest_payable_msat",
    "msat_per_unit",
    "calc_limits",
    "boundary_table",
]

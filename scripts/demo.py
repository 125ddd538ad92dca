"""Demo: msat <-> asset unit conversions and decimal display limits.

Scenarios covered:
S1) USD asset (decimal display 6) at 5,000 and 50,702.12 USD/BTC: msat -> units -> msat
S2) JPY asset (decimal display 4) at 7,341,847 JPY/BTC
S3) Cross rate USD -> JPY through msat
L)  Decimal display limits table for a range of BTC prices
"""
from __future__ import annotations

from typing import Callable, List, Optional
import argparse

from rfq_math import FixedPoint, milli_satoshi_to_units, units_to_milli_satoshi, convert_units
from rfq_math.core import fmt_fixed, fmt_msat
from rfq_math.limits import DEFAULT_BTC_PRICES_CENTS, boundary_table

# ---------- pretty printers ----------

def print_round_trip(title: str, msat: int, price: FixedPoint) -> None:
    units = milli_satoshi_to_units(msat, price)
    back = units_to_milli_satoshi(units, price)
    print(f"\n=== {title} ===")
    print(f"- price: {fmt_fixed(price)} units/BTC (scale {price.scale})")
    print(f"- {fmt_msat(msat)} -> {units} units ({fmt_fixed(FixedPoint(units, price.scale))})")
    print(f"- {units} units -> {fmt_msat(back)} (round-trip loss {msat - back} mSAT)")


def print_cross(title: str, whole_units: int, from_price: FixedPoint, to_price: FixedPoint) -> None:
    units = FixedPoint.from_int(whole_units).scale_to(from_price.scale)
    out_units = convert_units(units, from_price, to_price)
    print(f"\n=== {title} ===")
    print(f"- {whole_units} @ {fmt_fixed(from_price)} -> {fmt_fixed(FixedPoint(out_units, to_price.scale))} @ {fmt_fixed(to_price)}")


def print_limits(prices_cents: List[int], max_decimal_display: int, num_shards: int) -> None:
    last_cents: Optional[int] = None
    for lim in boundary_table(prices_cents, max_decimal_display, num_shards):
        cents = lim.price_scaled.scale_to(2).value
        if cents != last_cents:
            print(f"-------------\nBTC price: {cents // 100} USD\n-------------")
            last_cents = cents
        print(
            f"decimalDisplay: {lim.decimal_display}\t{10 ** lim.decimal_display} units = 1 USD, "
            f"1 BTC = {lim.price_scaled.value} units\n"
            f"  Max issuable units:          can represent {lim.max_units_btc} BTC\n"
            f"  Min payable invoice amount:  {lim.smallest_payable_msat} mSAT\n"
            f"  Max MPP rounding error:      {lim.max_mpp_rounding_msat} mSAT (@{lim.num_shards} shards)\n"
            f"  Satoshi per USD:             {lim.msat_per_whole_unit // 1000}\n"
            f"  mSAT per asset unit:         {fmt_fixed(lim.msat_per_unit)}\n"
            f"  Asset units per satoshi:     {lim.units_per_sat}"
        )


# ---------- registry ----------

class Scenario:
    def __init__(self, sid: str, fn: Callable[[], None]):
        self.sid = sid
        self.fn = fn


scenarios: List[Scenario] = []


def add(sid: str, fn: Callable[[], None]) -> None:
    scenarios.append(Scenario(sid, fn))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="RFQ fixed-point conversion demo")
    parser.add_argument("--only", type=str, default=None, help="Comma-separated scenario ids to run (e.g., S1,L)")
    parser.add_argument("--skip", type=str, default=None, help="Comma-separated scenario ids to skip")
    parser.add_argument("--max-decimal-display", type=int, default=8, help="Largest decimal display in the limits table")
    parser.add_argument("--shards", type=int, default=16, help="MPP shard count for the rounding bound")
    args = parser.parse_args()

    usd_5k = FixedPoint(5_000_00, 2).scale_to(6)
    usd_50k = FixedPoint(50_702_12, 2).scale_to(6)
    jpy = FixedPoint(7_341_847, 0).scale_to(4)

    add("S1", lambda: (
        print_round_trip("S1a) 200,000 mSAT @ 5,000 USD/BTC", 200_000, usd_5k),
        print_round_trip("S1b) 1,973 mSAT @ 50,702.12 USD/BTC", 1_973, usd_50k),
    ))
    add("S2", lambda: print_round_trip("S2) 5,000 mSAT @ 7,341,847 JPY/BTC", 5_000, jpy))
    add("S3", lambda: print_cross(
        "S3) 100 USD -> JPY", 100, usd_50k, jpy,
    ))
    add("L", lambda: print_limits(
        list(DEFAULT_BTC_PRICES_CENTS), args.max_decimal_display, args.shards,
    ))

    # --------------- Filter & run ---------------
    only_set = None
    skip_set = None
    if args.only:
        only_set = set([s.strip() for s in args.only.split(',') if s.strip()])
    if args.skip:
        skip_set = set([s.strip() for s in args.skip.split(',') if s.strip()])

    for sc in scenarios:
        if only_set is not None and sc.sid not in only_set:
            continue
        if skip_set is not None and sc.sid in skip_set:
            continue
        sc.fn()

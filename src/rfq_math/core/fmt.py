"""
Formatting helpers and Decimal bridges (non-core arithmetic).

Core arithmetic uses integers only. Decimal here is for formatting and
convenience (tests, logs, display, parsing human-entered prices).
"""

from decimal import Decimal, ROUND_DOWN, localcontext

from .exc import AmountDomainError, InvalidScaleError
from .constants import MSAT_PER_SAT
from .fixedpoint import FixedPoint

# Debug printing control (formatting layer)
DEBUG_FMT = False

def _dbg(msg: str) -> None:
    if DEBUG_FMT:
        print(msg)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def fmt_fixed(fp: FixedPoint) -> str:
    """Format a FixedPoint with exactly `scale` fractional digits.

    The output is exact (no float round-trip), e.g.:
      FixedPoint(123456, 2)  -> '1234.56'
      FixedPoint(12, 6)      -> '0.000012'
      FixedPoint(7, 0)       -> '7'
    """
    if not isinstance(fp, FixedPoint):
        raise AmountDomainError("fmt_fixed(): expected FixedPoint")
    return str(fp)


def fmt_msat(msat: int) -> str:
    """Render a milli-satoshi amount as satoshis with three fractional digits."""
    if not isinstance(msat, int):
        raise AmountDomainError("fmt_msat: msat must be int")
    if msat < 0:
        raise AmountDomainError("fmt_msat: msat must be >= 0")
    sat, rem = divmod(msat, MSAT_PER_SAT)
    return f"{sat}.{rem:03d} sat"


# ---------------------------------------------------------------------------
# Decimal bridges (I/O only)
# ---------------------------------------------------------------------------

def fixed_to_decimal(fp: FixedPoint) -> Decimal:
    """Convert a FixedPoint into a Decimal for logging/printing only."""
    if fp is None:
        raise AmountDomainError("fixed_to_decimal(): received None")
    if not isinstance(fp, FixedPoint):
        raise AmountDomainError("fixed_to_decimal(): unsupported type")
    return fp.to_decimal()


def fixed_from_decimal(x: Decimal, scale: int) -> FixedPoint:
    """Bridge from Decimal (non-negative only) to a FixedPoint at `scale`.

    Digits beyond `scale` are truncated toward zero, matching FixedPoint.scale_to.
    """
    if not isinstance(x, Decimal):
        raise AmountDomainError("fixed_from_decimal(): expected Decimal")
    if x.is_nan() or x.is_infinite():
        raise AmountDomainError("fixed_from_decimal(): invalid Decimal")
    if x < 0:
        raise AmountDomainError("fixed_from_decimal(): negative not allowed")
    if not isinstance(scale, int) or scale < 0:
        raise InvalidScaleError(scale)
    with localcontext() as ctx:
        # scaleb rounds to context precision; keep every digit.
        ctx.prec = max(ctx.prec, len(x.as_tuple().digits) + scale + 1)
        shifted = x.scaleb(scale).to_integral_value(rounding=ROUND_DOWN)
    _dbg(f"fixed_from_decimal: x={x}, scale={scale} -> {shifted}")
    return FixedPoint(int(shifted), scale)


__all__ = [
    "fmt_fixed",
    "fmt_msat",
    "fixed_to_decimal",
    "fixed_from_decimal",
]

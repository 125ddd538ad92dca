"""
FixedPoint primitive: unsigned integer magnitude with an explicit decimal scale.

- FixedPoint(value, scale) represents value / 10^scale.
- Non-negative domain: value >= 0 and scale >= 0; violations are rejected at input.
- No canonical form: (100, 2) and (1, 0) are distinct values with equal real meaning.
  Equality is structural; use `equals()` to compare real values.
- Rounding semantics: every precision-reducing step truncates toward zero.
- Width: magnitudes are Python ints (unbounded). Narrowing to a wire width happens
  only at the boundary (`to_int`, `to_uint64`) and is checked, never wrapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .constants import UINT64_BITS

# Import core exceptions
from .exc import (
    AmountDomainError,
    InvalidScaleError,
    ScaleMismatchError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)

# Debug printing control
DEBUG_FIXEDPOINT = False

def _dbg(msg: str) -> None:
    if DEBUG_FIXEDPOINT:
        print(msg)


# ----------------------------
# Integer helpers (centralised)
# ----------------------------

def _ten_pow(n: int) -> int:
    """Return 10**n for n >= 0 (internal helper)."""
    if n < 0:
        raise ValueError("_ten_pow expects non-negative exponent")
    return 10 ** n


def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise AmountDomainError("_floor_div expects a>=0 and b>0")
    return a // b


def _check_scale(scale: int) -> None:
    if not isinstance(scale, int) or isinstance(scale, bool):
        raise AmountDomainError(f"scale must be int, got {type(scale).__name__}")
    if scale < 0:
        raise InvalidScaleError(scale)


def narrow(value: int, bits: int = UINT64_BITS) -> int:
    """Return `value` unchanged if it fits an unsigned `bits`-wide integer.

    Raises ArithmeticOverflowError otherwise; nothing is ever truncated or wrapped.
    """
    if bits <= 0:
        raise AmountDomainError(f"bit width must be positive, got {bits}")
    if value < 0:
        raise AmountDomainError(f"cannot narrow negative value {value} to uint{bits}")
    if value >> bits:
        raise ArithmeticOverflowError(value, bits)
    return value


# ----------------------------
# FixedPoint
# ----------------------------

@dataclass(frozen=True)
class FixedPoint:
    """Fixed-point decimal: value * 10^-scale (non-negative domain)."""
    value: int
    scale: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise AmountDomainError(f"FixedPoint value must be int, got {type(self.value).__name__}")
        if self.value < 0:
            raise AmountDomainError("FixedPoint value must be >= 0")
        _check_scale(self.scale)

    # ------------- constructors -------------

    @classmethod
    def from_int(cls, raw: int, scale: int = 0) -> "FixedPoint":
        """Wrap a raw integer magnitude at `scale` without rescaling it.

        `FixedPoint.from_int(123_456, 2)` is 1234.56; to express the whole number
        1234 at scale 2 use `FixedPoint.from_int(1234).scale_to(2)`.
        """
        return cls(raw, scale)

    @staticmethod
    def zero(scale: int = 0) -> "FixedPoint":
        return FixedPoint(0, scale)

    # ------------- conversions -------------

    def to_decimal(self) -> Decimal:
        """Exact Decimal view with `scale` fractional digits, for logs/printing only."""
        return Decimal(str(self))

    def __str__(self) -> str:
        if self.scale == 0:
            return str(self.value)
        whole, frac = divmod(self.value, _ten_pow(self.scale))
        return f"{whole}.{frac:0{self.scale}d}"

    def to_int(self, bits: int = UINT64_BITS) -> int:
        """Return the magnitude as a plain integer; requires scale 0.

        The result is checked against an unsigned `bits`-wide range.
        """
        if self.scale != 0:
            raise ScaleMismatchError("to_int", 0, self.scale)
        return narrow(self.value, bits)

    def to_uint64(self) -> int:
        return self.to_int(UINT64_BITS)

    # ------------- predicates -------------

    def is_zero(self) -> bool:
        return self.value == 0

    def equals(self, other: "FixedPoint") -> bool:
        """Compare real values regardless of representation (exact, no truncation)."""
        if not isinstance(other, FixedPoint):
            raise AmountDomainError("FixedPoint comparison requires FixedPoint operands")
        s = max(self.scale, other.scale)
        return self.scale_to(s).value == other.scale_to(s).value

    # ------------- scaling -------------

    def scale_to(self, new_scale: int) -> "FixedPoint":
        """Return the same real value expressed with `new_scale` fractional digits.

        Scaling up is exact. Scaling down truncates toward zero: discarded digits are
        dropped regardless of their value, so the result never exceeds the input.
        """
        _check_scale(new_scale)
        diff = new_scale - self.scale
        if diff == 0:
            return self
        if diff > 0:
            return FixedPoint(self.value * _ten_pow(diff), new_scale)
        return FixedPoint(_floor_div(self.value, _ten_pow(-diff)), new_scale)

    # ------------- arithmetic (integer domain) -------------

    def _require_same_scale(self, op: str, other: "FixedPoint") -> None:
        if not isinstance(other, FixedPoint):
            raise AmountDomainError(f"FixedPoint.{op} requires FixedPoint operands")
        if other.scale != self.scale:
            raise ScaleMismatchError(op, self.scale, other.scale)

    def mul(self, other: "FixedPoint") -> "FixedPoint":
        """Product of the represented values at the shared scale, truncated toward zero."""
        self._require_same_scale("mul", other)
        product = self.value * other.value
        q = _floor_div(product, _ten_pow(self.scale))
        _dbg(f"mul: {self.value} * {other.value} / 10^{self.scale} -> {q}")
        return FixedPoint(q, self.scale)

    def div(self, other: "FixedPoint") -> "FixedPoint":
        """Quotient of the represented values at the shared scale, truncated toward zero."""
        self._require_same_scale("div", other)
        if other.value == 0:
            raise DivisionByZeroError(f"division of {self} by zero")
        num = self.value * _ten_pow(self.scale)
        q = _floor_div(num, other.value)
        _dbg(f"div: {self.value} * 10^{self.scale} / {other.value} -> {q}")
        return FixedPoint(q, self.scale)


__all__ = [
    "FixedPoint",
    "narrow",
]

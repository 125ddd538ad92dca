"""
Core exception types for rfq_math.core.

These are dependency-free and may be imported by all core modules.
"""

__all__ = [
    "RfqMathError",
    "AmountDomainError",
    "InvalidScaleError",
    "ScaleMismatchError",
    "DivisionByZeroError",
    "ArithmeticOverflowError",
]


class RfqMathError(Exception):
    """Base class for all errors raised by rfq_math."""
    pass


class AmountDomainError(RfqMathError):
    """Raised when inputs violate the non-negative domain or basic preconditions."""
    pass


class InvalidScaleError(RfqMathError):
    """Raised when a negative scale is supplied to a constructor or rescale."""

    def __init__(self, scale):
        super().__init__(f"scale must be >= 0, got {scale}")
        self.scale = scale


class ScaleMismatchError(RfqMathError):
    """Raised when an operation requires operands at a particular scale."""

    def __init__(self, op, expected, got):
        super().__init__(f"{op}: expected scale {expected}, got {got}")
        self.op = op
        self.expected = expected
        self.got = got


class DivisionByZeroError(RfqMathError, ZeroDivisionError):
    """Raised when a FixedPoint divisor (most commonly a price) is zero."""
    pass


class ArithmeticOverflowError(RfqMathError, OverflowError):
    """Raised when a magnitude does not fit the requested unsigned width.

    Attributes
    ----------
    value : int
        The magnitude that failed to narrow.
    bits : int
        Width of the target unsigned integer.
    """

    def __init__(self, value, bits):
        super().__init__(f"value {value} does not fit in uint{bits}")
        self.value = value
        self.bits = bits

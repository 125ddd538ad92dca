import dataclasses
import pytest
from decimal import Decimal

from rfq_math.core.fixedpoint import FixedPoint, narrow
from rfq_math.core.constants import UINT64_MAX
from rfq_math.core.exc import (
    AmountDomainError,
    InvalidScaleError,
    ScaleMismatchError,
    DivisionByZeroError,
    ArithmeticOverflowError,
)


# -----------------------------
# Construction & validation
# -----------------------------

def test_from_int_keeps_raw_value():
    print("[from_int] 123456 @ scale 2 -> value 123456, scale 2 (1234.56)")
    fp = FixedPoint.from_int(123_456, 2)
    assert fp.value == 123_456
    assert fp.scale == 2
    assert str(fp) == "1234.56"


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda: FixedPoint.from_int(1, -1), "from_int(1, -1)"),
        (lambda: FixedPoint(5, -3), "FixedPoint(5, -3)"),
        (lambda: FixedPoint(5, 2).scale_to(-1), "scale_to(-1)"),
    ],
)
def test_negative_scale_rejected(call, name):
    print(f"[negative-scale] {name} -> expect InvalidScaleError")
    with pytest.raises(InvalidScaleError):
        call()


@pytest.mark.parametrize(
    "call,name",
    [
        (lambda: FixedPoint.from_int(-1, 0), "from_int(-1, 0)"),
        (lambda: FixedPoint(1.5, 0), "FixedPoint(1.5, 0)"),
        (lambda: FixedPoint(1, 2.0), "FixedPoint(1, 2.0)"),
        (lambda: FixedPoint(True, 0), "FixedPoint(True, 0)"),
        (lambda: FixedPoint(1, True), "FixedPoint(1, True)"),
    ],
)
def test_invalid_magnitude_rejected(call, name):
    print(f"[invalid-input] {name} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        call()


def test_fixedpoint_is_immutable():
    fp = FixedPoint(1, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        fp.value = 2  # type: ignore[misc]


def test_equality_is_structural_equals_is_numeric():
    print("[equality] (100, 2) vs (1, 0): distinct representations, same real value")
    a = FixedPoint(100, 2)
    b = FixedPoint(1, 0)
    assert a != b
    assert a.equals(b)
    assert b.equals(a)
    assert not FixedPoint(101, 2).equals(b)


# -----------------------------
# scale_to
# -----------------------------

@pytest.mark.parametrize(
    "fp,new_scale,expected",
    [
        (FixedPoint(1, 0), 12, FixedPoint(1_000_000_000_000, 12)),
        (FixedPoint(9, 0), 4, FixedPoint(90_000, 4)),
        (FixedPoint(123_456, 2), 4, FixedPoint(12_345_600, 4)),
        (FixedPoint(12_345_600, 4), 2, FixedPoint(123_456, 2)),
        # precision loss truncates, never rounds up (1234.56 -> 1234, not 1235)
        (FixedPoint(12_345_600, 6), 2, FixedPoint(1_234, 2)),
        # full loss of value
        (FixedPoint(12, 6), 2, FixedPoint(0, 2)),
        (FixedPoint(99_999, 5), 0, FixedPoint(0, 0)),
    ],
)
def test_scale_to(fp, new_scale, expected):
    out = fp.scale_to(new_scale)
    print(f"[scale_to] {fp} -> scale {new_scale}: got {out}, expected {expected}")
    assert out == expected


@pytest.mark.parametrize("v", [0, 1, 7, 123_456_789, UINT64_MAX])
@pytest.mark.parametrize("s1", [0, 2, 6])
@pytest.mark.parametrize("s2", [6, 11, 18])
def test_scale_up_then_down_is_lossless(v, s1, s2):
    fp = FixedPoint.from_int(v, s1)
    assert fp.scale_to(s2).scale_to(s1) == fp


@pytest.mark.parametrize("scale", [0, 2, 11])
def test_scale_to_same_scale_is_identity(scale):
    fp = FixedPoint(123_456, scale)
    assert fp.scale_to(scale) is fp


def test_repeated_down_scaling_loses_no_more_than_single_step():
    print("[scale_to] 9.87654321 -> 6 -> 2 equals 9.87654321 -> 2")
    fp = FixedPoint(987_654_321, 8)
    assert fp.scale_to(6).scale_to(2) == fp.scale_to(2) == FixedPoint(987, 2)


# -----------------------------
# mul / div
# -----------------------------

def test_mul_basic_and_truncation():
    print("[mul] 1.50 * 2.00 = 3.00; 0.333 * 0.333 = 0.110 (0.110889 truncated)")
    assert FixedPoint(150, 2).mul(FixedPoint(200, 2)) == FixedPoint(300, 2)
    assert FixedPoint(333, 3).mul(FixedPoint(333, 3)) == FixedPoint(110, 3)


def test_mul_wide_intermediate_does_not_wrap():
    print("[mul] uint64 max squared at scale 0 is exact; narrowing it fails loudly")
    sq = FixedPoint(UINT64_MAX, 0).mul(FixedPoint(UINT64_MAX, 0))
    assert sq.value == UINT64_MAX * UINT64_MAX
    with pytest.raises(ArithmeticOverflowError):
        sq.to_uint64()


def test_div_basic_and_truncation():
    print("[div] 1.000 / 3.000 = 0.333; 10.00 / 4.00 = 2.50")
    assert FixedPoint(1_000, 3).div(FixedPoint(3_000, 3)) == FixedPoint(333, 3)
    assert FixedPoint(1_000, 2).div(FixedPoint(400, 2)) == FixedPoint(250, 2)


def test_div_by_zero_raises():
    print("[div-by-zero] 5.00 / 0.00 -> DivisionByZeroError (also a ZeroDivisionError)")
    with pytest.raises(DivisionByZeroError):
        FixedPoint(500, 2).div(FixedPoint(0, 2))
    with pytest.raises(ZeroDivisionError):
        FixedPoint(500, 2).div(FixedPoint(0, 2))


@pytest.mark.parametrize("op", ["mul", "div"])
def test_mixed_scale_operands_rejected(op):
    print(f"[{op}-scale-mismatch] scale 2 vs scale 3 -> ScaleMismatchError")
    with pytest.raises(ScaleMismatchError):
        getattr(FixedPoint(100, 2), op)(FixedPoint(100, 3))


@pytest.mark.parametrize("op", ["mul", "div"])
def test_non_fixedpoint_operand_rejected(op):
    with pytest.raises(AmountDomainError):
        getattr(FixedPoint(100, 2), op)(100)


# -----------------------------
# Narrowing & conversions
# -----------------------------

def test_to_uint64_bounds():
    assert FixedPoint(5, 0).to_uint64() == 5
    assert FixedPoint(UINT64_MAX, 0).to_uint64() == UINT64_MAX
    with pytest.raises(ArithmeticOverflowError):
        FixedPoint(UINT64_MAX + 1, 0).to_uint64()


def test_to_uint64_requires_scale_zero():
    with pytest.raises(ScaleMismatchError):
        FixedPoint(500, 2).to_uint64()
    assert FixedPoint(500, 2).scale_to(0).to_uint64() == 5


def test_to_int_custom_width():
    print("[to_int] 2^32 - 1 fits uint32, 2^32 does not")
    assert FixedPoint(2 ** 32 - 1, 0).to_int(bits=32) == 2 ** 32 - 1
    with pytest.raises(ArithmeticOverflowError) as ei:
        FixedPoint(2 ** 32, 0).to_int(bits=32)
    assert ei.value.bits == 32
    assert ei.value.value == 2 ** 32


def test_narrow_rejects_negative_and_bad_width():
    with pytest.raises(AmountDomainError):
        narrow(-1)
    with pytest.raises(AmountDomainError):
        narrow(1, bits=0)


@pytest.mark.parametrize(
    "fp,text",
    [
        (FixedPoint(123_456, 2), "1234.56"),
        (FixedPoint(12, 6), "0.000012"),
        (FixedPoint(7, 0), "7"),
        (FixedPoint(0, 3), "0.000"),
        (FixedPoint(5_070_212_000_000_000, 11), "50702.12000000000"),
    ],
)
def test_str_has_exactly_scale_fraction_digits(fp, text):
    print(f"[str] {fp!r} -> {str(fp)!r}")
    assert str(fp) == text
    assert fp.to_decimal() == Decimal(text)


def test_zero_and_is_zero():
    z = FixedPoint.zero(4)
    assert z.is_zero()
    assert z.scale == 4
    assert not FixedPoint(1, 4).is_zero()

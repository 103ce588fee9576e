"""
Test suite for decimal arithmetic helpers.

Tests safe division, token amount scaling and square-and-multiply
exponentiation.
"""

from decimal import Decimal, localcontext

import pytest

from pool_pricing.numeric import (
    ONE_BD,
    ZERO_BD,
    convert_token_to_decimal,
    exponent_to_decimal,
    fast_exponentiation,
    safe_div,
    to_decimal,
)

TICK_BASE = Decimal("1.0001")
TOLERANCE = Decimal("1e-25")


class TestSafeDiv:
    """Test division with a defined zero result."""

    def test_regular_division(self):
        assert safe_div(Decimal("1"), Decimal("4")) == Decimal("0.25")

    @pytest.mark.parametrize("denominator", [0, Decimal("0"), Decimal("0.000"), "0"])
    def test_zero_denominator_returns_zero(self, denominator):
        """Zero divisor is not an error."""
        result = safe_div(ONE_BD, denominator)
        assert result == ZERO_BD
        assert result.is_zero()

    def test_rounds_to_34_significant_digits(self):
        result = safe_div(ONE_BD, Decimal(3))
        assert result == Decimal("0." + "3" * 34)


class TestToDecimal:
    """Test numeric coercion."""

    def test_accepts_int_str_decimal(self):
        assert to_decimal(5) == Decimal(5)
        assert to_decimal("1.0001") == Decimal("1.0001")
        assert to_decimal(Decimal("2")) == Decimal("2")

    def test_rejects_float(self):
        """Floats would bring binary rounding into persisted values."""
        with pytest.raises(TypeError):
            to_decimal(1.5)


class TestTokenScaling:
    """Test conversion of raw token amounts."""

    def test_exponent_to_decimal(self):
        assert exponent_to_decimal(0) == ONE_BD
        assert exponent_to_decimal(18) == Decimal(10**18)

    def test_exponent_to_decimal_negative(self):
        with pytest.raises(ValueError):
            exponent_to_decimal(-1)

    @pytest.mark.parametrize("amount,decimals,expected", [
        (1000000000, 6, Decimal("1000")),
        (66726312884609397, 18, Decimal("0.066726312884609397")),
        (5, 0, Decimal("5")),
        (0, 18, Decimal("0")),
    ])
    def test_convert_token_to_decimal(self, amount, decimals, expected):
        assert convert_token_to_decimal(amount, decimals) == expected


class TestFastExponentiation:
    """Test square-and-multiply exponentiation."""

    def test_zero_exponent(self):
        assert fast_exponentiation(TICK_BASE, 0) == ONE_BD

    @pytest.mark.parametrize("exponent,expected", [
        (1, Decimal("1.0001")),
        (2, Decimal("1.00020001")),
        (3, Decimal("1.000300030001")),
        (4, Decimal("1.0004000600040001")),
    ])
    def test_small_exponents_are_exact(self, exponent, expected):
        assert fast_exponentiation(TICK_BASE, exponent) == expected

    def test_integer_base(self):
        assert fast_exponentiation(2, 10) == Decimal(1024)
        assert fast_exponentiation(Decimal(2), -2) == Decimal("0.25")

    @pytest.mark.parametrize("n", [1, 7, 100, 195600, 887272, 2**23 - 1, 2**23])
    def test_reciprocal_powers(self, n):
        """base^n * base^-n is 1 within rounding."""
        product = fast_exponentiation(TICK_BASE, n) * fast_exponentiation(TICK_BASE, -n)
        assert abs(product - ONE_BD) < TOLERANCE

    @pytest.mark.parametrize("n", [195600, 196740, -54452, 55732])
    def test_matches_high_precision_reference(self, n):
        """Rounding drift stays far below the persisted precision."""
        with localcontext() as ctx:
            ctx.prec = 80
            reference = TICK_BASE ** n
            relative_error = abs(fast_exponentiation(TICK_BASE, n) - reference) / reference
        assert relative_error < TOLERANCE

    def test_idempotent(self):
        first = fast_exponentiation(TICK_BASE, -887272)
        second = fast_exponentiation(TICK_BASE, -887272)
        assert str(first) == str(second)

    @pytest.mark.parametrize("base", [0, Decimal("-1.0001")])
    def test_non_positive_base_rejected(self, base):
        with pytest.raises(ValueError, match="strictly positive"):
            fast_exponentiation(base, 2)

    @pytest.mark.parametrize("exponent", [2**31, -(2**31) - 1])
    def test_exponent_outside_int32_rejected(self, exponent):
        with pytest.raises(ValueError, match="32-bit"):
            fast_exponentiation(TICK_BASE, exponent)

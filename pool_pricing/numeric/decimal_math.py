"""
Fixed-point decimal helpers shared by the pricing and tick modules.

Every value that ends up persisted by the indexer goes through these helpers so
that rounding is identical across runs:

- One module-level ``decimal.Context`` (34 significant digits, half-even)
- ``safe_div`` returns an exact zero instead of raising on a zero divisor
- ``fast_exponentiation`` rounds after every multiply, LSB-first
"""

from decimal import Context, Decimal, ROUND_HALF_EVEN, localcontext
from typing import Union

DECIMAL_PRECISION = 34

DECIMAL_CONTEXT = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=999_999,
    Emin=-999_999,
)

ZERO_BI = 0
ONE_BI = 1
ZERO_BD = Decimal(0)
ONE_BD = Decimal(1)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

DecimalLike = Union[Decimal, int, str]


def to_decimal(value: DecimalLike) -> Decimal:
    """
    Convert an int, str or Decimal to Decimal.

    Floats are rejected: their binary representation would leak into the
    persisted values.

    Raises:
        TypeError: If value is a float or an unsupported type
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Refusing to convert {type(value).__name__} to Decimal: {value!r}")
    if isinstance(value, (int, str)):
        return Decimal(value)
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")


def safe_div(numerator: DecimalLike, denominator: DecimalLike) -> Decimal:
    """Divide, returning exactly zero when the denominator is zero."""
    denominator = to_decimal(denominator)
    if denominator == ZERO_BD:
        return ZERO_BD
    with localcontext(DECIMAL_CONTEXT):
        return to_decimal(numerator) / denominator


def exponent_to_decimal(decimals: int) -> Decimal:
    """Return 10**decimals as an exact Decimal."""
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return Decimal(10**decimals)


def convert_token_to_decimal(amount: int, decimals: int) -> Decimal:
    """
    Scale a raw token amount (atoms) to human units.

    Args:
        amount: Raw integer amount from an event
        decimals: Token decimals

    Returns:
        amount / 10**decimals, or the amount itself for zero-decimal tokens
    """
    if decimals == ZERO_BI:
        return Decimal(amount)
    with localcontext(DECIMAL_CONTEXT):
        return Decimal(amount) / exponent_to_decimal(decimals)


def fast_exponentiation(base: DecimalLike, exponent: int) -> Decimal:
    """
    Raise base to an integer power by square-and-multiply.

    The loop walks the exponent bits from least significant upwards. When a
    bit is set the running result is multiplied by the current square, then the
    square is squared. Each multiply is rounded in DECIMAL_CONTEXT, so the order
    of operations is part of the result.

    Negative exponents are computed as safe_div(1, base ** -exponent).

    Args:
        base: Strictly positive decimal base
        exponent: 32-bit signed integer exponent

    Returns:
        base ** exponent

    Raises:
        ValueError: If base is not positive or exponent is outside int32
    """
    base = to_decimal(base)
    if base <= ZERO_BD:
        raise ValueError(f"base must be strictly positive, got {base}")
    if exponent < INT32_MIN or exponent > INT32_MAX:
        raise ValueError(f"exponent {exponent} does not fit in a signed 32-bit integer")

    if exponent == 0:
        return ONE_BD
    if exponent < 0:
        return safe_div(ONE_BD, fast_exponentiation(base, -exponent))

    result = ONE_BD
    square = base
    remaining = exponent
    with localcontext(DECIMAL_CONTEXT):
        while remaining > 0:
            if remaining & 1:
                result = result * square
            remaining >>= 1
            if remaining:
                square = square * square
    return result

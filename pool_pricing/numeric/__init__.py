"""Decimal arithmetic used by pricing and tick computations."""

from .decimal_math import (
    DECIMAL_CONTEXT,
    ONE_BD,
    ONE_BI,
    ZERO_BD,
    ZERO_BI,
    convert_token_to_decimal,
    exponent_to_decimal,
    fast_exponentiation,
    safe_div,
    to_decimal,
)

__all__ = [
    "DECIMAL_CONTEXT",
    "ZERO_BD",
    "ONE_BD",
    "ZERO_BI",
    "ONE_BI",
    "to_decimal",
    "safe_div",
    "exponent_to_decimal",
    "convert_token_to_decimal",
    "fast_exponentiation",
]

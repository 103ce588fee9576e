"""
sqrtPriceX96 to token price conversion.

sqrtPriceX96 is sqrt(token1/token0) in Q64.96 fixed point, so its square is the
raw atom ratio with 192 fractional bits:

    price1 = sqrtPriceX96^2 / 2^192 * 10^decimals0 / 10^decimals1
    price0 = 1 / price1
"""

from decimal import Decimal, localcontext
from typing import Tuple

from ..numeric import DECIMAL_CONTEXT, ONE_BD, exponent_to_decimal, safe_div
from .types import Token

Q192 = 2**192


def sqrt_price_to_token_prices(
    sqrt_price_x96: int,
    token0_decimals: int,
    token1_decimals: int,
) -> Tuple[Decimal, Decimal]:
    """
    Convert a raw pool price into human-scaled token prices.

    The square is taken on the integer before any decimal conversion, then a
    single division by 2^192.

    Args:
        sqrt_price_x96: Raw sqrt price from Initialize/Swap events
        token0_decimals: Decimals of token0
        token1_decimals: Decimals of token1

    Returns:
        (price0, price1): token0 per token1 and token1 per token0
    """
    if sqrt_price_x96 < 0:
        raise ValueError(f"sqrtPriceX96 must be non-negative, got {sqrt_price_x96}")

    numerator = Decimal(sqrt_price_x96 * sqrt_price_x96)
    denominator = Decimal(Q192)

    with localcontext(DECIMAL_CONTEXT):
        price1 = (
            numerator
            / denominator
            * exponent_to_decimal(token0_decimals)
            / exponent_to_decimal(token1_decimals)
        )

    price0 = safe_div(ONE_BD, price1)
    return price0, price1


def token_prices_for_pool(sqrt_price_x96: int, token0: Token, token1: Token) -> Tuple[Decimal, Decimal]:
    """Same as sqrt_price_to_token_prices, reading decimals from token snapshots."""
    return sqrt_price_to_token_prices(sqrt_price_x96, token0.decimals, token1.decimals)

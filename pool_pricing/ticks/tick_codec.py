"""
Tick index decoding and tick price seeding.

Key concepts:
- Tick: logarithmic price index where price = 1.0001^tick
- Event tick fields arrive as hex words; only the low 24 bits carry the
  int24 value, in two's complement
- price0 at a tick is the raw token1/token0 ratio before decimals scaling,
  price1 is its reciprocal
"""

import logging
from decimal import Decimal
from typing import Optional, Tuple, Union

from ..config import get_config
from ..numeric import ONE_BD, fast_exponentiation, safe_div
from ..pricing.types import Tick

logger = logging.getLogger(__name__)

INT24_SIGN_BIT = 2**23  # 8388608
INT24_MODULUS = 2**24  # 16777216
INT24_HEX_DIGITS = 6

MIN_INT24 = -INT24_SIGN_BIT
MAX_INT24 = INT24_SIGN_BIT - 1


def decode_tick_index(hex_value: Union[str, bytes]) -> int:
    """
    Decode an int24 tick from a hex encoding of any length.

    Only the trailing 6 hex digits are read. Values with the sign bit set are
    shifted down by 2^24.

    Args:
        hex_value: Hex string (with or without 0x) or raw bytes

    Returns:
        Tick index in [-2^23, 2^23 - 1]
    """
    if isinstance(hex_value, (bytes, bytearray)):
        hex_value = bytes(hex_value).hex()

    value = int(hex_value[-INT24_HEX_DIGITS:], 16)
    if value >= INT24_SIGN_BIT:
        value -= INT24_MODULUS
    return value


def encode_tick_index(tick_idx: int) -> str:
    """Encode a tick as 6 lowercase hex digits of int24 two's complement."""
    if tick_idx < MIN_INT24 or tick_idx > MAX_INT24:
        raise ValueError(f"tick {tick_idx} out of int24 range")
    return format(tick_idx % INT24_MODULUS, "06x")


def tick_to_prices(tick_idx: int, base: Optional[Decimal] = None) -> Tuple[Decimal, Decimal]:
    """
    Compute the (price0, price1) pair for a tick.

    Args:
        tick_idx: Tick index
        base: Tick base, defaults to the configured pricing tick_base

    Returns:
        (base^tick, 1 / base^tick)
    """
    if base is None:
        base = get_config().pricing.tick_base

    price0 = fast_exponentiation(base, tick_idx)
    price1 = safe_div(ONE_BD, price0)
    return price0, price1


def tick_id(pool_id: str, tick_idx: int) -> str:
    """Composite tick identity: <pool>#<tick>."""
    return f"{pool_id}#{tick_idx}"


def create_tick(
    pool_id: str,
    tick_idx: int,
    block_number: int = 0,
    timestamp: int = 0,
    base: Optional[Decimal] = None,
) -> Tick:
    """
    Build a new Tick record with seeded prices and zeroed counters.

    Args:
        pool_id: Pool address
        tick_idx: Tick index
        block_number: Block of the first event referencing the tick
        timestamp: Timestamp of that block
        base: Tick base, defaults to the configured pricing tick_base

    Returns:
        Tick ready to be saved by the caller
    """
    price0, price1 = tick_to_prices(tick_idx, base)
    logger.debug(f"Seeding tick {tick_idx} on {pool_id}: price0={price0}")
    return Tick(
        id=tick_id(pool_id, tick_idx),
        pool_id=pool_id,
        tick_idx=tick_idx,
        price0=price0,
        price1=price1,
        created_at_timestamp=timestamp,
        created_at_block_number=block_number,
    )

"""Tick index codec and per-tick price seeding."""

from .tick_codec import (
    create_tick,
    decode_tick_index,
    encode_tick_index,
    tick_id,
    tick_to_prices,
)

__all__ = [
    "decode_tick_index",
    "encode_tick_index",
    "tick_to_prices",
    "tick_id",
    "create_tick",
]

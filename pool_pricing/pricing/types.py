"""
Core types for pricing and tick computations.

Value snapshots of the indexer's persisted entities. The caller loads them from
its store, passes them in, and saves whatever fields it chooses to update.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

BUNDLE_ID = "1"


@dataclass
class Token:
    """
    ERC20 token snapshot.

    Attributes:
        id: Token contract address (lowercase)
        decimals: Token decimals
        derived_native: Price of one token in the native unit
        whitelist_pools: Pools pairing this token with a whitelisted token,
            in the order they were created
        symbol: Token symbol (optional)
        name: Token name (optional)
    """

    id: str
    decimals: int
    derived_native: Decimal = Decimal(0)
    whitelist_pools: List[str] = field(default_factory=list)
    symbol: Optional[str] = None
    name: Optional[str] = None


@dataclass
class Pool:
    """
    Concentrated-liquidity pool snapshot.

    Attributes:
        id: Pool contract address (lowercase)
        token0: First token address, fixed at creation
        token1: Second token address, fixed at creation
        liquidity: Currently active liquidity
        token0_price: token0 per token1
        token1_price: token1 per token0
        total_value_locked_token0: token0 amount locked, human units
        total_value_locked_token1: token1 amount locked, human units
        sqrt_price: Last raw sqrtPriceX96 (optional)
        tick: Current tick (optional)
    """

    id: str
    token0: str
    token1: str
    liquidity: int = 0
    token0_price: Decimal = Decimal(0)
    token1_price: Decimal = Decimal(0)
    total_value_locked_token0: Decimal = Decimal(0)
    total_value_locked_token1: Decimal = Decimal(0)
    sqrt_price: int = 0
    tick: Optional[int] = None


@dataclass
class Bundle:
    """Global singleton holding the USD price of the native unit."""

    native_price_usd: Decimal = Decimal(0)
    id: str = BUNDLE_ID


@dataclass
class Tick:
    """
    Per-tick record, created the first time a tick is referenced.

    price0 and price1 are seeded from the tick index and never recomputed.
    The remaining counters belong to the event handlers.
    """

    id: str
    pool_id: str
    tick_idx: int
    price0: Decimal
    price1: Decimal
    created_at_timestamp: int = 0
    created_at_block_number: int = 0
    liquidity_gross: int = 0
    liquidity_net: int = 0
    liquidity_provider_count: int = 0
    volume_token0: Decimal = Decimal(0)
    volume_token1: Decimal = Decimal(0)
    volume_usd: Decimal = Decimal(0)
    untracked_volume_usd: Decimal = Decimal(0)
    fees_usd: Decimal = Decimal(0)
    collected_fees_token0: Decimal = Decimal(0)
    collected_fees_token1: Decimal = Decimal(0)
    collected_fees_usd: Decimal = Decimal(0)
    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0

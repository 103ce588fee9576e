"""
Native-unit price oracle.

Derives a token's price in the chain's native unit by walking the token's
whitelist pools and taking the rate from the pool holding the most native value
on the counterpart side. Also converts native prices to USD and computes the
whitelist-tracked USD amount of a swap, mint or burn.

Inputs are snapshot maps assembled by the caller; nothing here touches storage.
"""

import logging
from decimal import Decimal, localcontext
from typing import Mapping, Optional

from ..config import PricingConfig, get_config
from ..numeric import DECIMAL_CONTEXT, ONE_BD, ZERO_BD, safe_div
from .errors import MissingSnapshotError
from .types import Bundle, Pool, Token

logger = logging.getLogger(__name__)

TWO_BD = Decimal(2)


def lookup_pool(pools: Mapping[str, Pool], pool_id: str) -> Optional[Pool]:
    """Return the pool snapshot, or None if the caller did not provide it."""
    return pools.get(pool_id)


def lookup_token(tokens: Mapping[str, Token], token_id: str) -> Optional[Token]:
    """Return the token snapshot, or None if the caller did not provide it."""
    return tokens.get(token_id)


def require_pool(pools: Mapping[str, Pool], pool_id: str) -> Pool:
    """Return the pool snapshot or raise MissingSnapshotError."""
    pool = lookup_pool(pools, pool_id)
    if pool is None:
        raise MissingSnapshotError("Pool", pool_id)
    return pool


def require_token(tokens: Mapping[str, Token], token_id: str) -> Token:
    """Return the token snapshot or raise MissingSnapshotError."""
    token = lookup_token(tokens, token_id)
    if token is None:
        raise MissingSnapshotError("Token", token_id)
    return token


class NativePriceOracle:
    """Price tokens in the native unit and USD using whitelist pools."""

    def __init__(self, config: Optional[PricingConfig] = None):
        """
        Initialize the oracle.

        Args:
            config: Pricing configuration (defaults to get_config().pricing)
        """
        self.config = config if config is not None else get_config().pricing

    def get_native_price_in_usd(self, pools: Mapping[str, Pool]) -> Decimal:
        """
        Read the USD price of the native unit from the reference stablecoin pool.

        Args:
            pools: Snapshot map containing the reference pool

        Returns:
            Stablecoin per native unit, or 0 if the pool is unavailable
        """
        pool_id = self.config.usd_pricing_pool_id
        if pool_id is None:
            logger.warning("No USD pricing pool configured, native price in USD is 0")
            return ZERO_BD

        pool = lookup_pool(pools, pool_id)
        if pool is None:
            logger.warning(f"USD pricing pool {pool_id} not available, native price in USD is 0")
            return ZERO_BD

        if self.config.usd_pricing_stablecoin_is_token0:
            return pool.token0_price
        return pool.token1_price

    def find_native_per_token(
        self,
        token: Token,
        pools: Mapping[str, Pool],
        tokens: Mapping[str, Token],
        bundle: Bundle,
    ) -> Decimal:
        """
        Search the token's whitelist pools for its native-unit price.

        The pool whose counterpart side holds the most native value wins; ties
        keep the earlier pool. Stablecoins bypass the search and are priced off
        the bundle so the USD anchor cannot price itself.

        Args:
            token: Token to price
            pools: Snapshots of every pool in token.whitelist_pools
            tokens: Snapshots of every counterpart token in those pools
            bundle: Global bundle holding the native USD price

        Returns:
            Native units per token, or 0 if no pool qualified

        Raises:
            MissingSnapshotError: If a whitelist pool or counterpart token is absent
        """
        if self.config.is_native(token.id):
            return ONE_BD

        if self.config.is_stablecoin(token.id):
            return safe_div(ONE_BD, bundle.native_price_usd)

        token_id = token.id.lower()
        largest_liquidity_native = ZERO_BD
        price_so_far = ZERO_BD
        minimum = self.config.minimum_native_locked_floor

        for pool_id in token.whitelist_pools:
            pool = require_pool(pools, pool_id)
            if pool.liquidity <= 0:
                continue

            if pool.token0.lower() == token_id:
                # whitelist token is token1
                peer = require_token(tokens, pool.token1)
                peer_locked = pool.total_value_locked_token1
                pool_price = pool.token1_price
            elif pool.token1.lower() == token_id:
                peer = require_token(tokens, pool.token0)
                peer_locked = pool.total_value_locked_token0
                pool_price = pool.token0_price
            else:
                logger.debug(f"Pool {pool_id} does not contain {token.id}, skipping")
                continue

            with localcontext(DECIMAL_CONTEXT):
                native_locked = peer_locked * peer.derived_native
                if native_locked > largest_liquidity_native and native_locked > minimum:
                    largest_liquidity_native = native_locked
                    # peer per token * native per peer
                    price_so_far = pool_price * peer.derived_native
                    logger.debug(
                        f"{token.id}: pool {pool_id} leads with {native_locked} native locked"
                    )

        if price_so_far == ZERO_BD:
            logger.debug(f"No qualifying whitelist pool for {token.id}")
        return price_so_far

    def get_tracked_amount_usd(
        self,
        amount0: Decimal,
        token0: Token,
        amount1: Decimal,
        token1: Token,
        bundle: Bundle,
    ) -> Decimal:
        """
        USD notional counting only whitelisted legs.

        If one token is whitelisted, its USD amount is doubled. If both are,
        the two amounts are summed. If neither is, the result is 0.
        """
        token0_whitelisted = self.config.is_whitelisted(token0.id)
        token1_whitelisted = self.config.is_whitelisted(token1.id)

        with localcontext(DECIMAL_CONTEXT):
            price0_usd = token0.derived_native * bundle.native_price_usd
            price1_usd = token1.derived_native * bundle.native_price_usd

            if token0_whitelisted and token1_whitelisted:
                return amount0 * price0_usd + amount1 * price1_usd

            if token0_whitelisted:
                return amount0 * price0_usd * TWO_BD

            if token1_whitelisted:
                return amount1 * price1_usd * TWO_BD

        return ZERO_BD

"""Token pricing: raw pool prices, native-unit oracle and tracked USD amounts."""

from .errors import MissingSnapshotError, PricingError
from .oracle import (
    NativePriceOracle,
    lookup_pool,
    lookup_token,
    require_pool,
    require_token,
)
from .prices import Q192, sqrt_price_to_token_prices, token_prices_for_pool
from .types import BUNDLE_ID, Bundle, Pool, Tick, Token

__all__ = [
    "NativePriceOracle",
    "sqrt_price_to_token_prices",
    "token_prices_for_pool",
    "lookup_pool",
    "lookup_token",
    "require_pool",
    "require_token",
    "PricingError",
    "MissingSnapshotError",
    "Bundle",
    "Pool",
    "Tick",
    "Token",
    "BUNDLE_ID",
    "Q192",
]

"""Shared fixtures for pricing tests."""

from decimal import Decimal

import pytest

from pool_pricing.config import PricingConfig
from pool_pricing.pricing import Bundle, NativePriceOracle, Pool, Token

from .constants import (
    RANDOM_TOKEN,
    TEST_NATIVE_PRICE_USD,
    USDC,
    USDC_WMETIS_POOL,
    USDT,
    WETH,
    WETH_WMETIS_POOL,
    WMETIS,
)


@pytest.fixture
def pricing_config():
    """Metis preset with every key given explicitly."""
    return PricingConfig.from_mapping({
        "chain": "metis",
        "native_token_id": WMETIS,
        "whitelist_token_ids": [WETH, WMETIS, USDC, USDT],
        "stablecoin_token_ids": [USDC, USDT],
        "minimum_native_locked_floor": Decimal("0"),
        "tick_base": Decimal("1.0001"),
        "usd_pricing_pool_id": USDC_WMETIS_POOL,
        "usd_pricing_stablecoin_is_token0": False,
    })

@pytest.fixture
def oracle(pricing_config):
    return NativePriceOracle(config=pricing_config)

@pytest.fixture
def bundle():
    return Bundle(native_price_usd=TEST_NATIVE_PRICE_USD)

@pytest.fixture
def tokens():
    return {
        WMETIS: Token(id=WMETIS, decimals=18, derived_native=Decimal("1"), symbol="WMETIS"),
        WETH: Token(id=WETH, decimals=18, symbol="WETH"),
        USDC: Token(id=USDC, decimals=6, derived_native=Decimal("1") / Decimal("40"), symbol="m.USDC"),
        RANDOM_TOKEN: Token(id=RANDOM_TOKEN, decimals=18, symbol="RND"),
    }

@pytest.fixture
def pools():
    return {
        USDC_WMETIS_POOL: Pool(id=USDC_WMETIS_POOL, token0=WMETIS, token1=USDC, liquidity=100),
        WETH_WMETIS_POOL: Pool(id=WETH_WMETIS_POOL, token0=WMETIS, token1=WETH, liquidity=200),
    }

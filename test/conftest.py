import pytest
from decimal import Decimal

from pool_pricing.config import PricingConfig
from pool_pricing.pricing import NativePriceOracle

WMETIS_ADDRESS = "0x75cb093e4d61d2a2e65d8e0bbb01de8d89b53481"
WETH_ADDRESS = "0x420000000000000000000000000000000000000a"
USDC_ADDRESS = "0xea32a96608495e54156ae48931a7c20f0dcc1a21"
USDT_ADDRESS = "0xbb06dca3ae6887fabf931640f67cab3e3a16f4dc"
USDC_WMETIS_03_POOL = "0xa4e4949e0cccd8282f30e7e113d8a551a1ed1aeb"
WETH_WMETIS_03_POOL = "0xbd718c67cd1e2f7fbe22d47be21036cd647c7714"


@pytest.fixture(scope="session")
def metis_config():
    # Explicit keys so local .env overrides do not leak into the scenario
    return PricingConfig.from_mapping({
        "chain": "metis",
        "native_token_id": WMETIS_ADDRESS,
        "whitelist_token_ids": [WETH_ADDRESS, WMETIS_ADDRESS, USDC_ADDRESS, USDT_ADDRESS],
        "stablecoin_token_ids": [USDC_ADDRESS, USDT_ADDRESS],
        "minimum_native_locked_floor": Decimal("0"),
        "usd_pricing_pool_id": USDC_WMETIS_03_POOL,
        "usd_pricing_stablecoin_is_token0": False,
    })


@pytest.fixture(scope="session")
def oracle(metis_config):
    return NativePriceOracle(config=metis_config)

"""
Pricing configuration for pool_pricing.

Deployment-specific constants used by the native price oracle: the wrapped
native token, the whitelist and stablecoin sets, the minimum native-locked
floor and the USD reference pool. Values come from a per-chain preset and can be
overridden one by one through environment variables or explicit arguments.
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from eth_utils import is_address, to_normalized_address

from .base import BaseConfig, ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CHAIN = "metis"

CHAIN_PRESETS: Dict[str, Dict[str, Any]] = {
    "metis": {
        "native_token_id": "0x75cb093e4d61d2a2e65d8e0bbb01de8d89b53481",  # WMETIS
        "whitelist_token_ids": [
            "0x420000000000000000000000000000000000000a",  # WETH
            "0x75cb093e4d61d2a2e65d8e0bbb01de8d89b53481",  # WMETIS
            "0xea32a96608495e54156ae48931a7c20f0dcc1a21",  # USDC
            "0xbb06dca3ae6887fabf931640f67cab3e3a16f4dc",  # USDT
        ],
        "stablecoin_token_ids": [
            "0xea32a96608495e54156ae48931a7c20f0dcc1a21",  # USDC
            "0xbb06dca3ae6887fabf931640f67cab3e3a16f4dc",  # USDT
        ],
        # USDC/WMETIS 0.3%, USDC is token1
        "usd_pricing_pool_id": "0xa4e4949e0cccd8282f30e7e113d8a551a1ed1aeb",
        "usd_pricing_stablecoin_is_token0": False,
    },
}

RECOGNIZED_KEYS = (
    "chain",
    "native_token_id",
    "whitelist_token_ids",
    "stablecoin_token_ids",
    "minimum_native_locked_floor",
    "tick_base",
    "usd_pricing_pool_id",
    "usd_pricing_stablecoin_is_token0",
)


def _normalize(address: str, key: str) -> str:
    if not is_address(address):
        raise ConfigError(f"Invalid address for {key}: {address}")
    return to_normalized_address(address)


@dataclass
class PricingConfig(BaseConfig):
    """Oracle configuration. Unset fields are filled from env, then the chain preset."""

    chain: str = field(default_factory=lambda: BaseConfig.get_env("PRICING_CHAIN", DEFAULT_CHAIN))
    native_token_id: Optional[str] = None
    whitelist_token_ids: Optional[List[str]] = None
    stablecoin_token_ids: Optional[List[str]] = None
    minimum_native_locked_floor: Optional[Decimal] = None
    tick_base: Optional[Decimal] = None
    usd_pricing_pool_id: Optional[str] = None
    usd_pricing_stablecoin_is_token0: Optional[bool] = None

    def __post_init__(self):
        """Resolve defaults, normalize addresses, then run base setup."""
        self._apply_defaults()
        self._normalize_addresses()
        super().__post_init__()

    def _apply_defaults(self):
        if self.chain not in CHAIN_PRESETS:
            raise ConfigError(f"Unsupported chain: {self.chain}")
        preset = CHAIN_PRESETS[self.chain]

        if self.native_token_id is None:
            self.native_token_id = self.get_env("PRICING_NATIVE_TOKEN", preset["native_token_id"])
        if self.whitelist_token_ids is None:
            self.whitelist_token_ids = self.get_env_list(
                "PRICING_WHITELIST_TOKENS", preset["whitelist_token_ids"]
            )
        if self.stablecoin_token_ids is None:
            self.stablecoin_token_ids = self.get_env_list(
                "PRICING_STABLECOINS", preset["stablecoin_token_ids"]
            )
        if self.minimum_native_locked_floor is None:
            self.minimum_native_locked_floor = self.get_env_decimal("PRICING_MIN_NATIVE_LOCKED", "0")
        if self.tick_base is None:
            self.tick_base = self.get_env_decimal("PRICING_TICK_BASE", "1.0001")
        if self.usd_pricing_pool_id is None:
            self.usd_pricing_pool_id = self.get_env("PRICING_USD_POOL", preset["usd_pricing_pool_id"]) or None
        if self.usd_pricing_stablecoin_is_token0 is None:
            self.usd_pricing_stablecoin_is_token0 = self.get_env_bool(
                "PRICING_USD_STABLE_IS_TOKEN0", preset["usd_pricing_stablecoin_is_token0"]
            )

        self.minimum_native_locked_floor = Decimal(self.minimum_native_locked_floor)
        self.tick_base = Decimal(self.tick_base)

    def _normalize_addresses(self):
        self.native_token_id = _normalize(self.native_token_id, "native_token_id")
        self.whitelist_token_ids = [
            _normalize(addr, "whitelist_token_ids") for addr in self.whitelist_token_ids
        ]
        self.stablecoin_token_ids = [
            _normalize(addr, "stablecoin_token_ids") for addr in self.stablecoin_token_ids
        ]
        if self.usd_pricing_pool_id is not None:
            self.usd_pricing_pool_id = _normalize(self.usd_pricing_pool_id, "usd_pricing_pool_id")

    def _validate_config(self):
        """Validate configuration values."""
        super()._validate_config()

        if self.minimum_native_locked_floor < 0:
            raise ConfigError(
                f"minimum_native_locked_floor must be >= 0, got {self.minimum_native_locked_floor}"
            )
        if self.tick_base <= 0:
            raise ConfigError(f"tick_base must be positive, got {self.tick_base}")
        if self.native_token_id not in self.whitelist_token_ids:
            logger.warning(f"Native token {self.native_token_id} is not in the whitelist")

        missing = [addr for addr in self.stablecoin_token_ids if addr not in self.whitelist_token_ids]
        if missing:
            logger.warning(f"Stablecoins not in whitelist: {missing}")

        logger.debug(
            f"Pricing config for {self.chain}: {len(self.whitelist_token_ids)} whitelist tokens, "
            f"{len(self.stablecoin_token_ids)} stablecoins, floor={self.minimum_native_locked_floor}"
        )

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PricingConfig":
        """
        Build a config from a plain mapping of recognized keys.

        Raises:
            ConfigError: If the mapping contains an unknown key
        """
        unknown = set(values) - set(RECOGNIZED_KEYS)
        if unknown:
            raise ConfigError(f"Unknown pricing config keys: {sorted(unknown)}")
        return cls(**dict(values))

    def is_native(self, token_id: str) -> bool:
        """Check whether token_id is the wrapped native token."""
        return token_id.lower() == self.native_token_id

    def is_whitelisted(self, token_id: str) -> bool:
        """Check whether token_id is a whitelist token."""
        return token_id.lower() in self.whitelist_token_ids

    def is_stablecoin(self, token_id: str) -> bool:
        """Check whether token_id is a recognized stablecoin."""
        return token_id.lower() in self.stablecoin_token_ids

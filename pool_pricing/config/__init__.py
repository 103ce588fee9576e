"""
Configuration management for pool_pricing.

Use get_config() to access all configuration settings.

Example:
    from pool_pricing.config import get_config

    config = get_config()

    # Wrapped native token for the selected chain
    native = config.pricing.native_token_id

    # Whitelist membership
    config.pricing.is_whitelisted("0xea32a96608495e54156ae48931a7c20f0dcc1a21")
"""

from .base import BaseConfig, ConfigError
from .manager import ConfigManager, get_config, reload_config
from .pricing import CHAIN_PRESETS, RECOGNIZED_KEYS, PricingConfig

__all__ = [
    "BaseConfig",
    "ConfigError",
    "PricingConfig",
    "CHAIN_PRESETS",
    "RECOGNIZED_KEYS",
    "ConfigManager",
    "get_config",
    "reload_config",
]

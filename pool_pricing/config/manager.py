"""
Configuration manager for pool_pricing.

Combines the configuration classes behind a single cached accessor.
"""

import logging
from typing import Any, Dict, Optional

from .base import BaseConfig, ConfigError
from .pricing import PricingConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Centralized configuration manager that combines all configuration classes.

    Configurations are initialized and validated once, on construction.
    """

    def __init__(self, environment: Optional[str] = None, chain: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            environment: Override the environment (local, dev, staging, production, test)
            chain: Override the pricing chain preset
        """
        self._environment = environment
        self._chain = chain
        self._base_config = None
        self._pricing_config = None
        self._initialize_configs()

    def _initialize_configs(self):
        """Initialize all configuration objects."""
        try:
            overrides = {"ENVIRONMENT": self._environment} if self._environment else {}
            self._base_config = BaseConfig(**overrides)
            if self._chain:
                overrides["chain"] = self._chain
            self._pricing_config = PricingConfig(**overrides)

            logger.info(f"Configuration initialized for environment: {self.environment}")

        except ConfigError:
            raise
        except Exception as e:
            logger.error(f"Failed to initialize configuration: {e}")
            raise ConfigError(f"Configuration initialization failed: {e}")

    @property
    def environment(self) -> str:
        """Get current environment."""
        return self._base_config.ENVIRONMENT

    @property
    def base(self) -> BaseConfig:
        """Get base configuration."""
        return self._base_config

    @property
    def pricing(self) -> PricingConfig:
        """Get pricing configuration."""
        return self._pricing_config

    def to_dict(self) -> Dict[str, Any]:
        """Convert all configurations to dictionary format."""
        return {
            "environment": self.environment,
            "base": self.base.to_dict() if self.base else {},
            "pricing": self.pricing.to_dict() if self.pricing else {},
        }

    def __repr__(self) -> str:
        """String representation of the configuration manager."""
        return f"ConfigManager(environment={self.environment}, chain={self.pricing.chain})"


# Global configuration manager instance
_config_manager = None


def get_config(
    environment: Optional[str] = None,
    chain: Optional[str] = None,
    force_reload: bool = False,
) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        environment: Override environment
        chain: Override pricing chain preset
        force_reload: Force reload of configuration

    Returns:
        ConfigManager instance
    """
    global _config_manager

    if _config_manager is None or force_reload:
        _config_manager = ConfigManager(environment=environment, chain=chain)

    return _config_manager


def reload_config(environment: Optional[str] = None, chain: Optional[str] = None) -> ConfigManager:
    """
    Reload the global configuration manager.

    Args:
        environment: Override environment
        chain: Override pricing chain preset

    Returns:
        New ConfigManager instance
    """
    return get_config(environment=environment, chain=chain, force_reload=True)

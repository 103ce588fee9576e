"""Reference pricing for concentrated-liquidity DEX indexers."""

__version__ = "0.1.0"

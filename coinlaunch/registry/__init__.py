"""Coin registry implementations for CoinLaunch."""

from coinlaunch.registry.base import CoinNotFoundError, CoinRegistry
from coinlaunch.registry.mock import MockCoinRegistry
from coinlaunch.registry.snapshot import JsonCoinRegistry

__all__ = ["CoinNotFoundError", "CoinRegistry", "JsonCoinRegistry", "MockCoinRegistry"]

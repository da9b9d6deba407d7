"""Base coin registry interface for CoinLaunch."""

import logging
from abc import ABC, abstractmethod

from coinlaunch.models import Coin

logger = logging.getLogger(__name__)


class CoinNotFoundError(KeyError):
    """Raised when a coin id is not in the registry."""


class CoinRegistry(ABC):
    """Abstract base class for coin registries.

    A registry supplies the ordered coin snapshot the market view and
    trade dialog work on. Coins are kept in memory in insertion order.
    """

    def __init__(self) -> None:
        self._coins: dict[str, Coin] = {}

    @abstractmethod
    def load(self) -> None:
        """Populate the registry from its source."""
        pass

    def list_coins(self) -> list[Coin]:
        """Get all coins in insertion order.

        Returns:
            A new list; changing it does not affect the registry.
        """
        return list(self._coins.values())

    def get_coin(self, coin_id: str) -> Coin:
        """Look up a coin by id.

        Args:
            coin_id: Coin identifier.

        Returns:
            The coin.

        Raises:
            CoinNotFoundError: If no coin has that id.
        """
        try:
            return self._coins[coin_id]
        except KeyError:
            raise CoinNotFoundError(f"Coin not found: {coin_id}") from None

    def add_coin(self, coin: Coin) -> None:
        """Add a coin to the registry.

        Args:
            coin: Coin to add.

        Raises:
            ValueError: If a coin with the same id is already listed.
        """
        if coin.id in self._coins:
            raise ValueError(f"Duplicate coin id: {coin.id}")
        self._coins[coin.id] = coin
        logger.debug("Registered coin %s (%s)", coin.id, coin.symbol)

    def __len__(self) -> int:
        return len(self._coins)

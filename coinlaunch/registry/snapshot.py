"""Coin registry backed by a JSON snapshot file."""

import logging
from pathlib import Path

from pydantic import TypeAdapter

from coinlaunch.models import Coin
from coinlaunch.registry.base import CoinRegistry

logger = logging.getLogger(__name__)

_COIN_LIST = TypeAdapter(list[Coin])


class JsonCoinRegistry(CoinRegistry):
    """Registry loaded from a JSON array of coin records.

    The file is only read. Coins added later live in memory.
    """

    def __init__(self, path: Path):
        """Initialize and load the snapshot.

        Args:
            path: Path to the JSON snapshot.

        Raises:
            FileNotFoundError: If the snapshot does not exist.
            OSError: If the snapshot cannot be read (e.g. it is a directory).
            pydantic.ValidationError: If a record is invalid.
            ValueError: If two records share an id.
        """
        super().__init__()
        self.path = Path(path)
        self.load()

    def load(self) -> None:
        """Read and validate the snapshot file."""
        coins = _COIN_LIST.validate_json(self.path.read_bytes())
        self._coins.clear()
        for coin in coins:
            self.add_coin(coin)
        logger.debug("Loaded %d coins from %s", len(self), self.path)

"""Mock coin registry with fabricated market data."""

import random
from datetime import datetime, timedelta
from typing import Optional

from coinlaunch.models import Coin
from coinlaunch.registry.base import CoinRegistry

MOCK_COINS = [
    ("Moon Doge", "MDOGE"),
    ("Pepe Classic", "PEPEC"),
    ("Solana Cat", "SCAT"),
    ("Based Frog", "BFROG"),
    ("Rocket Fuel", "FUEL"),
    ("Diamond Paws", "PAWS"),
    ("Laser Eyes", "LASER"),
    ("Wojak Coin", "WOJAK"),
    ("Gigachad", "GIGA"),
    ("Banana Split", "BNANA"),
    ("Turbo Snail", "SNAIL"),
    ("Hamster Wheel", "HWHEEL"),
    ("Ape Together", "APES"),
    ("Cope Token", "COPE"),
    ("Bonk Jr", "BONKJR"),
    ("Lambo Soon", "LAMBO"),
]

# Fixed supply used to derive market cap from price
MOCK_SUPPLY = 1_000_000_000


class MockCoinRegistry(CoinRegistry):
    """Registry of fabricated coins for local use.

    Prices, changes, volumes and holders are random but reproducible
    for a given seed.
    """

    DEFAULT_COUNT = 12
    DEFAULT_SEED = 42

    def __init__(
        self,
        seed: Optional[int] = None,
        count: int = DEFAULT_COUNT,
        now: Optional[datetime] = None,
    ):
        """Initialize and populate the mock registry.

        Args:
            seed: Random seed. None gives a different market each run.
            count: Number of coins to fabricate.
            now: Reference time for creation timestamps.
        """
        super().__init__()
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        self._rng = random.Random(seed)
        self._count = count
        self._now = now or datetime.now()
        self.load()

    def _make_coin(self, index: int) -> Coin:
        name, symbol = MOCK_COINS[index % len(MOCK_COINS)]
        cycle = index // len(MOCK_COINS)
        if cycle:
            name = f"{name} {cycle + 1}"
            symbol = f"{symbol}{cycle + 1}"[-10:]

        rng = self._rng
        # Log-uniform so sub-cent coins are common
        price = 10 ** rng.uniform(-7, 1)

        return Coin(
            id=str(index + 1),
            name=name,
            symbol=symbol,
            description=f"{name} community coin",
            image=None,
            created_at=self._now - timedelta(minutes=rng.randint(1, 60 * 24 * 30)),
            price=price,
            change_24h=rng.uniform(-60.0, 150.0),
            volume_24h=rng.uniform(0, 5_000_000),
            market_cap=price * MOCK_SUPPLY,
            holders=rng.randint(0, 50_000),
        )

    def load(self) -> None:
        """Fabricate the mock coins."""
        self._coins.clear()
        for index in range(self._count):
            self.add_coin(self._make_coin(index))

"""Market ranking of coins by a selectable sort key."""

from typing import Iterable

from coinlaunch.models import Coin

# Sort key -> coin attribute, all ranked descending
SORT_ATTRIBUTES = {
    "price": "price",
    "volume": "volume_24h",
    "change": "change_24h",
}

SORT_KEYS = tuple(SORT_ATTRIBUTES)

DEFAULT_SORT_KEY = "volume"


def rank(coins: Iterable[Coin], sort_key: str = DEFAULT_SORT_KEY) -> list[Coin]:
    """Rank coins by price, volume or 24h change.

    Coins with equal values are ordered by id ascending so the
    ranking is reproducible. The input is never modified.

    Args:
        coins: Coin collection snapshot.
        sort_key: One of "price", "volume" (default) or "change".

    Returns:
        New list of coins, highest first.

    Raises:
        ValueError: If sort_key is unknown.
    """
    if sort_key not in SORT_ATTRIBUTES:
        raise ValueError(f"Sort key must be one of {SORT_KEYS}, got {sort_key!r}")

    attribute = SORT_ATTRIBUTES[sort_key]
    return sorted(coins, key=lambda c: (-getattr(c, attribute), c.id))

"""Data models for CoinLaunch."""

from coinlaunch.models.coin import Coin
from coinlaunch.models.trade import Direction, ExecutionReceipt, TradeIntent
from coinlaunch.models.stats import MarketStats

__all__ = [
    "Coin",
    "Direction",
    "ExecutionReceipt",
    "TradeIntent",
    "MarketStats",
]

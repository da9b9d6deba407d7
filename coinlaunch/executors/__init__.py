"""Trade executor implementations for CoinLaunch."""

from coinlaunch.executors.base import BaseExecutor
from coinlaunch.executors.paper import PaperExecutor

__all__ = ["BaseExecutor", "PaperExecutor"]

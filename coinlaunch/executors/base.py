"""Base executor interface for CoinLaunch."""

from abc import ABC, abstractmethod

from coinlaunch.models import ExecutionReceipt, TradeIntent


class BaseExecutor(ABC):
    """Abstract base class for trade executors.

    Executors receive validated trade intents and are responsible for
    actually moving value (wallet signing, ledger submission, etc.).
    """

    @abstractmethod
    def execute(self, intent: TradeIntent) -> ExecutionReceipt:
        """Execute a trade intent.

        Args:
            intent: Validated trade intent.

        Returns:
            ExecutionReceipt describing the outcome.
        """
        pass

"""Paper executor for simulated trading."""

import logging
import uuid
from datetime import datetime

from coinlaunch.executors.base import BaseExecutor
from coinlaunch.models import ExecutionReceipt, TradeIntent

logger = logging.getLogger(__name__)


class PaperExecutor(BaseExecutor):
    """Executor that simulates fills without touching any chain.

    Every intent is acknowledged immediately. Nothing is recorded
    beyond the returned receipt.
    """

    STATUS = "SIMULATED"

    def execute(self, intent: TradeIntent) -> ExecutionReceipt:
        """Simulate execution of a trade intent.

        Args:
            intent: Validated trade intent.

        Returns:
            ExecutionReceipt with a fresh order id.
        """
        order_id = f"PAPER-{uuid.uuid4().hex[:12].upper()}"
        logger.info(
            "Paper %s of %s on coin %s (fee %s, net %s) as %s",
            intent.direction,
            intent.amount,
            intent.coin_id,
            intent.fee,
            intent.net,
            order_id,
        )

        return ExecutionReceipt(
            order_id=order_id,
            coin_id=intent.coin_id,
            direction=intent.direction,
            amount=intent.amount,
            fee=intent.fee,
            net=intent.net,
            status=self.STATUS,
            message="Paper trade - no funds moved",
            timestamp=datetime.now(),
        )

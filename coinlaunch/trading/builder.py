"""Trade request builder for the market trade dialog.

Turns a raw trade submission (coin, direction, amount text) into a
validated TradeIntent. The builder only validates and assembles; handing
the intent to an executor is the caller's job.
"""

import logging
import math
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field

from coinlaunch.market.valuation import (
    DEFAULT_FEE_RATE,
    DIRECTIONS,
    InvalidAmount,
    compute_fee,
    compute_net,
    validate_fee_rate,
)
from coinlaunch.models import Coin, TradeIntent

logger = logging.getLogger(__name__)


class ComposerState(str, Enum):
    """States of the trade composer."""

    IDLE = "IDLE"
    COMPOSING = "COMPOSING"


class ComposerStateError(RuntimeError):
    """Raised when a composer action is not allowed in the current state."""


class TradeQuote(BaseModel):
    """Live fee preview shown while a trade is being composed."""

    direction: str = Field(..., description="Trade direction")
    amount: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Parsed amount (0 if invalid)"
    )
    fee: float = Field(..., ge=0, allow_inf_nan=False, description="Fee on the amount")
    net: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Amount paid or received"
    )

    model_config = {"frozen": True}


def parse_amount(raw_amount: Union[str, float, int, None]) -> float:
    """Parse a raw trade amount.

    Args:
        raw_amount: Amount as typed by the user, or a number.

    Returns:
        The amount as a positive float.

    Raises:
        InvalidAmount: If the amount is blank, not a number, or <= 0.
    """
    if raw_amount is None or isinstance(raw_amount, bool):
        raise InvalidAmount(f"Amount is required, got {raw_amount!r}")

    if isinstance(raw_amount, str):
        raw_amount = raw_amount.strip()
        if not raw_amount:
            raise InvalidAmount("Amount is required")

    try:
        amount = float(raw_amount)
    except (TypeError, ValueError):
        raise InvalidAmount(f"Amount is not a number: {raw_amount!r}") from None

    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmount(f"Amount must be positive, got {raw_amount!r}")

    return amount


def _check_direction(direction: str) -> str:
    if direction not in DIRECTIONS:
        raise ValueError(f"Direction must be one of {DIRECTIONS}, got {direction!r}")
    return direction


def _fee_and_net(amount: float, fee_rate: float, direction: str) -> tuple[float, float]:
    fee = compute_fee(amount, fee_rate)
    net = compute_net(amount, fee_rate, direction)
    # Amounts near the float maximum overflow once the fee is added
    if not (math.isfinite(fee) and math.isfinite(net)):
        raise InvalidAmount(f"Amount is too large: {amount!r}")
    return fee, net


def build_trade_intent(
    coin: Coin,
    direction: str,
    raw_amount: Union[str, float, int, None],
    fee_rate: float = DEFAULT_FEE_RATE,
) -> TradeIntent:
    """Validate a trade submission and build a TradeIntent.

    Args:
        coin: Coin being traded.
        direction: "buy" or "sell".
        raw_amount: Amount as typed by the user.
        fee_rate: Fee rate to apply.

    Returns:
        TradeIntent with amount, fee and net computed.

    Raises:
        InvalidAmount: If the amount does not parse, is <= 0, or is too
            large for the fee and net to be represented.
        ValueError: If direction or fee_rate is invalid.
    """
    _check_direction(direction)
    amount = parse_amount(raw_amount)
    fee, net = _fee_and_net(amount, fee_rate, direction)

    intent = TradeIntent(
        coin_id=coin.id,
        direction=direction,
        amount=amount,
        fee=fee,
        net=net,
        fee_rate=fee_rate,
    )
    logger.debug("Built trade intent: %s", intent)
    return intent


class TradeComposer:
    """State machine behind the trade dialog.

    IDLE until a coin is selected, then COMPOSING while the user edits
    direction and amount. Cancelling or a successful submit returns to
    IDLE. A rejected submit keeps the composer in COMPOSING so the user
    can fix the amount and try again.
    """

    def __init__(self, fee_rate: float = DEFAULT_FEE_RATE):
        """Initialize the composer.

        Args:
            fee_rate: Fee rate applied to every trade built here.
        """
        self._fee_rate = validate_fee_rate(fee_rate)
        self._coin: Optional[Coin] = None
        self._direction = "buy"
        self._raw_amount = ""

    @property
    def state(self) -> ComposerState:
        """Current composer state."""
        if self._coin is None:
            return ComposerState.IDLE
        return ComposerState.COMPOSING

    @property
    def fee_rate(self) -> float:
        return self._fee_rate

    @property
    def coin(self) -> Optional[Coin]:
        return self._coin

    @property
    def direction(self) -> str:
        return self._direction

    @property
    def raw_amount(self) -> str:
        return self._raw_amount

    def _require_composing(self, action: str) -> Coin:
        if self._coin is None:
            raise ComposerStateError(f"Cannot {action}: no coin selected")
        return self._coin

    def select(self, coin: Coin) -> None:
        """Select a coin to trade, entering COMPOSING."""
        self._coin = coin
        logger.debug("Selected coin %s (%s)", coin.id, coin.symbol)

    def set_direction(self, direction: str) -> None:
        """Switch between buy and sell."""
        self._require_composing("set direction")
        self._direction = _check_direction(direction)

    def set_amount(self, raw_amount: str) -> None:
        """Update the amount text. Not validated until submit."""
        self._require_composing("set amount")
        self._raw_amount = raw_amount

    def preview(self) -> TradeQuote:
        """Quote fee and net for the current amount.

        An amount that submit would reject quotes as zero.
        """
        self._require_composing("preview")

        try:
            amount = parse_amount(self._raw_amount)
            fee, net = _fee_and_net(amount, self._fee_rate, self._direction)
        except InvalidAmount:
            return TradeQuote(direction=self._direction, amount=0.0, fee=0.0, net=0.0)

        return TradeQuote(direction=self._direction, amount=amount, fee=fee, net=net)

    def cancel(self) -> None:
        """Close the dialog, clearing selection and amount."""
        self._coin = None
        self._raw_amount = ""

    def submit(self) -> TradeIntent:
        """Build the trade intent for the current selection.

        Returns:
            TradeIntent for the selected coin.

        Raises:
            ComposerStateError: If no coin is selected.
            InvalidAmount: If the amount is invalid; state is unchanged.
        """
        coin = self._require_composing("submit")

        try:
            intent = build_trade_intent(
                coin, self._direction, self._raw_amount, self._fee_rate
            )
        except InvalidAmount as e:
            logger.info("Rejected trade for %s: %s", coin.id, e)
            raise

        self.cancel()
        return intent

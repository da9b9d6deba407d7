"""Valuation calculations for the coin market.

This module provides the pure functions behind the market view and the
trade dialog: price and volume display formatting, trading fee and net
amount computation, and aggregate statistics over a coin collection.
None of the functions keep state, so they are safe to call from anywhere.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterable

from coinlaunch.models import Coin, MarketStats

# Default trading fee (2% goes to platform revenue)
DEFAULT_FEE_RATE = 0.02

# Decimal places for fee/net currency display
CURRENCY_DECIMALS = 4

# Prices below one cent get 6 decimals instead of 4
SUB_CENT_THRESHOLD = 0.01

DIRECTIONS = ("buy", "sell")


class InvalidAmount(ValueError):
    """Raised when a trade amount is non-positive or not a number."""


def _round_half_up(value: float, places: int) -> str:
    """Round a float half-up on its shortest decimal representation.

    Args:
        value: Finite float to round.
        places: Number of decimal places.

    Returns:
        The rounded value as a fixed-point string.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot format non-finite value: {value}")

    if value == 0:
        value = 0.0  # drop the sign of -0.0

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # Enough digits for any finite float
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def validate_fee_rate(fee_rate: float) -> float:
    """Validate a fee rate.

    Args:
        fee_rate: Proportion of the amount charged as fee.

    Returns:
        The fee rate unchanged.

    Raises:
        ValueError: If the rate is not finite or outside [0, 1).
    """
    if not math.isfinite(fee_rate) or fee_rate < 0 or fee_rate >= 1:
        raise ValueError(f"Fee rate must be in [0, 1), got {fee_rate}")
    return fee_rate


def _validate_amount(amount: float) -> float:
    if isinstance(amount, bool) or not isinstance(amount, (int, float)):
        raise InvalidAmount(f"Amount must be a number, got {amount!r}")
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmount(f"Amount must be positive, got {amount}")
    return float(amount)


def format_price(price: float) -> str:
    """Format a coin price for display.

    Sub-cent prices get 6 decimals so that cheap coins stay
    distinguishable, everything else gets 4.

    Args:
        price: Coin price.

    Returns:
        Display string such as "$1.2346" or "$0.000006".
    """
    places = 6 if price < SUB_CENT_THRESHOLD else 4
    return f"${_round_half_up(price, places)}"


def format_volume(volume: float) -> str:
    """Format a volume or market cap figure in abbreviated form.

    Args:
        volume: Volume or market cap in currency units.

    Returns:
        "$2.5M" for millions, "$4.2K" for thousands, "$850" otherwise.
    """
    if volume >= 1_000_000:
        return f"${_round_half_up(volume / 1_000_000, 1)}M"
    if volume >= 1_000:
        return f"${_round_half_up(volume / 1_000, 1)}K"
    return f"${_round_half_up(volume, 0)}"


def format_change(change: float) -> str:
    """Format a 24h percentage change with an explicit sign."""
    sign = "+" if change >= 0 else ""
    return f"{sign}{_round_half_up(change, 2)}%"


def format_amount(amount: float, currency: str = "SOL") -> str:
    """Format a fee or net amount with currency precision."""
    return f"{_round_half_up(amount, CURRENCY_DECIMALS)} {currency}"


def compute_fee(amount: float, fee_rate: float) -> float:
    """Calculate the trading fee for an amount.

    The result is not rounded; rounding happens when it is formatted.

    Args:
        amount: Requested trade amount.
        fee_rate: Fee rate (e.g. 0.02 for 2%).

    Returns:
        amount * fee_rate

    Raises:
        InvalidAmount: If amount is not a positive number.
    """
    amount = _validate_amount(amount)
    validate_fee_rate(fee_rate)
    return amount * fee_rate


def compute_net(amount: float, fee_rate: float, direction: str) -> float:
    """Calculate the net amount of a trade.

    Buyers pay the amount plus the fee, sellers receive the amount
    minus the fee.

    Args:
        amount: Requested trade amount.
        fee_rate: Fee rate (e.g. 0.02 for 2%).
        direction: "buy" or "sell".

    Returns:
        amount * (1 + fee_rate) for buys, amount * (1 - fee_rate) for sells.

    Raises:
        InvalidAmount: If amount is not a positive number.
        ValueError: If direction is unknown.
    """
    amount = _validate_amount(amount)
    validate_fee_rate(fee_rate)

    if direction == "buy":
        return amount * (1 + fee_rate)
    if direction == "sell":
        return amount * (1 - fee_rate)
    raise ValueError(f"Direction must be one of {DIRECTIONS}, got {direction!r}")


def aggregate(coins: Iterable[Coin]) -> MarketStats:
    """Calculate aggregate statistics over a coin collection.

    Sums use math.fsum so the totals do not depend on coin order.
    An empty collection yields all-zero stats.

    Args:
        coins: Coin collection snapshot.

    Returns:
        MarketStats with total volume, total market cap and coin count.

    Raises:
        OverflowError: If a total exceeds the largest float, even though
            every coin's own values are finite.
    """
    coins = list(coins)
    try:
        total_volume = math.fsum(c.volume_24h for c in coins)
        total_market_cap = math.fsum(c.market_cap for c in coins)
    except OverflowError as e:
        raise OverflowError(f"Market totals are too large to represent: {e}") from e

    return MarketStats(
        total_volume=total_volume,
        total_market_cap=total_market_cap,
        count=len(coins),
    )

"""Market valuation and ranking module."""

from coinlaunch.market.valuation import (
    CURRENCY_DECIMALS,
    DEFAULT_FEE_RATE,
    SUB_CENT_THRESHOLD,
    InvalidAmount,
    aggregate,
    compute_fee,
    compute_net,
    format_amount,
    format_change,
    format_price,
    format_volume,
    validate_fee_rate,
)
from coinlaunch.market.ranking import DEFAULT_SORT_KEY, SORT_KEYS, rank

__all__ = [
    "CURRENCY_DECIMALS",
    "DEFAULT_FEE_RATE",
    "DEFAULT_SORT_KEY",
    "SORT_KEYS",
    "SUB_CENT_THRESHOLD",
    "InvalidAmount",
    "aggregate",
    "compute_fee",
    "compute_net",
    "format_amount",
    "format_change",
    "format_price",
    "format_volume",
    "rank",
    "validate_fee_rate",
]

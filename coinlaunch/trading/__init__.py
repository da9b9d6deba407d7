"""Trade request building module."""

from coinlaunch.trading.builder import (
    ComposerState,
    ComposerStateError,
    TradeComposer,
    TradeQuote,
    build_trade_intent,
    parse_amount,
)

__all__ = [
    "ComposerState",
    "ComposerStateError",
    "TradeComposer",
    "TradeQuote",
    "build_trade_intent",
    "parse_amount",
]

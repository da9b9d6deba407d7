"""CoinLaunch - token launch and mock market toolkit."""

__version__ = "0.1.0"

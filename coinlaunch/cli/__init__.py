"""CLI commands for CoinLaunch.

This package provides the command-line interface for CoinLaunch,
including the market view, trade dialog and coin creation commands.
"""

from coinlaunch.cli.main import cli, main

__all__ = ["cli", "main"]

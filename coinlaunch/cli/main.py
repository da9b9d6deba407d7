"""Main CLI entry point for CoinLaunch.

This module provides the main click group. Command modules are
imported lazily, only when the command is invoked.
"""

import importlib
import logging

import click
from rich.console import Console

console = Console()


class LazyGroup(click.Group):
    """A click Group that imports command modules on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        return sorted(set(base) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, importing its module if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name not in self._lazy_subcommands:
            return None

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)
        cmd = getattr(module, cmd_name, None)

        if not isinstance(cmd, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "market": "coinlaunch.cli.market",
    "stats": "coinlaunch.cli.market",
    "trade": "coinlaunch.cli.trade",
    "create": "coinlaunch.cli.launch",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbose: bool) -> None:
    """Configure logging; rich-formatted debug output when verbose."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="coinlaunch")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """CoinLaunch - create community coins and trade them on a mock market.

    Nothing here touches a blockchain: coins and trades are simulated
    locally.

    \b
    Quick Start:
      coinlaunch market               # Ranked market view
      coinlaunch trade 3 1.5          # Buy 1.5 SOL of coin 3
      coinlaunch create "My Coin" MC  # Create a coin
    """
    ctx.ensure_object(dict)
    setup_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()

"""Market commands for CoinLaunch CLI.

Handles the ranked market table and the aggregate statistics panel.
"""

from pathlib import Path
from typing import Optional

import click
from rich.columns import Columns
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from coinlaunch.cli.common import console, error_panel, get_registry, get_settings
from coinlaunch.market import (
    SORT_KEYS,
    aggregate,
    format_change,
    format_price,
    format_volume,
    rank,
)
from coinlaunch.models import Coin, MarketStats

registry_option = click.option(
    "-r", "--registry",
    "registry_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="JSON coin snapshot to load instead of the mock market.",
)

seed_option = click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for the mock market (reproducible coins).",
)


def render_stats(stats: MarketStats) -> Columns:
    """Build the three stat panels shown above the market table."""
    return Columns([
        Panel(
            f"[bold]{format_volume(stats.total_volume)}[/bold]",
            title="[green]Total Volume 24h[/green]",
            border_style="green",
        ),
        Panel(
            f"[bold]{format_volume(stats.total_market_cap)}[/bold]",
            title="[blue]Total Market Cap[/blue]",
            border_style="blue",
        ),
        Panel(
            f"[bold]{stats.count}[/bold]",
            title="[magenta]Active Coins[/magenta]",
            border_style="magenta",
        ),
    ])


def market_stats(coins: list[Coin]) -> MarketStats:
    """Aggregate the coins, exiting with an error panel if the totals overflow."""
    try:
        return aggregate(coins)
    except OverflowError as e:
        error_panel(str(e), title="Market Error")


def render_market_table(coins: list[Coin], sort_key: str) -> Table:
    """Build the ranked market table."""
    table = Table(
        title=f"Trading Market (by {sort_key})",
        show_header=True,
        header_style="bold",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="dim")
    table.add_column("Coin", style="bold")
    table.add_column("Symbol")
    table.add_column("Price", justify="right")
    table.add_column("24h Change", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Market Cap", justify="right")
    table.add_column("Holders", justify="right")

    for position, coin in enumerate(coins, start=1):
        change_color = "green" if coin.change_24h >= 0 else "red"
        table.add_row(
            str(position),
            coin.id,
            escape(coin.name),
            coin.symbol,
            format_price(coin.price),
            f"[{change_color}]{format_change(coin.change_24h)}[/{change_color}]",
            format_volume(coin.volume_24h),
            format_volume(coin.market_cap),
            f"{coin.holders:,}",
        )

    return table


@click.command()
@click.option(
    "-s", "--sort",
    "sort_key",
    type=click.Choice(SORT_KEYS),
    default=None,
    help="Sort key (default from config, else volume).",
)
@registry_option
@seed_option
def market(sort_key: Optional[str], registry_path: Optional[Path], seed: Optional[int]) -> None:
    """Show the ranked coin market.

    Lists every coin with price, 24h change, volume and market cap,
    highest first by the chosen sort key.

    \b
    Examples:
      coinlaunch market                 # Sort by volume
      coinlaunch market --sort change   # Biggest gainers first
      coinlaunch market -r coins.json   # Load a coin snapshot
    """
    settings = get_settings()
    registry = get_registry(settings, registry_path, seed)
    coins = registry.list_coins()
    sort_key = sort_key or settings.default_sort

    if not coins:
        console.print(Panel(
            "[dim]Create the first coin to start trading![/dim]\n\n"
            "Run [cyan]coinlaunch create NAME SYMBOL[/cyan] to launch one.",
            title="[bold]No Coins Available[/bold]",
            border_style="yellow",
        ))
        return

    console.print(render_stats(market_stats(coins)))
    console.print(render_market_table(rank(coins, sort_key), sort_key))
    console.print(
        f"\n[dim]Trading fee: {settings.fee_rate * 100:g}% - "
        f"use [cyan]coinlaunch trade ID AMOUNT[/cyan] to trade.[/dim]"
    )


@click.command()
@registry_option
@seed_option
def stats(registry_path: Optional[Path], seed: Optional[int]) -> None:
    """Show aggregate market statistics.

    \b
    Examples:
      coinlaunch stats
      coinlaunch stats --seed 42
    """
    settings = get_settings()
    registry = get_registry(settings, registry_path, seed)
    console.print(render_stats(market_stats(registry.list_coins())))

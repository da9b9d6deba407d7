"""Coin creation command for CoinLaunch CLI."""

from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel

from coinlaunch.cli.common import console, error_panel, get_settings
from coinlaunch.launch import CoinCreationError, create_coin


@click.command()
@click.argument("name")
@click.argument("symbol")
@click.option(
    "-d", "--description",
    default="",
    help="Coin description (up to 500 characters).",
)
@click.option(
    "-i", "--image",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Coin logo (PNG, JPG, GIF; max 5MB).",
)
def create(name: str, symbol: str, description: str, image: Optional[Path]) -> None:
    """Create a new coin.

    NAME is the coin name (up to 50 characters).
    SYMBOL is the ticker symbol (up to 10 letters/digits, upper-cased).

    \b
    Examples:
      coinlaunch create "My Awesome Coin" MAC
      coinlaunch create "Moon Doge" mdoge -d "To the moon" -i logo.png
    """
    settings = get_settings()

    try:
        coin = create_coin(name, symbol, description=description, image=image)
    except CoinCreationError as e:
        error_panel(str(e), title="Create Error")

    details = (
        f"[bold]{escape(coin.name)}[/bold] ({coin.symbol})\n\n"
        f"ID:      {coin.id}\n"
        f"Created: {coin.created_at:%Y-%m-%d %H:%M:%S}"
    )
    if coin.description:
        details += f"\n\n{escape(coin.description)}"
    if coin.image:
        details += f"\n\nImage: {escape(coin.image)}"
    details += (
        f"\n\nMinting fee: [green]{settings.minting_fee:g} {settings.currency}[/green]"
        " [dim](all fees included)[/dim]"
    )

    console.print(Panel(
        details,
        title="[bold green]Coin Created[/bold green]",
        border_style="green",
    ))

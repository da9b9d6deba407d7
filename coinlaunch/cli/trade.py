"""Trade command for CoinLaunch CLI.

Drives the trade dialog: select a coin, set direction and amount, show
the fee breakdown, then hand the intent to the paper executor.
"""

from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.panel import Panel

from coinlaunch.cli.common import console, error_panel, get_registry, get_settings
from coinlaunch.cli.market import registry_option, seed_option
from coinlaunch.executors import PaperExecutor
from coinlaunch.market import InvalidAmount, format_amount, format_price
from coinlaunch.registry import CoinNotFoundError
from coinlaunch.trading import TradeComposer


@click.command()
@click.argument("coin_id")
@click.argument("amount")
@click.option(
    "--sell",
    is_flag=True,
    default=False,
    help="Sell instead of buy.",
)
@click.option(
    "-n", "--dry-run",
    is_flag=True,
    default=False,
    help="Show the fee breakdown without executing.",
)
@registry_option
@seed_option
def trade(
    coin_id: str,
    amount: str,
    sell: bool,
    dry_run: bool,
    registry_path: Optional[Path],
    seed: Optional[int],
) -> None:
    """Buy or sell a coin.

    COIN_ID is the coin's ID from the market table.
    AMOUNT is the trade amount in the trade currency (e.g. SOL).

    Buyers pay the amount plus the trading fee, sellers receive the
    amount minus the fee.

    \b
    Examples:
      coinlaunch trade 3 1.5            # Buy 1.5 SOL of coin 3
      coinlaunch trade 3 1.5 --sell     # Sell 1.5 SOL of coin 3
      coinlaunch trade 3 10 --dry-run   # Preview fees only
    """
    settings = get_settings()
    registry = get_registry(settings, registry_path, seed)

    try:
        coin = registry.get_coin(coin_id)
    except CoinNotFoundError:
        error_panel(
            f"Coin not found: {coin_id}",
            title="Trade Error",
            hint="Run [cyan]coinlaunch market[/cyan] to see available coins.",
        )

    composer = TradeComposer(fee_rate=settings.fee_rate)
    composer.select(coin)
    composer.set_direction("sell" if sell else "buy")
    composer.set_amount(amount)
    quote = composer.preview()
    fee_rate = composer.fee_rate

    try:
        intent = composer.submit()
    except InvalidAmount as e:
        error_panel(f"Invalid amount: {e}", title="Trade Error")

    side_color = "green" if quote.direction == "buy" else "red"
    net_label = "You pay" if quote.direction == "buy" else "You receive"
    currency = settings.currency

    console.print(Panel(
        f"[bold]{escape(coin.name)}[/bold] ({coin.symbol})  {format_price(coin.price)}\n\n"
        f"Side:        [{side_color}]{quote.direction.upper()}[/{side_color}]\n"
        f"Amount:      {format_amount(quote.amount, currency)}\n"
        f"Trading Fee ({fee_rate * 100:g}%): {format_amount(quote.fee, currency)}\n"
        f"{net_label}:{' ' * (12 - len(net_label))}[bold]{format_amount(quote.net, currency)}[/bold]",
        title="[bold cyan]Trade[/bold cyan]",
        border_style="cyan",
    ))

    if dry_run:
        console.print("[dim]Dry run - trade not executed.[/dim]")
        return

    receipt = PaperExecutor().execute(intent)

    console.print(Panel(
        f"[bold green]Trade Executed[/bold green]\n\n"
        f"Order ID: {receipt.order_id}\n"
        f"Status:   {receipt.status}\n\n"
        f"[dim]{receipt.message}[/dim]",
        title="[bold green]Success[/bold green]",
        border_style="green",
    ))

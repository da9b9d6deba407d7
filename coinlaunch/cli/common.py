"""Shared helpers for CoinLaunch CLI commands."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from coinlaunch.config import ConfigError, Settings, load_config
from coinlaunch.registry import CoinRegistry, JsonCoinRegistry, MockCoinRegistry

console = Console()


def error_panel(message: str, title: str = "Error", hint: str = "") -> None:
    """Print an error panel and exit with status 1.

    The message is escaped; the hint may contain rich markup.
    """
    if hint:
        hint = f"\n\n{hint}"
    console.print(Panel(
        f"[red]{escape(message)}[/red]{hint}",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def get_settings() -> Settings:
    """Load settings, exiting with an error panel if the config is invalid."""
    try:
        return load_config()
    except ConfigError as e:
        error_panel(str(e), title="Config Error")


def get_registry(
    settings: Settings,
    registry_path: Optional[Path] = None,
    seed: Optional[int] = None,
) -> CoinRegistry:
    """Get the coin registry.

    A JSON snapshot (from the option or config) wins over the mock market.
    """
    path = registry_path or settings.registry_path

    if path is not None:
        try:
            return JsonCoinRegistry(path)
        except FileNotFoundError:
            error_panel(f"Coin snapshot not found: {path}", title="Registry Error")
        except OSError as e:
            error_panel(f"Could not read coin snapshot {path}: {e}", title="Registry Error")
        except ValueError as e:
            error_panel(f"Invalid coin snapshot {path}:\n{e}", title="Registry Error")

    return MockCoinRegistry(
        seed=seed if seed is not None else settings.seed,
        count=settings.mock_count,
    )

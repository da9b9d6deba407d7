"""Configuration loading for CoinLaunch.

Settings are read from ~/.config/coinlaunch/config.toml (or the path in
COINLAUNCH_CONFIG). A missing file means defaults.

Example config.toml:

    [trading]
    fee_rate = 0.02
    currency = "SOL"

    [market]
    default_sort = "volume"
    seed = 42
    mock_count = 12
    registry_path = "~/coins.json"

    [launch]
    minting_fee = 0.11
"""

import os
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from coinlaunch.launch.creator import MINTING_FEE
from coinlaunch.market.valuation import DEFAULT_FEE_RATE
from coinlaunch.registry.mock import MockCoinRegistry

CONFIG_ENV_VAR = "COINLAUNCH_CONFIG"


class ConfigError(Exception):
    """Raised when the config file cannot be read or is invalid."""


class Settings(BaseModel):
    """Validated CoinLaunch settings."""

    fee_rate: float = Field(
        default=DEFAULT_FEE_RATE, ge=0, lt=1, description="Trading fee rate"
    )
    currency: str = Field(default="SOL", min_length=1, description="Trade currency")
    default_sort: Literal["price", "volume", "change"] = Field(
        default="volume", description="Default market sort key"
    )
    seed: int = Field(
        default=MockCoinRegistry.DEFAULT_SEED,
        description="Mock market seed",
    )
    mock_count: int = Field(
        default=MockCoinRegistry.DEFAULT_COUNT, ge=0, description="Mock coin count"
    )
    registry_path: Optional[Path] = Field(
        default=None, description="JSON coin snapshot to load instead of mocks"
    )
    minting_fee: float = Field(
        default=MINTING_FEE, ge=0, description="All-inclusive minting fee"
    )

    model_config = {"frozen": True}


def get_config_path() -> Path:
    """Get the config file path."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "coinlaunch" / "config.toml"


def load_config(path: Optional[Path] = None) -> Settings:
    """Load settings from a TOML config file.

    Args:
        path: Config file path. Defaults to get_config_path().

    Returns:
        Settings; defaults if the file does not exist.

    Raises:
        ConfigError: If the file is malformed or a value is invalid.
    """
    import toml

    config_path = path or get_config_path()

    if not config_path.exists():
        return Settings()

    try:
        config = toml.load(str(config_path))
    except (OSError, toml.TomlDecodeError) as e:
        raise ConfigError(f"Could not read {config_path}: {e}") from e

    trading = config.get("trading", {})
    market = config.get("market", {})
    launch = config.get("launch", {})

    values = {
        "fee_rate": trading.get("fee_rate"),
        "currency": trading.get("currency"),
        "default_sort": market.get("default_sort"),
        "seed": market.get("seed"),
        "mock_count": market.get("mock_count"),
        "registry_path": market.get("registry_path"),
        "minting_fee": launch.get("minting_fee"),
    }
    values = {k: v for k, v in values.items() if v is not None}

    if "registry_path" in values:
        values["registry_path"] = Path(values["registry_path"]).expanduser()

    try:
        return Settings(**values)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e

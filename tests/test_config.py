"""Tests for configuration loading.

**Feature: coin-launch**
"""

from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from coinlaunch.config import ConfigError, Settings, get_config_path, load_config


class TestLoadConfig:
    """
    **Feature: coin-launch, Property 12: Config Validation**

    *For any* fee rate in [0, 1) the config loads; anything else is
    rejected with ConfigError.
    """

    def test_missing_file_gives_defaults(self, tmp_path: Path):
        config = load_config(tmp_path / "missing.toml")

        assert config == Settings()
        assert config.fee_rate == 0.02
        assert config.currency == "SOL"
        assert config.default_sort == "volume"
        assert config.minting_fee == 0.11
        assert config.registry_path is None
        assert config.seed == 42

    def test_full_config(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text(
            "[trading]\n"
            "fee_rate = 0.01\n"
            'currency = "USDC"\n'
            "\n"
            "[market]\n"
            'default_sort = "change"\n'
            "seed = 42\n"
            "mock_count = 5\n"
            'registry_path = "coins.json"\n'
            "\n"
            "[launch]\n"
            "minting_fee = 0.2\n"
        )

        config = load_config(path)

        assert config.fee_rate == 0.01
        assert config.currency == "USDC"
        assert config.default_sort == "change"
        assert config.seed == 42
        assert config.mock_count == 5
        assert config.registry_path == Path("coins.json")
        assert config.minting_fee == 0.2

    def test_partial_config_keeps_defaults(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[market]\nseed = 7\n")

        config = load_config(path)

        assert config.seed == 7
        assert config.fee_rate == 0.02

    @given(fee_rate=st.floats(min_value=0, max_value=0.999, allow_nan=False))
    @settings(max_examples=30)
    def test_valid_fee_rates(self, fee_rate: float):
        assert Settings(fee_rate=fee_rate).fee_rate == fee_rate

    @pytest.mark.parametrize("fee_rate", ["1.5", "-0.1", "1.0"])
    def test_invalid_fee_rate(self, tmp_path: Path, fee_rate: str):
        path = tmp_path / "config.toml"
        path.write_text(f"[trading]\nfee_rate = {fee_rate}\n")

        with pytest.raises(ConfigError, match="Invalid config"):
            load_config(path)

    def test_invalid_sort_key(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text('[market]\ndefault_sort = "holders"\n')

        with pytest.raises(ConfigError):
            load_config(path)

    def test_malformed_toml(self, tmp_path: Path):
        path = tmp_path / "config.toml"
        path.write_text("[trading\nfee_rate = ")

        with pytest.raises(ConfigError, match="Could not read"):
            load_config(path)


class TestConfigPath:
    """Config path resolution."""

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("COINLAUNCH_CONFIG", raising=False)

        assert get_config_path() == Path.home() / ".config" / "coinlaunch" / "config.toml"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text("[trading]\nfee_rate = 0.05\n")
        monkeypatch.setenv("COINLAUNCH_CONFIG", str(path))

        assert get_config_path() == path
        assert load_config().fee_rate == 0.05

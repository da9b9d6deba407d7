"""Property-based tests for the valuation engine.

**Feature: coin-launch**
"""

import math
from datetime import datetime

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from coinlaunch.market import (
    DEFAULT_FEE_RATE,
    InvalidAmount,
    aggregate,
    compute_fee,
    compute_net,
    format_amount,
    format_change,
    format_price,
    format_volume,
    validate_fee_rate,
)
from coinlaunch.models import Coin


def coin_strategy():
    """Generate valid Coin objects for testing."""
    return st.builds(
        Coin,
        id=st.text(
            alphabet=st.characters(whitelist_categories=("Ll", "Nd")),
            min_size=1,
            max_size=8,
        ),
        name=st.text(min_size=1, max_size=50),
        symbol=st.from_regex(r"[A-Z0-9]{1,10}", fullmatch=True),
        created_at=st.datetimes(
            min_value=datetime(2020, 1, 1),
            max_value=datetime(2030, 12, 31),
        ),
        price=st.floats(min_value=0, max_value=1e6, allow_nan=False, allow_infinity=False),
        change_24h=st.floats(min_value=-100, max_value=1e4, allow_nan=False, allow_infinity=False),
        volume_24h=st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False),
        market_cap=st.floats(min_value=0, max_value=1e12, allow_nan=False, allow_infinity=False),
        holders=st.integers(min_value=0, max_value=10_000_000),
    )


amounts = st.floats(min_value=1e-6, max_value=1e9, allow_nan=False, allow_infinity=False)
fee_rates = st.floats(min_value=0, max_value=0.5, allow_nan=False, allow_infinity=False)


class TestPriceFormatting:
    """
    **Feature: coin-launch, Property 1: Price Precision Bands**

    *For any* price, format_price uses 6 decimals iff the price is
    below 0.01, otherwise 4 decimals.
    """

    def test_sub_cent_price_rounds_to_six_decimals(self):
        assert format_price(0.0000055) == "$0.000006"

    def test_price_rounds_to_four_decimals(self):
        assert format_price(1.23456) == "$1.2346"

    def test_threshold_price_uses_four_decimals(self):
        assert format_price(0.01) == "$0.0100"

    def test_zero_price(self):
        assert format_price(0) == "$0.000000"

    @given(price=st.floats(min_value=0, max_value=1e9, allow_nan=False, allow_infinity=False))
    @settings(max_examples=200)
    def test_decimal_places_by_band(self, price: float):
        """
        *For any* non-negative price, the number of decimals is 6 for
        sub-cent prices and 4 otherwise.
        """
        formatted = format_price(price)

        assert formatted.startswith("$")
        decimals = formatted.split(".")[1]
        expected = 6 if price < 0.01 else 4
        assert len(decimals) == expected, f"{price} formatted as {formatted}"

    def test_non_finite_price_rejected(self):
        with pytest.raises(ValueError):
            format_price(float("nan"))


class TestVolumeFormatting:
    """
    **Feature: coin-launch, Property 2: Volume Magnitude Bands**

    *For any* non-negative volume, format_volume abbreviates millions
    with "M", thousands with "K", and shows smaller values as integers.
    """

    def test_millions(self):
        assert format_volume(2_500_000) == "$2.5M"

    def test_thousands(self):
        assert format_volume(4_200) == "$4.2K"

    def test_units(self):
        assert format_volume(850) == "$850"

    def test_units_round_half_up(self):
        assert format_volume(850.5) == "$851"

    def test_band_edges(self):
        assert format_volume(1_000_000) == "$1.0M"
        assert format_volume(1_000) == "$1.0K"
        assert format_volume(999) == "$999"
        assert format_volume(0) == "$0"

    @given(volume=st.floats(min_value=0, max_value=1e15, allow_nan=False, allow_infinity=False))
    @settings(max_examples=200)
    def test_suffix_matches_band(self, volume: float):
        """
        *For any* non-negative volume, the suffix matches its magnitude band.
        """
        formatted = format_volume(volume)

        if volume >= 1_000_000:
            assert formatted.endswith("M")
        elif volume >= 1_000:
            assert formatted.endswith("K")
        else:
            assert formatted[1:].isdigit(), f"{volume} formatted as {formatted}"


class TestChangeAndAmountFormatting:
    """Formatting of 24h change and fee/net amounts."""

    def test_positive_change_has_plus_sign(self):
        assert format_change(12.5) == "+12.50%"

    def test_negative_change(self):
        assert format_change(-3.1) == "-3.10%"

    def test_zero_change(self):
        assert format_change(0.0) == "+0.00%"
        assert format_change(-0.0) == "+0.00%"

    def test_amount_uses_four_decimals(self):
        assert format_amount(0.2) == "0.2000 SOL"
        assert format_amount(10.2, currency="USDC") == "10.2000 USDC"


class TestFeeComputation:
    """
    **Feature: coin-launch, Property 3: Fee Additivity**

    *For any* positive amount and fee rate, the fee equals amount * rate,
    buys pay amount + fee and sells receive amount - fee.
    """

    @given(amount=amounts, fee_rate=fee_rates)
    @settings(max_examples=200)
    def test_fee_equals_amount_times_rate(self, amount: float, fee_rate: float):
        assert compute_fee(amount, fee_rate) == amount * fee_rate

    @given(amount=amounts, fee_rate=fee_rates)
    @settings(max_examples=200)
    def test_fee_is_additive_for_buys(self, amount: float, fee_rate: float):
        """
        *For any* buy, net minus fee equals the requested amount.
        """
        net = compute_net(amount, fee_rate, "buy")
        fee = compute_fee(amount, fee_rate)

        assert net - fee == pytest.approx(amount, rel=1e-9)

    @given(amount=amounts, fee_rate=fee_rates)
    @settings(max_examples=200)
    def test_fee_is_subtractive_for_sells(self, amount: float, fee_rate: float):
        """
        *For any* sell, amount minus net equals the fee.
        """
        net = compute_net(amount, fee_rate, "sell")
        fee = compute_fee(amount, fee_rate)

        assert amount - net == pytest.approx(fee, rel=1e-9, abs=1e-9 * amount)

    def test_default_fee_example(self):
        assert compute_fee(10, DEFAULT_FEE_RATE) == pytest.approx(0.2)
        assert compute_net(10, DEFAULT_FEE_RATE, "buy") == pytest.approx(10.2)
        assert compute_net(10, DEFAULT_FEE_RATE, "sell") == pytest.approx(9.8)

    @pytest.mark.parametrize("amount", [0, -5, -0.0001, float("nan"), float("inf")])
    def test_invalid_amount_rejected(self, amount: float):
        with pytest.raises(InvalidAmount):
            compute_fee(amount, DEFAULT_FEE_RATE)
        with pytest.raises(InvalidAmount):
            compute_net(amount, DEFAULT_FEE_RATE, "buy")

    def test_non_numeric_amount_rejected(self):
        with pytest.raises(InvalidAmount):
            compute_fee("10", DEFAULT_FEE_RATE)

    def test_invalid_amount_is_value_error(self):
        with pytest.raises(ValueError):
            compute_fee(0, DEFAULT_FEE_RATE)

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValueError, match="Direction"):
            compute_net(10, DEFAULT_FEE_RATE, "hold")

    @pytest.mark.parametrize("fee_rate", [-0.01, 1.0, 1.5, float("nan")])
    def test_invalid_fee_rate_rejected(self, fee_rate: float):
        with pytest.raises(ValueError):
            validate_fee_rate(fee_rate)
        with pytest.raises(ValueError):
            compute_fee(10, fee_rate)

    def test_zero_fee_rate_allowed(self):
        assert compute_fee(10, 0.0) == 0.0
        assert compute_net(10, 0.0, "sell") == 10.0


class TestAggregate:
    """
    **Feature: coin-launch, Property 4: Market Stats Aggregation**

    *For any* coin collection, totals are the sums of volume and market
    cap, independent of order, and count is the collection size.
    """

    def test_empty_collection(self):
        stats = aggregate([])

        assert stats.total_volume == 0
        assert stats.total_market_cap == 0
        assert stats.count == 0

    @given(coins=st.lists(coin_strategy(), min_size=0, max_size=30))
    @settings(max_examples=100)
    def test_totals_match_sums(self, coins: list[Coin]):
        stats = aggregate(coins)

        assert stats.count == len(coins)
        assert stats.total_volume == pytest.approx(math.fsum(c.volume_24h for c in coins))
        assert stats.total_market_cap == pytest.approx(math.fsum(c.market_cap for c in coins))

    @given(coins=st.lists(coin_strategy(), min_size=0, max_size=30))
    @settings(max_examples=100)
    def test_order_independent(self, coins: list[Coin]):
        """
        *For any* coin collection, reversing it does not change the stats.
        """
        assert aggregate(coins) == aggregate(list(reversed(coins)))

    def test_accepts_any_iterable(self):
        coin = Coin(
            id="a",
            name="Alpha",
            symbol="ALPHA",
            created_at=datetime(2024, 1, 1),
            volume_24h=100.0,
            market_cap=2500.0,
        )

        stats = aggregate(c for c in [coin, coin])

        assert stats.count == 2
        assert stats.total_volume == 200.0
        assert stats.total_market_cap == 5000.0

    def test_overflowing_totals_raise(self):
        coins = [
            Coin(
                id=coin_id,
                name="Whale",
                symbol="WHALE",
                created_at=datetime(2024, 1, 1),
                volume_24h=1.7e308,
            )
            for coin_id in ("a", "b")
        ]

        with pytest.raises(OverflowError, match="too large"):
            aggregate(coins)

"""Tests for the SMA/EMA primitives shared by the indicators."""

from __future__ import annotations

import pytest

from signalix.engine.indicators import ema, sma


class TestSMACorrectness:
    """SMA averages the trailing window."""

    def test_value_at_exact_period(self) -> None:
        # (1+2+3+4+5) / 5 = 3.0
        assert sma([1.0, 2.0, 3.0, 4.0, 5.0], 5) == pytest.approx(3.0)

    def test_uses_only_last_period_values(self) -> None:
        assert sma([1.0, 2.0, 3.0, 4.0], 2) == pytest.approx(3.5)

    def test_matches_naive_mean_on_long_series(self) -> None:
        prices = [100.0 + i * 3.0 - (i % 7) for i in range(60)]
        assert sma(prices, 20) == pytest.approx(sum(prices[-20:]) / 20)

    def test_period_one_is_last_value(self) -> None:
        assert sma([7.0, 8.0, 9.0], 1) == 9.0


class TestSMAShortSeries:
    """Fewer values than the period fall back to the latest value."""

    def test_short_series_returns_last(self) -> None:
        assert sma([5.0], 3) == 5.0

    def test_short_series_ignores_earlier_values(self) -> None:
        assert sma([1.0, 50.0], 20) == 50.0


class TestSMAValidation:
    """Invalid arguments raise ValueError."""

    def test_zero_period_raises(self) -> None:
        with pytest.raises(ValueError, match="period"):
            sma([1.0, 2.0], 0)

    def test_empty_values_raises(self) -> None:
        with pytest.raises(ValueError):
            sma([], 3)


class TestEMA:
    """EMA is seeded with the first value, k = 2/(period+1)."""

    def test_three_values_period_three(self) -> None:
        # k = 0.5: 1 -> 1.5 -> 2.25
        assert ema([1.0, 2.0, 3.0], 3) == pytest.approx(2.25)

    def test_short_series_falls_back_to_sma(self) -> None:
        assert ema([1.0, 2.0], 3) == 2.0

    def test_constant_series_stays_constant(self) -> None:
        assert ema([4.0] * 30, 12) == pytest.approx(4.0)

    def test_rising_series_lags_price(self) -> None:
        values = [float(i) for i in range(1, 41)]
        result = ema(values, 12)
        assert result < values[-1]
        assert result > sma(values, 26)

    def test_shorter_period_tracks_closer(self) -> None:
        values = [float(i) for i in range(1, 61)]
        assert ema(values, 12) > ema(values, 26)

"""Shared test factories for creating domain objects.

Provides make_candle() and series builders with sensible defaults so tests
can focus on the values they care about, plus make_bundle() for building
aggregator inputs without going through the engine.
"""

from __future__ import annotations

from collections.abc import Sequence

from signalix.engine.types import (
    BollingerReading,
    IndicatorBundle,
    IndicatorReading,
    MACDReading,
    Signal,
    StochasticReading,
    TrendReading,
)
from signalix.market.types import Candle

# 2026-02-10 15:00 UTC
_DEFAULT_TIME = 1_770_735_600
_HOUR = 3600


def make_candle(
    *,
    time: int = _DEFAULT_TIME,
    open: float = 100.0,
    high: float = 101.0,
    low: float = 99.0,
    close: float = 100.5,
    volume_quote: float = 1000.0,
) -> Candle:
    """Create a Candle with sensible defaults."""
    return Candle(
        time=time,
        open=open,
        high=high,
        low=low,
        close=close,
        volume_quote=volume_quote,
    )


def make_series(
    closes: Sequence[float],
    *,
    volumes: Sequence[float] | None = None,
    wick: float = 0.0,
    start_time: int = _DEFAULT_TIME,
    interval: int = _HOUR,
) -> list[Candle]:
    """Build candles from closes. Each open is the previous close.

    High/low are the candle body extended by ``wick`` on both sides.
    """
    if volumes is None:
        volumes = [1000.0] * len(closes)
    candles: list[Candle] = []
    previous = closes[0]
    for i, (close, volume) in enumerate(zip(closes, volumes, strict=True)):
        candles.append(
            Candle(
                time=start_time + i * interval,
                open=previous,
                high=max(previous, close) + wick,
                low=min(previous, close) - wick,
                close=close,
                volume_quote=volume,
            )
        )
        previous = close
    return candles


def uptrend_closes(
    count: int,
    *,
    start: float = 100.0,
    step_pct: float = 0.5,
) -> list[float]:
    """Strictly rising closes, each ``step_pct`` percent above the last."""
    factor = 1 + step_pct / 100
    return [start * factor**i for i in range(count)]


def zigzag_uptrend_closes(
    count: int,
    *,
    start: float = 100.0,
    up_pct: float = 1.0,
    down_pct: float = 0.5,
) -> list[float]:
    """Net-rising closes alternating +up_pct / -down_pct (odd steps rise)."""
    closes = [start]
    for i in range(1, count):
        pct = up_pct if i % 2 == 1 else -down_pct
        closes.append(closes[-1] * (1 + pct / 100))
    return closes


def _reading(
    signal: Signal,
    strength: float,
    value: float | str = 0.0,
) -> IndicatorReading:
    return IndicatorReading(value, signal, "test", strength)


def make_bundle(
    *,
    rsi: Signal = Signal.NEUTRAL,
    stochastic: Signal = Signal.NEUTRAL,
    macd: Signal = Signal.NEUTRAL,
    trend: Signal = Signal.NEUTRAL,
    momentum: Signal = Signal.NEUTRAL,
    bollinger: Signal = Signal.NEUTRAL,
    volume: Signal = Signal.NEUTRAL,
    roc: Signal = Signal.NEUTRAL,
    strength: float = 50.0,
    adx: float | str = "0.0",
    bollinger_width: float = 0.0,
) -> IndicatorBundle:
    """Create an IndicatorBundle with chosen signals and a shared strength."""
    return IndicatorBundle(
        rsi=_reading(rsi, strength, "50.0"),
        stochastic=StochasticReading(50.0, 50.0, stochastic, "test", strength),
        momentum=_reading(momentum, strength, "0.00"),
        roc=_reading(roc, strength, "0.00%"),
        macd=MACDReading(0.0, 0.0, 0.0, macd, "test", strength),
        adx=IndicatorReading(adx, Signal.NEUTRAL, "test", 0.0),
        sma20=100.0,
        sma50=100.0,
        sma200=100.0,
        trend_signal=TrendReading(trend, "test", strength),
        bollinger=BollingerReading(
            100.0, 100.0, 100.0, bollinger_width, bollinger, "test", strength
        ),
        volume_trend=_reading(volume, strength, "0.0%"),
    )

"""Indicator calculation over a candle series.

Every function is pure and recomputes from the trailing window of its input;
nothing is carried between calls. Short series never raise: below an
indicator's lookback the function returns a neutral placeholder with
strength 0 (or the documented fixed fallback), and every ratio is guarded so
NaN/inf never reaches a reading.

Two formulas are deliberate approximations, not textbook versions:

- Stochastic %D equals %K (no smoothing over a %K history).
- The MACD signal line is 0.9 x the MACD line (no 9-period EMA of the line).

Switching either to the textbook form changes downstream signals.
"""

from __future__ import annotations

import math
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

RSI_PERIOD = 14
STOCHASTIC_PERIOD = 14
MOMENTUM_PERIOD = 10
ROC_PERIOD = 9
MACD_FAST = 12
MACD_SLOW = 26
MACD_SIGNAL_RATIO = 0.9
BOLLINGER_PERIOD = 20
BOLLINGER_K = 2.0
VOLUME_PERIOD = 20

# Fixed strengths, not derived from magnitude
MOMENTUM_STRENGTH = 60.0
TREND_STRENGTH = 67.0
BOLLINGER_STRENGTH = 50.0

_INSUFFICIENT = "Insufficient data"


def _finite(value: float, default: float = 0.0) -> float:
    return value if math.isfinite(value) else default


def _ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or ``default`` for a zero or non-finite result."""
    if denominator == 0 or not math.isfinite(denominator):
        return default
    return _finite(numerator / denominator, default)


def _clamp_strength(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    return max(0.0, min(100.0, value))


# --- Shared primitives ---


def sma(values: Sequence[float], period: int) -> float:
    """Arithmetic mean of the last ``period`` values.

    With fewer than ``period`` values, returns the most recent value.
    """
    if period < 1:
        raise ValueError(f"SMA period must be >= 1, got {period}")
    if not values:
        raise ValueError("sma() requires at least one value")
    if len(values) < period:
        return values[-1]
    return sum(values[-period:]) / period


def ema(values: Sequence[float], period: int) -> float:
    """Exponential moving average, ``k = 2/(period+1)``, seeded with values[0].

    Series shorter than ``period`` fall back to sma().
    """
    if len(values) < period:
        return sma(values, period)
    k = 2 / (period + 1)
    result = values[0]
    for value in values[1:]:
        result = value * k + result * (1 - k)
    return result


# --- Momentum ---


def rsi(closes: Sequence[float], period: int = RSI_PERIOD) -> IndicatorReading:
    """RSI over the last ``period`` deltas (trailing window, no running smooth).

    With no losses in the window the ratio is undefined and RSI is 50.
    """
    if len(closes) < period + 1:
        return IndicatorReading("50.0", Signal.NEUTRAL, _INSUFFICIENT, 0.0)

    gains = 0.0
    losses = 0.0
    for i in range(len(closes) - period, len(closes)):
        delta = closes[i] - closes[i - 1]
        if delta >= 0:
            gains += delta
        else:
            losses -= delta

    avg_gain = gains / period
    avg_loss = losses / period
    value = 50.0
    if avg_loss != 0:
        value = _finite(100 - 100 / (1 + avg_gain / avg_loss), 50.0)

    if value > 70:
        signal, strength = Signal.DOWN, 85.0
        description = "Overbought - potential reversal"
    elif value < 30:
        signal, strength = Signal.UP, 85.0
        description = "Oversold - potential bounce"
    elif value > 55:
        signal, strength = Signal.UP, 60.0
        description = "Bullish momentum"
    elif value < 45:
        signal, strength = Signal.DOWN, 60.0
        description = "Bearish momentum"
    else:
        signal, strength = Signal.NEUTRAL, 50.0
        description = "Neutral range"

    return IndicatorReading(f"{value:.1f}", signal, description, strength)


def stochastic(
    candles: Sequence[Candle],
    period: int = STOCHASTIC_PERIOD,
) -> StochasticReading:
    """%K of the latest close within the ``period`` high/low range; %D = %K."""
    placeholder = StochasticReading(50.0, 50.0, Signal.NEUTRAL, _INSUFFICIENT, 0.0)
    if len(candles) < period:
        return placeholder

    window = candles[-period:]
    lowest_low = min(c.low for c in window)
    highest_high = max(c.high for c in window)
    span = highest_high - lowest_low
    if span <= 0 or not math.isfinite(span):
        return placeholder

    k = _ratio(candles[-1].close - lowest_low, span, 0.5) * 100
    d = k

    if k < 20:
        signal, description = Signal.UP, "Oversold"
    elif k > 80:
        signal, description = Signal.DOWN, "Overbought"
    elif k > 50:
        signal, description = Signal.UP, "Bullish momentum"
    else:
        signal, description = Signal.DOWN, "Bearish momentum"

    strength = _clamp_strength(abs(k - 50) + 20)
    return StochasticReading(k, d, signal, description, strength)


def momentum(
    closes: Sequence[float],
    period: int = MOMENTUM_PERIOD,
) -> IndicatorReading:
    """Latest close minus the first close of the trailing ``period`` window."""
    if len(closes) < period:
        return IndicatorReading("0.00", Signal.NEUTRAL, _INSUFFICIENT, 0.0)

    change = _finite(closes[-1] - closes[-period])
    signal = Signal.UP if change > 0 else Signal.DOWN
    return IndicatorReading(
        f"{change:.2f}",
        signal,
        f"{period}-period momentum",
        MOMENTUM_STRENGTH,
    )


def rate_of_change(
    closes: Sequence[float],
    period: int = ROC_PERIOD,
) -> IndicatorReading:
    """Percent change versus the close ``period`` candles back."""
    if len(closes) < period + 1:
        return IndicatorReading("0.00%", Signal.NEUTRAL, _INSUFFICIENT, 0.0)

    previous = closes[-1 - period]
    roc = _ratio(closes[-1] - previous, previous) * 100

    if roc > 0:
        signal, description = Signal.UP, "Positive rate of change"
    elif roc < 0:
        signal, description = Signal.DOWN, "Negative rate of change"
    else:
        signal, description = Signal.NEUTRAL, "No rate of change"

    return IndicatorReading(
        f"{roc:.2f}%",
        signal,
        description,
        _clamp_strength(abs(roc) * 20),
    )


# --- Trend ---


def macd(closes: Sequence[float]) -> MACDReading:
    """EMA12 - EMA26 with the approximated signal line (0.9 x line).

    No placeholder: below 26 closes ema() falls back to sma(), so a short
    series still votes. With fewer than 12 closes the line is 0 (DOWN).
    """
    line = _finite(ema(closes, MACD_FAST) - ema(closes, MACD_SLOW))
    signal_line = line * MACD_SIGNAL_RATIO
    histogram = line - signal_line

    if histogram > 0:
        signal, description = Signal.UP, "Bullish crossover detected"
    else:
        signal, description = Signal.DOWN, "Bearish divergence"

    return MACDReading(
        line,
        signal_line,
        histogram,
        signal,
        description,
        _clamp_strength(abs(histogram) * 1000),
    )


def adx_proxy(closes: Sequence[float]) -> IndicatorReading:
    """Trend-strength magnitude from the SMA20/SMA50 spread.

    Not Wilder's ADX: there is no directional movement or true range here.
    The spread is scaled (x1000, x5) and capped at 100. Always NEUTRAL.
    """
    sma20 = sma(closes, 20)
    sma50 = sma(closes, 50)
    spread = abs(_ratio(sma20 - sma50, sma50)) * 1000
    value = _clamp_strength(spread * 5)

    description = "Weak trend"
    if value > 25:
        description = "Strong trend"
    if value > 50:
        description = "Very strong trend"

    return IndicatorReading(f"{value:.1f}", Signal.NEUTRAL, description, value)


def trend_signal(close: float, sma20: float, sma50: float) -> TrendReading:
    """UP when close and SMA20 are both above SMA50, DOWN when both below."""
    if close > sma50 and sma20 > sma50:
        return TrendReading(Signal.UP, "Price above SMA50 - Bullish", TREND_STRENGTH)
    if close < sma50 and sma20 < sma50:
        return TrendReading(Signal.DOWN, "Price below SMA50 - Bearish", TREND_STRENGTH)
    return TrendReading(Signal.NEUTRAL, "Sideways", TREND_STRENGTH)


# --- Volatility ---


def bollinger_bands(
    closes: Sequence[float],
    period: int = BOLLINGER_PERIOD,
    k: float = BOLLINGER_K,
) -> BollingerReading:
    """SMA ± k·σ over the trailing window (population σ).

    The signal flags volatility, not direction: UP means the bands are
    wider than 1% of price, NEUTRAL means they are tight.
    """
    if len(closes) < period:
        last = closes[-1]
        return BollingerReading(
            last, last, last, 0.0, Signal.NEUTRAL, _INSUFFICIENT, 0.0
        )

    window = closes[-period:]
    middle = sum(window) / period
    variance = sum((p - middle) * (p - middle) for p in window) / period
    std_dev = _finite(math.sqrt(variance)) if variance >= 0 else 0.0
    upper = middle + k * std_dev
    lower = middle - k * std_dev
    width = _ratio(upper - lower, middle) * 100

    if width < 1:
        signal, description = Signal.NEUTRAL, "Tight bands - low volatility"
    else:
        signal, description = Signal.UP, "Bands expanding - elevated volatility"

    return BollingerReading(
        upper, middle, lower, width, signal, description, BOLLINGER_STRENGTH
    )


# --- Volume ---


def volume_trend(
    volumes: Sequence[float],
    period: int = VOLUME_PERIOD,
) -> IndicatorReading:
    """Latest volume versus its SMA, in percent.

    Contraction is NEUTRAL, never DOWN: volume confirms moves but does not
    originate bearish calls.
    """
    average = sma(volumes, period)
    change = _ratio(volumes[-1] - average, average) * 100

    signal = Signal.UP if change > 0 else Signal.NEUTRAL
    if change > 20:
        description = "Strong volume confirmation"
    elif change < -20:
        description = "Low volume"
    else:
        description = "Normal volume"

    sign = "+" if change > 0 else ""
    return IndicatorReading(
        f"{sign}{change:.1f}%",
        signal,
        description,
        _clamp_strength(abs(change)),
    )


# --- Bundle ---


def compute_indicators(candles: Sequence[Candle]) -> IndicatorBundle:
    """Compute every indicator for an ascending candle series.

    Raises ValueError only for an empty series; any non-empty series,
    however short, produces a complete bundle.
    """
    if not candles:
        raise ValueError("compute_indicators() requires at least one candle")

    closes = [c.close for c in candles]
    volumes = [c.volume_quote for c in candles]

    sma20 = sma(closes, 20)
    sma50 = sma(closes, 50)
    sma200 = sma(closes, 200)

    return IndicatorBundle(
        rsi=rsi(closes),
        stochastic=stochastic(candles),
        momentum=momentum(closes),
        roc=rate_of_change(closes),
        macd=macd(closes),
        adx=adx_proxy(closes),
        sma20=sma20,
        sma50=sma50,
        sma200=sma200,
        trend_signal=trend_signal(closes[-1], sma20, sma50),
        bollinger=bollinger_bands(closes),
        volume_trend=volume_trend(volumes),
    )

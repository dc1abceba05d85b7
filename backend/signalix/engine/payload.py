"""Engine types to presentation payload converters.

The presentation layer renders these dicts directly, so keys use the
established camelCase contract names (``trendSignal``, ``upCount``, ...).
Signals and regimes are emitted as their string values.
"""

from __future__ import annotations

from typing import Any

from signalix.engine.types import (
    AggregationResult,
    BollingerReading,
    IndicatorBundle,
    IndicatorReading,
    MACDReading,
    StochasticReading,
    TrendReading,
)


def reading_to_payload(reading: IndicatorReading) -> dict[str, Any]:
    return {
        "value": reading.value,
        "signal": reading.signal.value,
        "description": reading.description,
        "strength": reading.strength,
    }


def _stochastic(reading: StochasticReading) -> dict[str, Any]:
    return {
        "k": reading.k,
        "d": reading.d,
        "signal": reading.signal.value,
        "description": reading.description,
        "strength": reading.strength,
    }


def _macd(reading: MACDReading) -> dict[str, Any]:
    return {
        "value": reading.value,
        "signalLine": reading.signal_line,
        "histogram": reading.histogram,
        "signal": reading.signal.value,
        "description": reading.description,
        "strength": reading.strength,
    }


def _trend(reading: TrendReading) -> dict[str, Any]:
    return {
        "signal": reading.signal.value,
        "description": reading.description,
        "strength": reading.strength,
    }


def _bollinger(reading: BollingerReading) -> dict[str, Any]:
    return {
        "upper": reading.upper,
        "middle": reading.middle,
        "lower": reading.lower,
        "width": reading.width,
        "signal": reading.signal.value,
        "description": reading.description,
        "strength": reading.strength,
    }


def bundle_to_payload(bundle: IndicatorBundle) -> dict[str, Any]:
    """Convert an IndicatorBundle to the presentation dict."""
    return {
        "rsi": reading_to_payload(bundle.rsi),
        "stochastic": _stochastic(bundle.stochastic),
        "momentum": reading_to_payload(bundle.momentum),
        "roc": reading_to_payload(bundle.roc),
        "macd": _macd(bundle.macd),
        "adx": reading_to_payload(bundle.adx),
        "sma20": bundle.sma20,
        "sma50": bundle.sma50,
        "sma200": bundle.sma200,
        "trendSignal": _trend(bundle.trend_signal),
        "bollinger": _bollinger(bundle.bollinger),
        "volumeTrend": reading_to_payload(bundle.volume_trend),
    }


def aggregation_to_payload(result: AggregationResult) -> dict[str, Any]:
    """Convert an AggregationResult to the presentation dict."""
    return {
        "upCount": result.up_count,
        "downCount": result.down_count,
        "neutralCount": result.neutral_count,
        "upScore": result.up_score,
        "downScore": result.down_score,
        "alignment": result.alignment,
        "marketRegime": result.market_regime.value,
    }

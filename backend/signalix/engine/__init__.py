"""Engine layer: indicator calculation and signal aggregation."""

from signalix.engine.aggregator import aggregate, classify_regime
from signalix.engine.indicators import compute_indicators, ema, sma
from signalix.engine.payload import aggregation_to_payload, bundle_to_payload
from signalix.engine.types import (
    AggregationResult,
    BollingerReading,
    IndicatorBundle,
    IndicatorReading,
    MACDReading,
    MarketRegime,
    Signal,
    StochasticReading,
    TrendReading,
)

__all__ = [
    "AggregationResult",
    "BollingerReading",
    "IndicatorBundle",
    "IndicatorReading",
    "MACDReading",
    "MarketRegime",
    "Signal",
    "StochasticReading",
    "TrendReading",
    "aggregate",
    "aggregation_to_payload",
    "bundle_to_payload",
    "classify_regime",
    "compute_indicators",
    "ema",
    "sma",
]

"""Signal aggregation: IndicatorBundle -> AggregationResult.

Direction comes from the seven tallied readings; regime comes from ADX and
Bollinger width, which describe market character rather than direction.
"""

from __future__ import annotations

from signalix.engine.types import (
    AggregationResult,
    IndicatorBundle,
    MarketRegime,
    Signal,
)

TRENDING_ADX_THRESHOLD = 25.0
VOLATILE_WIDTH_THRESHOLD = 3.0


def _adx_value(value: float | str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def classify_regime(bundle: IndicatorBundle) -> MarketRegime:
    """ADX > 25 is TRENDING, else Bollinger width > 3 is VOLATILE, else RANGING."""
    if _adx_value(bundle.adx.value) > TRENDING_ADX_THRESHOLD:
        return MarketRegime.TRENDING
    if bundle.bollinger.width > VOLATILE_WIDTH_THRESHOLD:
        return MarketRegime.VOLATILE
    return MarketRegime.RANGING


def aggregate(bundle: IndicatorBundle) -> AggregationResult:
    """Tally the directional readings and classify the regime.

    Strengths add to the score of their direction; NEUTRAL readings count
    but score nothing. Alignment is the share of the majority direction.
    """
    readings = bundle.tallied()

    up_count = down_count = neutral_count = 0
    up_score = down_score = 0.0
    for reading in readings:
        if reading.signal == Signal.UP:
            up_count += 1
            up_score += reading.strength
        elif reading.signal == Signal.DOWN:
            down_count += 1
            down_score += reading.strength
        else:
            neutral_count += 1

    alignment = max(up_count, down_count) / len(readings) * 100

    return AggregationResult(
        up_count=up_count,
        down_count=down_count,
        neutral_count=neutral_count,
        up_score=up_score,
        down_score=down_score,
        alignment=alignment,
        market_regime=classify_regime(bundle),
    )

"""Indicator engine value types.

Every reading is a frozen dataclass carrying the same ``signal`` /
``description`` / ``strength`` triple, so the aggregator can treat them
uniformly. Strength is a 0-100 magnitude proxy, independent of direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Signal(str, Enum):
    """Three-way directional call. Values are part of the display contract."""

    UP = "UP"
    DOWN = "DOWN"
    NEUTRAL = "NEUTRAL"


class MarketRegime(str, Enum):
    """Market character, independent of direction."""

    TRENDING = "TRENDING"
    VOLATILE = "VOLATILE"
    RANGING = "RANGING"


class DirectionalReading(Protocol):
    """Anything the aggregator can tally."""

    @property
    def signal(self) -> Signal: ...

    @property
    def strength(self) -> float: ...


@dataclass(frozen=True)
class IndicatorReading:
    """Generic reading with a display-formatted value.

    ``strength`` is a float in [0, 100] and is never rounded to an integer,
    so proportional strengths such as ``|roc| * 20`` keep their fraction.
    """

    value: float | str
    signal: Signal
    description: str
    strength: float


@dataclass(frozen=True)
class StochasticReading:
    """Stochastic oscillator. ``d`` mirrors ``k`` (no %D smoothing)."""

    k: float
    d: float
    signal: Signal
    description: str
    strength: float


@dataclass(frozen=True)
class MACDReading:
    """MACD line with an approximated signal line (0.9 x line)."""

    value: float
    signal_line: float
    histogram: float
    signal: Signal
    description: str
    strength: float


@dataclass(frozen=True)
class TrendReading:
    """Close/SMA20 position relative to SMA50."""

    signal: Signal
    description: str
    strength: float


@dataclass(frozen=True)
class BollingerReading:
    """Bollinger bands. ``width`` is the band spread as percent of the middle."""

    upper: float
    middle: float
    lower: float
    width: float
    signal: Signal
    description: str
    strength: float


@dataclass(frozen=True)
class IndicatorBundle:
    """All readings for one analysis run, plus the raw SMA scalars."""

    rsi: IndicatorReading
    stochastic: StochasticReading
    momentum: IndicatorReading
    roc: IndicatorReading
    macd: MACDReading
    adx: IndicatorReading
    sma20: float
    sma50: float
    sma200: float
    trend_signal: TrendReading
    bollinger: BollingerReading
    volume_trend: IndicatorReading

    def tallied(self) -> tuple[DirectionalReading, ...]:
        """The seven readings that vote on direction.

        ADX and ROC are display-only here and never vote. ADX still
        feeds regime classification in the aggregator.
        """
        return (
            self.rsi,
            self.stochastic,
            self.macd,
            self.trend_signal,
            self.momentum,
            self.bollinger,
            self.volume_trend,
        )


@dataclass(frozen=True)
class AggregationResult:
    """Signal tally over the seven directional readings."""

    up_count: int
    down_count: int
    neutral_count: int
    up_score: float
    down_score: float
    alignment: float
    market_regime: MarketRegime

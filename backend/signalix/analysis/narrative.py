"""Narrative (AI verdict) boundary.

The model call itself lives outside this package. This module defines what
the engine hands the generator (NarrativeContext), the protocol a generator
satisfies, and validation of the verdict it returns.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from signalix.engine.types import AggregationResult, IndicatorBundle, Signal
from signalix.market.types import Candle


class NarrativeError(Exception):
    """The narrative generator failed or returned an unusable verdict."""


@dataclass(frozen=True)
class NarrativeContext:
    """Indicator summary handed to the narrative generator."""

    pair_name: str
    timeframe: str
    last_price: float
    rsi: str
    sma20: float
    sma50: float
    sma200: float
    bollinger_upper: float
    bollinger_lower: float
    macd: float
    market_regime: str
    alignment: float
    recent_candles: tuple[Candle, ...]


def build_narrative_context(
    pair_name: str,
    timeframe: str,
    candles: Sequence[Candle],
    bundle: IndicatorBundle,
    aggregation: AggregationResult,
    recent: int = 15,
) -> NarrativeContext:
    """Condense one run into the prompt inputs for the narrative generator."""
    if not candles:
        raise ValueError("build_narrative_context() requires at least one candle")
    return NarrativeContext(
        pair_name=pair_name,
        timeframe=timeframe,
        last_price=candles[-1].close,
        rsi=str(bundle.rsi.value),
        sma20=bundle.sma20,
        sma50=bundle.sma50,
        sma200=bundle.sma200,
        bollinger_upper=bundle.bollinger.upper,
        bollinger_lower=bundle.bollinger.lower,
        macd=bundle.macd.value,
        market_regime=aggregation.market_regime.value,
        alignment=aggregation.alignment,
        recent_candles=tuple(candles[-recent:]),
    )


class Verdict(BaseModel):
    """Verdict returned by the narrative generator.

    Accepts both snake_case and the camelCase keys the model emits
    (``timeHorizon``, ``keyFactors``, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    verdict: Signal
    confidence: float = Field(ge=0, le=100)
    summary: str
    prediction_duration: str
    time_horizon: str = ""
    key_factors: list[str] = Field(default_factory=list)
    risk_warnings: list[str] = Field(default_factory=list)
    entry_zone: str | None = None
    target_zone: str | None = None
    stop_loss: str | None = None
    thought_process: str | None = None


def parse_verdict(payload: dict[str, Any]) -> Verdict:
    """Validate a raw verdict payload. Raises NarrativeError if it is unusable."""
    try:
        return Verdict.model_validate(payload)
    except ValidationError as e:
        raise NarrativeError(f"Invalid verdict payload: {e}") from e


@runtime_checkable
class NarrativeGenerator(Protocol):
    """Async interface of the narrative collaborator."""

    async def generate(self, context: NarrativeContext) -> Verdict:
        """Produce a verdict for the given context.

        Implementations raise NarrativeError on failure.
        """
        ...

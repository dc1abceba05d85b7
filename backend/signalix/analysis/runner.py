"""Analysis runner — orchestrates one analysis run.

Wires together: catalog lookup, CandleProvider, indicator engine, aggregator
and an optional NarrativeGenerator. The engine steps are synchronous and
never suspend; only the data fetch and the narrative call await.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from uuid import uuid4

import structlog

from signalix.analysis.narrative import (
    NarrativeGenerator,
    Verdict,
    build_narrative_context,
)
from signalix.config import AnalysisConfig
from signalix.engine.aggregator import aggregate
from signalix.engine.indicators import compute_indicators
from signalix.engine.types import AggregationResult, IndicatorBundle
from signalix.market.catalog import get_pair, get_timeframe
from signalix.market.provider import CandleProvider
from signalix.market.types import Candle, CryptoPair, TimeframeConfig
from signalix.utils.logging import run_context

log = structlog.get_logger()


class AnalysisError(Exception):
    """An analysis run could not produce a result."""


@dataclass(frozen=True)
class StageDurations:
    """Wall-clock seconds spent in each stage."""

    data: float
    technical: float
    aggregation: float
    narrative: float | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Complete output of one analysis run."""

    run_id: str
    pair: CryptoPair
    timeframe: TimeframeConfig
    candles: tuple[Candle, ...]
    indicators: IndicatorBundle
    aggregation: AggregationResult
    durations: StageDurations
    verdict: Verdict | None = None

    @property
    def last_price(self) -> float:
        return self.candles[-1].close


class AnalysisRunner:
    """Runs fetch → indicators → aggregation → (optional) narrative.

    The provider must already be connected (use it as ``async with``).
    """

    def __init__(
        self,
        provider: CandleProvider,
        narrator: NarrativeGenerator | None = None,
        config: AnalysisConfig | None = None,
    ) -> None:
        self._provider = provider
        self._narrator = narrator
        self._config = config if config is not None else AnalysisConfig()

    async def run(
        self,
        pair_symbol: str | None = None,
        timeframe_value: str | None = None,
    ) -> AnalysisResult:
        """Execute one run. Catalog errors are raised before any I/O."""
        pair = get_pair(pair_symbol or self._config.default_pair)
        timeframe = get_timeframe(timeframe_value or self._config.default_timeframe)

        run_id = uuid4().hex[:12]
        with run_context(run_id, pair=pair.symbol, timeframe=timeframe.value):
            return await self._run(run_id, pair, timeframe)

    async def _run(
        self,
        run_id: str,
        pair: CryptoPair,
        timeframe: TimeframeConfig,
    ) -> AnalysisResult:
        log.info("analysis_started")

        # 1. Data collection
        t0 = time.monotonic()
        candles = await self._provider.get_candles(pair, timeframe)
        data_duration = time.monotonic() - t0
        if not candles:
            raise AnalysisError(
                f"No candles returned for {pair.symbol} {timeframe.value}",
            )
        log.info("analysis_data_ready", candle_count=len(candles))

        # 2. Technical analysis
        t1 = time.monotonic()
        indicators = compute_indicators(candles)
        technical_duration = time.monotonic() - t1

        # 3. Signal aggregation
        t2 = time.monotonic()
        aggregation = aggregate(indicators)
        aggregation_duration = time.monotonic() - t2
        log.info(
            "analysis_aggregated",
            up=aggregation.up_count,
            down=aggregation.down_count,
            neutral=aggregation.neutral_count,
            alignment=round(aggregation.alignment, 1),
            regime=aggregation.market_regime.value,
        )

        # 4. Narrative verdict
        verdict: Verdict | None = None
        narrative_duration: float | None = None
        if self._narrator is not None:
            context = build_narrative_context(
                pair.name,
                timeframe.value,
                candles,
                indicators,
                aggregation,
                recent=self._config.narrative_candles,
            )
            t3 = time.monotonic()
            verdict = await self._narrator.generate(context)
            narrative_duration = time.monotonic() - t3
            log.info(
                "analysis_verdict",
                verdict=verdict.verdict.value,
                confidence=verdict.confidence,
            )

        return AnalysisResult(
            run_id=run_id,
            pair=pair,
            timeframe=timeframe,
            candles=tuple(candles),
            indicators=indicators,
            aggregation=aggregation,
            durations=StageDurations(
                data=data_duration,
                technical=technical_duration,
                aggregation=aggregation_duration,
                narrative=narrative_duration,
            ),
            verdict=verdict,
        )

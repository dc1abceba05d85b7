"""Tests for AnalysisRunner."""

from __future__ import annotations

import pytest

from signalix.analysis.narrative import (
    NarrativeContext,
    NarrativeError,
    Verdict,
    parse_verdict,
)
from signalix.analysis.runner import AnalysisError, AnalysisRunner
from signalix.config import AnalysisConfig
from signalix.engine.types import MarketRegime
from signalix.market.errors import (
    MarketDataNotConnectedError,
    UnknownPairError,
    UnknownTimeframeError,
)
from signalix.market.fake import FakeCandleProvider
from signalix.market.types import Candle
from signalix.utils.logging import get_run_id
from tests.factories import make_series, zigzag_uptrend_closes


class _RecordingNarrator:
    """NarrativeGenerator stub that records its inputs."""

    def __init__(self, fail: bool = False) -> None:
        self.contexts: list[NarrativeContext] = []
        self.run_ids: list[str] = []
        self._fail = fail

    async def generate(self, context: NarrativeContext) -> Verdict:
        self.contexts.append(context)
        self.run_ids.append(get_run_id())
        if self._fail:
            raise NarrativeError("model unavailable")
        return parse_verdict(
            {
                "verdict": "UP",
                "confidence": 70,
                "summary": "Bullish alignment.",
                "predictionDuration": "4-8 hours",
            }
        )


@pytest.fixture
def candles() -> list[Candle]:
    return make_series(zigzag_uptrend_closes(60))


@pytest.fixture
async def provider(candles: list[Candle]) -> FakeCandleProvider:
    fake = FakeCandleProvider({"BTC/USDT": candles})
    await fake.connect()
    return fake


class TestRun:
    """Fetch -> indicators -> aggregation."""

    async def test_full_run(self, provider: FakeCandleProvider) -> None:
        result = await AnalysisRunner(provider).run("BTC/USDT", "1h")
        assert result.pair.symbol == "BTC/USDT"
        assert result.timeframe.value == "1h"
        assert len(result.candles) == 60
        assert result.last_price == result.candles[-1].close
        assert result.aggregation.up_count == 5
        assert result.aggregation.market_regime == MarketRegime.TRENDING
        assert result.verdict is None
        assert result.durations.narrative is None
        assert result.durations.data >= 0

    async def test_defaults_from_config(self, provider: FakeCandleProvider) -> None:
        config = AnalysisConfig(default_pair="btc/usdt", default_timeframe="4h")
        await AnalysisRunner(provider, config=config).run()
        assert provider.requests == [("BTC/USDT", "4h")]

    async def test_run_id_is_hex(self, provider: FakeCandleProvider) -> None:
        result = await AnalysisRunner(provider).run("BTC/USDT", "1h")
        assert len(result.run_id) == 12
        int(result.run_id, 16)

    async def test_run_ids_differ(self, provider: FakeCandleProvider) -> None:
        runner = AnalysisRunner(provider)
        first = await runner.run("BTC/USDT", "1h")
        second = await runner.run("BTC/USDT", "1h")
        assert first.run_id != second.run_id

    async def test_run_id_cleared_after_run(
        self, provider: FakeCandleProvider
    ) -> None:
        await AnalysisRunner(provider).run("BTC/USDT", "1h")
        assert get_run_id() == ""

    async def test_history_truncated_to_timeframe_limit(self) -> None:
        closes = zigzag_uptrend_closes(100)
        fake = FakeCandleProvider({"BTC/USDT": make_series(closes)})
        async with fake:
            result = await AnalysisRunner(fake).run("BTC/USDT", "30s")
        assert len(result.candles) == 60


class TestRunErrors:
    """Failures surface as typed exceptions."""

    async def test_unknown_pair_before_fetch(
        self, provider: FakeCandleProvider
    ) -> None:
        with pytest.raises(UnknownPairError):
            await AnalysisRunner(provider).run("FOO/BAR", "1h")
        assert provider.requests == []

    async def test_unknown_timeframe_before_fetch(
        self, provider: FakeCandleProvider
    ) -> None:
        with pytest.raises(UnknownTimeframeError):
            await AnalysisRunner(provider).run("BTC/USDT", "7m")
        assert provider.requests == []

    async def test_empty_history(self, provider: FakeCandleProvider) -> None:
        with pytest.raises(AnalysisError, match="No candles returned for ETH/USDT"):
            await AnalysisRunner(provider).run("ETH/USDT", "1h")

    async def test_provider_not_connected(self, candles: list[Candle]) -> None:
        fake = FakeCandleProvider({"BTC/USDT": candles})
        with pytest.raises(MarketDataNotConnectedError):
            await AnalysisRunner(fake).run("BTC/USDT", "1h")

    async def test_run_id_cleared_after_failure(
        self, provider: FakeCandleProvider
    ) -> None:
        with pytest.raises(AnalysisError):
            await AnalysisRunner(provider).run("ETH/USDT", "1h")
        assert get_run_id() == ""


class TestNarrative:
    """Optional narrative stage."""

    async def test_verdict_attached(self, provider: FakeCandleProvider) -> None:
        narrator = _RecordingNarrator()
        result = await AnalysisRunner(provider, narrator=narrator).run(
            "BTC/USDT", "1h"
        )
        assert result.verdict is not None
        assert result.verdict.confidence == 70
        assert result.durations.narrative is not None

    async def test_context_built_from_run(self, provider: FakeCandleProvider) -> None:
        narrator = _RecordingNarrator()
        config = AnalysisConfig(narrative_candles=5)
        result = await AnalysisRunner(provider, narrator=narrator, config=config).run(
            "BTC/USDT", "1h"
        )
        context = narrator.contexts[0]
        assert context.pair_name == "Bitcoin"
        assert context.timeframe == "1h"
        assert context.last_price == result.last_price
        assert context.recent_candles == result.candles[-5:]
        assert context.market_regime == "TRENDING"

    async def test_generator_sees_run_id(
        self, provider: FakeCandleProvider
    ) -> None:
        narrator = _RecordingNarrator()
        result = await AnalysisRunner(provider, narrator=narrator).run(
            "BTC/USDT", "1h"
        )
        assert narrator.run_ids == [result.run_id]

    async def test_generator_failure_propagates(
        self, provider: FakeCandleProvider
    ) -> None:
        narrator = _RecordingNarrator(fail=True)
        with pytest.raises(NarrativeError, match="model unavailable"):
            await AnalysisRunner(provider, narrator=narrator).run("BTC/USDT", "1h")

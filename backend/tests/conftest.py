"""Shared test fixtures for signalix."""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator, Iterator
from types import SimpleNamespace
from typing import Any

import pytest
import structlog

from signalix.market.types import Candle
from tests.factories import make_series, uptrend_closes


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Drop handlers installed by setup_logging() and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def uptrend_candles() -> list[Candle]:
    """60 candles, each close +0.5% over the previous, flat volume."""
    return make_series(uptrend_closes(60))


@pytest.fixture
def flat_candles() -> list[Candle]:
    """60 candles at a constant close with a 1.0 wick either side."""
    return make_series([100.0] * 60, wick=1.0)


@pytest.fixture
def market_data_config() -> SimpleNamespace:
    """Minimal market data config for provider unit tests."""
    return SimpleNamespace(
        api_base="https://min-api.cryptocompare.com/data/v2",
        api_key="test-key",
        timeout_seconds=5.0,
    )


@pytest.fixture
def live_market_data_config() -> Any:
    """Market data config for live integration tests.

    Skips the test unless SIGNALIX_MARKET_DATA__API_KEY is set.
    """
    api_key = os.environ.get("SIGNALIX_MARKET_DATA__API_KEY", "")
    if not api_key:
        pytest.skip(
            "CryptoCompare API key not set. Set SIGNALIX_MARKET_DATA__API_KEY.",
        )
    return SimpleNamespace(
        api_base="https://min-api.cryptocompare.com/data/v2",
        api_key=api_key,
        timeout_seconds=15.0,
    )


@pytest.fixture
async def live_provider(live_market_data_config: Any) -> AsyncIterator[Any]:
    """Connected CryptoCompareProvider for integration tests."""
    from signalix.market.cryptocompare import CryptoCompareProvider

    provider = CryptoCompareProvider(live_market_data_config)
    await provider.connect()
    try:
        yield provider
    finally:
        await provider.disconnect()

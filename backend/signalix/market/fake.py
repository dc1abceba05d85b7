"""FakeCandleProvider — in-memory candle history for testing.

Lightweight implementation of CandleProvider for unit testing the analysis
runner and CLI without touching the network.
"""

from __future__ import annotations

from typing import Self

from signalix.market.errors import MarketDataNotConnectedError
from signalix.market.types import Candle, CryptoPair, TimeframeConfig


class FakeCandleProvider:
    """In-memory CandleProvider for testing.

    Supply canned candles per pair symbol at construction, or set them
    during a test via set_candles(). Records every request in ``requests``.
    """

    def __init__(
        self,
        candles: dict[str, list[Candle]] | None = None,
    ) -> None:
        self._candles: dict[str, list[Candle]] = candles if candles is not None else {}
        self._connected = False
        self.requests: list[tuple[str, str]] = []

    def set_candles(self, symbol: str, candles: list[Candle]) -> None:
        self._candles[symbol] = candles

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> None:
        self._connected = True

    async def disconnect(self) -> None:
        self._connected = False

    async def get_candles(
        self,
        pair: CryptoPair,
        timeframe: TimeframeConfig,
    ) -> list[Candle]:
        if not self._connected:
            raise MarketDataNotConnectedError("FakeCandleProvider is not connected")
        self.requests.append((pair.symbol, timeframe.value))
        return list(self._candles.get(pair.symbol, []))[-timeframe.limit :]

    async def __aenter__(self) -> Self:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.disconnect()

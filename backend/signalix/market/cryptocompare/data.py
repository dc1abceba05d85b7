"""CryptoCompareProvider — candle history via the CryptoCompare REST API.

One httpx.AsyncClient per connection. Transport-level failures are translated
into the MarketDataError hierarchy at this boundary.
"""

from __future__ import annotations

import asyncio
from typing import Any, Self

import httpx
import structlog

from signalix.market.cryptocompare.mappers import history_payload_to_candles
from signalix.market.errors import (
    MarketDataAPIError,
    MarketDataAuthError,
    MarketDataConnectionError,
    MarketDataNotConnectedError,
    MarketDataTimeoutError,
)
from signalix.market.types import Candle, CryptoPair, TimeframeConfig

logger = structlog.get_logger()


class CryptoCompareProvider:
    """CandleProvider implementation backed by CryptoCompare's history API.

    ``config`` needs ``api_base``, ``api_key`` and ``timeout_seconds``
    (see MarketDataConfig). ``transport`` is an injection point for tests.
    """

    def __init__(
        self,
        config: Any,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._lifecycle_lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Open the HTTP session."""
        async with self._lifecycle_lock:
            if self._client is not None:
                logger.warning("CryptoCompareProvider already connected")
                return

            headers: dict[str, str] = {}
            if self._config.api_key:
                headers["authorization"] = f"Apikey {self._config.api_key}"
            else:
                logger.warning(
                    "No CryptoCompare API key set; requests are rate-limited",
                )

            self._client = httpx.AsyncClient(
                base_url=self._config.api_base.rstrip("/"),
                headers=headers,
                timeout=self._config.timeout_seconds,
                transport=self._transport,
            )
            logger.info("CryptoCompareProvider connected")

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        async with self._lifecycle_lock:
            if self._client is None:
                return
            await self._client.aclose()
            self._client = None
            logger.info("CryptoCompareProvider disconnected")

    async def get_candles(
        self,
        pair: CryptoPair,
        timeframe: TimeframeConfig,
    ) -> list[Candle]:
        """Fetch history for ``pair`` at the timeframe's bucket size."""
        if self._client is None:
            raise MarketDataNotConnectedError(
                "Not connected. Call connect() first.",
            )

        params = {
            "fsym": pair.base,
            "tsym": pair.quote,
            "limit": timeframe.limit,
            "aggregate": timeframe.aggregate,
        }
        try:
            response = await self._client.get(
                f"/{timeframe.endpoint.value}",
                params=params,
            )
        except httpx.TimeoutException as e:
            raise MarketDataTimeoutError(
                f"Timed out fetching {pair.symbol} {timeframe.value}",
            ) from e
        except httpx.TransportError as e:
            raise MarketDataConnectionError(
                f"Failed to reach price API: {e}",
            ) from e

        if response.status_code in (401, 403):
            raise MarketDataAuthError(
                f"Price API rejected credentials (HTTP {response.status_code})",
            )
        if response.status_code >= 400:
            raise MarketDataAPIError(response.status_code, response.text)

        try:
            payload = response.json()
        except ValueError as e:
            raise MarketDataAPIError(
                response.status_code,
                "Response body is not JSON",
            ) from e

        candles = history_payload_to_candles(payload, response.status_code)
        logger.debug(
            "candles_fetched",
            pair=pair.symbol,
            timeframe=timeframe.value,
            count=len(candles),
        )
        return candles

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

"""CandleProvider protocol — abstract interface for historical price sources.

All market data implementations (CryptoCompare, fake) must satisfy this protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from signalix.market.types import Candle, CryptoPair, TimeframeConfig


@runtime_checkable
class CandleProvider(Protocol):
    """Async interface for fetching candle history.

    Implementations must support ``async with`` for lifecycle management.
    """

    async def connect(self) -> None:
        """Open the underlying session."""
        ...

    async def disconnect(self) -> None:
        """Close the session and release resources."""
        ...

    async def get_candles(
        self,
        pair: CryptoPair,
        timeframe: TimeframeConfig,
    ) -> list[Candle]:
        """Fetch candle history for a pair.

        Args:
            pair: Catalog pair (base/quote drive the request).
            timeframe: Catalog timeframe (endpoint, aggregate and limit).

        Returns:
            List of Candle objects ordered by time ascending.
        """
        ...

    async def __aenter__(self) -> CandleProvider:
        """Connect on context manager entry."""
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Disconnect on context manager exit."""
        ...

"""Market data error hierarchy.

All market-data exceptions inherit from MarketDataError, enabling
clean exception handling at the provider boundary.
"""

from __future__ import annotations


class MarketDataError(Exception):
    """Base exception for all market-data errors."""


class MarketDataConnectionError(MarketDataError):
    """Network failures reaching the price API."""


class MarketDataAuthError(MarketDataError):
    """Invalid or missing API credentials (HTTP 401/403)."""


class MarketDataAPIError(MarketDataError):
    """Price API rejected the request (HTTP 4xx/5xx or an error body).

    Stores the HTTP status code and error message from the API.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"Market data API error {status_code}: {message}")


class MarketDataTimeoutError(MarketDataError):
    """Request timeout when talking to the price API."""


class MarketDataNotConnectedError(MarketDataError):
    """Method called before connect() was called."""


class UnknownPairError(MarketDataError, ValueError):
    """Pair symbol is not in the supported catalog."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"Unsupported pair: {symbol!r}")


class UnknownTimeframeError(MarketDataError, ValueError):
    """Timeframe value is not in the supported catalog."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unsupported timeframe: {value!r}")

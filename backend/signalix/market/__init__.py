"""Market data layer.

Re-exports public types, the catalog, the provider protocol and errors:
    from signalix.market import Candle, CandleProvider, get_pair, MarketDataError
"""

from signalix.market.catalog import (
    SUPPORTED_PAIRS,
    TIMEFRAMES,
    get_pair,
    get_timeframe,
    pairs_by_type,
)
from signalix.market.errors import (
    MarketDataAPIError,
    MarketDataAuthError,
    MarketDataConnectionError,
    MarketDataError,
    MarketDataNotConnectedError,
    MarketDataTimeoutError,
    UnknownPairError,
    UnknownTimeframeError,
)
from signalix.market.provider import CandleProvider
from signalix.market.types import (
    AssetType,
    Candle,
    CryptoPair,
    HistoEndpoint,
    TimeframeConfig,
    TradingStyle,
)

__all__ = [
    "SUPPORTED_PAIRS",
    "TIMEFRAMES",
    "AssetType",
    "Candle",
    "CandleProvider",
    "CryptoPair",
    "HistoEndpoint",
    "MarketDataAPIError",
    "MarketDataAuthError",
    "MarketDataConnectionError",
    "MarketDataError",
    "MarketDataNotConnectedError",
    "MarketDataTimeoutError",
    "TimeframeConfig",
    "TradingStyle",
    "UnknownPairError",
    "UnknownTimeframeError",
    "get_pair",
    "get_timeframe",
    "pairs_by_type",
]

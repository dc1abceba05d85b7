"""Market domain types shared across the analysis pipeline.

Frozen dataclasses for value objects. Prices and volumes are float: the
indicator engine is a float pipeline and the upstream API returns JSON numbers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AssetType(str, Enum):
    """Asset class of a tradable pair."""

    CRYPTO = "CRYPTO"
    FOREX = "FOREX"


class HistoEndpoint(str, Enum):
    """CryptoCompare history endpoint; selects the base candle bucket."""

    MINUTE = "histominute"
    HOUR = "histohour"
    DAY = "histoday"


class TradingStyle(str, Enum):
    """Trading style a timeframe is grouped under in the picker."""

    SCALP = "SCALP"
    DAY = "DAY"
    SWING = "SWING"
    POSITION = "POSITION"


# --- Value Objects (frozen) ---


@dataclass(frozen=True)
class Candle:
    """OHLC candle with volume denominated in the quote currency."""

    time: int
    open: float
    high: float
    low: float
    close: float
    volume_quote: float


@dataclass(frozen=True)
class CryptoPair:
    """A supported market pair, e.g. BTC/USDT."""

    symbol: str
    base: str
    quote: str
    name: str
    asset_type: AssetType = AssetType.CRYPTO


@dataclass(frozen=True)
class TimeframeConfig:
    """How a user-facing timeframe maps onto the history API.

    ``aggregate`` is the bucket multiplier applied to ``endpoint``:
    a 4h timeframe is ``histohour`` with ``aggregate=4``.
    """

    label: str
    value: str
    limit: int
    endpoint: HistoEndpoint
    aggregate: int
    style: TradingStyle

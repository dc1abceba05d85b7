"""CryptoCompare payload to domain type converters.

All JSON-to-float conversion happens here. History rows carry ``volumeto``
(volume in the quote currency) and ``volumefrom`` (base currency); the engine
works on quote volume.
"""

from __future__ import annotations

from typing import Any

from signalix.market.errors import MarketDataAPIError
from signalix.market.types import Candle


def history_row_to_candle(row: dict[str, Any]) -> Candle:
    """Convert one ``Data.Data[*]`` history row to a Candle."""
    return Candle(
        time=int(row["time"]),
        open=float(row["open"]),
        high=float(row["high"]),
        low=float(row["low"]),
        close=float(row["close"]),
        volume_quote=float(row.get("volumeto", 0.0)),
    )


def history_payload_to_candles(
    payload: dict[str, Any],
    status_code: int,
) -> list[Candle]:
    """Convert a full history response body to candles ordered by time.

    CryptoCompare reports most failures with HTTP 200 and
    ``{"Response": "Error", "Message": ...}``; those raise MarketDataAPIError.
    """
    if payload.get("Response") == "Error":
        message = str(payload.get("Message", "unknown error"))
        raise MarketDataAPIError(status_code, message)

    try:
        rows = payload["Data"]["Data"]
    except (KeyError, TypeError) as e:
        raise MarketDataAPIError(status_code, "Malformed history payload") from e

    try:
        candles = [history_row_to_candle(row) for row in rows]
    except (KeyError, TypeError, ValueError) as e:
        raise MarketDataAPIError(status_code, f"Malformed history row: {e}") from e

    return sorted(candles, key=lambda c: c.time)

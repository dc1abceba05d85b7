"""CryptoCompare market data implementation."""

from signalix.market.cryptocompare.data import CryptoCompareProvider

__all__ = [
    "CryptoCompareProvider",
]

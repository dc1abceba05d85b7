"""Static market catalog: supported pairs and timeframes.

Both tables are immutable tuples. Lookups go through get_pair() and
get_timeframe(), which raise catalog errors for unknown keys.
"""

from __future__ import annotations

from signalix.market.errors import UnknownPairError, UnknownTimeframeError
from signalix.market.types import (
    AssetType,
    CryptoPair,
    HistoEndpoint,
    TimeframeConfig,
    TradingStyle,
)


def _crypto(base: str, name: str) -> CryptoPair:
    return CryptoPair(
        symbol=f"{base}/USDT",
        base=base,
        quote="USDT",
        name=name,
        asset_type=AssetType.CRYPTO,
    )


def _forex(base: str, quote: str, name: str) -> CryptoPair:
    return CryptoPair(
        symbol=f"{base}/{quote}",
        base=base,
        quote=quote,
        name=name,
        asset_type=AssetType.FOREX,
    )


SUPPORTED_PAIRS: tuple[CryptoPair, ...] = (
    # Majors
    _crypto("BTC", "Bitcoin"),
    _crypto("ETH", "Ethereum"),
    _crypto("BNB", "Binance Coin"),
    _crypto("SOL", "Solana"),
    _crypto("XRP", "Ripple"),
    _crypto("ADA", "Cardano"),
    _crypto("AVAX", "Avalanche"),
    _crypto("DOT", "Polkadot"),
    _crypto("TRX", "Tron"),
    _crypto("LINK", "Chainlink"),
    # AI & DePIN
    _crypto("TAO", "Bittensor"),
    _crypto("FET", "Fetch.ai"),
    _crypto("RNDR", "Render"),
    _crypto("WLD", "Worldcoin"),
    _crypto("GRT", "The Graph"),
    # Layer 1 & 2
    _crypto("SUI", "Sui"),
    _crypto("SEI", "Sei"),
    _crypto("APT", "Aptos"),
    _crypto("OP", "Optimism"),
    _crypto("ARB", "Arbitrum"),
    _crypto("MATIC", "Polygon"),
    _crypto("NEAR", "Near Protocol"),
    _crypto("INJ", "Injective"),
    _crypto("TIA", "Celestia"),
    _crypto("ATOM", "Cosmos"),
    _crypto("FTM", "Fantom"),
    _crypto("ALGO", "Algorand"),
    _crypto("HBAR", "Hedera"),
    _crypto("EGLD", "MultiversX"),
    _crypto("ICP", "Internet Computer"),
    _crypto("STX", "Stacks"),
    _crypto("IMX", "Immutable"),
    # DeFi & utility
    _crypto("UNI", "Uniswap"),
    _crypto("AAVE", "Aave"),
    _crypto("MKR", "Maker"),
    _crypto("SNX", "Synthetix"),
    _crypto("LDO", "Lido DAO"),
    _crypto("RUNE", "THORChain"),
    _crypto("JUP", "Jupiter"),
    _crypto("PYTH", "Pyth Network"),
    _crypto("ONDO", "Ondo"),
    _crypto("ENA", "Ethena"),
    _crypto("PENDLE", "Pendle"),
    # Meme & speculative
    _crypto("DOGE", "Dogecoin"),
    _crypto("SHIB", "Shiba Inu"),
    _crypto("PEPE", "Pepe"),
    _crypto("WIF", "dogwifhat"),
    _crypto("BONK", "Bonk"),
    _crypto("FLOKI", "Floki"),
    _crypto("MEME", "Memecoin"),
    _crypto("BOME", "Book of Meme"),
    _crypto("ORDI", "Ordinals"),
    # Legacy & privacy
    _crypto("LTC", "Litecoin"),
    _crypto("BCH", "Bitcoin Cash"),
    _crypto("XLM", "Stellar"),
    _crypto("ETC", "Ethereum Classic"),
    _crypto("EOS", "EOS"),
    _crypto("DASH", "Dash"),
    # Forex
    _forex("EUR", "USD", "Euro"),
    _forex("GBP", "USD", "British Pound"),
    _forex("AUD", "USD", "Aus Dollar"),
    _forex("JPY", "USD", "Japanese Yen"),
    _forex("USD", "CAD", "Canadian Dollar"),
    _forex("USD", "CHF", "Swiss Franc"),
)

_MINUTE = HistoEndpoint.MINUTE
_HOUR = HistoEndpoint.HOUR
_DAY = HistoEndpoint.DAY

TIMEFRAMES: tuple[TimeframeConfig, ...] = (
    # 30s is served from 1-minute candles; the API has no sub-minute bucket
    TimeframeConfig("30 Sec", "30s", 60, _MINUTE, 1, TradingStyle.SCALP),
    TimeframeConfig("1 Min", "1m", 200, _MINUTE, 1, TradingStyle.SCALP),
    TimeframeConfig("3 Min", "3m", 200, _MINUTE, 3, TradingStyle.SCALP),
    TimeframeConfig("5 Min", "5m", 200, _MINUTE, 5, TradingStyle.SCALP),
    TimeframeConfig("15 Min", "15m", 200, _MINUTE, 15, TradingStyle.DAY),
    TimeframeConfig("30 Min", "30m", 200, _MINUTE, 30, TradingStyle.DAY),
    TimeframeConfig("1 Hour", "1h", 200, _HOUR, 1, TradingStyle.DAY),
    TimeframeConfig("2 Hours", "2h", 200, _HOUR, 2, TradingStyle.SWING),
    TimeframeConfig("4 Hours", "4h", 200, _HOUR, 4, TradingStyle.SWING),
    TimeframeConfig("8 Hours", "8h", 200, _HOUR, 8, TradingStyle.SWING),
    TimeframeConfig("12 Hours", "12h", 200, _HOUR, 12, TradingStyle.SWING),
    TimeframeConfig("1 Day", "1d", 200, _DAY, 1, TradingStyle.SWING),
    TimeframeConfig("3 Days", "3d", 200, _DAY, 3, TradingStyle.POSITION),
    TimeframeConfig("1 Week", "1w", 200, _DAY, 7, TradingStyle.POSITION),
)

_PAIRS_BY_SYMBOL: dict[str, CryptoPair] = {p.symbol: p for p in SUPPORTED_PAIRS}
_TIMEFRAMES_BY_VALUE: dict[str, TimeframeConfig] = {t.value: t for t in TIMEFRAMES}


def get_pair(symbol: str) -> CryptoPair:
    """Look up a pair by symbol (case-insensitive, e.g. "btc/usdt")."""
    pair = _PAIRS_BY_SYMBOL.get(symbol.strip().upper())
    if pair is None:
        raise UnknownPairError(symbol)
    return pair


def get_timeframe(value: str) -> TimeframeConfig:
    """Look up a timeframe by its short value (e.g. "4h")."""
    timeframe = _TIMEFRAMES_BY_VALUE.get(value.strip())
    if timeframe is None:
        raise UnknownTimeframeError(value)
    return timeframe


def pairs_by_type(asset_type: AssetType) -> list[CryptoPair]:
    """All supported pairs of one asset class, in catalog order."""
    return [p for p in SUPPORTED_PAIRS if p.asset_type is asset_type]

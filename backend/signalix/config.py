"""Pydantic Settings configuration models.

3-tier config hierarchy (lowest to highest priority):
1. Pydantic defaults (in code below)
2. .env file (loaded by Pydantic Settings)
3. Environment variables (e.g., SIGNALIX_MARKET_DATA__API_KEY=...)
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from signalix.market.catalog import get_pair, get_timeframe
from signalix.market.errors import UnknownPairError, UnknownTimeframeError

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_LOG_FORMATS = frozenset({"console", "json"})


class MarketDataConfig(BaseModel):
    """Price API connection configuration."""

    provider: str = "cryptocompare"
    api_base: str = "https://min-api.cryptocompare.com/data/v2"
    api_key: str = ""
    timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    @field_validator("api_base")
    @classmethod
    def validate_api_base(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"api_base must be an http(s) URL, got {v!r}")
        return v.rstrip("/")


class AnalysisConfig(BaseModel):
    """Defaults for an analysis run."""

    default_pair: str = "BTC/USDT"
    default_timeframe: str = "1h"
    narrative_candles: int = Field(default=15, ge=1, le=200)

    @field_validator("default_pair")
    @classmethod
    def validate_default_pair(cls, v: str) -> str:
        try:
            return get_pair(v).symbol
        except UnknownPairError as e:
            raise ValueError(str(e)) from e

    @field_validator("default_timeframe")
    @classmethod
    def validate_default_timeframe(cls, v: str) -> str:
        try:
            return get_timeframe(v).value
        except UnknownTimeframeError as e:
            raise ValueError(str(e)) from e


class AppConfig(BaseSettings):
    """Top-level application configuration.

    Env var examples:
        SIGNALIX_LOG_LEVEL=DEBUG
        SIGNALIX_LOG_FORMAT=json
        SIGNALIX_MARKET_DATA__API_KEY=your-key
        SIGNALIX_ANALYSIS__DEFAULT_TIMEFRAME=4h
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGNALIX_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    log_format: str = "console"
    market_data: MarketDataConfig = MarketDataConfig()
    analysis: AnalysisConfig = AnalysisConfig()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got {v}"
            )
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got {v}"
            )
        return v

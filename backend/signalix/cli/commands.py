"""Click CLI commands for signalix."""

from __future__ import annotations

import asyncio
import json
from typing import TYPE_CHECKING

import click

from signalix.config import AppConfig
from signalix.market.catalog import SUPPORTED_PAIRS, TIMEFRAMES, pairs_by_type
from signalix.market.types import AssetType

if TYPE_CHECKING:
    from signalix.analysis.runner import AnalysisResult
    from signalix.engine.types import Signal


@click.group()
def cli() -> None:
    """Signalix: technical indicator and signal aggregation engine."""


@cli.command()
@click.option(
    "--type",
    "asset_type",
    type=click.Choice(["crypto", "forex"], case_sensitive=False),
    default=None,
    help="Only list pairs of this asset class.",
)
def pairs(asset_type: str | None) -> None:
    """List supported market pairs."""
    selected = (
        pairs_by_type(AssetType(asset_type.upper()))
        if asset_type
        else list(SUPPORTED_PAIRS)
    )
    for pair in selected:
        click.echo(f"{pair.symbol:<12} {pair.name:<20} {pair.asset_type.value}")


@cli.command()
def timeframes() -> None:
    """List supported timeframes."""
    for tf in TIMEFRAMES:
        click.echo(
            f"{tf.value:<5} {tf.label:<10} {tf.style.value:<9} "
            f"{tf.endpoint.value} x{tf.aggregate} (limit {tf.limit})"
        )


@cli.command()
@click.argument("pair", required=False)
@click.option(
    "--timeframe",
    "-t",
    default=None,
    help="Timeframe value, e.g. 1h or 4h (default from config).",
)
@click.option(
    "--json", "as_json", is_flag=True, help="Print the result payload as JSON."
)
def analyze(pair: str | None, timeframe: str | None, as_json: bool) -> None:
    """Fetch candles for PAIR and print indicators and aggregation."""
    from signalix.analysis.runner import AnalysisError
    from signalix.market.errors import MarketDataError
    from signalix.utils.logging import setup_logging

    app_config = AppConfig()
    setup_logging(level=app_config.log_level, log_format=app_config.log_format)

    try:
        result = asyncio.run(_run_analysis(app_config, pair, timeframe))
    except (MarketDataError, AnalysisError) as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(_result_payload(result), indent=2))
    else:
        _print_analysis(result)


async def _run_analysis(
    app_config: AppConfig,
    pair: str | None,
    timeframe: str | None,
) -> AnalysisResult:
    """Run one analysis against the configured price API."""
    from signalix.analysis.runner import AnalysisRunner
    from signalix.market.cryptocompare import CryptoCompareProvider

    async with CryptoCompareProvider(app_config.market_data) as provider:
        runner = AnalysisRunner(provider, config=app_config.analysis)
        return await runner.run(pair, timeframe)


def _result_payload(result: AnalysisResult) -> dict[str, object]:
    from signalix.engine.payload import aggregation_to_payload, bundle_to_payload

    return {
        "pair": result.pair.symbol,
        "timeframe": result.timeframe.value,
        "lastPrice": result.last_price,
        "candleCount": len(result.candles),
        "indicators": bundle_to_payload(result.indicators),
        "aggregation": aggregation_to_payload(result.aggregation),
    }


def _row(label: str, value: object, signal: Signal, description: str) -> None:
    click.echo(f"  {label:<17}{value!s:>10}  {signal.value:<8} {description}")


def _print_analysis(result: AnalysisResult) -> None:
    """Format and print an analysis result."""
    ind = result.indicators
    agg = result.aggregation

    click.echo(f"\nAnalysis: {result.pair.symbol} ({result.pair.name})")
    click.echo(f"Timeframe:  {result.timeframe.label}")
    click.echo(f"Candles:    {len(result.candles)}")
    click.echo(f"Last Price: {result.last_price:,.6g}")

    click.echo("\nMomentum:")
    _row("RSI (14):", ind.rsi.value, ind.rsi.signal, ind.rsi.description)
    _row(
        "Stochastic %K:",
        f"{ind.stochastic.k:.1f}",
        ind.stochastic.signal,
        ind.stochastic.description,
    )
    _row(
        "Momentum (10):",
        ind.momentum.value,
        ind.momentum.signal,
        ind.momentum.description,
    )
    _row("ROC (9):", ind.roc.value, ind.roc.signal, ind.roc.description)

    click.echo("\nTrend:")
    _row("MACD:", f"{ind.macd.value:.4f}", ind.macd.signal, ind.macd.description)
    _row("ADX (proxy):", ind.adx.value, ind.adx.signal, ind.adx.description)
    _row("Trend:", "", ind.trend_signal.signal, ind.trend_signal.description)
    click.echo(
        f"  SMA 20/50/200:   "
        f"{ind.sma20:,.6g} / {ind.sma50:,.6g} / {ind.sma200:,.6g}"
    )

    click.echo("\nVolatility & Volume:")
    _row(
        "Bollinger width:",
        f"{ind.bollinger.width:.2f}%",
        ind.bollinger.signal,
        ind.bollinger.description,
    )
    _row(
        "Volume trend:",
        ind.volume_trend.value,
        ind.volume_trend.signal,
        ind.volume_trend.description,
    )

    click.echo("\nAggregation:")
    click.echo(f"  Up:              {agg.up_count} (score {agg.up_score:.1f})")
    click.echo(f"  Down:            {agg.down_count} (score {agg.down_score:.1f})")
    click.echo(f"  Neutral:         {agg.neutral_count}")
    click.echo(f"  Alignment:       {agg.alignment:.1f}%")
    click.echo(f"  Market Regime:   {agg.market_regime.value}")


@cli.command()
def config() -> None:
    """Show current configuration."""
    cfg = AppConfig()

    click.echo("=== Signalix Configuration ===\n")

    click.echo(f"Log Level:    {cfg.log_level}")
    click.echo(f"Log Format:   {cfg.log_format}")
    click.echo("")

    click.echo("[Market Data]")
    click.echo(f"  Provider:   {cfg.market_data.provider}")
    click.echo(f"  API Base:   {cfg.market_data.api_base}")
    click.echo(f"  API Key:    {'set' if cfg.market_data.api_key else 'not set'}")
    click.echo(f"  Timeout:    {cfg.market_data.timeout_seconds}s")
    click.echo("")

    click.echo("[Analysis]")
    click.echo(f"  Default Pair:       {cfg.analysis.default_pair}")
    click.echo(f"  Default Timeframe:  {cfg.analysis.default_timeframe}")
    click.echo(f"  Narrative Candles:  {cfg.analysis.narrative_candles}")

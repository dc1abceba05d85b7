"""Command-line interface."""

from signalix.cli.commands import cli

__all__ = ["cli"]

"""Signalix: technical indicator and signal aggregation engine."""

__version__ = "0.1.0"

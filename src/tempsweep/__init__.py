"""Tempsweep: remove stale temp, cache, log and crash dump files."""

__version__ = "0.1.0"

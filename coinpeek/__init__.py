"""
CoinPeek - single-window item tracker

A small desktop app that keeps timestamped items in a local SQLite store.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]

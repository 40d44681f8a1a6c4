"""
Technical Analysis Indicators Module

Concrete implementations of streaming technical indicators built on BaseIndicator.
Every update is O(1) in time and memory.
"""

from .trend import SMA, SSMA
from .momentum import RSI, RsiPhase

__all__ = [
    # Trend indicators
    "SMA",
    "SSMA",

    # Momentum indicators
    "RSI",
    "RsiPhase",
]

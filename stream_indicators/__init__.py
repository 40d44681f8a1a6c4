"""
Streaming Indicators Library

Constant-time, constant-memory technical indicators that consume one sample
at a time and emit an updated value on every step.

This library provides:
- SMA, SSMA (smoothed simple moving average) and RSI indicators
- A common BaseIndicator interface: update/next, value, reset, period
- Inputs as bare numbers, mappings or any bar-like record exposing ``close``
- Factory functions for creating indicators by name or from configuration

Example Usage:
    import stream_indicators as si

    rsi = si.create('rsi', period=14)
    ssma = si.SSMA(period=9)

    for bar in bars:
        rsi.update(bar)        # uses bar.close
        ssma.update(bar.close)

    print(rsi, rsi.value)      # RSI(14) 57.3...
"""

__version__ = "1.0.0"
__author__ = "Stream Indicators Development Team"

# Public API exports
from .base import BaseIndicator, SupportsClose, validate_period
from .exceptions import (
    IndicatorError,
    InvalidParameterError,
    MissingInputError,
    InvalidDataError,
    IndicatorNotFoundError
)
from .indicators import SMA, SSMA, RSI, RsiPhase
from .factory import (
    create,
    create_from_config,
    list_indicators,
    describe,
    validate_input_field
)
from .core import ConfigLoader, setup_logging

__all__ = [
    # Core classes
    "BaseIndicator",
    "SupportsClose",

    # Factory functions
    "create",
    "create_from_config",
    "list_indicators",
    "describe",

    # Indicators
    "SMA",
    "SSMA",
    "RSI",
    "RsiPhase",

    # Validation utilities
    "validate_period",
    "validate_input_field",

    # Configuration
    "ConfigLoader",
    "setup_logging",

    # Exceptions
    "IndicatorError",
    "InvalidParameterError",
    "MissingInputError",
    "InvalidDataError",
    "IndicatorNotFoundError",

    # Metadata
    "__version__",
    "__author__",
]

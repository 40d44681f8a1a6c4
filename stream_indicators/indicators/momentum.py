"""
Momentum technical indicators.

This module implements indicators that measure the speed and strength of price movements.
All indicators use O(1) streaming updates.

Classes:
    RSI: Relative Strength Index smoothed by two simple moving averages
    RsiPhase: Lifecycle phases of an RSI instance
"""

import math
from enum import Enum

from ..base import BaseIndicator, DataPoint
from .trend import SMA

# Below this the up/down averages are treated as zero and RSI is neutral
NEUTRAL_EPSILON = 1e-9
NEUTRAL_RSI = 50.0


class RsiPhase(Enum):
    """Lifecycle phases of an RSI instance."""
    FRESH = "fresh"      # no sample consumed since construction/reset
    WARMING = "warming"  # inner averages hold fewer than `period` samples
    STEADY = "steady"    # inner averages cover full windows


class RSI(BaseIndicator):
    """
    Relative Strength Index (RSI) momentum indicator.

    Compares the magnitude of recent gains and losses to measure the speed and
    change of price movements. The output lies in the range 0..100.

    Mathematical Formula:
        RSI = 100 * U / (U + D)

        U = SMA(up moves, period)
        D = SMA(down moves, period)

    If the current value is higher than the previous one the up move is
    ``p_t - p_{t-1}`` and the down move is 0. Otherwise (equal values included)
    the up move is 0 and the down move is ``p_{t-1} - p_t``.

    The first sample only seeds the previous value; both averages receive 0.
    Whenever U + D falls below 1e-9 the indicator returns the neutral 50.

    Example:
        >>> rsi = RSI(period=3)
        >>> rsi.update(10.0)
        50.0
        >>> rsi.update(10.5)
        100.0
    """

    required_inputs = ('close',)
    label = "RSI"

    def __init__(self, period: int = 14, input_field: str = 'close'):
        """
        Initialize Relative Strength Index indicator.

        Args:
            period (int): Window length of the up/down averages. Defaults to 14.
            input_field (str): Field to use when fed records. Defaults to 'close'.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period, input_field)

        self.up_ma = SMA(period)
        self.down_ma = SMA(period)
        self._children = [self.up_ma, self.down_ma]

        self._prev_val = 0.0
        self._is_new = True
        self._rsi_value = math.nan

    def update(self, data_point: DataPoint) -> float:
        """
        Process a new sample and return the RSI value.

        Algorithm:
        1. First sample: remember it and feed 0 to both averages
        2. Later samples: route the move to the up or down average, 0 to the other
        3. RSI = 100 * U / (U + D), or 50 when U + D is effectively zero
        """
        value = self._extract_value(data_point)

        if self._is_new:
            self._is_new = False
            self._prev_val = value
            avg_gain = self.up_ma.update(0.0)
            avg_loss = self.down_ma.update(0.0)
        else:
            if value > self._prev_val:
                avg_gain = self.up_ma.update(value - self._prev_val)
                avg_loss = self.down_ma.update(0.0)
            else:
                avg_gain = self.up_ma.update(0.0)
                avg_loss = self.down_ma.update(self._prev_val - value)
            self._prev_val = value

        if avg_gain + avg_loss < NEUTRAL_EPSILON:
            self._rsi_value = NEUTRAL_RSI
        elif avg_loss == 0.0:
            # 100 * U / U may round to 99.99999999999999
            self._rsi_value = 100.0
        else:
            rsi = 100.0 * avg_gain / (avg_gain + avg_loss)
            # Rolling-sum drift can leave an average a few ulps below zero; NaN passes through
            if rsi > 100.0:
                rsi = 100.0
            elif rsi < 0.0:
                rsi = 0.0
            self._rsi_value = rsi

        return self._record_step(self._rsi_value)

    @property
    def value(self) -> float:
        """
        Get the current RSI value.

        Returns:
            float: Last RSI value between 0-100, or NaN before the first sample.
        """
        return self._rsi_value

    @property
    def phase(self) -> RsiPhase:
        """Current lifecycle phase."""
        if self._is_new:
            return RsiPhase.FRESH
        if self.up_ma.is_ready and self.down_ma.is_ready:
            return RsiPhase.STEADY
        return RsiPhase.WARMING

    @property
    def previous_value(self) -> float:
        """Input consumed on the previous step (0.0 while fresh)."""
        return self._prev_val

    @property
    def average_gain(self) -> float:
        """Smoothed up move U, or NaN before the first sample."""
        return self.up_ma.value

    @property
    def average_loss(self) -> float:
        """Smoothed down move D, or NaN before the first sample."""
        return self.down_ma.value

    @property
    def relative_strength(self) -> float:
        """
        Get the current Relative Strength (RS) ratio U / D.

        Returns:
            float: RS, infinity when only gains are present, NaN before the
                first sample or when both averages are zero.
        """
        avg_gain = self.average_gain
        avg_loss = self.average_loss

        if math.isnan(avg_gain) or math.isnan(avg_loss):
            return math.nan

        if avg_loss == 0:
            return math.inf if avg_gain > 0 else math.nan

        return avg_gain / avg_loss

    def reset(self) -> None:
        """Reset the indicator and both inner averages."""
        super().reset()
        self._is_new = True
        self._prev_val = 0.0
        self._rsi_value = math.nan

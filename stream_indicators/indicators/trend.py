"""
Trend-following technical indicators.

This module implements moving average indicators that follow price trends.
All indicators use O(1) streaming updates.

Classes:
    SMA: Simple Moving Average with O(1) rolling sum technique
    SSMA: Smoothed Simple Moving Average, arithmetic mean during warm-up
        followed by a one-pole recurrence
"""

import math
from collections import deque

from ..base import BaseIndicator, DataPoint


class SMA(BaseIndicator):
    """
    Simple Moving Average (SMA) indicator.

    Calculates the arithmetic mean of the last ``period`` samples using an
    O(1) rolling sum. Before a full window has been seen the mean covers every
    sample received so far, so the first output equals the first input.

    Mathematical Formula:
        SMA = (P1 + P2 + ... + Pn) / n,   n = min(count, period)

    For streaming updates:
        sum = sum - oldest_price + new_price

    Example:
        >>> sma = SMA(period=3)
        >>> sma.update(1.0), sma.update(2.0), sma.update(3.0), sma.update(4.0)
        (1.0, 1.5, 2.0, 3.0)
    """

    required_inputs = ('close',)
    label = "SMA"

    def __init__(self, period: int, input_field: str = 'close'):
        """
        Initialize Simple Moving Average indicator.

        Args:
            period (int): Number of periods for the moving average calculation.
                Must be positive integer >= 1.
            input_field (str): Field to use when fed records. Defaults to 'close'.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period, input_field)

        self._buffer: deque = deque(maxlen=period)
        self._sum = 0.0

    def update(self, data_point: DataPoint) -> float:
        """
        Process a new sample and return the mean of the current window.

        Uses the rolling sum technique:
        1. If the buffer is full, remove the oldest value from the sum
        2. Add the new value to buffer and sum
        3. Divide by the number of buffered values
        """
        value = self._extract_value(data_point)

        if len(self._buffer) == self.period:
            self._sum -= self._buffer[0]

        self._buffer.append(value)
        self._sum += value

        return self._record_step(self._sum / len(self._buffer))

    @property
    def value(self) -> float:
        """Mean of the buffered window, or NaN before the first sample."""
        if not self._buffer:
            return math.nan

        return self._sum / len(self._buffer)

    def reset(self) -> None:
        """Reset the indicator, including the rolling window and running sum."""
        super().reset()
        self._buffer.clear()
        self._sum = 0.0


class SSMA(BaseIndicator):
    """
    Smoothed Simple Moving Average (SSMA) indicator.

    Behaves like a cumulative average until ``period`` samples have been seen,
    then switches to a recurrence that weights history by (N-1)/N and the new
    sample by 1/N. No window is kept, so memory use does not depend on period.

    Mathematical Formula:
        t <= N:  SSMA_t = (p_1 + p_2 + ... + p_t) / t
        t >  N:  SSMA_t = (SSMA_{t-1} * (N - 1) + p_t) / N

    The warm-up formula is authoritative through t = N; the recurrence is
    seeded with SSMA_N = sum / N and takes over from t = N + 1. With N = 1 the
    output tracks the input exactly.

    Example:
        >>> ssma = SSMA(period=3)
        >>> [ssma.update(x) for x in (10.0, 11.0, 12.0)]
        [10.0, 10.5, 11.0]
        >>> round(ssma.update(13.0), 4)
        11.6667
    """

    required_inputs = ('close',)
    label = "SSMA"

    def __init__(self, period: int = 9, input_field: str = 'close'):
        """
        Initialize Smoothed Simple Moving Average indicator.

        Args:
            period (int): Smoothing period N. Must be a positive integer.
                Defaults to 9.
            input_field (str): Field to use when fed records. Defaults to 'close'.

        Raises:
            InvalidParameterError: If period is not a positive integer.
        """
        super().__init__(period, input_field)

        # Only read while count <= period
        self._sum = 0.0
        self._current_val = 0.0

    def update(self, data_point: DataPoint) -> float:
        """Process a new sample and return the smoothed value."""
        value = self._extract_value(data_point)

        count = self._data_count + 1
        self._sum += value

        if count <= self.period:
            self._current_val = self._sum / count
        else:
            self._current_val = (self._current_val * (self.period - 1) + value) / self.period

        return self._record_step(self._current_val)

    @property
    def value(self) -> float:
        """Current SSMA value, or NaN before the first sample."""
        if self._data_count == 0:
            return math.nan

        return self._current_val

    def reset(self) -> None:
        """Reset count, running sum and current value."""
        super().reset()
        self._sum = 0.0
        self._current_val = 0.0

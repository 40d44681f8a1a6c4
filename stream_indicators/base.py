"""Base class for streaming technical indicators."""

from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, Tuple, Union, runtime_checkable
import logging
import numbers

from .exceptions import InvalidDataError, InvalidParameterError, MissingInputError

logger = logging.getLogger(__name__)


@runtime_checkable
class SupportsClose(Protocol):
    """Any bar-like record exposing a real-valued close."""

    @property
    def close(self) -> float:
        ...


DataPoint = Union[float, Mapping, SupportsClose]


def validate_period(period: Any, name: str = "period", indicator_name: Optional[str] = None) -> int:
    """
    Validate that a period parameter is a positive integer.

    Shared by every indicator constructor and exposed through the package API.

    Raises:
        InvalidParameterError: If period is not a positive integer (bools included).
    """
    if not isinstance(period, int) or isinstance(period, bool):
        raise InvalidParameterError(name, period, "positive integer", indicator_name)

    if period <= 0:
        raise InvalidParameterError(name, period, "positive integer (> 0)", indicator_name)

    return period


class BaseIndicator(ABC):
    """Abstract base for streaming technical indicators."""

    # Class attributes to be overridden by subclasses
    required_inputs: Tuple[str, ...] = ()
    label: str = ""

    def __init__(self, period: int, input_field: str = 'close'):
        """Initialize indicator with period and input field."""
        validate_period(period, indicator_name=self.label or self.__class__.__name__)

        self.period = period
        self.input_field = input_field
        self.required_inputs = (input_field,)

        self._output_history: deque = deque(maxlen=1000)

        # State management
        self._ready_threshold = period
        self._data_count = 0

        # Composite pattern support
        self._children: List['BaseIndicator'] = []

        self._name = self.__class__.__name__

        logger.debug(f"Initialized {self._name} with period={period}, input_field={input_field}")

    @abstractmethod
    def update(self, data_point: DataPoint) -> float:
        """
        Consume one sample and return the updated indicator value.

        Args:
            data_point: A bare number, a mapping holding ``input_field``, or any
                record exposing ``input_field`` as an attribute (``close`` by default).

        Returns:
            float: The indicator value after this sample.

        Raises:
            MissingInputError: If a record or mapping lacks ``input_field``.
            InvalidDataError: If the projected sample is a bool.
        """
        pass

    @property
    @abstractmethod
    def value(self) -> float:
        """Last emitted value, NaN before the first sample."""
        pass

    def next(self, data_point: DataPoint) -> float:
        """Alias of :meth:`update`."""
        return self.update(data_point)

    @property
    def count(self) -> int:
        """Number of samples consumed since construction or the last reset."""
        return self._data_count

    @property
    def is_ready(self) -> bool:
        """
        Check whether a full period of samples has been seen.

        Values are emitted during warm-up as well; this only reports whether
        the warm-up phase is over.
        """
        return self._data_count >= self._ready_threshold

    @property
    def children(self) -> List['BaseIndicator']:
        """
        Get the list of child indicators for composite patterns.

        Returns:
            List[BaseIndicator]: Owned sub-indicators. Empty for leaf indicators.
        """
        return self._children.copy()

    def get_history(self, n: int = 10) -> List[float]:
        """
        Retrieve the last n emitted values, ordered from oldest to newest.

        Args:
            n (int): Number of recent values to return. Defaults to 10.
        """
        if n <= 0:
            return []

        history_length = len(self._output_history)
        start_idx = max(0, history_length - n)

        return list(self._output_history)[start_idx:]

    def reset(self) -> None:
        """Return the indicator to its post-construction state."""
        self._output_history.clear()
        self._data_count = 0

        for child in self._children:
            child.reset()

        logger.debug(f"Reset {self._name} indicator state")

    def _extract_value(self, data_point: DataPoint) -> float:
        """
        Project the configured input field out of a data point.

        Numbers pass through untouched so NaN and infinities propagate.
        """
        if isinstance(data_point, Mapping):
            if self.input_field not in data_point:
                raise MissingInputError([self.input_field], list(self.required_inputs), self._name)
            value = data_point[self.input_field]
        elif isinstance(data_point, numbers.Real):
            value = data_point
        else:
            try:
                value = getattr(data_point, self.input_field)
            except AttributeError:
                raise MissingInputError([self.input_field], list(self.required_inputs), self._name) from None

        # bool is a numbers.Real subclass but never a price
        if isinstance(value, bool):
            raise InvalidDataError(self.input_field, value, "boolean is not a numeric sample", self._name)

        return value

    def _record_step(self, output_value: float) -> float:
        """Count the sample, store its output and hand it back."""
        self._data_count += 1
        self._output_history.append(output_value)
        return output_value

    def __repr__(self) -> str:
        ready_status = "ready" if self.is_ready else f"warming up ({self._data_count}/{self._ready_threshold})"
        return f"{self._name}(period={self.period}, {ready_status})"

    def __str__(self) -> str:
        """Short label such as ``RSI(14)``."""
        return f"{self.label or self._name}({self.period})"

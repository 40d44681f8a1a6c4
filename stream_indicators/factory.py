"""Create indicators by name or from configuration entries."""

import inspect
import logging
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Tuple, Type

from .base import BaseIndicator, validate_period
from .exceptions import InvalidParameterError, IndicatorNotFoundError
from .indicators.trend import SMA, SSMA
from .indicators.momentum import RSI

logger = logging.getLogger(__name__)

OHLCV_FIELDS = ('open', 'high', 'low', 'close', 'volume')


class IndicatorEntry(NamedTuple):
    """Canonical name, class and accepted aliases of a built-in indicator."""
    name: str
    indicator_class: Type[BaseIndicator]
    aliases: Tuple[str, ...]

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.name,) + self.aliases


BUILTIN_INDICATORS: Tuple[IndicatorEntry, ...] = (
    IndicatorEntry('sma', SMA, ('simple_ma', 'simple_moving_average')),
    IndicatorEntry('ssma', SSMA, ('smoothed_sma', 'smoothed_simple_moving_average')),
    IndicatorEntry('rsi', RSI, ('relative_strength_index',)),
)

# Every accepted spelling, lower-cased, mapped to its entry
_LOOKUP: Dict[str, IndicatorEntry] = {
    alias: entry for entry in BUILTIN_INDICATORS for alias in entry.names
}


def _resolve(name: str) -> IndicatorEntry:
    entry = _LOOKUP.get(name.lower())
    if entry is None:
        raise IndicatorNotFoundError(name, list_indicators())
    return entry


def create(name: str, **kwargs) -> BaseIndicator:
    """
    Create an indicator by name or alias (case-insensitive).

    Args:
        name (str): e.g. ``'rsi'``, ``'SSMA'``, ``'relative_strength_index'``.
        **kwargs: Constructor parameters, typically ``period`` and ``input_field``.

    Raises:
        IndicatorNotFoundError: If the name matches no indicator.
        InvalidParameterError: If the constructor rejects the parameters.

    Examples:
        >>> import stream_indicators as si
        >>> str(si.create('rsi', period=14)), str(si.create('SSMA'))
        ('RSI(14)', 'SSMA(9)')
    """
    entry = _resolve(name)
    try:
        return entry.indicator_class(**kwargs)
    except TypeError as e:
        accepted = [p for p in inspect.signature(entry.indicator_class).parameters]
        raise InvalidParameterError(
            parameter_name="constructor",
            value=str(kwargs),
            expected=f"keyword arguments among {accepted}",
            indicator_name=entry.name
        ) from e


def create_from_config(specs: Iterable[Mapping[str, Any]]) -> Dict[str, BaseIndicator]:
    """
    Build indicators from configuration entries.

    Each entry names an indicator and carries its constructor parameters, as
    found in the ``indicators`` section of config.yml::

        indicators:
          - name: rsi
            period: 14
          - name: ssma
            period: 9
            input_field: high

    Returns:
        Dict[str, BaseIndicator]: Indicators keyed by their label, e.g. ``'RSI(14)'``.
            An optional ``key`` entry overrides the label.

    Raises:
        InvalidParameterError: If an entry has no ``name`` or an unknown ``input_field``.
    """
    indicators: Dict[str, BaseIndicator] = {}
    for spec in specs:
        params = dict(spec)
        name = params.pop('name', None)
        if not name:
            raise InvalidParameterError("name", name, "indicator name in config entry")

        key = params.pop('key', None)
        if 'input_field' in params:
            params['input_field'] = validate_input_field(params['input_field'])

        indicator = create(name, **params)
        indicators[key or str(indicator)] = indicator
        logger.info(f"Configured indicator {indicator}")

    return indicators


def list_indicators() -> List[str]:
    """Canonical indicator names, sorted: ``['rsi', 'sma', 'ssma']``."""
    return sorted(entry.name for entry in BUILTIN_INDICATORS)


def describe(name: str) -> Dict[str, Any]:
    """
    Summarise an indicator: class name, accepted names, constructor
    parameters (type, default, required), docstring and required inputs.

    Raises:
        IndicatorNotFoundError: If the name matches no indicator.
    """
    entry = _resolve(name)
    cls = entry.indicator_class

    parameters = {
        param_name: {
            'type': 'Any' if param.annotation is inspect.Parameter.empty else param.annotation,
            'default': None if param.default is inspect.Parameter.empty else param.default,
            'required': param.default is inspect.Parameter.empty,
        }
        for param_name, param in inspect.signature(cls).parameters.items()
    }

    return {
        'name': cls.__name__,
        'aliases': list(entry.names),
        'parameters': parameters,
        'docstring': cls.__doc__,
        'required_inputs': cls.required_inputs,
    }


def validate_input_field(input_field: Any) -> str:
    """
    Normalise an OHLCV field name to lower case.

    Raises:
        InvalidParameterError: If the value is not one of the OHLCV field names.
    """
    if not isinstance(input_field, str) or input_field.lower() not in OHLCV_FIELDS:
        raise InvalidParameterError("input_field", input_field, f"one of {list(OHLCV_FIELDS)}")

    return input_field.lower()


__all__ = [
    "BUILTIN_INDICATORS",
    "IndicatorEntry",
    "create",
    "create_from_config",
    "describe",
    "list_indicators",
    "validate_input_field",
    "validate_period",
]

"""Shared fixtures for indicator tests."""

from dataclasses import dataclass
from pathlib import Path
import sys

import numpy as np
import pytest

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))


@dataclass
class Bar:
    """Minimal OHLCV bar; indicators only read the projected field."""
    close: float
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    volume: float = 0.0


@pytest.fixture
def make_bar():
    """Factory for bar records with a given close."""
    def _make_bar(close: float, **fields) -> Bar:
        return Bar(close=close, **fields)
    return _make_bar


@pytest.fixture
def random_walk():
    """Reproducible synthetic close series (geometric random walk)."""
    np.random.seed(42)
    returns = np.random.normal(0, 0.02, 500)
    closes = 100 * np.exp(np.cumsum(returns))
    return [float(c) for c in closes]


@pytest.fixture
def config_path() -> Path:
    """The repository's config.yml."""
    return project_root / 'config.yml'

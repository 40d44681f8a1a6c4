"""Configuration loading and logging setup."""

import yaml
import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base import BaseIndicator
from .factory import create_from_config

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigLoader:
    """
    YAML configuration holding an ``indicators`` list and a ``logging`` dictConfig.

    Example:
        >>> loader = ConfigLoader('config.yml')
        >>> setup_logging(loader.get('logging'))
        >>> indicators = loader.build_indicators()
        >>> sorted(indicators)
        ['RSI(14)', 'SMA(20)', 'SSMA(9)']
    """

    def __init__(self, config_path: Union[str, Path]):
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Parse the YAML file; an empty file yields an empty dict.

        Raises:
            FileNotFoundError: If the configuration file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
        """
        try:
            with self.config_path.open('r') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.error(f"Configuration file not found at '{self.config_path}'")
            raise
        except yaml.YAMLError as e:
            logger.error(f"Malformed YAML in configuration file {self.config_path}: {e}")
            raise

    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.config[key]

    def get_all(self) -> Dict[str, Any]:
        return self.config

    def build_indicators(self) -> Dict[str, BaseIndicator]:
        """Instantiate every entry of the ``indicators`` section, keyed by label."""
        specs = self.get('indicators') or []
        indicators = create_from_config(specs)
        logger.info(f"Loaded {len(indicators)} indicators from {self.config_path}")
        return indicators


def setup_logging(config: Optional[Dict[str, Any]] = None) -> None:
    """
    Configure logging from a dictConfig mapping.

    Without a mapping, or when the mapping is rejected by ``dictConfig``,
    a basic INFO-level console configuration is installed instead.
    """
    if not config:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_LOG_FORMAT)
        return

    try:
        logging.config.dictConfig(config)
        logger.info("Logging configured successfully from config file.")
    except (ValueError, TypeError, AttributeError) as e:
        logging.basicConfig(level=logging.INFO, format=DEFAULT_LOG_FORMAT)
        logging.warning(f"Could not configure logging from dict: {e}. Using basic config.")

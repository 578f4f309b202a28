"""
Standalone configuration provider.

Uses a local JSON file for configuration, with environment overrides.
"""

import logging
import os
from typing import Dict, Any, Optional

from feedfilter.environment import (
    DEFAULT_FILTER_HOSTS,
    DEFAULT_MIN_PLAY,
    parse_flag,
    parse_threshold,
    split_hosts,
)
from feedfilter.interfaces.config_provider import ConfigProvider
from feedfilter.tools.file_store import FileStore, default_store

logger = logging.getLogger(__name__)


def default_config() -> Dict[str, Any]:
    return {
        "min_play": DEFAULT_MIN_PLAY,
        "filter_enabled": True,
        "filter_hosts": split_hosts(DEFAULT_FILTER_HOSTS),
        "filter_path": "",
        "debug": False,
    }


class StandaloneConfigProvider(ConfigProvider):
    """File-based configuration provider"""

    def __init__(self, config_path: Optional[str] = None, store: Optional[FileStore] = None):
        """
        Initialize standalone config provider.

        Args:
            config_path: Path to config file (default: resolved by FileStore)
            store: FileStore used for path resolution and JSON I/O
        """
        self.store = store or default_store
        self.config_path = config_path or self.store.get_config_path()
        self._config = self._load_from_file()
        self._apply_env_overrides()

    def _load_from_file(self) -> Dict[str, Any]:
        """Load configuration from JSON file"""
        defaults = default_config()

        if not os.path.exists(self.config_path):
            # Create default config file
            try:
                self.store.write_json(self.config_path, defaults)
            except OSError as e:
                logger.debug("could not create %s: %s", self.config_path, e)
            return defaults

        try:
            config = self.store.read_json(self.config_path)
        except (OSError, ValueError) as e:
            logger.warning("ignoring unreadable config %s: %s", self.config_path, e)
            return defaults
        if not isinstance(config, dict):
            logger.warning("ignoring config %s: top level is not an object", self.config_path)
            return defaults
        return self._normalize({**defaults, **config})

    def _normalize(self, config: Dict[str, Any]) -> Dict[str, Any]:
        config['min_play'] = parse_threshold(config.get('min_play'))
        config['filter_enabled'] = parse_flag(config.get('filter_enabled'), default=True)
        config['debug'] = parse_flag(config.get('debug'))
        hosts = config.get('filter_hosts')
        if isinstance(hosts, str):
            hosts = split_hosts(hosts)
        elif isinstance(hosts, list):
            hosts = [str(h).strip().lower() for h in hosts if str(h).strip()]
        else:
            hosts = split_hosts(DEFAULT_FILTER_HOSTS)
        config['filter_hosts'] = hosts
        config['filter_path'] = str(config.get('filter_path') or '')
        return config

    def _apply_env_overrides(self):
        """Apply environment variable overrides"""
        # FF_MIN_PLAY overrides config
        if os.getenv('FF_MIN_PLAY') is not None:
            self._config['min_play'] = parse_threshold(os.getenv('FF_MIN_PLAY'), default=self._config['min_play'])

        if os.getenv('FF_FILTER_ENABLED') is not None:
            self._config['filter_enabled'] = parse_flag(os.getenv('FF_FILTER_ENABLED'))

        # FF_FILTER_HOSTS may be empty to filter every host
        if os.getenv('FF_FILTER_HOSTS') is not None:
            self._config['filter_hosts'] = split_hosts(os.getenv('FF_FILTER_HOSTS'))

        if os.getenv('FF_FILTER_PATH') is not None:
            self._config['filter_path'] = os.getenv('FF_FILTER_PATH')

        # FF_DEBUG enables debug mode
        if parse_flag(os.getenv('FF_DEBUG')):
            self._config['debug'] = True

    def load_config(self) -> Dict[str, Any]:
        """Load configuration (already loaded in __init__)"""
        return dict(self._config)

    def save_config(self, config: Dict[str, Any]) -> bool:
        """Save configuration to file"""
        try:
            self._config.update(config)
            self._config = self._normalize(self._config)
            self.store.write_json(self.config_path, self._config)
            return True
        except OSError as e:
            logger.warning("failed to save config: %s", e)
            return False

    def get(self, key: str, default: Any = None) -> Any:
        """Get a specific configuration value"""
        return self._config.get(key, default)

    def refresh(self) -> bool:
        """Refresh configuration from file"""
        self._config = self._load_from_file()
        self._apply_env_overrides()
        return True

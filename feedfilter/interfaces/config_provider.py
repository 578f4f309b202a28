"""
Configuration provider interface.

Defines how filter configuration is loaded and persisted.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class ConfigProvider(ABC):
    """Abstract configuration provider interface"""

    @abstractmethod
    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from source.

        Returns:
            Configuration dictionary with keys:
            - min_play: int
            - filter_enabled: bool
            - filter_hosts: list of str
            - filter_path: str
            - debug: bool
        """
        pass

    @abstractmethod
    def save_config(self, config: Dict[str, Any]) -> bool:
        """
        Save configuration to persistent storage.

        Args:
            config: Configuration dictionary to save

        Returns:
            True if successful, False otherwise
        """
        pass

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a specific configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        pass

    @abstractmethod
    def refresh(self) -> bool:
        """
        Reload configuration from source.

        Returns:
            True if refresh successful, False otherwise
        """
        pass

from abc import ABC, abstractmethod
from importlib import metadata as importlib_metadata
from typing import Any, Dict, Mapping, Optional
import logging

from whatsnew.config.config_manager import BUILD_NUMBER_KEY, SHORT_VERSION_KEY, ConfigManager

logger = logging.getLogger(__name__)

class HostMetadata(ABC):
    """Base class for sources of host application metadata"""

    @abstractmethod
    def get_info_dictionary(self) -> Mapping[str, Any]:
        """
        Get the host application's info dictionary

        Returns:
            Mapping of metadata keys to values
        """
        pass

    def _get_string(self, key: str) -> Optional[str]:
        value = self.get_info_dictionary().get(key)
        # Non-string values count as absent
        return value if isinstance(value, str) else None

    @property
    def short_version_string(self) -> Optional[str]:
        """Get the short version string, e.g. "1.2.3" """
        return self._get_string(SHORT_VERSION_KEY)

    @property
    def build_number(self) -> Optional[str]:
        """Get the build number, e.g. "45" """
        return self._get_string(BUILD_NUMBER_KEY)

class StaticHostMetadata(HostMetadata):
    """Metadata held in memory, supplied by the embedding application"""

    def __init__(self, info: Optional[Mapping[str, Any]] = None):
        self._info: Dict[str, Any] = dict(info or {})

    def get_info_dictionary(self) -> Mapping[str, Any]:
        return self._info

    def __repr__(self) -> str:
        return f"StaticHostMetadata({self._info!r})"

class ConfigHostMetadata(HostMetadata):
    """Metadata of the running application, read from its configuration"""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        self._config_manager = config_manager

    @property
    def config_manager(self) -> ConfigManager:
        if self._config_manager is None:
            self._config_manager = ConfigManager()
        return self._config_manager

    def get_info_dictionary(self) -> Mapping[str, Any]:
        return self.config_manager.info_dictionary

class DistributionHostMetadata(HostMetadata):
    """Metadata of an installed Python distribution; it has no build number"""

    def __init__(self, distribution_name: str):
        self.distribution_name = distribution_name

    def get_info_dictionary(self) -> Mapping[str, Any]:
        try:
            version = importlib_metadata.version(self.distribution_name)
        except importlib_metadata.PackageNotFoundError:
            logger.warning(f"Distribution '{self.distribution_name}' is not installed")
            return {}
        return {SHORT_VERSION_KEY: version}

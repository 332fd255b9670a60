import logging
from typing import Any, Mapping, Optional, Union

from whatsnew.metadata.host_metadata import HostMetadata
from whatsnew.models.version import Version

logger = logging.getLogger(__name__)

VersionLike = Union[Version, str]

def is_newer_version(current: VersionLike, latest: VersionLike) -> bool:
    """Check if latest version is newer than current version."""
    return Version.coerce(latest) > Version.coerce(current)

class VersionCheckService:
    """Service deciding whether release notes should be presented."""

    def __init__(self, metadata: Union[HostMetadata, Mapping[str, Any], None] = None):
        """
        Initialize the version check service.
        
        Args:
            metadata: Host metadata source; defaults to the application's configuration
        """
        self._metadata = metadata

    @property
    def current_version(self) -> Version:
        """Get the running application's version"""
        return Version.current(self._metadata)

    def should_present(self, last_seen: Optional[VersionLike]) -> bool:
        """
        Check whether release notes for the current version should be shown.
        
        Args:
            last_seen: Version whose release notes were last presented, if any
            
        Returns:
            True when nothing was presented yet or the current version is newer
        """
        current = self.current_version
        if last_seen is None:
            logger.info(f"No release notes presented yet, presenting {current}")
            return True

        last_seen_version = Version.coerce(last_seen)
        if current > last_seen_version:
            logger.info(f"New version available: {current} (last seen {last_seen_version})")
            return True

        logger.info(f"Release notes for {current} already presented (last seen {last_seen_version})")
        return False

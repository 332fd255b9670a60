"""Release version value object used to decide when to show what's new."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Tuple, Union

from whatsnew.metadata.host_metadata import ConfigHostMetadata, HostMetadata, StaticHostMetadata
from whatsnew.utils.logging_utils import get_logger, log_version_resolution

logger = get_logger(__name__)

# Optional sign followed by ASCII digits, nothing else
_INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+')

# Components are 64-bit signed integers; anything outside is not a number
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

# major, minor, patch, build
COMPONENT_COUNT = 4


def _parse_integer(token: str) -> int:
    if not _INTEGER_TOKEN.fullmatch(token):
        return 0
    number = int(token)
    return number if INT64_MIN <= number <= INT64_MAX else 0


def _parse_components(value: str, count: int) -> List[int]:
    """
    Split a dotted string into ``count`` integers.

    A token that is missing or is not an integer becomes 0 at its position.
    Tokens past ``count`` are ignored.
    """
    tokens = value.split('.')
    components = []
    for index in range(count):
        token = tokens[index] if index < len(tokens) else ''
        components.append(_parse_integer(token))
    return components


@dataclass(frozen=True, order=True)
class Version:
    """Immutable four-component version (major.minor.patch.build)."""

    major: int
    minor: int
    patch: int
    build: int = 0

    @classmethod
    def parse(cls, value: Optional[str]) -> Version:
        """
        Create a Version from a dotted string such as "1.2", "1.2.3" or "1.2.3.45".

        Parsing never fails: missing or non-numeric components are 0.

        Args:
            value: Version string; None is treated as an empty string

        Returns:
            Version instance
        """
        return cls(*_parse_components(value or '', COMPONENT_COUNT))

    @classmethod
    def coerce(cls, value: Union[Version, str, None]) -> Version:
        """Return ``value`` as a Version, parsing it if it is a string."""
        if isinstance(value, cls):
            return value
        return cls.parse(value)

    @classmethod
    def current(cls, metadata: Union[HostMetadata, Mapping[str, Any], None] = None) -> Version:
        """
        Retrieve the running application's version from its host metadata.

        The short version string supplies major, minor and patch. When a build
        number is also available it always lands in the build slot, even if the
        short version string omits the patch component.

        Args:
            metadata: Metadata source or raw info dictionary. Defaults to the
                configuration-backed metadata of the running application.

        Returns:
            Version instance, zero-filled where metadata is missing
        """
        if metadata is None:
            metadata = ConfigHostMetadata()
        elif not isinstance(metadata, HostMetadata):
            metadata = StaticHostMetadata(metadata)

        short_version = metadata.short_version_string
        build_number = metadata.build_number

        if short_version is not None and build_number is not None:
            major, minor, patch = _parse_components(short_version, 3)
            version = cls.parse(f"{major}.{minor}.{patch}.{build_number}")
        else:
            version = cls.parse(short_version or '')

        log_version_resolution(logger, type(metadata).__name__, short_version, build_number, version)
        return version

    @property
    def description(self) -> str:
        """Textual representation, always with all four components."""
        return '.'.join(str(component) for component in self.as_tuple())

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.major, self.minor, self.patch, self.build)

    def __str__(self) -> str:
        return self.description

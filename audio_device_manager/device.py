"""
Audio Device Records

The Device record returned by every query, the Windows device roles, and
the helper that splits a "Name (Manufacturer)" display string.
"""
import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple, Union

# Text before the first parenthesis, then the outermost parenthesised part
_DISPLAY_NAME_PATTERN = re.compile(r"([^)(]+)\((.+)\)")
_DEFAULT_MARKER = "(default)"


@dataclass(frozen=True)
class Device:
    """An audio output device, identified only by its display name."""
    name: str

    @classmethod
    def from_parts(cls, name: str, manufacturer: str) -> "Device":
        """Build a device whose display name is "name (manufacturer)"."""
        return cls(f"{name} ({manufacturer})")

    def __str__(self) -> str:
        return self.name


class DeviceRole(IntEnum):
    """Default device roles. Values are what SoundVolumeView expects."""
    CONSOLE = 0
    MULTIMEDIA = 1
    COMMUNICATIONS = 2

    @property
    def column(self) -> str:
        """SoundVolumeView column reporting the default device for this role."""
        return _ROLE_COLUMNS.get(self, "Default")

    @classmethod
    def parse(cls, value: Union[str, int, "DeviceRole"]) -> "DeviceRole":
        """
        Parse a role from its name (any case) or its integer value.

        Raises:
            ValueError: If the value names no role
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        if text.lstrip('-').isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            choices = ", ".join(role.name.lower() for role in cls)
            raise ValueError(f"Unknown device role {value!r} (expected one of: {choices})") from None


_ROLE_COLUMNS = {
    DeviceRole.CONSOLE: "Default",
    DeviceRole.MULTIMEDIA: "Default Multimedia",
    DeviceRole.COMMUNICATIONS: "Default Communications",
}


def split_device_name(display_name: str) -> Optional[Tuple[str, str]]:
    """
    Split a "Name (Manufacturer)" display string into its parts.

    "(default)" markers are dropped first, so names copied from a listing
    that flags the current device still resolve.

    Args:
        display_name: Display string such as "Speakers (Realtek(R) Audio)"

    Returns:
        (name, manufacturer) tuple, or None if the string has no parenthesised part
    """
    cleaned = display_name.replace(_DEFAULT_MARKER, "")
    match = _DISPLAY_NAME_PATTERN.search(cleaned)
    if match is None:
        return None
    return match.group(1).strip(), match.group(2).strip()

"""
Windows Platform Audio Utilities

Default playback device management through NirSoft SoundVolumeView:
- /scomma "" exports the device table to stdout as comma-separated rows
- /Columns picks which columns are exported
- /SetDefault switches the default device for one role or all of them
"""
import csv
import threading
from typing import Iterable, List, Optional

from ...commands import StdoutAction, execute_async_command, execute_command
from ...constants import (
    SVV_ALL_ROLES,
    SVV_COLUMNS_FLAG,
    SVV_CURRENT_COLUMNS,
    SVV_EXPORT_STDOUT,
    SVV_FRIENDLY_ID,
    SVV_LIST_COLUMNS,
    SVV_RENDER,
    SVV_SET_DEFAULT_FLAG,
    SVV_TYPE_DEVICE,
)
from ...device import Device, DeviceRole, split_device_name
from ...logging_config import get_logger

_logger = get_logger(__name__)


def _rows(lines: Iterable[str]) -> List[List[str]]:
    """Split exported lines into fields, honouring CSV quoting."""
    return [row for row in csv.reader(line for line in lines if line.strip())]


def build_current_device_arguments(role: DeviceRole = DeviceRole.CONSOLE) -> List[str]:
    """Export name, manufacturer and the role's default flag of every item."""
    columns = SVV_CURRENT_COLUMNS.format(role_column=DeviceRole(role).column)
    return [*SVV_EXPORT_STDOUT, SVV_COLUMNS_FLAG, columns]


def build_all_devices_arguments() -> List[str]:
    return [*SVV_EXPORT_STDOUT, SVV_COLUMNS_FLAG, SVV_LIST_COLUMNS]


def build_set_default_arguments(device_name: str,
                                role: Optional[DeviceRole] = None) -> Optional[List[str]]:
    """
    Build /SetDefault arguments for a "Name (Manufacturer)" display name.

    Returns:
        Argument list, or None if the name cannot be turned into a device id
    """
    parts = split_device_name(device_name)
    if parts is None:
        return None
    name, manufacturer = parts
    friendly_id = SVV_FRIENDLY_ID.format(manufacturer=manufacturer, name=name)
    role_argument = SVV_ALL_ROLES if role is None else str(int(role))
    return [SVV_SET_DEFAULT_FLAG, friendly_id, role_argument]


def parse_current_device(lines: Iterable[str]) -> Optional[Device]:
    """
    Find the default render device in "Name,Device Name,<role column>" rows.

    The role column holds "Render" for the default playback device and
    "Capture" for the default recording device.
    """
    for row in _rows(lines):
        if len(row) < 3:
            continue
        if row[2] == SVV_RENDER:
            return Device.from_parts(row[0], row[1])
    return None


def parse_all_devices(lines: Iterable[str]) -> List[Device]:
    """Collect render devices from "Name,Type,Direction,Device Name" rows."""
    devices = []
    for row in _rows(lines):
        if len(row) < 4:
            continue
        if row[1] == SVV_TYPE_DEVICE and row[2] == SVV_RENDER:
            devices.append(Device.from_parts(row[0], row[3]))
    return devices


def get_current_device(role: DeviceRole = DeviceRole.CONSOLE) -> Optional[Device]:
    """Get the current default playback device for a role."""
    current_device: Optional[Device] = None

    def handle_output(output: List[str]) -> None:
        nonlocal current_device
        current_device = parse_current_device(output)

    execute_command(build_current_device_arguments(role), handle_output)
    return current_device


def get_all_devices() -> List[Device]:
    """Get every playback device."""
    devices: List[Device] = []

    def handle_output(output: List[str]) -> None:
        devices.extend(parse_all_devices(output))

    execute_command(build_all_devices_arguments(), handle_output)
    return devices


def set_default_device(device_name: str, role: Optional[DeviceRole] = None,
                       stdout_action: Optional[StdoutAction] = None) -> Optional[threading.Thread]:
    """
    Switch the default playback device in the background.

    Args:
        device_name: Display name as returned by get_all_devices()
        role: Role to switch, or None for all roles
        stdout_action: Receives the tool output (optional)

    Returns:
        The worker thread, or None if nothing was started
    """
    arguments = build_set_default_arguments(device_name, role)
    if arguments is None:
        _logger.warning(f"Cannot derive a device id from {device_name!r}; expected 'Name (Manufacturer)'")
        return None
    _logger.info(f"Switching default playback device to: {device_name}")
    return execute_async_command(arguments, stdout_action)

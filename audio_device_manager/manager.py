"""
Audio Device Manager

Static API to show and switch the default audio output device. Calls are
dispatched to the backend for the running platform; on any other platform an
error is logged and None is returned.
"""
import threading
from typing import List, Optional, Union

from .commands import StdoutAction
from .constants import MSG_UNSUPPORTED_PLATFORM
from .device import Device, DeviceRole
from .logging_config import get_logger
from .platform_utils import is_linux, is_macos, is_windows

_logger = get_logger(__name__)


def get_current_device(role: DeviceRole = DeviceRole.CONSOLE) -> Optional[Device]:
    """
    Get the current default audio output device.

    Args:
        role: Role of the device (Windows only, defaults to console)

    Returns:
        The current audio output device, or None if unknown
    """
    if is_windows():
        from .backends.platform import windows
        return windows.get_current_device(role)
    elif is_macos():
        from .backends.platform import macos
        return macos.get_current_device()
    elif is_linux():
        from .backends.platform import linux
        return linux.get_current_device()
    _logger.error(MSG_UNSUPPORTED_PLATFORM)
    return None


def get_all_devices() -> Optional[List[Device]]:
    """
    Get all the available audio output devices.

    Returns:
        List of output devices, or None on unsupported platforms
    """
    if is_windows():
        from .backends.platform import windows
        return windows.get_all_devices()
    elif is_macos():
        from .backends.platform import macos
        return macos.get_all_devices()
    elif is_linux():
        from .backends.platform import linux
        return linux.get_all_devices()
    _logger.error(MSG_UNSUPPORTED_PLATFORM)
    return None


def set_default_device(device: Union[str, Device], role: Optional[DeviceRole] = None,
                       stdout_action: Optional[StdoutAction] = None) -> Optional[threading.Thread]:
    """
    Asynchronously change the default audio output device.

    The switch runs on a background thread that is returned but never joined.

    Args:
        device: Device, or its display name, to set as default
        role: Role of the device (Windows only, defaults to all roles)
        stdout_action: Receives the tool output once the switch ran (optional)

    Returns:
        The worker thread, or None if nothing was started
    """
    device_name = device.name if isinstance(device, Device) else device
    if is_windows():
        from .backends.platform import windows
        return windows.set_default_device(device_name, role, stdout_action)
    elif is_macos():
        from .backends.platform import macos
        return macos.set_default_device(device_name, stdout_action)
    elif is_linux():
        from .backends.platform import linux
        return linux.set_default_device(device_name, stdout_action)
    _logger.error(MSG_UNSUPPORTED_PLATFORM)
    return None

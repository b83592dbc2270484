"""
macOS Platform Audio Utilities

Default output device management through SwitchAudioSource, which prints one
device name per line.
"""
import threading
from typing import Iterable, List, Optional

from ...commands import StdoutAction, execute_async_command, execute_command
from ...constants import SAS_CURRENT_ARGS, SAS_LIST_ARGS, SAS_SET_ARGS
from ...device import Device
from ...logging_config import get_logger

_logger = get_logger(__name__)


def build_set_default_arguments(device_name: str) -> List[str]:
    return [*SAS_SET_ARGS, device_name]


def parse_current_device(lines: Iterable[str]) -> Optional[Device]:
    for line in lines:
        if line.strip():
            return Device(line.strip())
    return None


def parse_all_devices(lines: Iterable[str]) -> List[Device]:
    return [Device(line.strip()) for line in lines if line.strip()]


def get_current_device() -> Optional[Device]:
    """Get the current default output device."""
    current_device: Optional[Device] = None

    def handle_output(output: List[str]) -> None:
        nonlocal current_device
        current_device = parse_current_device(output)

    execute_command(SAS_CURRENT_ARGS, handle_output)
    return current_device


def get_all_devices() -> List[Device]:
    """Get every output device."""
    devices: List[Device] = []

    def handle_output(output: List[str]) -> None:
        devices.extend(parse_all_devices(output))

    execute_command(SAS_LIST_ARGS, handle_output)
    return devices


def set_default_device(device_name: str,
                       stdout_action: Optional[StdoutAction] = None) -> Optional[threading.Thread]:
    """Switch the default output device in the background."""
    _logger.info(f"Switching default output device to: {device_name}")
    return execute_async_command(build_set_default_arguments(device_name), stdout_action)

"""
Audio Device Manager Package

Show and switch the operating system's default audio output device from
Python, by driving small platform tools and parsing their output.

Features:
- Windows: NirSoft SoundVolumeView (bundled win64/win32 builds)
- macOS: SwitchAudioSource (bundled)
- Linux: PulseAudio/PipeWire sinks via pulsectl
- Per-role defaults on Windows (console, multimedia, communications)
- Fire-and-forget switching on a background thread
"""

from .device import Device, DeviceRole, split_device_name
from .config import ManagerConfig, get_config, init_config, set_config
from .manager import get_current_device, get_all_devices, set_default_device
from .cli import main

__version__ = "1.0.0"

__all__ = [
    # Classes
    "Device",
    "DeviceRole",
    "ManagerConfig",
    # Functions
    "split_device_name",
    "get_config",
    "init_config",
    "set_config",
    "get_current_device",
    "get_all_devices",
    "set_default_device",
    "main",
]

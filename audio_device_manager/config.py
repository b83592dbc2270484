"""
Audio Device Manager - Configuration

Holds the location of the bundled command-line tools and the command timeout.
Values come from environment variables, falling back to defaults that work
both in development and when bundled with PyInstaller.
"""
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from .constants import ENV_COMMAND_TIMEOUT, ENV_TOOLS_DIR, TOOLS_DIR_NAME
from .logging_config import get_logger

_logger = get_logger(__name__)


def _get_resource_base() -> str:
    """
    Get the directory bundled resources live in.

    When bundled, looks in sys._MEIPASS (one-file mode) or next to the
    executable (one-folder mode). When not bundled, uses the project root.
    """
    if getattr(sys, 'frozen', False):
        if hasattr(sys, '_MEIPASS'):
            return sys._MEIPASS
        return os.path.dirname(sys.executable)
    # Go up from audio_device_manager/ to project root
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def default_tools_dir() -> Path:
    """Directory holding win64/, win32/ and macOS/ tool builds."""
    override = os.environ.get(ENV_TOOLS_DIR)
    if override:
        return Path(override)
    return Path(_get_resource_base()) / TOOLS_DIR_NAME


def default_command_timeout() -> Optional[float]:
    """Timeout from the environment, or None to block until the tool exits."""
    raw = os.environ.get(ENV_COMMAND_TIMEOUT)
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        _logger.warning(f"Ignoring invalid {ENV_COMMAND_TIMEOUT} value: {raw!r}")
        return None
    if timeout <= 0:
        _logger.warning(f"Ignoring non-positive {ENV_COMMAND_TIMEOUT} value: {raw!r}")
        return None
    return timeout


@dataclass
class ManagerConfig:
    """Runtime configuration for the command layer."""
    tools_dir: Path = field(default_factory=default_tools_dir)
    command_timeout: Optional[float] = field(default_factory=default_command_timeout)

    def __post_init__(self):
        self.tools_dir = Path(self.tools_dir)


# Global configuration instance
_global_config: Optional[ManagerConfig] = None


def get_config() -> ManagerConfig:
    """
    Get the global configuration instance.

    Returns:
        Global ManagerConfig instance, created from the environment on first use
    """
    global _global_config
    if _global_config is None:
        _global_config = ManagerConfig()
    return _global_config


def init_config(tools_dir: Optional[Union[str, Path]] = None,
                command_timeout: Optional[float] = None) -> ManagerConfig:
    """
    Initialize the global configuration.

    Args:
        tools_dir: Directory of bundled tools. If None, uses the default.
        command_timeout: Seconds before a command is abandoned. If None, uses the default.

    Returns:
        The new global ManagerConfig instance
    """
    config = ManagerConfig()
    if tools_dir is not None:
        config.tools_dir = Path(tools_dir)
    if command_timeout is not None:
        config.command_timeout = command_timeout
    return set_config(config)


def set_config(config: Optional[ManagerConfig]) -> Optional[ManagerConfig]:
    """Replace the global configuration. Passing None resets it."""
    global _global_config
    _global_config = config
    return config

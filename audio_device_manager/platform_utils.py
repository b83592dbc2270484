"""
Platform Utilities

Runtime platform detection.
"""
import sys
from typing import Optional


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32'


def is_linux() -> bool:
    """Check if running on Linux."""
    return sys.platform.startswith('linux')


def is_macos() -> bool:
    """Check if running on macOS."""
    return sys.platform == 'darwin'


def is_64bit() -> bool:
    """Check if the interpreter uses 64-bit pointers."""
    return sys.maxsize > 2 ** 32


def get_platform_name() -> Optional[str]:
    """Short name of the supported platform we run on, or None."""
    if is_windows():
        return 'windows'
    elif is_macos():
        return 'macos'
    elif is_linux():
        return 'linux'
    return None

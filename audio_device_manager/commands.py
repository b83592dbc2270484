"""
Command Execution

Runs the bundled audio tools (SoundVolumeView on Windows, SwitchAudioSource
on macOS) and hands their standard output to a callback as a list of lines.
"""
import subprocess
import threading
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .config import get_config
from .constants import (
    ASYNC_COMMAND_THREAD_NAME,
    MACOS_TOOL,
    MSG_COMMAND_EXIT_CODE,
    MSG_COMMAND_FAILED,
    MSG_COMMAND_TIMEOUT,
    MSG_UNSUPPORTED_PLATFORM,
    WINDOWS_TOOL_32,
    WINDOWS_TOOL_64,
)
from .logging_config import get_logger
from .platform_utils import is_64bit, is_macos, is_windows

_logger = get_logger(__name__)

StdoutAction = Callable[[List[str]], None]

# No console window for the tool on Windows; 0 elsewhere
_CREATION_FLAGS = getattr(subprocess, 'CREATE_NO_WINDOW', 0)


def get_executable_path() -> Optional[Path]:
    """Path of the bundled tool for this platform, or None if unsupported."""
    tools_dir = get_config().tools_dir
    if is_windows():
        # Match the tool build to the interpreter's pointer size
        return tools_dir / (WINDOWS_TOOL_64 if is_64bit() else WINDOWS_TOOL_32)
    elif is_macos():
        return tools_dir / MACOS_TOOL
    _logger.error(MSG_UNSUPPORTED_PLATFORM)
    return None


def execute_command(arguments: Sequence[str],
                    stdout_action: Optional[StdoutAction] = None) -> Optional[int]:
    """
    Execute the platform tool and wait for it to exit.

    Args:
        arguments: Command arguments
        stdout_action: Receives the output lines (optional). Output is only
            captured when given.

    Returns:
        Process exit code, or None if the tool could not be run
    """
    return _command(get_executable_path(), arguments, stdout_action)


def execute_async_command(arguments: Sequence[str],
                          stdout_action: Optional[StdoutAction] = None) -> Optional[threading.Thread]:
    """
    Start a thread that executes the platform tool.

    The executable is resolved on the calling thread. Nothing waits for the
    thread; join it if the result matters.

    Args:
        arguments: Command arguments
        stdout_action: Receives the output lines on the worker thread (optional)

    Returns:
        The started thread, or None if the platform has no tool
    """
    executable_path = get_executable_path()
    if executable_path is None:
        return None
    thread = threading.Thread(
        target=_background_command,
        args=(executable_path, list(arguments), stdout_action),
        name=ASYNC_COMMAND_THREAD_NAME,
    )
    thread.start()
    return thread


def _command(executable_path: Optional[Path], arguments: Sequence[str],
             stdout_action: Optional[StdoutAction]) -> Optional[int]:
    """Run one tool invocation, logging instead of raising on failure."""
    if executable_path is None:
        return None

    command = [str(executable_path), *arguments]
    timeout = get_config().command_timeout
    _logger.debug(f"Running: {subprocess.list2cmdline(command)}")

    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE if stdout_action is not None else None,
            text=True,
            errors="replace",
            timeout=timeout,
            creationflags=_CREATION_FLAGS,
        )
    except subprocess.TimeoutExpired:
        _logger.error(MSG_COMMAND_TIMEOUT.format(timeout, executable_path.name))
        return None
    except OSError as e:
        _logger.error(MSG_COMMAND_FAILED.format(executable_path, e))
        return None

    if result.returncode != 0:
        _logger.warning(MSG_COMMAND_EXIT_CODE.format(executable_path.name, result.returncode))

    if stdout_action is not None:
        stdout_action((result.stdout or "").splitlines())

    return result.returncode


def _background_command(executable_path: Path, arguments: Sequence[str],
                        stdout_action: Optional[StdoutAction]) -> None:
    """Thread target: the caller is gone, so failures end up in the log."""
    try:
        _command(executable_path, arguments, stdout_action)
    except Exception as e:
        _logger.error(f"Background command failed: {e}")

"""Shared fixtures: isolated configuration and a switchable fake platform."""

import pytest

from audio_device_manager import cli, commands, manager
from audio_device_manager.config import ManagerConfig, set_config

_PLATFORM_MODULES = (manager, commands)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point the tools directory at a temp dir and disable timeouts"""
    config = set_config(ManagerConfig(tools_dir=tmp_path / "tools", command_timeout=None))
    yield config
    set_config(None)


@pytest.fixture
def fake_platform(monkeypatch):
    """Pretend to run on 'windows', 'macos', 'linux' or anything else"""

    def apply(name):
        checks = {
            "is_windows": lambda: name == "windows",
            "is_macos": lambda: name == "macos",
            "is_linux": lambda: name == "linux",
        }
        for module in _PLATFORM_MODULES:
            # Only replace the checks each module actually imports
            for attr, check in checks.items():
                if hasattr(module, attr):
                    monkeypatch.setattr(module, attr, check)
        monkeypatch.setattr(cli, "get_platform_name", lambda: name)

    return apply


class RecordingCommand:
    """Stands in for execute_command: records arguments and replays output"""

    def __init__(self, output=None, returncode=0):
        self.output = output or []
        self.returncode = returncode
        self.calls = []

    def __call__(self, arguments, stdout_action=None):
        self.calls.append(list(arguments))
        if stdout_action is not None:
            stdout_action(list(self.output))
        return self.returncode


@pytest.fixture
def recording_command():
    return RecordingCommand

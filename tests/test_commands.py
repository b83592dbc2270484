"""Tests for tool resolution and process execution

subprocess.run is replaced, so no tool is ever started. The decoding test runs
the interpreter itself to emit raw bytes.
"""

import subprocess
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from audio_device_manager import commands
from audio_device_manager.config import get_config


@pytest.fixture
def fake_run(monkeypatch):
    run = MagicMock(return_value=subprocess.CompletedProcess(args=[], returncode=0, stdout="first\nsecond\r\n"))
    monkeypatch.setattr(commands.subprocess, "run", run)
    return run


class TestExecutablePath:
    def test_windows_64bit(self, fake_platform, monkeypatch):
        fake_platform("windows")
        monkeypatch.setattr(commands, "is_64bit", lambda: True)
        assert commands.get_executable_path() == get_config().tools_dir / "win64" / "SoundVolumeView.exe"

    def test_windows_32bit(self, fake_platform, monkeypatch):
        fake_platform("windows")
        monkeypatch.setattr(commands, "is_64bit", lambda: False)
        assert commands.get_executable_path() == get_config().tools_dir / "win32" / "SoundVolumeView.exe"

    def test_macos(self, fake_platform):
        fake_platform("macos")
        assert commands.get_executable_path() == get_config().tools_dir / "macOS" / "SwitchAudioSource"

    def test_unsupported(self, fake_platform):
        fake_platform("linux")
        assert commands.get_executable_path() is None


class TestExecuteCommand:
    def test_output_lines_passed_to_action(self, fake_platform, fake_run):
        fake_platform("macos")
        action = MagicMock()

        assert commands.execute_command(["-a", "-t", "output"], action) == 0

        action.assert_called_once_with(["first", "second"])
        command = fake_run.call_args.args[0]
        assert command == [str(get_config().tools_dir / "macOS" / "SwitchAudioSource"), "-a", "-t", "output"]
        assert fake_run.call_args.kwargs["stdout"] == subprocess.PIPE
        assert fake_run.call_args.kwargs["timeout"] is None

    def test_output_not_captured_without_action(self, fake_platform, fake_run):
        fake_platform("macos")
        commands.execute_command(["-t", "output", "-s", "Speakers"])
        assert fake_run.call_args.kwargs["stdout"] is None

    def test_configured_timeout_used(self, fake_platform, fake_run):
        fake_platform("macos")
        get_config().command_timeout = 2.5
        commands.execute_command(["-c"])
        assert fake_run.call_args.kwargs["timeout"] == 2.5

    def test_non_zero_exit_code_returned(self, fake_platform, monkeypatch):
        fake_platform("macos")
        monkeypatch.setattr(commands.subprocess, "run", MagicMock(
            return_value=subprocess.CompletedProcess(args=[], returncode=3, stdout="")))
        action = MagicMock()

        assert commands.execute_command(["-c"], action) == 3
        action.assert_called_once_with([])

    def test_launch_failure_is_logged_not_raised(self, fake_platform, monkeypatch):
        fake_platform("windows")
        monkeypatch.setattr(commands.subprocess, "run", MagicMock(side_effect=FileNotFoundError("missing")))
        action = MagicMock()

        assert commands.execute_command(["/scomma", ""], action) is None
        action.assert_not_called()

    def test_timeout_is_logged_not_raised(self, fake_platform, monkeypatch):
        fake_platform("macos")
        monkeypatch.setattr(commands.subprocess, "run", MagicMock(
            side_effect=subprocess.TimeoutExpired(cmd="SwitchAudioSource", timeout=1)))
        action = MagicMock()

        assert commands.execute_command(["-c"], action) is None
        action.assert_not_called()

    def test_unsupported_platform_runs_nothing(self, fake_platform, fake_run):
        fake_platform("other")
        assert commands.execute_command(["-c"], MagicMock()) is None
        fake_run.assert_not_called()


class TestExecuteAsyncCommand:
    def test_runs_on_background_thread(self, fake_platform, fake_run):
        fake_platform("macos")
        action = MagicMock()

        thread = commands.execute_async_command(["-t", "output", "-s", "Speakers"], action)
        thread.join(timeout=5)

        assert not thread.is_alive()
        assert not thread.daemon
        action.assert_called_once_with(["first", "second"])

    def test_action_errors_stay_on_the_thread(self, fake_platform, fake_run):
        fake_platform("macos")
        action = MagicMock(side_effect=ValueError("bad output"))

        thread = commands.execute_async_command(["-c"], action)
        thread.join(timeout=5)

        assert not thread.is_alive()
        action.assert_called_once()

    def test_unsupported_platform_starts_no_thread(self, fake_platform, fake_run):
        fake_platform("other")
        assert commands.execute_async_command(["-c"]) is None
        fake_run.assert_not_called()


class TestOutputDecoding:
    def test_undecodable_bytes_do_not_raise(self):
        """A device name in another code page must not break parsing"""
        emit_latin1 = "import sys; sys.stdout.buffer.write(b'Caf\\xe9 Speakers\\nHeadphones\\n')"
        action = MagicMock()

        assert commands._command(Path(sys.executable), ["-c", emit_latin1], action) == 0

        lines = action.call_args.args[0]
        assert len(lines) == 2
        assert lines[0].startswith("Caf") and lines[0].endswith(" Speakers")
        assert lines[1] == "Headphones"

    def test_decoding_errors_replaced(self, fake_platform, fake_run):
        fake_platform("windows")
        commands.execute_command(["/scomma", ""], MagicMock())
        assert fake_run.call_args.kwargs["errors"] == "replace"

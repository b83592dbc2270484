"""Tests for the PulseAudio/PipeWire backend with a fake pulsectl"""

import builtins
import importlib
import sys
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from audio_device_manager import manager
from audio_device_manager.backends.platform import linux
from audio_device_manager.device import Device


class FakePulseError(Exception):
    pass


def _sink(name, description):
    return SimpleNamespace(name=name, description=description)


SINKS = [
    _sink("alsa_output.pci-0000_00_1f.3.analog-stereo", "Built-in Audio Analog Stereo"),
    _sink("bluez_output.AA_BB_CC.1", "WH-1000XM4"),
    _sink("Denoiser_Null_Sink", "Null Output"),
]


class FakePulse:
    """Minimal pulsectl.Pulse replacement"""

    default_sink_name = SINKS[0].name
    fail = False

    def __init__(self, client_name):
        self.client_name = client_name

    def __enter__(self):
        if FakePulse.fail:
            raise FakePulseError("connection refused")
        return self

    def __exit__(self, *exc):
        return False

    def server_info(self):
        return SimpleNamespace(default_sink_name=FakePulse.default_sink_name)

    def sink_list(self):
        return list(SINKS)

    def sink_default_set(self, sink):
        FakePulse.default_sink_name = sink.name


@pytest.fixture
def fake_pulsectl(monkeypatch):
    FakePulse.default_sink_name = SINKS[0].name
    FakePulse.fail = False
    module = SimpleNamespace(Pulse=FakePulse, PulseError=FakePulseError)
    monkeypatch.setattr(linux, "pulsectl", module)
    monkeypatch.setattr(linux, "USE_PULSECTL", True)
    return module


def test_current_device_is_default_sink(fake_pulsectl):
    assert linux.get_current_device() == Device("Built-in Audio Analog Stereo")


def test_current_device_missing_from_sink_list(fake_pulsectl):
    FakePulse.default_sink_name = "gone"
    assert linux.get_current_device() is None


def test_all_devices_skip_null_sinks(fake_pulsectl):
    assert linux.get_all_devices() == [
        Device("Built-in Audio Analog Stereo"),
        Device("WH-1000XM4"),
    ]


def test_pulse_errors_are_logged(fake_pulsectl):
    FakePulse.fail = True
    assert linux.get_current_device() is None
    assert linux.get_all_devices() == []


def test_set_default_device_by_description(fake_pulsectl):
    callback = MagicMock()

    thread = linux.set_default_device("WH-1000XM4", callback)
    thread.join(timeout=5)

    assert FakePulse.default_sink_name == "bluez_output.AA_BB_CC.1"
    callback.assert_called_once_with(["WH-1000XM4"])


def test_set_default_device_by_internal_name(fake_pulsectl):
    thread = linux.set_default_device("bluez_output.AA_BB_CC.1")
    thread.join(timeout=5)
    assert FakePulse.default_sink_name == "bluez_output.AA_BB_CC.1"


def test_set_default_device_unknown_sink(fake_pulsectl):
    callback = MagicMock()

    thread = linux.set_default_device("HDMI", callback)
    thread.join(timeout=5)

    assert FakePulse.default_sink_name == SINKS[0].name
    callback.assert_not_called()


def test_without_pulsectl(monkeypatch):
    monkeypatch.setattr(linux, "USE_PULSECTL", False)
    assert linux.get_current_device() is None
    assert linux.get_all_devices() == []
    assert linux.set_default_device("WH-1000XM4") is None


@pytest.fixture
def missing_libpulse():
    """Reload the backend as if pulsectl is installed but libpulse.so.0 is not"""
    real_import = builtins.__import__

    def fake_import(name, *args, **kwargs):
        if name == "pulsectl":
            raise OSError("libpulse.so.0: cannot open shared object file: No such file or directory")
        return real_import(name, *args, **kwargs)

    with patch.dict(sys.modules), patch("builtins.__import__", fake_import):
        sys.modules.pop("pulsectl", None)
        importlib.reload(linux)
        yield linux
    importlib.reload(linux)


def test_missing_libpulse_disables_backend(missing_libpulse):
    assert missing_libpulse.USE_PULSECTL is False
    assert missing_libpulse.pulsectl is None
    assert missing_libpulse.get_current_device() is None
    assert missing_libpulse.get_all_devices() == []
    assert missing_libpulse.set_default_device("WH-1000XM4") is None


def test_missing_libpulse_through_manager(missing_libpulse, fake_platform):
    fake_platform("linux")
    assert manager.get_all_devices() == []
    assert manager.get_current_device() is None
    assert manager.set_default_device("WH-1000XM4") is None

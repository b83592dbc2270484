"""
Linux Platform Audio Utilities

Default output device management for PulseAudio/PipeWire via pulsectl.
Sinks are reported by their human-readable description, which is also the
name accepted when switching.
"""
import threading
from typing import List, Optional

from ...commands import StdoutAction
from ...constants import ASYNC_COMMAND_THREAD_NAME, MSG_PULSECTL_UNAVAILABLE, PULSE_CLIENT_NAME
from ...device import Device
from ...logging_config import get_logger

_logger = get_logger(__name__)

# Try to import pulsectl for PulseAudio/PipeWire device management
try:
    import pulsectl
    USE_PULSECTL = True
except (ImportError, OSError) as e:
    # OSError: pulsectl is installed but libpulse.so.0 is missing
    pulsectl = None
    USE_PULSECTL = False
    _logger.debug(f"pulsectl not available - Linux device management disabled ({e})")


def _is_real_sink(sink) -> bool:
    """Skip monitors and null sinks (virtual devices for routing)."""
    name_lower = sink.name.lower()
    return not name_lower.endswith('.monitor') and 'null' not in name_lower


def _find_sink(sinks, device_name: str):
    """Match a sink by description first, internal name second."""
    for sink in sinks:
        if sink.description == device_name:
            return sink
    for sink in sinks:
        if sink.name == device_name:
            return sink
    return None


def get_current_device() -> Optional[Device]:
    """Get the current default sink."""
    if not USE_PULSECTL:
        _logger.warning(MSG_PULSECTL_UNAVAILABLE)
        return None

    try:
        with pulsectl.Pulse(f'{PULSE_CLIENT_NAME}-current') as pulse:
            default_sink_name = pulse.server_info().default_sink_name
            for sink in pulse.sink_list():
                if sink.name == default_sink_name:
                    return Device(sink.description)
            _logger.warning(f"Default sink not found in sink list: {default_sink_name}")
            return None
    except pulsectl.PulseError as e:
        _logger.warning(f"Failed to query default PulseAudio sink: {e}")
        return None


def get_all_devices() -> List[Device]:
    """Get every real output sink."""
    if not USE_PULSECTL:
        _logger.warning(MSG_PULSECTL_UNAVAILABLE)
        return []

    try:
        with pulsectl.Pulse(f'{PULSE_CLIENT_NAME}-list') as pulse:
            return [Device(sink.description) for sink in pulse.sink_list() if _is_real_sink(sink)]
    except pulsectl.PulseError as e:
        _logger.warning(f"Failed to list PulseAudio sinks: {e}")
        return []


def _switch_default_sink(device_name: str, stdout_action: Optional[StdoutAction]) -> None:
    """Thread target: make the named sink the default."""
    try:
        with pulsectl.Pulse(f'{PULSE_CLIENT_NAME}-switch') as pulse:
            sink = _find_sink(pulse.sink_list(), device_name)
            if sink is None:
                _logger.warning(f"No PulseAudio sink named: {device_name}")
                return
            pulse.sink_default_set(sink)
            _logger.info(f"Set default sink to: {sink.description}")
        if stdout_action is not None:
            stdout_action([sink.description])
    except pulsectl.PulseError as e:
        _logger.error(f"PulseAudio error while switching sink: {e}")
    except Exception as e:
        _logger.error(f"Error switching sink: {e}")


def set_default_device(device_name: str,
                       stdout_action: Optional[StdoutAction] = None) -> Optional[threading.Thread]:
    """Switch the default sink in the background."""
    if not USE_PULSECTL:
        _logger.warning(MSG_PULSECTL_UNAVAILABLE)
        return None

    _logger.info(f"Switching default sink to: {device_name}")
    thread = threading.Thread(
        target=_switch_default_sink,
        args=(device_name, stdout_action),
        name=ASYNC_COMMAND_THREAD_NAME,
    )
    thread.start()
    return thread

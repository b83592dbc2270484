"""
Command-Line Interface for Audio Device Manager

Lists output devices, shows the current default and switches it.
Supports Windows (SoundVolumeView), macOS (SwitchAudioSource) and
Linux (PulseAudio/PipeWire).
"""
import argparse
import sys
import threading
from typing import List, Optional

from .config import init_config
from .device import DeviceRole
from .logging_config import get_logger
from .manager import get_all_devices, get_current_device, set_default_device
from .platform_utils import get_platform_name

_logger = get_logger(__name__)


def _role_argument(value: str) -> DeviceRole:
    try:
        return DeviceRole.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='audio-device-manager',
        description='Show and switch the default audio output device',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List output devices (the current default is marked with *):
  audio-device-manager --list-devices

  # Show the default communications device (Windows):
  audio-device-manager --current --role communications

  # Switch the default device for every role:
  audio-device-manager --set "Speakers (Realtek High Definition Audio)"

  # Switch only the multimedia role (Windows):
  audio-device-manager --set "Headphones (USB Audio)" --role multimedia

  # Use tools bundled somewhere else:
  audio-device-manager --tools-dir ./StreamingAssets/AudioDeviceManager --list-devices
        """
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument('--list-devices', action='store_true',
                         help='List all output devices and exit (default)')
    actions.add_argument('--current', action='store_true',
                         help='Print the current default output device')
    actions.add_argument('--set', metavar='NAME', dest='set_device', default=None,
                         help='Set NAME as the default output device')
    actions.add_argument('--tui', action='store_true',
                         help='Launch terminal UI')

    parser.add_argument('--role', type=_role_argument, default=None,
                        help='Device role: console, multimedia or communications (Windows only; '
                             '--current defaults to console, --set defaults to all roles)')
    parser.add_argument('--tools-dir', type=str, default=None,
                        help='Directory holding the bundled win64/, win32/ and macOS/ tools')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Seconds to wait for a tool before giving up (default: no timeout)')
    return parser


def list_devices(role: DeviceRole = DeviceRole.CONSOLE) -> int:
    """Print every output device, marking the current default. Returns exit status."""
    devices = get_all_devices()
    if devices is None:
        return 1

    current = get_current_device(role)
    print(f"Output devices ({get_platform_name()}):")
    print("=" * 80)
    if not devices:
        print("No output devices found")
    for device in devices:
        marker = "*" if device == current else " "
        print(f" {marker} {device.name}")
    return 0


def show_current_device(role: DeviceRole = DeviceRole.CONSOLE) -> int:
    device = get_current_device(role)
    if device is None:
        _logger.error("No default output device found")
        return 1
    print(device.name)
    return 0


def switch_device(device_name: str, role: Optional[DeviceRole] = None) -> int:
    """
    Switch the default device and wait for the background switch to finish.

    The output callback only fires once the tool ran (or the sink was set on
    Linux), so a silent callback means the switch never happened.
    """
    switched = threading.Event()
    thread = set_default_device(device_name, role, lambda output: switched.set())
    if thread is None:
        return 1
    thread.join()
    if not switched.is_set():
        _logger.error(f"Could not switch default output device to: {device_name}")
        return 1
    return 0


def main(argv: Optional[List[str]] = None):
    """Main function for the audio-device-manager command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    if args.tools_dir is not None or args.timeout is not None:
        init_config(tools_dir=args.tools_dir, command_timeout=args.timeout)

    if args.tui:
        try:
            from .tui import DeviceManagerApp
        except ImportError as e:
            _logger.error(f"Failed to import TUI: {e}")
            _logger.error("Make sure textual is installed: pip install textual")
            sys.exit(1)
        app = DeviceManagerApp(role=args.role or DeviceRole.CONSOLE)
        app.run()
        sys.exit(0)

    try:
        if args.set_device is not None:
            status = switch_device(args.set_device, args.role)
        elif args.current:
            status = show_current_device(args.role or DeviceRole.CONSOLE)
        else:
            status = list_devices(args.role or DeviceRole.CONSOLE)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        status = 1

    sys.exit(status)


if __name__ == "__main__":
    main()

"""
Audio Device Manager TUI App

Main Textual application: pick an output device and make it the default.
"""
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Static
from textual.worker import get_current_worker

from ..device import Device, DeviceRole
from ..logging_config import attach_handler, detach_handler, set_tui_mode
from ..manager import get_all_devices, get_current_device, set_default_device
from .widgets import DeviceList, StatusLine, TUIStatusHandler


class DeviceManagerApp(App):
    """Audio Device Manager TUI Application."""

    TITLE = "[ AUDIO DEVICE MANAGER ]"
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #app-title {
        text-style: bold;
        padding: 0 1;
    }
    #status-line {
        height: 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh_devices", "Refresh"),
        Binding("escape", "quit", "Quit", show=False),
        Binding("1", "set_role(0)", "Console"),
        Binding("2", "set_role(1)", "Multimedia"),
        Binding("3", "set_role(2)", "Communications"),
    ]

    def __init__(self, role: DeviceRole = DeviceRole.CONSOLE, **kwargs):
        super().__init__(**kwargs)
        self.role = role
        self.log_handler = TUIStatusHandler()
        self.switch_thread = None

    def compose(self) -> ComposeResult:
        """Create the UI layout."""
        yield Static("AUDIO DEVICE MANAGER", id="app-title")
        with Vertical(id="main-container"):
            yield DeviceList(id="device-panel")
            yield StatusLine(id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        # Route package logging to the status line instead of the console
        set_tui_mode(True)
        status_line = self.query_one("#status-line", StatusLine)
        status_line.set_role(self.role.name)
        self.log_handler.set_widget(status_line)
        attach_handler(self.log_handler)

        self.refresh_devices()

    def on_unmount(self) -> None:
        detach_handler(self.log_handler)
        self.log_handler.set_widget(None)
        set_tui_mode(False)

    def refresh_devices(self) -> None:
        """Query the devices on a worker thread; the tools can take a while."""
        self.run_worker(self._query_devices, thread=True, exclusive=True, group="refresh")

    def _query_devices(self) -> None:
        devices = get_all_devices()
        current = get_current_device(self.role) if devices is not None else None
        if get_current_worker().is_cancelled:
            return
        self.call_from_thread(self._show_devices, devices, current)

    async def _show_devices(self, devices: Optional[List[Device]], current: Optional[Device]) -> None:
        """Redraw the list and report the default in the status line."""
        status_line = self.query_one("#status-line", StatusLine)
        device_list = self.query_one("#device-panel", DeviceList)

        if devices is None:
            status_line.show_message("Audio device management is not available on this platform", "error")
            await device_list.set_devices([], None)
            return

        await device_list.set_devices(devices, current)
        if current is None:
            status_line.show_message(f"{len(devices)} devices, no default found", "warning")
        else:
            status_line.show_message(f"{len(devices)} devices, default: {current.name}")

    def action_refresh_devices(self) -> None:
        """Refresh the device list."""
        self.refresh_devices()

    def action_set_role(self, role: int) -> None:
        """Choose the role used for the default marker and for switching."""
        self.role = DeviceRole(role)
        self.query_one("#status-line", StatusLine).set_role(self.role.name)
        self.refresh_devices()

    def on_device_list_device_chosen(self, message: DeviceList.DeviceChosen) -> None:
        """Switch to the picked device in the background."""
        status_line = self.query_one("#status-line", StatusLine)
        status_line.show_message(f"Switching to: {message.device.name}")
        self.switch_thread = set_default_device(message.device, self.role, self._on_switched)
        if self.switch_thread is None:
            status_line.show_message(f"Could not switch to: {message.device.name}", "error")

    def _on_switched(self, output: List[str]) -> None:
        """Runs on the switch thread once the tool has finished."""
        self.call_from_thread(self.refresh_devices)

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

"""
Device List Widget

Displays available output devices with the current default marked.
"""
from typing import List, Optional

from textual.message import Message
from textual.widgets import Label, ListItem, ListView, Static

from ...device import Device


class DeviceListItem(ListItem):
    """A single device in the list."""

    def __init__(self, device: Device, is_current: bool = False) -> None:
        super().__init__()
        self.device = device
        self.is_current = is_current

    def compose(self):
        marker = "● " if self.is_current else "  "
        # Truncate long names
        name = self.device.name
        display_name = name[:50] + "..." if len(name) > 53 else name
        yield Label(f"{marker}{display_name}", markup=False)


class DeviceList(Static):
    """Widget to display and select audio output devices."""

    DEFAULT_CSS = """
    DeviceList {
        border: heavy $accent;
        height: 1fr;
    }
    """

    class DeviceChosen(Message):
        """Posted when the user picks a device."""

        def __init__(self, device: Device) -> None:
            super().__init__()
            self.device = device

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.devices: List[Device] = []
        self.current_device: Optional[Device] = None
        self.border_title = "[ OUTPUT DEVICES ]"

    def compose(self):
        yield ListView(id="device-list")

    async def set_devices(self, devices: List[Device], current: Optional[Device]) -> None:
        """Replace the listed devices and highlight the current default."""
        self.devices = list(devices)
        self.current_device = current

        list_view = self.query_one("#device-list", ListView)
        await list_view.clear()
        await list_view.extend(DeviceListItem(device, device == current) for device in self.devices)

        if self.devices:
            list_view.index = self.devices.index(current) if current in self.devices else 0

    @property
    def highlighted_device(self) -> Optional[Device]:
        list_view = self.query_one("#device-list", ListView)
        item = list_view.highlighted_child
        return item.device if isinstance(item, DeviceListItem) else None

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle device selection."""
        event.stop()
        if isinstance(event.item, DeviceListItem):
            self.post_message(self.DeviceChosen(event.item.device))

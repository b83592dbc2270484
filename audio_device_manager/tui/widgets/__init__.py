"""
TUI Widgets Package
"""
from .device_list import DeviceList, DeviceListItem
from .status_line import StatusLine, TUIStatusHandler

__all__ = ['DeviceList', 'DeviceListItem', 'StatusLine', 'TUIStatusHandler']

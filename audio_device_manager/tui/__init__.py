"""
Audio Device Manager TUI

Terminal User Interface using Textual.
"""
from .app import DeviceManagerApp

__all__ = ['DeviceManagerApp', 'main']


def main():
    """Entry point for the 'audio-device-manager-tui' command."""
    app = DeviceManagerApp()
    app.run()

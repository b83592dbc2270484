#!/usr/bin/env python3
"""
Audio Device Manager - TUI Entry Point

This is the top-level entry script for frozen builds.
"""
from audio_device_manager.tui.app import DeviceManagerApp

def main():
    app = DeviceManagerApp()
    app.run()

if __name__ == "__main__":
    main()

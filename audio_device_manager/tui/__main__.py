"""
TUI Entry Point

Run with: python -m audio_device_manager.tui
"""
from . import main

if __name__ == "__main__":
    main()

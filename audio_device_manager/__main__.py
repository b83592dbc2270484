"""
Module Entry Point

Run with: python -m audio_device_manager
"""
from .cli import main

if __name__ == "__main__":
    main()

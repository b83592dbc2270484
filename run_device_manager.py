#!/usr/bin/env python3
"""
Audio Device Manager - Entry Point Script

Usage:
    python run_device_manager.py [options]

    Or as a module:
    python -m audio_device_manager [options]

For help:
    python run_device_manager.py --help
"""
from audio_device_manager import main

if __name__ == "__main__":
    main()

"""
Platform-specific audio backends.

This package contains platform-specific device management:
- windows.py: SoundVolumeView export parsing and /SetDefault (Windows only)
- macos.py: SwitchAudioSource listing and switching (macOS only)
- linux.py: PulseAudio/PipeWire sinks via pulsectl (Linux only)

Every module imports on every platform; only the one for the running
platform talks to the operating system.
"""

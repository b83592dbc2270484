"""
Audio Device Manager Constants

Central location for all configuration constants used across the package.
"""

# Bundled tool locations (relative to the tools directory)
TOOLS_DIR_NAME = "AudioDeviceManager"
WINDOWS_TOOL_64 = "win64/SoundVolumeView.exe"
WINDOWS_TOOL_32 = "win32/SoundVolumeView.exe"
MACOS_TOOL = "macOS/SwitchAudioSource"

# Environment overrides
ENV_TOOLS_DIR = "AUDIO_DEVICE_MANAGER_TOOLS_DIR"
ENV_COMMAND_TIMEOUT = "AUDIO_DEVICE_MANAGER_TIMEOUT"

# SoundVolumeView arguments and columns
SVV_EXPORT_STDOUT = ["/scomma", ""]
SVV_COLUMNS_FLAG = "/Columns"
SVV_SET_DEFAULT_FLAG = "/SetDefault"
SVV_ALL_ROLES = "all"
SVV_RENDER = "Render"
SVV_TYPE_DEVICE = "Device"
SVV_LIST_COLUMNS = "Name,Type,Direction,Device Name"
SVV_CURRENT_COLUMNS = "Name,Device Name,{role_column}"
SVV_FRIENDLY_ID = "{manufacturer}\\Device\\{name}\\Render"

# SwitchAudioSource arguments
SAS_CURRENT_ARGS = ["-c", "-t", "output"]
SAS_LIST_ARGS = ["-a", "-t", "output"]
SAS_SET_ARGS = ["-t", "output", "-s"]

# PulseAudio client names
PULSE_CLIENT_NAME = "audio-device-manager"

# Thread naming
ASYNC_COMMAND_THREAD_NAME = "audio-device-command"

# Shared Messages
MSG_UNSUPPORTED_PLATFORM = "AudioDeviceManager is only available for Windows, macOS and Linux!"
MSG_COMMAND_FAILED = "Could not run {}: {}"
MSG_COMMAND_TIMEOUT = "Command timed out after {}s: {}"
MSG_COMMAND_EXIT_CODE = "{} exited with code {}"
MSG_PULSECTL_UNAVAILABLE = "pulsectl not available - PulseAudio device management disabled"

"""
Status Line Widget

Displays single-line status updates.
"""
import logging
from typing import Optional

from rich.text import Text
from textual.reactive import reactive
from textual.widgets import Static

_LEVEL_STYLES = {
    "info": ("ℹ", "white on #00262b"),
    "success": ("✔", "bold white on #2e7d32"),
    "warning": ("⚠", "bold black on #f9a825"),
    "error": ("✖", "bold white on #c62828"),
}


class StatusLine(Static):
    """Widget to display single-line status messages next to the active role."""

    current_message: reactive[str] = reactive("")
    current_level: reactive[str] = reactive("info")
    role_label: reactive[str] = reactive("CONSOLE")

    def on_mount(self) -> None:
        self._update_display()

    def watch_current_message(self, message: str) -> None:
        self._update_display()

    def watch_current_level(self, level: str) -> None:
        self._update_display()

    def watch_role_label(self, label: str) -> None:
        self._update_display()

    def _update_display(self) -> None:
        # Role segment (mode-like), then the message segment
        content = Text()
        content.append(f" ROLE: {self.role_label} ", style="bold black on #3be8ff")
        if self.current_message:
            icon, style = _LEVEL_STYLES.get(self.current_level, _LEVEL_STYLES["info"])
            content.append(f" {icon} {self.current_message} ", style=style)
        self.update(content)

    def show_message(self, message: str, level: str = "info") -> None:
        """Update the status line."""
        self.current_message = message
        self.current_level = level

    def set_role(self, label: str) -> None:
        self.role_label = label


class TUIStatusHandler(logging.Handler):
    """Logging handler that updates the TUI status line."""

    def __init__(self, status_line: Optional[StatusLine] = None):
        super().__init__()
        self.status_line = status_line

    def set_widget(self, status_line: Optional[StatusLine]) -> None:
        self.status_line = status_line

    def emit(self, record: logging.LogRecord) -> None:
        if self.status_line is None:
            return

        level = record.levelname.lower()
        if level == "critical":
            level = "error"
        elif level == "debug":
            # Command lines are too noisy for the status line
            return

        msg = self.format(record)
        try:
            self.status_line.app.call_from_thread(self.status_line.show_message, msg, level)
        except RuntimeError:
            # Already on the app thread
            self.status_line.show_message(msg, level)

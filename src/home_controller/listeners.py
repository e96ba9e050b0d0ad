"""
Notification sinks.

Listeners are plain callables registered on the hub; these two cover the
usual display and audit-log needs.
"""

from datetime import datetime
from typing import Callable, List, Optional


class ConsoleDisplay:
    """Prints every event as "[DISPLAY] <event>"."""

    def __init__(self, write: Callable[[str], None] = print) -> None:
        self._write = write

    def __call__(self, message: str) -> None:
        self._write(f"[DISPLAY] {message}")


class EventLog:
    """
    Keeps a timestamped record of every event.

    Entries look like "2025-01-15 20:00:00 - Kitchen Light turned ON".
    With echo=True each entry is also printed as "[LOG] <entry>".
    """

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

    def __init__(
        self,
        echo: bool = False,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.echo = echo
        self._clock = clock or datetime.now
        self._entries: List[str] = []

    def __call__(self, message: str) -> None:
        entry = f"{self._clock().strftime(self.TIMESTAMP_FORMAT)} - {message}"
        self._entries.append(entry)
        if self.echo:
            print(f"[LOG] {entry}")

    def entries(self) -> List[str]:
        """Get a copy of all entries, oldest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Remove all entries."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

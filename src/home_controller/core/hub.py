"""
Notification Hub for device and controller events.

The hub is a simple, synchronous dispatcher of human-readable event strings.
"""

import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)


Listener = Callable[[str], None]


class NotificationHub:
    """
    Synchronous fan-out of event strings to registered listeners.

    Listeners are called in registration order and the publishing call does
    not return until every listener has processed the event. Deliveries are
    serialized so events published from timer threads never interleave with
    foreground events.

    Listeners are wrapped in try/except so one bad sink cannot stop the others.
    """

    def __init__(self) -> None:
        """Initialize an empty hub."""
        self._listeners: List[Listener] = []
        self._lock = threading.RLock()

    @property
    def listeners(self) -> List[Listener]:
        """Currently registered listeners, in registration order."""
        return list(self._listeners)

    def subscribe(self, listener: Listener) -> None:
        """
        Register a listener for every published event.

        Args:
            listener: Callable that receives the event string
        """
        self._listeners.append(listener)
        logger.debug(f"Subscribed listener {_name_of(listener)}")

    def unsubscribe(self, listener: Listener) -> None:
        """
        Remove a listener.

        Removing a listener while an event is being delivered takes effect
        from the next publish. Unknown listeners are ignored.

        Args:
            listener: The listener to remove
        """
        self._listeners = [existing for existing in self._listeners if existing != listener]
        logger.debug(f"Unsubscribed listener {_name_of(listener)}")

    def publish(self, message: str) -> None:
        """
        Deliver an event to all listeners.

        Args:
            message: Human-readable description of one state change
        """
        with self._lock:
            logger.debug(f"Publishing event: {message}")

            for listener in list(self._listeners):
                try:
                    listener(message)
                except Exception as e:
                    logger.error(
                        f"Error in listener {_name_of(listener)} for event {message!r}: {e}",
                        exc_info=True,
                    )


def _name_of(listener: Listener) -> str:
    return getattr(listener, "__name__", type(listener).__name__)

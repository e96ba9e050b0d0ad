"""Dimmable light."""

import logging

from .base import Device, DeviceType

logger = logging.getLogger(__name__)


class Light(Device):
    """
    A light with a brightness level in percent.

    Brightness defaults to 100 and is independent of the power state.
    """

    DEVICE_TYPE = DeviceType.LIGHT

    MIN_BRIGHTNESS = 0
    MAX_BRIGHTNESS = 100

    def __init__(self, name, room, hub) -> None:
        super().__init__(name, room, hub)
        self._brightness = self.MAX_BRIGHTNESS

    @property
    def brightness(self) -> int:
        return self._brightness

    def set_brightness(self, level: int) -> None:
        """
        Set the brightness level.

        Levels outside 0-100 are ignored: brightness stays unchanged and no
        event is published. Valid levels always publish, even when equal to
        the current level.

        Args:
            level: Brightness in percent
        """
        if not self.MIN_BRIGHTNESS <= level <= self.MAX_BRIGHTNESS:
            logger.debug(f"Ignoring out-of-range brightness {level} for {self.describe()}")
            return

        with self._lock:
            old_level = self._brightness
            self._brightness = level
            self._notify(f"brightness changed from {old_level}% to {level}%")

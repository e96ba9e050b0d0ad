"""Motion sensing add-on for devices."""

import functools
import logging
import threading
from typing import Optional

from home_controller.core.scheduler import Scheduler, TimerHandle
from home_controller.devices.base import SmartDevice

from .base import DeviceDecorator

logger = logging.getLogger(__name__)


MOTION_QUIET_PERIOD_SECONDS = 300  # 5 minutes


class MotionSensingDecorator(DeviceDecorator):
    """
    Adds a motion sensor to a device.

    detect_motion() marks motion as active, announces it, and powers the
    device on if it is off. The motion flag clears silently once the quiet
    period passes without further motion.

    Event order for motion on a device that is off:
        1. "Motion detected near <description>"
        2. "<inner description> turned ON"
        3. "Motion sensor for <description> activated"
    """

    PREFIX = "Motion-Sensing"

    def __init__(
        self,
        device: SmartDevice,
        scheduler: Scheduler,
        quiet_period_seconds: float = MOTION_QUIET_PERIOD_SECONDS,
    ) -> None:
        """
        Wrap a device with motion sensing.

        Args:
            device: Device or decorator to wrap
            scheduler: Scheduler used for the motion reset
            quiet_period_seconds: Seconds without motion before the flag clears
        """
        super().__init__(device)
        self._scheduler = scheduler
        self.quiet_period_seconds = quiet_period_seconds

        self._motion_detected = False
        self._reset_handle: Optional[TimerHandle] = None
        self._generation = 0
        self._timer_lock = threading.Lock()

    @property
    def motion_detected(self) -> bool:
        """True while motion is considered active."""
        return self._motion_detected

    def detect_motion(self) -> None:
        """Report motion near the device."""
        with self._timer_lock:
            self._motion_detected = True

            # Restart the quiet period
            if self._reset_handle is not None:
                self._reset_handle.cancel()
            self._generation += 1
            self._reset_handle = self._scheduler.schedule(
                self.quiet_period_seconds,
                functools.partial(self._reset_motion, self._generation),
            )

        self.hub.publish(f"Motion detected near {self.describe()}")

        if not self.is_on:
            self.turn_on()

    def turn_on(self) -> None:
        was_on = self.is_on
        super().turn_on()
        if not was_on and self.is_on:
            self.hub.publish(f"Motion sensor for {self.describe()} activated")

    def turn_off(self) -> None:
        was_on = self.is_on
        super().turn_off()
        if was_on and not self.is_on:
            self.hub.publish(f"Motion sensor for {self.describe()} deactivated")

    def _reset_motion(self, generation: int) -> None:
        """Clear the motion flag unless newer motion restarted the period."""
        with self._timer_lock:
            if generation != self._generation:
                return
            self._motion_detected = False
            self._reset_handle = None

        logger.debug(f"Motion cleared for {self.describe()}")

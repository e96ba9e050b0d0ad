"""Scheduled shutoff add-on for devices."""

import functools
import logging
import threading
from datetime import datetime, timedelta
from typing import Optional

from home_controller.core.scheduler import Scheduler, TimerHandle
from home_controller.devices.base import SmartDevice

from .base import DeviceDecorator

logger = logging.getLogger(__name__)


class TimedShutoffDecorator(DeviceDecorator):
    """
    Adds a countdown that turns the device off.

    At most one countdown is pending per decorator: setting a new one
    cancels the previous. A countdown that fires and a cancel_timer() call
    racing it never both publish; whichever claims the timer first wins.
    """

    PREFIX = "Timer-Enabled"

    def __init__(self, device: SmartDevice, scheduler: Scheduler) -> None:
        """
        Wrap a device with a shutoff timer.

        Args:
            device: Device or decorator to wrap
            scheduler: Scheduler used for the countdown
        """
        super().__init__(device)
        self._scheduler = scheduler

        self._scheduled_time: Optional[datetime] = None
        self._handle: Optional[TimerHandle] = None
        self._generation = 0
        self._timer_lock = threading.Lock()

    @property
    def scheduled_time(self) -> Optional[datetime]:
        """When the pending shutoff fires, or None."""
        return self._scheduled_time

    def set_timer(self, minutes: float) -> None:
        """
        Turn the device off after a number of minutes.

        Args:
            minutes: Countdown length in minutes

        Raises:
            ValueError: If minutes is negative
        """
        if minutes < 0:
            raise ValueError(f"Timer minutes must be non-negative, got {minutes}")

        with self._timer_lock:
            if self._handle is not None:
                self._handle.cancel()

            self._generation += 1
            self._scheduled_time = self._scheduler.now() + timedelta(minutes=minutes)
            self._handle = self._scheduler.schedule(
                minutes * 60,
                functools.partial(self._expire, self._generation),
            )

        logger.info(f"Shutoff for {self.describe()} scheduled at {self._scheduled_time}")
        self.hub.publish(f"{self.describe()} set to turn off in {minutes} minutes")

    def is_timer_active(self) -> bool:
        """True while a shutoff is pending and its fire time is in the future."""
        scheduled_time = self._scheduled_time
        return scheduled_time is not None and self._scheduler.now() < scheduled_time

    def cancel_timer(self) -> None:
        """Cancel the pending shutoff. Does nothing if none is pending."""
        with self._timer_lock:
            if self._scheduled_time is None:
                return

            if self._handle is not None:
                self._handle.cancel()
            self._handle = None
            self._scheduled_time = None
            self._generation += 1

        logger.info(f"Shutoff cancelled for {self.describe()}")
        self.hub.publish(f"Timer cancelled for {self.describe()}")

    def _expire(self, generation: int) -> None:
        """Run the shutoff if this countdown is still the current one."""
        with self._timer_lock:
            if generation != self._generation or self._scheduled_time is None:
                return
            self._scheduled_time = None
            self._handle = None

        logger.info(f"Shutoff timer expired for {self.describe()}")
        self.turn_off()

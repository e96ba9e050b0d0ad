"""
Device decorators.

Decorators add behavior to a device while keeping its capability surface,
and can be stacked in any order:

    smart_light = TimedShutoffDecorator(
        MotionSensingDecorator(light, scheduler),
        scheduler,
    )
    smart_light.describe()  # "Timer-Enabled Motion-Sensing Bedroom Lamp"
"""

from .base import DeviceDecorator
from .motion import MotionSensingDecorator, MOTION_QUIET_PERIOD_SECONDS
from .timer import TimedShutoffDecorator

__all__ = [
    "DeviceDecorator",
    "MotionSensingDecorator",
    "MOTION_QUIET_PERIOD_SECONDS",
    "TimedShutoffDecorator",
]

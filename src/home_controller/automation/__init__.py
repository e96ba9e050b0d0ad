"""
Automation modes for home-controller.

A mode is a named strategy applied to every device in the controller.
Each strategy has one handler per device kind (lights, thermostats, doors,
cameras), selected by the device's DeviceType tag.

Usage:
    controller.register_mode("night", NightModeStrategy())
    controller.set_mode("night")
    controller.execute_current_mode()
"""

from .strategy import AutomationStrategy, DeviceHandler
from .modes import (
    NightModeStrategy,
    MorningModeStrategy,
    VacationModeStrategy,
    register_builtin_modes,
)

__all__ = [
    "AutomationStrategy",
    "DeviceHandler",
    "NightModeStrategy",
    "MorningModeStrategy",
    "VacationModeStrategy",
    "register_builtin_modes",
]

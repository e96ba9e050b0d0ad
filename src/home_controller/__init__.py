"""
home-controller: a simulated home-automation controller.

This library provides:
- Devices (lights, thermostats, doors, cameras) grouped into rooms
- Stackable device decorators (motion sensing, timed shutoff)
- A synchronous notification hub for every state change
- Named automation modes applied across all devices
"""

from home_controller.core.hub import NotificationHub
from home_controller.core.scheduler import ManualScheduler, Scheduler, ThreadingScheduler
from home_controller.core.room import Room
from home_controller.core.controller import HomeController
from home_controller.devices import DeviceType, UnknownDeviceTypeError

__version__ = "0.1.0"

__all__ = [
    "NotificationHub",
    "Scheduler",
    "ThreadingScheduler",
    "ManualScheduler",
    "Room",
    "HomeController",
    "DeviceType",
    "UnknownDeviceTypeError",
]

"""
Core components of the home-controller.

This package contains:
- hub: NotificationHub for event fan-out
- scheduler: Scheduler abstraction for delayed actions
- room: Room container
- controller: HomeController registry of rooms, devices and modes
"""

from home_controller.core.hub import NotificationHub
from home_controller.core.scheduler import (
    ManualScheduler,
    Scheduler,
    ThreadingScheduler,
    TimerHandle,
)
from home_controller.core.room import Room
from home_controller.core.controller import HomeController

__all__ = [
    "NotificationHub",
    "Scheduler",
    "TimerHandle",
    "ThreadingScheduler",
    "ManualScheduler",
    "Room",
    "HomeController",
]

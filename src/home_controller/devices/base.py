"""
Base classes for simulated devices.

SmartDevice is the capability surface shared by concrete devices and by
decorators that wrap them. Device is the concrete state holder every
variant builds on.
"""

import logging
import threading
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from home_controller.core.hub import NotificationHub
    from home_controller.core.room import Room

logger = logging.getLogger(__name__)


class DeviceType(Enum):
    """Closed set of device kinds the controller knows how to build."""

    LIGHT = "light"
    THERMOSTAT = "thermostat"
    DOOR = "door"
    SECURITY_CAMERA = "security_camera"


class SmartDevice(ABC):
    """
    Capability interface for anything that behaves like a device.

    Implemented by the concrete devices and by every decorator, so a
    decorated device can stand wherever a plain one is expected.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Device name, unique within its room."""
        pass

    @property
    @abstractmethod
    def room(self) -> "Room":
        """Room the device belongs to."""
        pass

    @property
    @abstractmethod
    def hub(self) -> "NotificationHub":
        """Hub that receives this device's notifications."""
        pass

    @property
    @abstractmethod
    def device_type(self) -> DeviceType:
        """Kind of the innermost device."""
        pass

    @property
    @abstractmethod
    def is_on(self) -> bool:
        """Current power state."""
        pass

    @abstractmethod
    def turn_on(self) -> None:
        """Power the device on. No-op if already on."""
        pass

    @abstractmethod
    def turn_off(self) -> None:
        """Power the device off. No-op if already off."""
        pass

    @abstractmethod
    def describe(self) -> str:
        """Human-readable description used in notifications."""
        pass

    def toggle(self) -> None:
        """Flip the power state through this object's own turn_on/turn_off."""
        if self.is_on:
            self.turn_off()
        else:
            self.turn_on()

    def __repr__(self) -> str:
        state = "on" if self.is_on else "off"
        return f"<{type(self).__name__} {self.describe()!r} {state}>"


class Device(SmartDevice):
    """
    Concrete device: name, room, power state and a hub to report to.

    Every operation that changes observable state publishes exactly one
    event; calls that request the current state publish nothing.
    Mutations are serialized per device so a timer firing on another
    thread cannot race a foreground call on the same device.
    """

    DEVICE_TYPE: DeviceType

    def __init__(self, name: str, room: "Room", hub: "NotificationHub") -> None:
        self._name = name
        self._room = room
        self._hub = hub
        self._on = False
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def room(self) -> "Room":
        return self._room

    @property
    def hub(self) -> "NotificationHub":
        return self._hub

    @property
    def device_type(self) -> DeviceType:
        return self.DEVICE_TYPE

    @property
    def is_on(self) -> bool:
        return self._on

    def turn_on(self) -> None:
        with self._lock:
            if self._on:
                return
            self._on = True
            self._notify("turned ON")

    def turn_off(self) -> None:
        with self._lock:
            if not self._on:
                return
            self._on = False
            self._notify("turned OFF")

    def describe(self) -> str:
        return f"{self._room.name} {self._name}"

    def _notify(self, change: str) -> None:
        """Publish '<description> <change>' on the hub."""
        self._hub.publish(f"{self.describe()} {change}")

"""Factory mapping device-type tags to device constructors."""

import logging
from typing import TYPE_CHECKING, Dict, Type, Union

from .base import Device, DeviceType
from .camera import SecurityCamera
from .door import Door
from .light import Light
from .thermostat import Thermostat

if TYPE_CHECKING:
    from home_controller.core.hub import NotificationHub
    from home_controller.core.room import Room

logger = logging.getLogger(__name__)


class UnknownDeviceTypeError(ValueError):
    """Raised when a device-type tag has no registered constructor."""


def parse_device_type(device_type: Union[DeviceType, str]) -> DeviceType:
    """
    Normalize a device-type tag.

    Accepts a DeviceType, its value ("light") or its name ("LIGHT"),
    case-insensitively.

    Raises:
        UnknownDeviceTypeError: If the tag does not name a device type
    """
    if isinstance(device_type, DeviceType):
        return device_type

    if isinstance(device_type, str):
        key = device_type.strip().lower()
        for member in DeviceType:
            if key in (member.value, member.name.lower()):
                return member

    raise UnknownDeviceTypeError(f"Unknown device type: {device_type!r}")


class DeviceFactory:
    """Factory for creating device instances"""

    DEFAULT_TYPES: Dict[DeviceType, Type[Device]] = {
        DeviceType.LIGHT: Light,
        DeviceType.THERMOSTAT: Thermostat,
        DeviceType.DOOR: Door,
        DeviceType.SECURITY_CAMERA: SecurityCamera,
    }

    def __init__(self) -> None:
        self._device_types: Dict[DeviceType, Type[Device]] = dict(self.DEFAULT_TYPES)

    def register_device_type(
        self, device_type: Union[DeviceType, str], device_class: Type[Device]
    ) -> None:
        """Register (or replace) the constructor used for a device type"""
        self._device_types[parse_device_type(device_type)] = device_class

    def create_device(
        self,
        device_type: Union[DeviceType, str],
        name: str,
        room: "Room",
        hub: "NotificationHub",
    ) -> Device:
        """
        Create a device instance based on type.

        Raises:
            UnknownDeviceTypeError: If no constructor is registered for the tag
        """
        kind = parse_device_type(device_type)
        if kind not in self._device_types:
            raise UnknownDeviceTypeError(f"Unknown device type: {device_type!r}")

        device_class = self._device_types[kind]
        logger.debug(f"Building {device_class.__name__} '{name}' for room {room.name}")
        return device_class(name, room, hub)

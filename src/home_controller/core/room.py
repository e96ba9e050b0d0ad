"""
Room container.

A Room groups devices under one name and offers bulk power control.
"""

import logging
from typing import Dict, List, Optional

from home_controller.devices.base import SmartDevice

logger = logging.getLogger(__name__)


class Room:
    """
    A named collection of devices.

    Attributes:
        name: Room name, unique within a HomeController

    Device names are unique within a room; adding a device with an existing
    name replaces the previous one.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._devices: Dict[str, SmartDevice] = {}

    def add_device(self, device: SmartDevice) -> None:
        """
        Add a device, replacing any device with the same name.

        Args:
            device: Device (or decorated device) to add
        """
        if device.name in self._devices:
            logger.debug(f"Replacing device '{device.name}' in room {self.name}")
        self._devices[device.name] = device

    def get_device(self, name: str) -> Optional[SmartDevice]:
        """
        Get a device by name.

        Returns:
            The device or None if not found
        """
        return self._devices.get(name)

    def list_devices(self) -> List[SmartDevice]:
        """Get all devices in the room."""
        return list(self._devices.values())

    def turn_all_on(self) -> None:
        """Turn on every device. Devices already on stay silent."""
        for device in self.list_devices():
            device.turn_on()

    def turn_all_off(self) -> None:
        """Turn off every device. Devices already off stay silent."""
        for device in self.list_devices():
            device.turn_off()

    def __contains__(self, name: object) -> bool:
        return name in self._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={list(self._devices)})"

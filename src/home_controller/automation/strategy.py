"""
Base class for automation strategies.

A strategy is a named, stateless bulk policy. It reads every room and
device from the controller when executed and applies one handler per
device kind.
"""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict

from home_controller.devices.base import DeviceType, SmartDevice

if TYPE_CHECKING:
    from home_controller.core.controller import HomeController

logger = logging.getLogger(__name__)


DeviceHandler = Callable[[SmartDevice], None]


class AutomationStrategy(ABC):
    """
    Base class for automation modes.

    Subclasses implement one handler per DeviceType. All four handlers are
    abstract, so a strategy that forgets a device kind cannot be
    instantiated. Handlers must not depend on iteration order and must be
    safe to run repeatedly.
    """

    CURRENT_CONFIG_VERSION = 1

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name (e.g., "Night Mode")."""
        pass

    @property
    def config(self) -> Dict[str, Any]:
        """Effective settings of this strategy."""
        return self.default_config()

    def default_config(self) -> Dict[str, Any]:
        """
        Get default settings for this strategy.

        Returns:
            Settings dict including a "version" key
        """
        return {"version": self.CURRENT_CONFIG_VERSION}

    def handlers(self) -> Dict[DeviceType, DeviceHandler]:
        """Map every device kind to its handler."""
        return {
            DeviceType.LIGHT: self.apply_to_light,
            DeviceType.THERMOSTAT: self.apply_to_thermostat,
            DeviceType.DOOR: self.apply_to_door,
            DeviceType.SECURITY_CAMERA: self.apply_to_camera,
        }

    def execute(self, controller: "HomeController") -> None:
        """
        Apply the policy to every device of every room.

        Args:
            controller: Controller providing the rooms
        """
        handlers = self.handlers()
        applied = 0

        for room in controller.all_rooms():
            for device in room.list_devices():
                handlers[device.device_type](device)
                applied += 1

        logger.debug(f"{self.name} applied to {applied} devices")

    @abstractmethod
    def apply_to_light(self, light: SmartDevice) -> None:
        pass

    @abstractmethod
    def apply_to_thermostat(self, thermostat: SmartDevice) -> None:
        pass

    @abstractmethod
    def apply_to_door(self, door: SmartDevice) -> None:
        pass

    @abstractmethod
    def apply_to_camera(self, camera: SmartDevice) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config})"

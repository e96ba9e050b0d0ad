"""
Base class for device decorators.

A decorator wraps exactly one device-shaped value (a device or another
decorator) and adds behavior while exposing the same capability surface.
"""

from typing import TYPE_CHECKING, Any

from home_controller.devices.base import Device, DeviceType, SmartDevice

if TYPE_CHECKING:
    from home_controller.core.hub import NotificationHub
    from home_controller.core.room import Room


class DeviceDecorator(SmartDevice):
    """
    Transparent wrapper around a SmartDevice.

    Capability operations are forwarded explicitly; anything else
    (set_brightness, lock, temperature, detect_motion of an inner decorator,
    ...) is forwarded by attribute lookup. No state is cached here: every
    read goes through to the wrapped value.

    Subclasses set PREFIX to extend the description.
    """

    PREFIX: str = ""

    def __init__(self, device: SmartDevice) -> None:
        self._device = device

    @property
    def wrapped(self) -> SmartDevice:
        """The device or decorator one level down."""
        return self._device

    def unwrap(self) -> Device:
        """Get the innermost concrete device."""
        inner = self._device
        while isinstance(inner, DeviceDecorator):
            inner = inner.wrapped
        return inner

    @property
    def name(self) -> str:
        return self._device.name

    @property
    def room(self) -> "Room":
        return self._device.room

    @property
    def hub(self) -> "NotificationHub":
        return self._device.hub

    @property
    def device_type(self) -> DeviceType:
        return self._device.device_type

    @property
    def is_on(self) -> bool:
        return self._device.is_on

    def turn_on(self) -> None:
        self._device.turn_on()

    def turn_off(self) -> None:
        self._device.turn_off()

    def describe(self) -> str:
        description = self._device.describe()
        if self.PREFIX:
            return f"{self.PREFIX} {description}"
        return description

    def __getattr__(self, attr: str) -> Any:
        # Only reached for attributes not defined on the decorator itself.
        if attr.startswith("_"):
            raise AttributeError(attr)
        return getattr(self._device, attr)

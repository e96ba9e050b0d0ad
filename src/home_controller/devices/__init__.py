"""
Simulated devices.

This package contains:
- base: DeviceType tag, SmartDevice capability interface, Device base class
- light, thermostat, door, camera: concrete device variants
- factory: DeviceFactory mapping type tags to constructors
"""

from home_controller.devices.base import Device, DeviceType, SmartDevice
from home_controller.devices.light import Light
from home_controller.devices.thermostat import Thermostat
from home_controller.devices.door import Door
from home_controller.devices.camera import SecurityCamera
from home_controller.devices.factory import (
    DeviceFactory,
    UnknownDeviceTypeError,
    parse_device_type,
)

__all__ = [
    "Device",
    "DeviceType",
    "SmartDevice",
    "Light",
    "Thermostat",
    "Door",
    "SecurityCamera",
    "DeviceFactory",
    "UnknownDeviceTypeError",
    "parse_device_type",
]

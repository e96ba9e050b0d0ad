"""Thermostat with a target temperature."""

from .base import Device, DeviceType


class Thermostat(Device):
    """A thermostat holding a target temperature in degrees Celsius."""

    DEVICE_TYPE = DeviceType.THERMOSTAT

    DEFAULT_TEMPERATURE = 22.0

    def __init__(self, name, room, hub) -> None:
        super().__init__(name, room, hub)
        self._temperature = self.DEFAULT_TEMPERATURE

    @property
    def temperature(self) -> float:
        return self._temperature

    def set_temperature(self, temperature: float) -> None:
        """
        Set the target temperature.

        Any value is accepted (no clamping) and the change is always
        published with the old and new values.
        """
        with self._lock:
            old_temperature = self._temperature
            self._temperature = float(temperature)
            self._notify(
                f"temperature changed from {old_temperature}°C to {self._temperature}°C"
            )

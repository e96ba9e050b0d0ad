"""
Built-in automation modes.

Each mode is configured through keyword arguments whose defaults match the
stock behavior:

    Mode      Lights                 Thermostats  Doors
    -------   --------------------   -----------  ---------------------
    night     off                    19.0 °C      lock
    morning   on, brightness 50      22.0 °C      unlock "front" doors
    vacation  unchanged              17.0 °C      lock

Cameras are left unchanged by every built-in mode.
"""

from typing import Any, Dict

from home_controller.devices.base import SmartDevice

from .strategy import AutomationStrategy


class NightModeStrategy(AutomationStrategy):
    """Lights off, thermostats down, every door locked."""

    def __init__(self, *, temperature: float = 19.0) -> None:
        self.temperature = temperature

    @property
    def name(self) -> str:
        return "Night Mode"

    def default_config(self) -> Dict[str, Any]:
        return {"version": self.CURRENT_CONFIG_VERSION, "temperature": 19.0}

    @property
    def config(self) -> Dict[str, Any]:
        return {"version": self.CURRENT_CONFIG_VERSION, "temperature": self.temperature}

    def apply_to_light(self, light: SmartDevice) -> None:
        light.turn_off()

    def apply_to_thermostat(self, thermostat: SmartDevice) -> None:
        thermostat.set_temperature(self.temperature)

    def apply_to_door(self, door: SmartDevice) -> None:
        door.lock()

    def apply_to_camera(self, camera: SmartDevice) -> None:
        pass


class MorningModeStrategy(AutomationStrategy):
    """
    Wake-up mode.

    Lights come on dimmed, thermostats go to a comfortable temperature and
    doors whose name contains the front-door keyword (case-insensitive) are
    unlocked. Other doors keep their lock state.
    """

    def __init__(
        self,
        *,
        brightness: int = 50,
        temperature: float = 22.0,
        front_door_keyword: str = "front",
    ) -> None:
        self.brightness = brightness
        self.temperature = temperature
        self.front_door_keyword = front_door_keyword

    @property
    def name(self) -> str:
        return "Morning Mode"

    def default_config(self) -> Dict[str, Any]:
        return {
            "version": self.CURRENT_CONFIG_VERSION,
            "brightness": 50,
            "temperature": 22.0,
            "front_door_keyword": "front",
        }

    @property
    def config(self) -> Dict[str, Any]:
        return {
            "version": self.CURRENT_CONFIG_VERSION,
            "brightness": self.brightness,
            "temperature": self.temperature,
            "front_door_keyword": self.front_door_keyword,
        }

    def apply_to_light(self, light: SmartDevice) -> None:
        light.turn_on()
        light.set_brightness(self.brightness)

    def apply_to_thermostat(self, thermostat: SmartDevice) -> None:
        thermostat.set_temperature(self.temperature)

    def apply_to_door(self, door: SmartDevice) -> None:
        if self.front_door_keyword.lower() in door.name.lower():
            door.unlock()

    def apply_to_camera(self, camera: SmartDevice) -> None:
        pass


class VacationModeStrategy(AutomationStrategy):
    """Energy saving and security while nobody is home."""

    def __init__(self, *, temperature: float = 17.0) -> None:
        self.temperature = temperature

    @property
    def name(self) -> str:
        return "Vacation Mode"

    def default_config(self) -> Dict[str, Any]:
        return {"version": self.CURRENT_CONFIG_VERSION, "temperature": 17.0}

    @property
    def config(self) -> Dict[str, Any]:
        return {"version": self.CURRENT_CONFIG_VERSION, "temperature": self.temperature}

    def apply_to_light(self, light: SmartDevice) -> None:
        pass

    def apply_to_thermostat(self, thermostat: SmartDevice) -> None:
        thermostat.set_temperature(self.temperature)

    def apply_to_door(self, door: SmartDevice) -> None:
        door.lock()

    def apply_to_camera(self, camera: SmartDevice) -> None:
        pass


def register_builtin_modes(controller) -> None:
    """
    Register the stock modes under their usual names.

    Registers "night", "morning" and "vacation" with default settings.

    Example:
        controller = HomeController()
        register_builtin_modes(controller)
        controller.set_mode("night")
    """
    controller.register_mode("night", NightModeStrategy())
    controller.register_mode("morning", MorningModeStrategy())
    controller.register_mode("vacation", VacationModeStrategy())

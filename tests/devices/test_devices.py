"""Tests for the device variants and the factory."""

import pytest

from home_controller.core.hub import NotificationHub
from home_controller.core.room import Room
from home_controller.devices import (
    DeviceFactory,
    DeviceType,
    Door,
    Light,
    SecurityCamera,
    Thermostat,
    UnknownDeviceTypeError,
    parse_device_type,
)


@pytest.fixture
def hub():
    return NotificationHub()


@pytest.fixture
def events(hub):
    """Record every event published on the hub."""
    received = []
    hub.subscribe(received.append)
    return received


@pytest.fixture
def room():
    return Room("Living Room")


class TestPower:
    """Tests for on/off/toggle, shared by every variant."""

    @pytest.mark.parametrize("device_class", [Light, Thermostat, Door, SecurityCamera])
    def test_starts_off(self, device_class, room, hub):
        assert device_class("Device", room, hub).is_on is False

    @pytest.mark.parametrize("device_class", [Light, Thermostat, Door, SecurityCamera])
    def test_turn_on_notifies_once(self, device_class, room, hub, events):
        device = device_class("Device", room, hub)

        device.turn_on()

        assert device.is_on is True
        assert events == ["Living Room Device turned ON"]

    @pytest.mark.parametrize("device_class", [Light, Thermostat, Door, SecurityCamera])
    def test_turn_on_when_on_is_silent(self, device_class, room, hub, events):
        device = device_class("Device", room, hub)
        device.turn_on()
        events.clear()

        device.turn_on()

        assert device.is_on is True
        assert events == []

    def test_turn_off_when_off_is_silent(self, room, hub, events):
        light = Light("Lamp", room, hub)

        light.turn_off()

        assert events == []

    def test_turn_off(self, room, hub, events):
        light = Light("Lamp", room, hub)
        light.turn_on()
        light.turn_off()

        assert light.is_on is False
        assert events == ["Living Room Lamp turned ON", "Living Room Lamp turned OFF"]

    def test_toggle(self, room, hub, events):
        light = Light("Lamp", room, hub)

        light.toggle()
        assert light.is_on is True
        light.toggle()
        assert light.is_on is False

        assert events == ["Living Room Lamp turned ON", "Living Room Lamp turned OFF"]

    def test_describe(self, room, hub):
        assert Door("Front Door", room, hub).describe() == "Living Room Front Door"

    def test_device_type(self, room, hub):
        assert Light("a", room, hub).device_type == DeviceType.LIGHT
        assert Thermostat("b", room, hub).device_type == DeviceType.THERMOSTAT
        assert Door("c", room, hub).device_type == DeviceType.DOOR
        assert SecurityCamera("d", room, hub).device_type == DeviceType.SECURITY_CAMERA


class TestLight:
    """Tests for brightness control."""

    def test_default_brightness(self, room, hub):
        assert Light("Lamp", room, hub).brightness == 100

    @pytest.mark.parametrize("level", [0, 1, 50, 99, 100])
    def test_valid_brightness_updates_and_notifies(self, level, room, hub, events):
        light = Light("Lamp", room, hub)

        light.set_brightness(level)

        assert light.brightness == level
        assert events == [f"Living Room Lamp brightness changed from 100% to {level}%"]

    @pytest.mark.parametrize("level", [-1, 101, 1000, -50])
    def test_out_of_range_brightness_is_ignored(self, level, room, hub, events):
        light = Light("Lamp", room, hub)

        light.set_brightness(level)

        assert light.brightness == 100
        assert events == []

    def test_brightness_does_not_change_power(self, room, hub):
        light = Light("Lamp", room, hub)
        light.set_brightness(30)
        assert light.is_on is False


class TestThermostat:
    """Tests for temperature control."""

    def test_default_temperature(self, room, hub):
        assert Thermostat("Thermostat", room, hub).temperature == 22.0

    def test_set_temperature_reports_old_and_new(self, room, hub, events):
        thermostat = Thermostat("Thermostat", room, hub)

        thermostat.set_temperature(19)

        assert thermostat.temperature == 19.0
        assert events == ["Living Room Thermostat temperature changed from 22.0°C to 19.0°C"]

    def test_same_temperature_still_notifies(self, room, hub, events):
        thermostat = Thermostat("Thermostat", room, hub)

        thermostat.set_temperature(22.0)

        assert len(events) == 1

    def test_no_clamping(self, room, hub):
        thermostat = Thermostat("Thermostat", room, hub)
        thermostat.set_temperature(-40.5)
        assert thermostat.temperature == -40.5


class TestDoor:
    """Tests for locking."""

    def test_starts_locked(self, room, hub):
        assert Door("Front Door", room, hub).is_locked is True

    def test_unlock_then_lock(self, room, hub, events):
        door = Door("Front Door", room, hub)

        door.unlock()
        assert door.is_locked is False
        door.lock()
        assert door.is_locked is True

        assert events == ["Living Room Front Door unlocked", "Living Room Front Door locked"]

    def test_lock_when_locked_is_silent(self, room, hub, events):
        Door("Front Door", room, hub).lock()
        assert events == []


class TestSecurityCamera:
    """Tests for recording."""

    def test_start_and_stop(self, room, hub, events):
        camera = SecurityCamera("Camera", room, hub)

        camera.start_recording()
        camera.start_recording()
        assert camera.is_recording is True
        camera.stop_recording()
        camera.stop_recording()
        assert camera.is_recording is False

        assert events == ["Living Room Camera started recording", "Living Room Camera stopped recording"]


class TestFactory:
    """Tests for DeviceFactory."""

    @pytest.mark.parametrize(
        "tag,expected",
        [
            (DeviceType.LIGHT, Light),
            ("light", Light),
            ("THERMOSTAT", Thermostat),
            ("Door", Door),
            ("security_camera", SecurityCamera),
        ],
    )
    def test_builds_each_type(self, tag, expected, room, hub):
        device = DeviceFactory().create_device(tag, "Device", room, hub)

        assert isinstance(device, expected)
        assert device.room is room
        assert device.hub is hub

    def test_unknown_type_raises(self, room, hub):
        with pytest.raises(UnknownDeviceTypeError):
            DeviceFactory().create_device("toaster", "Toaster", room, hub)

    def test_unknown_type_is_value_error(self):
        with pytest.raises(ValueError, match="Unknown device type"):
            parse_device_type("fridge")

    def test_non_string_tag_raises(self):
        with pytest.raises(UnknownDeviceTypeError):
            parse_device_type(42)

    def test_register_device_type(self, room, hub):
        class DimmerLight(Light):
            pass

        factory = DeviceFactory()
        factory.register_device_type("light", DimmerLight)

        assert isinstance(factory.create_device("light", "Lamp", room, hub), DimmerLight)
        # Other factories keep the stock mapping
        assert type(DeviceFactory().create_device("light", "Lamp", room, hub)) is Light

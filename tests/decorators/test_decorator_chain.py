"""Tests for stacked decorators."""

import threading

import pytest

from home_controller.core.hub import NotificationHub
from home_controller.core.room import Room
from home_controller.core.scheduler import ManualScheduler, ThreadingScheduler
from home_controller.decorators import MotionSensingDecorator, TimedShutoffDecorator
from home_controller.devices import Light


@pytest.fixture
def hub():
    return NotificationHub()


@pytest.fixture
def events(hub):
    received = []
    hub.subscribe(received.append)
    return received


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def light(hub):
    return Light("Lamp", Room("Bedroom"), hub)


class TestTimerAroundMotion:
    """Timer decorator wrapping a motion decorator wrapping a light."""

    @pytest.fixture
    def smart_light(self, light, scheduler):
        return TimedShutoffDecorator(MotionSensingDecorator(light, scheduler), scheduler)

    def test_nested_description(self, smart_light, light):
        assert smart_light.describe() == f"Timer-Enabled Motion-Sensing {light.describe()}"

    def test_turn_off_reaches_innermost(self, smart_light, light):
        light.turn_on()

        smart_light.turn_off()

        assert light.is_on is False
        assert smart_light.is_on is False
        assert smart_light.wrapped.is_on is False

    def test_motion_through_outer_layer(self, smart_light, light, events):
        smart_light.detect_motion()

        assert light.is_on is True
        assert smart_light.wrapped.motion_detected is True
        assert events[0] == "Motion detected near Motion-Sensing Bedroom Lamp"

    def test_timer_shutoff_passes_through_motion_layer(self, smart_light, light, scheduler, events):
        smart_light.detect_motion()
        smart_light.set_timer(5)
        events.clear()

        scheduler.advance(300)

        assert light.is_on is False
        assert events == [
            "Bedroom Lamp turned OFF",
            "Motion sensor for Motion-Sensing Bedroom Lamp deactivated",
        ]

    def test_timers_are_independent(self, smart_light, scheduler):
        """Cancelling the shutoff leaves the motion reset pending."""
        smart_light.detect_motion()
        smart_light.set_timer(10)

        smart_light.cancel_timer()
        scheduler.advance(300)

        assert smart_light.wrapped.motion_detected is False
        assert smart_light.is_on is True

    def test_unwrap(self, smart_light, light):
        assert smart_light.unwrap() is light


class TestMotionAroundTimer:
    """Motion decorator wrapping a timer decorator wrapping a light."""

    def test_both_behaviors_preserved(self, light, scheduler):
        smart_light = MotionSensingDecorator(TimedShutoffDecorator(light, scheduler), scheduler)

        assert smart_light.describe() == "Motion-Sensing Timer-Enabled Bedroom Lamp"

        smart_light.detect_motion()
        smart_light.set_timer(1)
        assert smart_light.is_timer_active() is True

        scheduler.advance(60)
        assert light.is_on is False


class TestRealTimers:
    """Stacked decorators on the threading scheduler."""

    def test_shutoff_fires_from_timer_thread(self, light, hub):
        scheduler = ThreadingScheduler()
        smart_light = TimedShutoffDecorator(MotionSensingDecorator(light, scheduler), scheduler)
        turned_off = threading.Event()

        def watch(message):
            if message == "Bedroom Lamp turned OFF":
                turned_off.set()

        hub.subscribe(watch)
        smart_light.turn_on()
        smart_light.set_timer(0.001)  # 60 ms

        assert turned_off.wait(timeout=5)
        assert light.is_on is False

    def test_fire_and_cancel_never_both_notify(self, light, hub, events):
        """Racing cancel_timer() against a firing timer yields one outcome."""
        scheduler = ThreadingScheduler()

        for _ in range(20):
            timed = TimedShutoffDecorator(light, scheduler)
            light.turn_on()
            events.clear()

            timed.set_timer(0.0001)  # 6 ms
            threading.Event().wait(0.006)
            timed.cancel_timer()
            threading.Event().wait(0.05)

            fired = "Bedroom Lamp turned OFF" in events
            cancelled = "Timer cancelled for Timer-Enabled Bedroom Lamp" in events
            assert fired != cancelled

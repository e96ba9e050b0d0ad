#!/usr/bin/env python3
"""
Quick example demonstrating home-controller basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

import logging

from home_controller import DeviceType, HomeController, ManualScheduler
from home_controller.automation import register_builtin_modes
from home_controller.decorators import MotionSensingDecorator, TimedShutoffDecorator
from home_controller.listeners import ConsoleDisplay, EventLog

logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(levelname)s %(message)s")

print("=" * 60)
print("home-controller Example")
print("=" * 60)

# 1. Controller and listeners
print("\n1. Creating controller...")
scheduler = ManualScheduler()
controller = HomeController(scheduler=scheduler)
log = EventLog()
controller.add_listener(log)
controller.add_listener(ConsoleDisplay())
register_builtin_modes(controller)
print(f"   ✓ Modes registered: {controller.mode_names}")

# 2. Rooms and devices
print("\n2. Building the home...")
for room_name in ("Living Room", "Kitchen", "Bedroom", "Bathroom"):
    controller.add_room(room_name)

living_light = controller.create_device("Living Room", DeviceType.LIGHT, "Main Light")
kitchen_light = controller.create_device("Kitchen", DeviceType.LIGHT, "Ceiling Light")
bedroom_light = controller.create_device("Bedroom", DeviceType.LIGHT, "Bedside Lamp")
living_thermostat = controller.create_device("Living Room", DeviceType.THERMOSTAT, "Thermostat")
controller.create_device("Bedroom", DeviceType.THERMOSTAT, "Thermostat")
front_door = controller.create_device("Living Room", DeviceType.DOOR, "Front Door")
controller.create_device("Kitchen", DeviceType.DOOR, "Back Door")
controller.create_device("Living Room", DeviceType.SECURITY_CAMERA, "Security Camera")

# 3. Basic device operations
print("\n3. Basic device operations...")
living_light.turn_on()
living_light.set_brightness(80)
living_thermostat.set_temperature(23.5)
front_door.unlock()

# 4. Room-based control
print("\n4. Room-based control...")
controller.get_room("Kitchen").turn_all_on()
controller.get_room("Bedroom").turn_all_on()
controller.get_room("Bedroom").turn_all_off()

# 5. Decorators
print("\n5. Decorators...")
motion_light = MotionSensingDecorator(living_light, scheduler)
motion_light.detect_motion()

timer_light = TimedShutoffDecorator(kitchen_light, scheduler)
timer_light.set_timer(2)

smart_light = TimedShutoffDecorator(MotionSensingDecorator(bedroom_light, scheduler), scheduler)
smart_light.detect_motion()
smart_light.set_timer(5)

print("\n   ...six minutes pass...")
scheduler.advance(6 * 60)

# 6. Automation modes
print("\n6. Automation modes...")
controller.set_mode("night")
controller.execute_current_mode()

print("\n   Switching to morning mode")
controller.set_mode("morning")
controller.execute_current_mode()

# 7. Log dump
print("\n7. System log:")
for entry in log.entries():
    print(f"   {entry}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)

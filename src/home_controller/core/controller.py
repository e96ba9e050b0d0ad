"""
HomeController: the registry of rooms, devices and automation modes.

The controller owns the topology and the mode selection; devices own their
state and the hub owns delivery.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Union

from home_controller.core.hub import Listener, NotificationHub
from home_controller.core.room import Room
from home_controller.core.scheduler import Scheduler, ThreadingScheduler
from home_controller.devices.base import Device, DeviceType, SmartDevice
from home_controller.devices.factory import DeviceFactory, parse_device_type

if TYPE_CHECKING:
    from home_controller.automation.strategy import AutomationStrategy

logger = logging.getLogger(__name__)


class HomeController:
    """
    Registry of rooms, devices, listeners and automation modes.

    Responsibilities:
    - Store rooms and create devices through the factory
    - Register listeners on the notification hub
    - Keep the named automation modes and the currently selected one

    The controller is constructed explicitly and passed to whoever needs it;
    there is no process-wide instance.
    """

    def __init__(
        self,
        hub: Optional[NotificationHub] = None,
        scheduler: Optional[Scheduler] = None,
        factory: Optional[DeviceFactory] = None,
    ) -> None:
        """
        Initialize an empty controller.

        Args:
            hub: Notification hub (a fresh one if omitted)
            scheduler: Scheduler handed to decorators (ThreadingScheduler if omitted)
            factory: Device factory (default type mapping if omitted)
        """
        self.hub = hub or NotificationHub()
        self.scheduler = scheduler or ThreadingScheduler()
        self.factory = factory or DeviceFactory()

        self._rooms: Dict[str, Room] = {}
        self._modes: Dict[str, "AutomationStrategy"] = {}
        self._current_mode: Optional["AutomationStrategy"] = None

    # =========================================================================
    # Notifications
    # =========================================================================

    def add_listener(self, listener: Listener) -> None:
        """Register a listener for every notification."""
        self.hub.subscribe(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Stop delivering notifications to a listener."""
        self.hub.unsubscribe(listener)

    def notify(self, message: str) -> None:
        """Publish a notification to all listeners."""
        self.hub.publish(message)

    # =========================================================================
    # Rooms and devices
    # =========================================================================

    def add_room(self, name: str) -> Room:
        """
        Add a room, replacing any room with the same name.

        Args:
            name: Room name

        Returns:
            The new Room
        """
        if name in self._rooms:
            logger.debug(f"Replacing existing room: {name}")

        room = Room(name)
        self._rooms[name] = room
        logger.info(f"Added room: {name}")
        self.notify(f"Room added: {name}")
        return room

    def get_room(self, name: str) -> Optional[Room]:
        """
        Get a room by name.

        Returns:
            The Room or None if not found
        """
        return self._rooms.get(name)

    def all_rooms(self) -> List[Room]:
        """Get all rooms."""
        return list(self._rooms.values())

    def all_devices(self) -> List[SmartDevice]:
        """Get every device across all rooms."""
        return [device for room in self.all_rooms() for device in room.list_devices()]

    def create_device(
        self,
        room_name: str,
        device_type: Union[DeviceType, str],
        name: str,
    ) -> Device:
        """
        Create a device and place it in a room.

        The room is created first if it does not exist yet.

        Args:
            room_name: Room that will own the device
            device_type: Device type tag (DeviceType or its string form)
            name: Device name

        Returns:
            The created Device

        Raises:
            UnknownDeviceTypeError: If the tag has no constructor
        """
        kind = parse_device_type(device_type)

        room = self.get_room(room_name)
        if room is None:
            room = self.add_room(room_name)

        device = self.factory.create_device(kind, name, room, self.hub)
        room.add_device(device)

        logger.info(f"Created device: {name} ({kind.name}) in {room_name}")
        self.notify(f"Device created: {name} ({kind.name}) in {room_name}")
        return device

    # =========================================================================
    # Automation modes
    # =========================================================================

    @property
    def current_mode(self) -> Optional["AutomationStrategy"]:
        """Currently selected strategy, or None."""
        return self._current_mode

    @property
    def mode_names(self) -> List[str]:
        """Names of all registered modes."""
        return list(self._modes)

    def register_mode(self, name: str, strategy: "AutomationStrategy") -> None:
        """
        Register a strategy under a name. A later registration replaces it.

        Args:
            name: Mode name (e.g., "night")
            strategy: The automation strategy
        """
        self._modes[name] = strategy
        logger.debug(f"Registered mode '{name}' ({strategy.name})")

    def set_mode(self, name: str) -> None:
        """
        Select the current mode.

        Unknown names leave the current mode unchanged.

        Args:
            name: Registered mode name
        """
        strategy = self._modes.get(name)
        if strategy is None:
            logger.debug(f"Ignoring unknown mode: {name}")
            return

        self._current_mode = strategy
        logger.info(f"Automation mode changed to: {name}")
        self.notify(f"Automation mode changed to: {name}")

    def execute_current_mode(self) -> None:
        """
        Apply the current strategy to every device.

        Does nothing when no mode is selected. Per-device changes publish
        their own events before the final "Executed mode" event.
        """
        strategy = self._current_mode
        if strategy is None:
            logger.debug("No automation mode selected")
            return

        strategy.execute(self)
        logger.info(f"Executed mode: {strategy.name}")
        self.notify(f"Executed mode: {strategy.name}")

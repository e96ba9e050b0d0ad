"""Lockable door."""

from .base import Device, DeviceType


class Door(Device):
    """A door lock. New doors start locked."""

    DEVICE_TYPE = DeviceType.DOOR

    def __init__(self, name, room, hub) -> None:
        super().__init__(name, room, hub)
        self._locked = True

    @property
    def is_locked(self) -> bool:
        return self._locked

    def lock(self) -> None:
        with self._lock:
            if self._locked:
                return
            self._locked = True
            self._notify("locked")

    def unlock(self) -> None:
        with self._lock:
            if not self._locked:
                return
            self._locked = False
            self._notify("unlocked")

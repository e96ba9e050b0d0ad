"""Security camera."""

from .base import Device, DeviceType


class SecurityCamera(Device):
    """A camera that can record independently of its power state."""

    DEVICE_TYPE = DeviceType.SECURITY_CAMERA

    def __init__(self, name, room, hub) -> None:
        super().__init__(name, room, hub)
        self._recording = False

    @property
    def is_recording(self) -> bool:
        return self._recording

    def start_recording(self) -> None:
        with self._lock:
            if self._recording:
                return
            self._recording = True
            self._notify("started recording")

    def stop_recording(self) -> None:
        with self._lock:
            if not self._recording:
                return
            self._recording = False
            self._notify("stopped recording")

"""
Camera permission from the OS point of view.

On Linux the webcam is /dev/video<index>; the process needs read+write
access to it (usually membership of the `video` group). Other platforms
prompt on first use, so the request is treated as granted here.
"""
import os
import sys
from nail_salon.adapters.permission.base import PermissionAdapter

class DevicePermission(PermissionAdapter):
    def __init__(self, status_store, index: int | None = None):
        self.status = status_store
        self.index = index if index is not None else int(os.getenv("CAMERA_INDEX", "0"))

    @property
    def device(self) -> str:
        return f"/dev/video{self.index}"

    def request_camera(self) -> bool:
        if not sys.platform.startswith("linux"):
            return True
        granted = os.access(self.device, os.R_OK | os.W_OK)
        self.status.log(f"permission: {self.device} {'granted' if granted else 'denied'}")
        return granted

    def settings_hint(self) -> str:
        if sys.platform.startswith("linux"):
            return (f"Grant access to {self.device} (for example: "
                    f"sudo usermod -aG video $USER, then log in again).")
        return super().settings_hint()

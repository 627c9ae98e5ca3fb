from nail_salon.adapters.permission.base import PermissionAdapter

class StaticPermission(PermissionAdapter):
    """Fixed answer, for the mock camera and for tests."""

    def __init__(self, status_store, granted: bool = True):
        self.status = status_store
        self.granted = granted

    def request_camera(self) -> bool:
        self.status.log(f"permission: static {'granted' if self.granted else 'denied'}")
        return self.granted

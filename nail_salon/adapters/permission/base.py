class PermissionAdapter:
    def request_camera(self) -> bool:
        """Return True when the app may use the camera."""
        raise NotImplementedError

    def settings_hint(self) -> str:
        return "Allow camera access in your system settings, then try again."

from abc import ABC, abstractmethod

class CameraAdapter(ABC):
    # where the last frame came from (device or file path)
    last_source: str | None = None

    @abstractmethod
    def capture_bytes(self) -> bytes | None:
        """Capture one photo. Returns JPEG bytes, or None if nothing was taken."""
        ...

    def release(self):
        pass

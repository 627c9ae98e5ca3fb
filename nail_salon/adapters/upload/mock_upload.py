import time
from nail_salon.adapters.upload.base import UploadAdapter
from nail_salon.session.contracts import RgbColor

# Simulated processing time — keep fast for mock testing
_PROCESS_S = 0.5

class MockUpload(UploadAdapter):
    """Offline stand-in: hands the photo straight back."""

    def __init__(self, status_store, delay: float = _PROCESS_S):
        self.status = status_store
        self.delay = delay

    def submit(self, image: bytes, color: RgbColor,
               filename: str = "hand.jpg", content_type: str = "image/jpeg") -> bytes:
        if not image:
            raise ValueError("image must not be empty")
        self.status.log(f"mock_upload: processing {filename} color={color.to_field()} ({self.delay}s)...")
        time.sleep(self.delay)
        self.status.log("mock_upload: done ✓")
        return bytes(image)

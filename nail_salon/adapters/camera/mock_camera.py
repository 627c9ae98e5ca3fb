"""Mock camera: serves a random sample hand photo from samples/ for testing."""
import os
import random
from pathlib import Path
from nail_salon.adapters.camera.base import CameraAdapter

SAMPLES_DIR = Path(os.getenv("SAMPLES_DIR", str(Path(__file__).parent / "samples")))

# BGR, a flat skin tone used when no sample photos exist
_PLACEHOLDER_BGR = (180, 200, 235)

class MockCamera(CameraAdapter):
    def __init__(self, status_store, samples_dir: Path | None = None):
        self.status = status_store
        self.samples_dir = Path(samples_dir) if samples_dir else SAMPLES_DIR

    def capture_bytes(self) -> bytes | None:
        photos = []
        if self.samples_dir.is_dir():
            photos = sorted(self.samples_dir.glob("*.jpg")) + sorted(self.samples_dir.glob("*.png"))
        if photos:
            chosen = random.choice(photos)
            self.status.log(f"mock_camera: serving {chosen.name}")
            self.last_source = str(chosen)
            return chosen.read_bytes()
        return self._placeholder()

    def _placeholder(self) -> bytes | None:
        try:
            import cv2
            import numpy as np
        except ImportError:
            self.status.log("mock_camera: no sample photos found")
            return None
        frame = np.full((480, 640, 3), _PLACEHOLDER_BGR, dtype=np.uint8)
        ok, buf = cv2.imencode(".jpg", frame)
        if not ok:
            return None
        self.status.log("mock_camera: no sample photos, serving placeholder frame")
        self.last_source = "placeholder.jpg"
        return bytes(buf)

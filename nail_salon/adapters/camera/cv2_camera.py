"""
OpenCV webcam capture adapter.

The device is opened lazily on the first photo and kept open between photos,
release() closes it (called when the app shuts down).

CAMERA_INDEX   device number (default 0)
CAMERA_WIDTH / CAMERA_HEIGHT   requested resolution, 0 keeps the driver default
"""
import os
import cv2
from nail_salon.adapters.camera.base import CameraAdapter

# full quality, the processing service does its own resizing
JPEG_QUALITY = 100
# frames thrown away after opening while auto exposure settles
WARMUP_FRAMES = 5


class CV2Camera(CameraAdapter):
    def __init__(self, status_store, index: int | None = None,
                 width: int | None = None, height: int | None = None):
        self.status = status_store
        self.index = index if index is not None else int(os.getenv("CAMERA_INDEX", "0"))
        self.width = width if width is not None else int(os.getenv("CAMERA_WIDTH", "0"))
        self.height = height if height is not None else int(os.getenv("CAMERA_HEIGHT", "0"))
        self._device = None

    @property
    def is_open(self) -> bool:
        return self._device is not None and self._device.isOpened()

    def _ensure_open(self) -> bool:
        if self.is_open:
            return True
        device = cv2.VideoCapture(self.index)
        if not device.isOpened():
            self.status.log(f"cv2_camera: cannot open device {self.index}")
            device.release()
            return False
        if self.width and self.height:
            device.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
            device.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)
        for _ in range(WARMUP_FRAMES):
            device.grab()
        self._device = device
        self.status.log(f"cv2_camera: device {self.index} opened")
        return True

    def capture_bytes(self) -> bytes | None:
        if not self._ensure_open():
            return None
        ok, frame = self._device.read()
        if not ok or frame is None:
            self.status.log("cv2_camera: no frame from device")
            return None
        encoded, jpeg = cv2.imencode(".jpg", frame, [cv2.IMWRITE_JPEG_QUALITY, JPEG_QUALITY])
        if not encoded:
            self.status.log("cv2_camera: jpeg encode failed")
            return None
        h, w = frame.shape[:2]
        self.last_source = f"camera{self.index}.jpg"
        self.status.log(f"cv2_camera: captured {w}x{h}")
        return jpeg.tobytes()

    def release(self):
        if self._device is not None:
            self._device.release()
            self._device = None
            self.status.log(f"cv2_camera: device {self.index} closed")

import threading
import time
from nail_salon.session.contracts import CapturedImage, Notification, RgbColor, DEFAULT_COLOR
from nail_salon.session import errors
from nail_salon.session.palette import MSG_PERMISSION, MSG_SERVER_ERROR, MSG_TRANSPORT_ERROR

class HandSession:
    """View-state of the single screen plus the actions that change it."""

    def __init__(self, upload, camera, permission, status_store, color: RgbColor = DEFAULT_COLOR):
        self.upload = upload
        self.camera = camera
        self.permission = permission
        self.status = status_store
        self.color = color
        self.image: CapturedImage | None = None
        self.processed: bytes | None = None
        self._lock = threading.Lock()

    @property
    def loading(self) -> bool:
        return self.status.busy

    @property
    def can_submit(self) -> bool:
        return self.image is not None and not self.status.busy

    def take_photo(self) -> CapturedImage | None:
        if not self.permission.request_camera():
            self.status.log("take_photo: permission denied")
            self.status.notify(Notification(kind="permission", message=MSG_PERMISSION,
                                            actions=("cancel", "open_settings")))
            raise errors.PermissionDenied()

        data = self.camera.capture_bytes()
        if not data:
            self.status.log("take_photo: nothing captured")
            return None
        return self.set_image(data, source=self.camera.last_source)

    def set_image(self, data: bytes, source: str | None = None,
                  content_type: str = "image/jpeg") -> CapturedImage:
        if not data:
            raise ValueError("image must not be empty")
        self.image = CapturedImage(data=data, source=source, content_type=content_type)
        self.processed = None
        self.status.dismiss()
        self.status.log(f"photo: {self.image.filename} ({len(data)} bytes)")
        return self.image

    def select_color(self, color: RgbColor):
        self.color = color
        self.status.log(f"color: {color.to_field()}")

    def apply_color(self) -> bytes:
        with self._lock:
            if self.image is None:
                raise errors.SubmitUnavailable(errors.ERR_NO_IMAGE, "take a hand photo first")
            if self.status.busy:
                raise errors.SubmitUnavailable(errors.ERR_BUSY, "an upload is already running")
            self.status.set_busy(True)

        image, color = self.image, self.color
        t0 = time.time()
        try:
            self.status.log(f"apply: start color={color.to_field()}")
            result = self.upload.submit(image.data, color,
                                        filename=image.filename, content_type=image.content_type)
            self.processed = result
            self.status.last_error = None
            self.status.dismiss()
            self.status.log(f"apply: done dt={int((time.time() - t0) * 1000)}ms")
            return result
        except errors.ServerError as e:
            self.status.last_error = e.code
            self.status.notify(Notification(kind="error", message=MSG_SERVER_ERROR))
            raise
        except errors.TransportError as e:
            self.status.last_error = e.code
            self.status.notify(Notification(kind="error",
                                            message=MSG_TRANSPORT_ERROR.format(detail=e.detail)))
            raise
        finally:
            self.status.set_busy(False)

    def preview(self) -> bytes | None:
        """Bytes the image area shows: None while loading or when nothing was taken yet."""
        if self.status.busy:
            return None
        if self.processed is not None:
            return self.processed
        if self.image is not None:
            return self.image.data
        return None

    def dismiss_notification(self):
        self.status.dismiss()

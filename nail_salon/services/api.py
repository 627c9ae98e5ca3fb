import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse, Response
from dotenv import load_dotenv
from nail_salon.services.models import (
    ColorIn, ColorOut, SwatchOut, NotificationOut, StatusResponse,
    PhotoResponse, ErrorResponse, SettingsHintResponse,
)
from nail_salon.services.status_store import StatusStore
from nail_salon.session.contracts import RgbColor
from nail_salon.session.hand_session import HandSession
from nail_salon.session.palette import PALETTE
from nail_salon.session import errors
from nail_salon.adapters.upload.http_upload import HttpUpload, DEFAULT_URL
from nail_salon.adapters.upload.mock_upload import MockUpload
from nail_salon.adapters.permission.device_permission import DevicePermission
from nail_salon.adapters.permission.static_permission import StaticPermission

load_dotenv(dotenv_path="nail_salon/.env", override=False)


def release_devices():
    """Free the webcam so other programs can open it after we exit."""
    session.camera.release()
    session.status.log("camera: released")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    release_devices()


app = FastAPI(title="nail-salon", lifespan=lifespan)

status = StatusStore()

# Upload adapter: read from UPLOAD_ADAPTER env var (default: http)
upload_adapter = os.getenv("UPLOAD_ADAPTER", "http").lower()
if upload_adapter == "mock":
    upload = MockUpload(status)
    status.log("upload adapter: mock")
else:
    upload_url = os.getenv("PROCESS_IMAGE_URL", DEFAULT_URL)
    upload = HttpUpload(status, url=upload_url, timeout=float(os.getenv("UPLOAD_TIMEOUT", "30")))
    status.log(f"upload adapter: http -> {upload_url}")

# Camera: CAMERA_ADAPTER=cv2 tries CV2Camera, falls back to MockCamera
_camera_adapter = os.getenv("CAMERA_ADAPTER", "cv2").lower()
camera = None
if _camera_adapter == "cv2":
    try:
        from nail_salon.adapters.camera.cv2_camera import CV2Camera
        camera = CV2Camera(status)
        status.log("camera: CV2Camera ready")
    except ImportError:
        status.log("camera: opencv not installed")
if camera is None:
    from nail_salon.adapters.camera.mock_camera import MockCamera
    camera = MockCamera(status)
    status.log("camera: MockCamera")

# Permission: device | granted | denied  (default: device for a real webcam)
_permission_mode = os.getenv(
    "CAMERA_PERMISSION", "device" if type(camera).__name__ == "CV2Camera" else "granted"
).lower()
if _permission_mode == "device":
    permission = DevicePermission(status)
else:
    permission = StaticPermission(status, granted=_permission_mode != "denied")
status.log(f"permission: {_permission_mode}")

session = HandSession(upload=upload, camera=camera, permission=permission, status_store=status)


def _color_out(c: RgbColor) -> ColorOut:
    return ColorOut(r=c.r, g=c.g, b=c.b, hex=c.to_hex(), on_color=c.on_color())


def _error(http_status: int, code: str, message: str, **extra) -> JSONResponse:
    body = ErrorResponse(error=code, message=message, **extra)
    return JSONResponse(status_code=http_status, content=body.model_dump())


@app.get("/status", response_model=StatusResponse)
def get_status():
    st = session.status
    n = st.notification
    return StatusResponse(
        has_image=session.image is not None,
        has_processed=session.processed is not None,
        loading=session.loading,
        can_submit=session.can_submit,
        color=_color_out(session.color),
        notification=NotificationOut(kind=n.kind, message=n.message, actions=list(n.actions)) if n else None,
        last_error=st.last_error,
        logs=st.logs,
    )


@app.post("/photo", response_model=PhotoResponse)
def take_photo():
    """Capture with the server-side camera (after the permission check)."""
    try:
        img = session.take_photo()
    except errors.PermissionDenied as e:
        return _error(403, e.code, str(e))
    if img is None:
        return PhotoResponse(ok=True, captured=False)
    return PhotoResponse(ok=True, captured=True, filename=img.filename, size=len(img.data))


@app.post("/photo/upload", response_model=PhotoResponse)
def upload_photo(image: UploadFile = File(...)):
    """Photo taken by the browser (getUserMedia or file input)."""
    data = image.file.read()
    if not data:
        return _error(422, "EMPTY_IMAGE", "uploaded image is empty")
    img = session.set_image(data, source=image.filename, content_type=image.content_type or "image/jpeg")
    return PhotoResponse(ok=True, captured=True, filename=img.filename, size=len(img.data))


@app.get("/color", response_model=ColorOut)
def get_color():
    return _color_out(session.color)


@app.post("/color", response_model=ColorOut)
def set_color(req: ColorIn):
    try:
        color = RgbColor.from_hex(req.hex) if req.hex is not None else RgbColor(req.r, req.g, req.b)
    except ValueError as e:
        return _error(422, "BAD_COLOR", str(e))
    session.select_color(color)
    return _color_out(color)


@app.get("/palette", response_model=list[SwatchOut])
def palette():
    return [SwatchOut(name=name, **_color_out(c).model_dump()) for name, c in PALETTE]


@app.post("/apply")
def apply_color():
    """Send photo + color to the processing service, answer with the processed image."""
    try:
        result = session.apply_color()
    except errors.SubmitUnavailable as e:
        return _error(409, e.code, str(e))
    except errors.ServerError as e:
        return _error(502, e.code, str(e), status=e.status)
    except errors.TransportError as e:
        return _error(504, e.code, str(e), detail=e.detail)
    return Response(content=result, media_type="application/octet-stream")


@app.get("/image")
def current_image():
    """Processed image if there is one, else the captured photo.
    204 while an upload runs, 404 before the first photo (UI shows the default hand).
    """
    if session.loading:
        return Response(status_code=204)
    data = session.preview()
    if data is None:
        return _error(404, errors.ERR_NO_IMAGE, "no photo yet")
    if session.processed is not None:
        return Response(content=data, media_type="application/octet-stream")
    return Response(content=data, media_type=session.image.content_type)


@app.post("/notification/dismiss")
def dismiss_notification():
    session.dismiss_notification()
    return {"ok": True}


@app.post("/permission/settings", response_model=SettingsHintResponse)
def open_settings():
    session.dismiss_notification()
    return SettingsHintResponse(ok=True, hint=session.permission.settings_hint())


@app.get("/health")
def health():
    """Check connectivity to the processing service."""
    checks = {
        "api": True,
        "upload_adapter": type(session.upload).__name__,
        "camera": type(session.camera).__name__,
        "permission": type(session.permission).__name__,
    }
    checks["upload_reachable"] = session.upload.reachable()
    checks["all_ok"] = checks["api"] and checks["upload_reachable"]
    return checks

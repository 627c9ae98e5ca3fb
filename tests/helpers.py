"""
Shared fakes for the nail salon tests.
"""
import io

import httpx
from python_multipart import parse_form

from nail_salon.adapters.camera.base import CameraAdapter

PROCESS_URL = "http://proc.test/process-image"
PHOTO = b"\xff\xd8\xff\xe0fake-hand-photo\xff\xd9"


def form_parts(request: httpx.Request) -> dict[str, tuple[str | None, bytes]]:
    """Multipart parts of a recorded request: name -> (filename, payload)."""
    parts = {}

    def on_field(field):
        parts[field.field_name.decode()] = (None, field.value or b"")

    def on_file(f):
        f.file_object.seek(0)
        name = f.file_name.decode() if f.file_name else None
        parts[f.field_name.decode()] = (name, f.file_object.read())

    headers = {"Content-Type": request.headers["content-type"]}
    parse_form(headers, io.BytesIO(request.content), on_field, on_file)
    return parts


def form_field(request: httpx.Request, name: str) -> bytes | None:
    part = form_parts(request).get(name)
    return part[1] if part else None


class ProcessServer:
    """Stand-in for the processing endpoint, records every request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.reply = self.echo_color

    @staticmethod
    def echo_color(request: httpx.Request) -> httpx.Response:
        color = form_field(request, "color") if request.method == "POST" else None
        return httpx.Response(200, content=b"processed:" + (color or b""))

    def handler(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        return self.reply(request)


class FakeCamera(CameraAdapter):
    def __init__(self, frames=()):
        self.frames = list(frames)
        self.released = 0

    def capture_bytes(self) -> bytes | None:
        if not self.frames:
            return None
        self.last_source = "/photos/left_hand.jpg"
        return self.frames.pop(0)

    def release(self):
        self.released += 1

"""
HTTP adapter for the image-processing service.

Wire contract:
  Request:  POST /process-image   multipart/form-data
              image  file part, the hand photo
              color  text part, "<r>,<g>,<b>" in decimal
  Response: 200 with the processed image as the raw body.
            Any other status is a server error.

One attempt per call. A fresh client is opened for every submit so nothing
is cached between calls.
"""

import httpx
from nail_salon.adapters.upload.base import UploadAdapter
from nail_salon.session.contracts import RgbColor
from nail_salon.session.errors import ServerError, TransportError

DEFAULT_URL = "http://127.0.0.1:5000/process-image"
# /health must answer quickly even when the service is unreachable
REACHABLE_TIMEOUT = 2.0


class HttpUpload(UploadAdapter):
    def __init__(self, status_store, url: str = DEFAULT_URL, timeout: float = 30.0,
                 transport: httpx.BaseTransport | None = None):
        self.status = status_store
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def _client(self, timeout: float | None = None) -> httpx.Client:
        return httpx.Client(timeout=timeout or self.timeout, transport=self._transport)

    def submit(self, image: bytes, color: RgbColor,
               filename: str = "hand.jpg", content_type: str = "image/jpeg") -> bytes:
        if not image:
            raise ValueError("image must not be empty")

        files = {"image": (filename, image, content_type)}
        data = {"color": color.to_field()}
        self.status.log(f"http_upload: POST {self.url} color={data['color']} ({len(image)} bytes)")
        try:
            with self._client() as client:
                resp = client.post(self.url, files=files, data=data)
        except httpx.HTTPError as e:
            detail = str(e) or type(e).__name__
            self.status.log(f"http_upload: transport error: {detail}")
            raise TransportError(detail) from e

        if resp.status_code != 200:
            self.status.log(f"http_upload: HTTP {resp.status_code}")
            raise ServerError(resp.status_code)

        self.status.log(f"http_upload: done ({len(resp.content)} bytes back)")
        return resp.content

    def reachable(self) -> bool:
        # any HTTP answer counts, the endpoint only accepts POST
        try:
            with self._client(REACHABLE_TIMEOUT) as client:
                client.get(self.url)
            return True
        except httpx.HTTPError:
            return False

"""
Tests for the multipart upload client against a mocked processing endpoint.
"""
import httpx
import pytest

from nail_salon.adapters.upload.http_upload import HttpUpload, REACHABLE_TIMEOUT
from nail_salon.adapters.upload.mock_upload import MockUpload
from nail_salon.session.contracts import RgbColor, DEFAULT_COLOR
from nail_salon.session.errors import ServerError, TransportError
from helpers import PHOTO, PROCESS_URL, form_field, form_parts


def test_request_shape(upload, server):
    upload.submit(PHOTO, RgbColor(12, 0, 255))

    assert len(server.requests) == 1
    req = server.requests[0]
    assert req.method == "POST"
    assert str(req.url) == PROCESS_URL
    assert req.headers["content-type"].startswith("multipart/form-data")
    assert form_field(req, "color") == b"12,0,255"
    assert form_field(req, "image") == PHOTO
    assert form_parts(req)["image"][0] == "hand.jpg"


def test_default_color_on_the_wire(upload, server):
    upload.submit(PHOTO, DEFAULT_COLOR)
    assert form_field(server.requests[0], "color") == b"255,139,126"


def test_custom_filename_and_content_type(upload, server):
    upload.submit(PHOTO, DEFAULT_COLOR, filename="left.png", content_type="image/png")
    req = server.requests[0]
    assert form_parts(req)["image"] == ("left.png", PHOTO)
    assert b"Content-Type: image/png" in req.content


def test_ok_body_returned_unchanged(upload, server):
    body = bytes(range(256)) * 4
    server.reply = lambda request: httpx.Response(200, content=body)
    assert upload.submit(PHOTO, DEFAULT_COLOR) == body


@pytest.mark.parametrize("code", [201, 400, 404, 413, 500, 503])
def test_non_200_is_server_error(upload, server, code):
    server.reply = lambda request: httpx.Response(code, content=b"nope")
    with pytest.raises(ServerError) as exc:
        upload.submit(PHOTO, DEFAULT_COLOR)
    assert exc.value.status == code
    assert len(server.requests) == 1   # no retry


def test_connection_refused_is_transport_error(upload, server):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    server.reply = refuse
    with pytest.raises(TransportError) as exc:
        upload.submit(PHOTO, DEFAULT_COLOR)
    assert exc.value.detail == "Connection refused"
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_timeout_is_transport_error(upload, server):
    def slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    server.reply = slow
    with pytest.raises(TransportError) as exc:
        upload.submit(PHOTO, DEFAULT_COLOR)
    assert "timed out" in exc.value.detail


def test_empty_image_rejected_before_sending(upload, server):
    with pytest.raises(ValueError):
        upload.submit(b"", DEFAULT_COLOR)
    assert server.requests == []


def test_identical_submits_are_independent(upload, server):
    counter = iter(range(100))
    server.reply = lambda request: httpx.Response(200, content=f"result-{next(counter)}".encode())

    first = upload.submit(PHOTO, DEFAULT_COLOR)
    second = upload.submit(PHOTO, DEFAULT_COLOR)

    assert len(server.requests) == 2
    assert first == b"result-0"
    assert second == b"result-1"


def test_upload_logs_to_status(upload, status):
    upload.submit(PHOTO, DEFAULT_COLOR)
    assert any(line.startswith("http_upload: POST") for line in status.logs)


def test_reachable(status):
    up = HttpUpload(status, url=PROCESS_URL,
                    transport=httpx.MockTransport(lambda r: httpx.Response(405)))
    assert up.reachable() is True

    def down(request):
        raise httpx.ConnectError("down", request=request)

    up = HttpUpload(status, url=PROCESS_URL, transport=httpx.MockTransport(down))
    assert up.reachable() is False


def test_mock_upload_echoes_photo(status):
    mock = MockUpload(status, delay=0)
    assert mock.submit(PHOTO, DEFAULT_COLOR) == PHOTO
    with pytest.raises(ValueError):
        mock.submit(b"", DEFAULT_COLOR)


def test_reachable_uses_short_timeout(status):
    seen = []

    def record(request):
        seen.append(request.extensions["timeout"])
        return httpx.Response(200, content=b"ok")

    up = HttpUpload(status, url=PROCESS_URL, timeout=30.0, transport=httpx.MockTransport(record))
    up.reachable()
    up.submit(PHOTO, DEFAULT_COLOR)

    assert seen[0]["read"] == REACHABLE_TIMEOUT
    assert seen[0]["connect"] == REACHABLE_TIMEOUT
    assert seen[1]["read"] == 30.0

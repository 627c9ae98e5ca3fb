"""
Test configuration and fixtures for the nail salon service.
"""
import os

# must be set before nail_salon.services.api is imported
os.environ.setdefault("UPLOAD_ADAPTER", "mock")
os.environ.setdefault("CAMERA_ADAPTER", "mock")
os.environ.setdefault("CAMERA_PERMISSION", "granted")

import httpx
import pytest
from fastapi.testclient import TestClient

from nail_salon.adapters.permission.static_permission import StaticPermission
from nail_salon.adapters.upload.http_upload import HttpUpload
from nail_salon.services import api
from nail_salon.services.status_store import StatusStore
from nail_salon.session.hand_session import HandSession

from helpers import PHOTO, PROCESS_URL, FakeCamera, ProcessServer


@pytest.fixture
def status():
    return StatusStore()


@pytest.fixture
def server():
    return ProcessServer()


@pytest.fixture
def upload(status, server):
    return HttpUpload(status, url=PROCESS_URL, transport=httpx.MockTransport(server.handler))


@pytest.fixture
def camera():
    return FakeCamera([PHOTO])


@pytest.fixture
def permission(status):
    return StaticPermission(status, granted=True)


@pytest.fixture
def session(upload, camera, permission, status):
    return HandSession(upload=upload, camera=camera, permission=permission, status_store=status)


@pytest.fixture
def test_client(monkeypatch, session):
    """API client wired to a fresh session."""
    monkeypatch.setattr(api, "session", session)
    return TestClient(api.app)

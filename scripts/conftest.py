import json
import sys
import os

import httpx
import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.main import app
from app.services.lyrics_service import LyricsService
from app.services.providers.lrclib import LrcLibProvider

BASE_URL = "https://lrclib.test"


class FakeLrcLib:
    """Records outbound requests. Queued replies go out first, then the canned one."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.body = {}
        self.error = None
        self.queued = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.queued:
            return self.queued.pop(0)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, content=json.dumps(self.body).encode())
        return httpx.Response(self.status_code, content=self.body)


@pytest.fixture
def lrclib():
    return FakeLrcLib()


@pytest.fixture
def provider(lrclib):
    client = httpx.AsyncClient(transport=httpx.MockTransport(lrclib), follow_redirects=True)
    return LrcLibProvider(base_url=BASE_URL, client=client)


@pytest.fixture
def client(provider):
    app.state.lyrics_service = LyricsService(provider)
    with TestClient(app) as test_client:
        yield test_client
    del app.state.lyrics_service

"""Shared fixtures for caniuse lookup tests"""

from typing import Optional

import pytest
import requests


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: Optional[str] = None):
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else repr(payload)

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class StubGet:
    """Replaces requests.get, answering by URL suffix and recording calls"""

    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        for suffix, response in self.responses.items():
            if url.endswith(suffix):
                if isinstance(response, Exception):
                    raise response
                return response
        raise AssertionError(f"unexpected request to {url}")


WEBSOCKET_RECORD = {
    "title": "WebSocketStream API",
    "description": "Streams-based WebSocket API",
    "spec": "https://websockets.spec.whatwg.org/",
    "mdn_url": "https://developer.mozilla.org/docs/Web/API/WebSocketStream",
    "support": {"chrome": "124", "firefox": False, "edge": "124", "safari": False},
}


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def websocket_record():
    return dict(WEBSOCKET_RECORD)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("CANIUSE_DEBUG", "CANIUSE_BASE_URL", "CANIUSE_TIMEOUT", "CANIUSE_USER_AGENT"):
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the tests
    monkeypatch.setattr("caniuse_lookup.src.config.config_loader.load_dotenv", lambda: False)


@pytest.fixture
def stub_get(monkeypatch):
    def install(responses):
        stub = StubGet(responses)
        monkeypatch.setattr("caniuse_lookup.src.services.caniuse_client.requests.get", stub)
        return stub

    return install


@pytest.fixture
def websocket_responses():
    return {
        "/process/query.php": FakeResponse({"featureIds": ["mdn-api_websocketstream"]}),
        "/process/get_feat_data.php": FakeResponse([WEBSOCKET_RECORD]),
    }


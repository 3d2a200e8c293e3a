import json

import pytest
import requests

from superstate_client import SuperstateClient, SuperstateConfig


class FakeResponse:
    def __init__(self, status_code=200, text="", content_type="application/json"):
        self.status_code = status_code
        self.text = text
        self.headers = {"content-type": content_type} if content_type else {}

    def json(self):
        return json.loads(self.text)


class FakeSession(requests.Session):
    """
    Real requests.Session up to the wire: requests still prepares the request,
    send() records what would go out and replays a canned response (or raises).
    """

    def __init__(self, response=None, exc=None, default_headers=False):
        super().__init__()
        if not default_headers:
            # drop User-Agent / Accept* so header sets can be compared exactly
            self.headers.clear()
        self.response = response or FakeResponse(200, "[]")
        self.exc = exc
        self.calls = []
        self.closed = False

    def send(self, request, **kwargs):
        self.calls.append(
            {
                "method": request.method,
                "url": request.url,
                "headers": dict(request.headers),
                "data": request.body,
                "timeout": kwargs.get("timeout"),
            }
        )
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True
        super().close()

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    cfg = SuperstateConfig(api_key="k1", api_secret="s1", base_url="https://api.example.test")
    return SuperstateClient(cfg, session=fake_session)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("SUPERSTATE_API_KEY", "SUPERSTATE_API_SECRET", "SUPERSTATE_BASE_URL", "SUPERSTATE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def make_client():
    """make_client(status_code, text, content_type=..., exc=...) -> (client, session)"""

    def _make(status_code=200, text="[]", content_type="application/json", exc=None, default_headers=False):
        session = FakeSession(FakeResponse(status_code, text, content_type), exc=exc, default_headers=default_headers)
        cfg = SuperstateConfig(api_key="k1", api_secret="s1", base_url="https://api.example.test")
        return SuperstateClient(cfg, session=session), session

    return _make

import httpx
import pytest

ACCESS_KEY = "test-access-key-0123456789"
SECRET_KEY = "test-secret-key-0123456789abcdef0123456789"


class RecordingHandler:
    """MockTransport handler that records requests and replies with a canned response."""

    def __init__(self, status_code=200, json=None, content=None, exc=None):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json if self.json is not None else [])

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(handler, cls=None, **kwargs):
    from upbit_core.client import UpbitClient

    cls = cls or UpbitClient
    kwargs.setdefault("access_key", ACCESS_KEY)
    kwargs.setdefault("secret_key", SECRET_KEY)
    return cls(transport=httpx.MockTransport(handler), **kwargs)


def bearer_claims(request: httpx.Request, secret: str = SECRET_KEY) -> dict:
    from upbit_core.auth import decode_token

    scheme, token = request.headers["Authorization"].split(" ", 1)
    assert scheme == "Bearer"
    return decode_token(token, secret)


@pytest.fixture
def handler():
    return RecordingHandler()

"""Pytest fixtures: a recording httpx transport and clients wired to it."""

import httpx
import pytest

from paystack_client import PaystackClient, RestClient, build_config, with_http_client, with_secret_key

SECRET_KEY = "sk_test_0123456789abcdef"
DEFAULT_BODY = b'{"status": true, "message": "Request successful", "data": {"id": 1}}'


class RecordingTransport:
    """Answers every request with a fixed status/body and keeps what was sent."""

    def __init__(self, status_code: int = 200, body: bytes = DEFAULT_BODY):
        self.status_code = status_code
        self.body = body
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, content=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def http_client(transport):
    client = httpx.Client(transport=httpx.MockTransport(transport))
    yield client
    client.close()


@pytest.fixture
def rest_client(http_client):
    return RestClient(build_config(with_secret_key(SECRET_KEY), with_http_client(http_client)))


@pytest.fixture
def paystack(http_client):
    return PaystackClient(with_secret_key(SECRET_KEY), with_http_client(http_client))


@pytest.fixture
def secret_key():
    return SECRET_KEY

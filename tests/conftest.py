"""Root conftest — shared test configuration and fake upstreams."""

import os

import pytest
import requests

# Ensure tests don't accidentally use a real API key
os.environ.setdefault("WEATHERAPI_KEY", "test-fake-key")


def make_response(body: str, status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    return resp


class FakeFetch:
    """Stands in for `RequestsTransport`; records every call it receives.

    Either a single *body* is served for every URL, or *routes* maps a URL
    substring to the body served for matching URLs.
    """

    def __init__(self, body=None, exc=None, routes=None, status=200):
        self.body = body
        self.exc = exc
        self.routes = routes or {}
        self.status = status
        self.calls = []

    def __call__(self, url, params=None):
        self.calls.append((url, params))
        if self.exc is not None:
            raise self.exc
        for fragment, body in self.routes.items():
            if fragment in url:
                return make_response(body, self.status)
        return make_response(self.body, self.status)


@pytest.fixture
def fake_fetch():
    return FakeFetch

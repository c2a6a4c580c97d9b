"""Shared fixtures: fake NewsAPI servers built on httpx.MockTransport."""

import json

import httpx
import pytest


OK_PAYLOAD = {
    "status": "ok",
    "totalResults": 1,
    "articles": [
        {
            "source": {"id": None, "name": "Example"},
            "title": "A",
            "url": "http://x",
            "description": "ignored",
        }
    ],
    "code": None,
}


def json_handler(payload, status_code=200, seen=None):
    """Return a MockTransport handler answering every request with `payload`.

    Requests are appended to `seen` when a list is given.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, content=json.dumps(payload).encode(),
                              headers={"content-type": "application/json"})
    return handler


def refusing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


@pytest.fixture
def seen_requests():
    return []


@pytest.fixture
def ok_client(seen_requests):
    with httpx.Client(transport=httpx.MockTransport(json_handler(OK_PAYLOAD, seen=seen_requests))) as client:
        yield client


def redirecting_handler(seen=None):
    """Answer plain-http requests with a 301 to https, and https ones with OK_PAYLOAD."""
    ok = json_handler(OK_PAYLOAD, seen=seen)

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.scheme == "http":
            if seen is not None:
                seen.append(request)
            return httpx.Response(301, headers={"location": str(request.url.copy_with(scheme="https"))})
        return ok(request)
    return handler

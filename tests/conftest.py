"""Shared pytest fixtures for hubrest tests.

Unit tests never touch the network: the client is given a `requests.Session`
whose `request` replays queued responses and records every call.
"""

from __future__ import annotations

import io
import json
from typing import Any, Callable

import pytest
import requests

from hubrest.auth import NoAuth
from hubrest.client import Client

TEST_USER_AGENT = "hubrest-tests"


class StubSession(requests.Session):
    """Session replaying queued responses (or raising queued exceptions) in order."""

    def __init__(self) -> None:
        super().__init__()
        self.queue: list[requests.Response | Exception] = []
        self.calls: list[dict[str, Any]] = []

    def enqueue(self, *items: requests.Response | Exception) -> None:
        self.queue.extend(items)

    def request(self, method, url, **kwargs):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": dict(kwargs.get("headers") or {}),
                "data": kwargs.get("data"),
                "allow_redirects": kwargs.get("allow_redirects"),
            }
        )
        if not self.queue:
            raise AssertionError(f"Unexpected request: {method} {url}")
        item = self.queue.pop(0)
        if isinstance(item, Exception):
            raise item
        if not item.url:
            item.url = url
        return item


class FailingStream(io.RawIOBase):
    """Body stream whose reads fail, as a dropped connection would."""

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError("connection reset while reading body")


def build_response(
    status: int = 200,
    body: bytes | str | dict | list = b"",
    headers: dict[str, str] | None = None,
    url: str | None = None,
    raw: io.RawIOBase | None = None,
) -> requests.Response:
    """A streamed `requests.Response` whose body has not been read yet."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = requests.Response()
    resp.status_code = status
    resp.headers.update(headers or {})
    resp.url = url
    resp.encoding = "utf-8"
    resp.raw = raw if raw is not None else io.BytesIO(body)
    return resp


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def make_response() -> Callable[..., requests.Response]:
    return build_response


@pytest.fixture
def session() -> StubSession:
    return StubSession()


@pytest.fixture
def client(session: StubSession) -> Client:
    """Unauthenticated client on the default API root backed by the stub session."""
    return Client(TEST_USER_AGENT, NoAuth(), session=session)


@pytest.fixture
def user_json() -> dict:
    return {
        "login": "octocat",
        "id": 1,
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "gravatar_id": "",
        "url": "https://api.github.com/users/octocat",
        "html_url": "https://github.com/octocat",
        "type": "User",
        "site_admin": False,
    }


@pytest.fixture
def repo_json(user_json: dict) -> dict:
    return {
        "id": 1296269,
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "url": "https://api.github.com/repos/octocat/Hello-World",
        "owner": user_json,
        "private": False,
        "fork": False,
        "default_branch": "master",
    }

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Authentication strategies for the GitHub API

A Client holds exactly one of the variants below. Switching strategy is a
plain reassignment of `client.auth`; the new value is used from the next call.
"""

import base64
import logging
from dataclasses import dataclass
from urllib.parse import urlencode, urlsplit, urlunsplit

from .config import get_github_token_default

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoAuth:
    """Use the GitHub API unauthenticated."""


@dataclass(frozen=True)
class BearerToken:
    """OAuth2 token, sent as `Authorization: Bearer <token>`."""

    token: str

    def __repr__(self) -> str:
        return "BearerToken(token='***')"


@dataclass(frozen=True)
class ClientCredentials:
    """OAuth2 application key/secret, sent as `client_id` / `client_secret` query parameters."""

    client_id: str
    client_secret: str

    def __repr__(self) -> str:
        return f"ClientCredentials(client_id={self.client_id!r}, client_secret='***')"


@dataclass(frozen=True)
class Basic:
    """Username/password with an optional two-factor one-time password."""

    username: str
    password: str
    otp: str | None = None

    def __repr__(self) -> str:
        return f"Basic(username={self.username!r}, password='***', otp={'***' if self.otp else None})"


Auth = NoAuth | BearerToken | ClientCredentials | Basic


def _append_query(url: str, pairs: list[tuple[str, str]]) -> str:
    """
    Append query pairs to an absolute URL, after any query already present.
    :raises ValueError: if the URL cannot be parsed or has no scheme/host
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"Malformed request URL: {url!r}")
    extra = urlencode(pairs)
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def basic_auth_header(username: str, password: str) -> str:
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def apply_auth(auth: Auth, headers: dict[str, str], url: str) -> str:
    """
    Apply the authentication strategy to a pending request.
    Headers are mutated in place; the (possibly extended) URL is returned.
    :param auth: The active strategy
    :param headers: Request headers, updated in place
    :param url: Absolute request URL
    :return: The URL to send the request to
    :raises ValueError: if a query parameter has to be added to a malformed URL
    """
    match auth:
        case NoAuth():
            return url
        case BearerToken(token=token):
            headers["Authorization"] = f"Bearer {token}"
            return url
        case ClientCredentials(client_id=client_id, client_secret=client_secret):
            return _append_query(
                url, [("client_id", client_id), ("client_secret", client_secret)]
            )
        case Basic(username=username, password=password, otp=otp):
            headers["Authorization"] = basic_auth_header(username, password)
            if otp is not None:
                # GitHub documents X-GitHub-OTP as a header, it is sent in the query here
                return _append_query(url, [("X-GitHub-OTP", otp)])
            return url
        case _:
            raise TypeError(f"Unsupported authentication strategy: {auth!r}")


def auth_from_env() -> Auth:
    """Bearer token from GITHUB_TOKEN / GITHUB_CLI_API_TOKEN, or NoAuth when unset."""
    token = get_github_token_default()
    if token is None:
        logger.info("No token in environment, using unauthenticated mode.")
        return NoAuth()
    logger.info("Using token from environment for authentication.")
    return BearerToken(token)

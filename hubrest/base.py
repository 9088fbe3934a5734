#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Base classes for GitHub API clients and the endpoint groups built on them
"""

import logging
from abc import ABC, abstractmethod
from pydantic import BaseModel

from .auth import Auth, NoAuth
from .config import GITHUB_API_URL, MediaTypes
from .exceptions import ApiError

logger = logging.getLogger(__name__)

Body = str | bytes | dict | list | BaseModel


class GitHubBase(ABC):
    """The abstract base class for GitHub API clients.

    Holds the configuration every request needs (base URL, user agent,
    authentication) and declares the verb methods endpoint groups call.
    """

    def __init__(
        self,
        user_agent: str,
        auth: Auth | None = None,
        base_url: str = GITHUB_API_URL,
    ):
        """
        Initialize the GitHubBase.

        :param user_agent: Value of the User-Agent header, GitHub rejects requests without one
        :param auth: Authentication strategy, unauthenticated when omitted
        :param base_url: API root, e.g. `https://github.example.com/api/v3` for GitHub Enterprise
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.auth: Auth = auth if auth is not None else NoAuth()
        if isinstance(self.auth, NoAuth):
            logger.debug("Client for %s operates in unauthenticated mode.", self.base_url)
        else:
            logger.debug(
                "Client for %s uses %s authentication.",
                self.base_url,
                type(self.auth).__name__,
            )

    def default_headers(self) -> dict[str, str]:
        return {
            "Accept": MediaTypes.DEFAULT.value,
            "User-Agent": self.user_agent,
        }

    def _build_url(self, endpoint: str) -> str:
        """
        Construct full API URL from endpoint
        :param endpoint: API endpoint e.g. `/repos/{owner}/{repo}/issues`, `/user`, `/zen`
        """
        if not endpoint.startswith("/"):
            endpoint = "/" + endpoint
        return f"{self.base_url}{endpoint}"

    @abstractmethod
    def request(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str] | None = None,
        body: Body | None = None,
    ):
        """
        Perform one logical request against a relative endpoint.
        :param method: HTTP method e.g. 'GET', 'POST'
        :param endpoint: Relative endpoint, beginning with `/`
        :param headers: Replaces the default headers when given
        :param body: Optional request body
        """
        pass

    def get(self, endpoint: str, headers: dict[str, str] | None = None):
        return self.request("GET", endpoint, headers)

    def post(self, endpoint: str, headers: dict[str, str] | None = None):
        return self.request("POST", endpoint, headers)

    def put(self, endpoint: str, headers: dict[str, str] | None = None):
        return self.request("PUT", endpoint, headers)

    def patch(self, endpoint: str, headers: dict[str, str] | None = None):
        return self.request("PATCH", endpoint, headers)

    def delete(self, endpoint: str, headers: dict[str, str] | None = None):
        return self.request("DELETE", endpoint, headers)

    def get_body(self, endpoint: str, body: Body, headers: dict[str, str] | None = None):
        logger.warning(
            "⚠️ A body is sent with a GET request to %s. You may want query parameters instead",
            endpoint,
        )
        return self.request("GET", endpoint, headers, body)

    def post_body(self, endpoint: str, body: Body, headers: dict[str, str] | None = None):
        return self.request("POST", endpoint, headers, body)

    def put_body(self, endpoint: str, body: Body, headers: dict[str, str] | None = None):
        return self.request("PUT", endpoint, headers, body)

    def patch_body(self, endpoint: str, body: Body, headers: dict[str, str] | None = None):
        return self.request("PATCH", endpoint, headers, body)

    def delete_body(self, endpoint: str, body: Body, headers: dict[str, str] | None = None):
        return self.request("DELETE", endpoint, headers, body)


class EndpointGroup:
    """Base for one API resource group (events, gists, issues, ...).

    Groups only depend on the GitHubBase interface, so any client
    implementation can back them.
    """

    def __init__(self, client: GitHubBase):
        self.client = client

    def _headers_with(self, overrides: dict[str, str]) -> dict[str, str]:
        """Default headers of the client with some entries replaced, e.g. `Accept`."""
        return self.client.default_headers() | overrides

    def _boolean(self, endpoint: str, true_code: int = 204, false_code: int = 404) -> bool:
        """
        Call a check endpoint (`GET /user/starred/{owner}/{repo}` and alike).
        GitHub answers `true_code` for yes and `false_code` for no.
        """
        try:
            resp = self.client.get(endpoint)
        except ApiError as err:
            if err.status_code == false_code:
                return False
            raise
        resp.close()
        return resp.status_code == true_code

    def _empty(
        self,
        method: str,
        endpoint: str,
        body: Body | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Perform a call whose response carries no useful body (e.g. 204 No Content)."""
        resp = self.client.request(method, endpoint, headers, body)
        logger.debug("%s %s -> %s", method, endpoint, resp.status_code)
        resp.close()

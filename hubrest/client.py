"""
This module provides the HTTP client every endpoint group goes through.
"""

import logging
from urllib.parse import urljoin, urlsplit

import requests

from .auth import Auth, apply_auth
from .base import Body, GitHubBase
from .config import (
    ERROR_STATUS_CODES,
    GITHUB_API_URL,
    PERMANENT_REDIRECT_STATUS_CODES,
    REDIRECT_STATUS_CODES,
)
from .exceptions import TransportError, error_from_response
from .utils import read_body, serialize_body

logger = logging.getLogger(__name__)


def _strip_query(url: str) -> str:
    """URL without query string, for logging (the query may hold credentials)."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


def _keep_headers(request: requests.PreparedRequest) -> requests.PreparedRequest:
    """requests auth hook that leaves the request alone.

    Passing it stops requests from filling `Authorization` from ~/.netrc,
    the strategy in `Client.auth` is the only source of credentials.
    """
    return request


class Client(GitHubBase):
    """Blocking GitHub REST client backed by a `requests.Session`.

    One call is one round trip (plus redirects). Attributes may be reassigned
    between calls, e.g. `client.auth = BearerToken(...)`, and are read again on
    the next call. Sharing one Client between threads is not supported.
    """

    def __init__(
        self,
        user_agent: str,
        auth: Auth | None = None,
        base_url: str = GITHUB_API_URL,
        session: requests.Session | None = None,
        timeout: float | tuple[float, float] | None = None,
    ) -> None:
        """
        :param user_agent: Value of the User-Agent header
        :param auth: Authentication strategy, unauthenticated when omitted
        :param base_url: API root, defaults to https://api.github.com
        :param session: Transport to use, a new `requests.Session` when omitted.
            A session created here carries no default headers of its own, so
            the request headers are exactly the resolved ones.
        :param timeout: Passed to requests as is; no timeout when omitted
        """
        super().__init__(user_agent, auth, base_url)
        if session is None:
            session = requests.Session()
            session.headers.clear()
        self.session = session
        self.timeout = timeout
        self.error_status_codes = ERROR_STATUS_CODES

    @classmethod
    def with_base_url(
        cls,
        base_url: str,
        user_agent: str,
        auth: Auth | None = None,
        **kwargs,
    ) -> "Client":
        """Client for an API root other than the default, e.g. GitHub Enterprise."""
        return cls(user_agent, auth, base_url=base_url, **kwargs)

    # Same as utils.read_body
    response_to_string = staticmethod(read_body)

    def _send(
        self,
        method: str,
        url: str,
        headers: dict[str, str],
        data: bytes | None = None,
    ) -> requests.Response:
        try:
            return self.session.request(
                method,
                url,
                headers=headers,
                data=data,
                auth=_keep_headers,
                allow_redirects=False,
                stream=True,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"Error while making a request to GitHub: {type(exc).__name__}: {exc}"
            ) from exc

    def _follow_redirects(
        self, resp: requests.Response, headers: dict[str, str]
    ) -> requests.Response:
        """
        Re-issue a GET to the Location of each redirect until a non-redirect response.
        The headers of the original request (authentication included) are reused.
        """
        hops = 0
        max_hops = self.session.max_redirects
        while resp.status_code in REDIRECT_STATUS_CODES:
            location = resp.headers.get("Location")
            if not location:
                resp.close()
                raise TransportError(
                    f"Redirect {resp.status_code} from {_strip_query(resp.url)} without a Location header"
                )
            hops += 1
            if hops > max_hops:
                resp.close()
                raise TransportError(f"Exceeded {max_hops} redirects")
            target = urljoin(resp.url, location)
            if resp.status_code in PERMANENT_REDIRECT_STATUS_CODES:
                logger.info(
                    "Endpoint %s has moved permanently to %s, consider updating it.",
                    _strip_query(resp.url),
                    _strip_query(target),
                )
            logger.debug("Following %s redirect to %s", resp.status_code, _strip_query(target))
            resp.close()
            resp = self._send("GET", target, headers)
        return resp

    def request(
        self,
        method: str,
        endpoint: str,
        headers: dict[str, str] | None = None,
        body: Body | None = None,
    ) -> requests.Response:
        """
        Unified low-level HTTP request handler for API calls.
        :param method: HTTP method to use (e.g., 'GET', 'POST', 'PATCH', 'PUT', 'DELETE').
        :param endpoint: API endpoint path, e.g. `/repos/{owner}/{repo}/issues?state=open`.
        :param headers: Optional headers. These replace the default headers entirely.
        :param body: Optional body: text, bytes, JSON-able data or a pydantic model.
        :return: The streamed `requests.Response`, body not yet read.
        :raises: `TransportError`, `ApiError`, `ParsingError` or `ResponseIOError`.
        """
        method = method.upper()
        request_headers = dict(headers) if headers is not None else self.default_headers()
        try:
            url = apply_auth(self.auth, request_headers, self._build_url(endpoint))
        except ValueError as exc:
            raise TransportError(f"Invalid request URL for {endpoint}: {exc}") from exc
        data = serialize_body(body)
        logger.debug("%s %s", method, _strip_query(url))

        resp = self._send(method, url, request_headers, data)
        resp = self._follow_redirects(resp, request_headers)

        # For GitHub error status
        if resp.status_code in self.error_status_codes:
            err = error_from_response(resp)
            logger.error(
                "GitHub HTTP error during %s %s: status=%s, %s",
                method,
                _strip_query(url),
                resp.status_code,
                err,
            )
            raise err
        return resp

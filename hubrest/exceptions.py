"""
Exception hierarchy for hubrest

Every failure a call can produce is one of four kinds, so callers can catch
`GitHubException` or one of its direct children and never need to know about
the underlying HTTP library.

GitHubException                 # The single root base exception type
├── TransportError              # Request could not be made or completed (network, bad URL, bad redirect)
├── ApiError                    # GitHub rejected the request with a structured error body
├── ParsingError                # Body is not JSON or does not have the expected shape
└── ResponseIOError             # Reading the response body stream failed
"""

from __future__ import annotations

from pydantic import BaseModel, ValidationError
from requests import Response


class ApiFieldError(BaseModel):
    """One entry of the `errors` list in a GitHub error body."""

    resource: str | None = None
    field: str | None = None
    code: str | None = None
    message: str | None = None


class ApiErrorBody(BaseModel):
    """Shape of the JSON body GitHub sends with a failure status."""

    message: str
    documentation_url: str | None = None
    errors: list[ApiFieldError] = []


class GitHubException(Exception):
    """The base hubrest exception class."""

    pass


class TransportError(GitHubException):
    """Exception class for errors on the transport layer.

    E.g. connection errors, DNS failures, timeouts, malformed URLs or
    redirects that cannot be followed. The original exception, if any, is
    chained as `__cause__`.
    """

    def __init__(self, msg: str) -> None:
        self.msg = msg
        super().__init__(msg)


class ApiError(GitHubException):
    """GitHub answered with an error status and a structured error body.

    Keeps the fields of the body so callers can explain the failure, down to
    the offending resource/field pair.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        documentation_url: str | None = None,
        errors: list[ApiFieldError] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.documentation_url = documentation_url
        self.errors = errors or []
        super().__init__(status_code, message)

    def __str__(self) -> str:
        parts = [f"{self.status_code} {self.message}"]
        for err in self.errors:
            parts.append(f"{err.resource}.{err.field}: {err.code}")
        if self.documentation_url:
            parts.append(f"see {self.documentation_url}")
        return " | ".join(parts)


class ParsingError(GitHubException):
    """The body could not be decoded into the expected type."""

    def __init__(self, msg: str, body: str | None = None) -> None:
        self.msg = msg
        self.body = body
        super().__init__(msg)


class ResponseIOError(GitHubException):
    """Failure while reading the response body stream."""

    pass


def error_from_body(status_code: int, body: str) -> ApiError | ParsingError:
    """Return an initialized exception for an error status and its body text."""
    try:
        payload = ApiErrorBody.model_validate_json(body)
    except ValidationError as exc:
        return ParsingError(
            f"Unable to parse GitHub error body for status {status_code}: {exc}",
            body=body,
        )
    return ApiError(
        status_code,
        payload.message,
        documentation_url=payload.documentation_url,
        errors=payload.errors,
    )


def error_from_response(response: Response) -> GitHubException:
    """Return an initialized exception for the given error-status response.

    The body is read here; a failure while reading it is returned as a
    `ResponseIOError`.
    """
    try:
        body = response.text
    except OSError as exc:
        return ResponseIOError(f"Error while reading error body: {exc!r}")
    return error_from_body(response.status_code, body)

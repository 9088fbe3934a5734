#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Helpers shared by the endpoint groups: body (de)serialization, query strings
and the generic "GET and decode" endpoint call.
"""

import json
import logging
from enum import Enum
from functools import lru_cache
from typing import Any
from urllib.parse import urlencode

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .base import Body, GitHubBase
from .exceptions import ParsingError, ResponseIOError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(model) -> TypeAdapter:
    return TypeAdapter(model)


def read_body(response: requests.Response) -> str:
    """
    Read the whole (streamed) response body as text.
    :raises ResponseIOError: if the body stream fails while reading
    """
    try:
        return response.text
    except OSError as exc:
        # requests.RequestException is an OSError
        raise ResponseIOError(f"Error while reading response body: {exc!r}") from exc


def decode_body(text: str, model: Any) -> Any:
    """
    Validate JSON text into the requested type.
    :param model: Anything pydantic.TypeAdapter accepts, e.g. `Meta`, `list[Event]`, `dict[str, str]`
    :raises ParsingError: on invalid JSON or a shape mismatch
    """
    try:
        return _adapter(model).validate_json(text)
    except ValidationError as exc:
        logger.debug("Unable to decode body into %s: %s", model, exc)
        raise ParsingError(f"Unable to decode response into {model}: {exc}", body=text) from exc


def parse_response(response: requests.Response, model: Any) -> Any:
    """Read a response fully and decode its JSON body into `model`."""
    return decode_body(read_body(response), model)


def request_endpoint(
    client: GitHubBase,
    endpoint: str,
    model: Any,
    headers: dict[str, str] | None = None,
) -> Any:
    """
    GET an endpoint and decode its JSON body.
    Every call is a fresh round trip, nothing is cached between calls.
    :param client: Client performing the request
    :param endpoint: Relative endpoint e.g. `/meta`, may carry a query string
    :param model: Target type of the decoded body
    :param headers: Replaces the default headers when given
    :raises TransportError, ApiError, ParsingError, ResponseIOError:
    """
    response = client.get(endpoint, headers)
    return parse_response(response, model)


def serialize_body(body: Body | None) -> bytes | None:
    """
    Turn a request body into the UTF-8 bytes that go on the wire.
    Models are dumped by alias without unset optional fields; dicts and lists as JSON.
    :raises TypeError: if a dict or list holds values JSON cannot encode
    """
    match body:
        case None | bytes():
            return body
        case str():
            return body.encode("utf-8")
        case BaseModel():
            return body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
        case _:
            return json.dumps(body).encode("utf-8")


def _query_value(value: Any) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case Enum():
            return str(value.value)
        case list() | tuple():
            return ",".join(_query_value(v) for v in value)
        case _:
            return str(value)


def build_endpoint(path: str, params: dict[str, Any] | None = None) -> str:
    """
    Append query parameters to a relative endpoint.
    `None` values are dropped, booleans become `true`/`false`, enums their value
    and lists are joined with commas (e.g. issue labels).
    """
    if not params:
        return path
    pairs = [(key, _query_value(value)) for key, value in params.items() if value is not None]
    if not pairs:
        return path
    return f"{path}?{urlencode(pairs)}"

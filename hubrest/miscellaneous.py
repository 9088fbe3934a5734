#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Miscellaneous endpoints: emojis, gitignore templates, markdown, meta,
rate limit and zen.
"""

import logging
from enum import StrEnum

from .base import EndpointGroup
from .config import MediaTypes
from .models import GitHubModel
from .utils import read_body, request_endpoint

logger = logging.getLogger(__name__)


class GitignoreTemplate(GitHubModel):
    name: str
    source: str


class MarkdownMode(StrEnum):
    # Plain Markdown, rendered like README files
    MARKDOWN = "markdown"
    # GitHub Flavored Markdown, rendered like issues and comments
    GFM = "gfm"


class MarkdownRequest(GitHubModel):
    """Body of POST /markdown"""

    text: str
    mode: MarkdownMode | None = None
    # Repository context e.g. "octocat/Hello-World", only used in gfm mode
    context: str | None = None


class MarkdownRawMime(StrEnum):
    """Content-Type of the document sent to POST /markdown/raw"""

    TEXT_PLAIN = MediaTypes.TEXT_PLAIN.value
    TEXT_X_MARKDOWN = MediaTypes.TEXT_MARKDOWN.value


class Meta(GitHubModel):
    verifiable_password_authentication: bool | None = None
    github_services_sha: str | None = None
    hooks: list[str] = []
    git: list[str] = []
    pages: list[str] = []
    importer: list[str] = []
    api: list[str] = []
    web: list[str] = []
    actions: list[str] = []


class RateLimitElement(GitHubModel):
    limit: int
    remaining: int
    reset: int
    used: int | None = None


class RateLimitResources(GitHubModel):
    core: RateLimitElement
    search: RateLimitElement
    graphql: RateLimitElement | None = None


class RateLimit(GitHubModel):
    resources: RateLimitResources
    # Deprecated by GitHub, mirrors resources.core
    rate: RateLimitElement | None = None


class MiscellaneousAPI(EndpointGroup):
    # Emojis
    def get_emojis(self) -> dict[str, str]:
        """
        Get the map of emoji names to image URLs.
        GitHub Docs:
        https://docs.github.com/en/rest/emojis/emojis#get-emojis
        """
        return request_endpoint(self.client, "/emojis", dict[str, str])

    # Gitignore
    def list_gitignore_templates(self) -> list[str]:
        """
        List the names of all gitignore templates.
        GitHub Docs:
        https://docs.github.com/en/rest/gitignore/gitignore#get-all-gitignore-templates
        """
        return request_endpoint(self.client, "/gitignore/templates", list[str])

    def get_gitignore_template(self, name: str) -> GitignoreTemplate:
        """
        Get a single gitignore template.
        GitHub Docs:
        https://docs.github.com/en/rest/gitignore/gitignore#get-a-gitignore-template
        """
        return request_endpoint(self.client, f"/gitignore/templates/{name}", GitignoreTemplate)

    def get_gitignore_template_raw(self, name: str) -> str:
        """Get the raw source of a gitignore template."""
        headers = self._headers_with({"Accept": MediaTypes.RAW.value})
        resp = self.client.get(f"/gitignore/templates/{name}", headers)
        return read_body(resp)

    # Markdown
    def render_markdown(self, request: MarkdownRequest) -> str:
        """
        Render a markdown document and return the HTML.
        GitHub Docs:
        https://docs.github.com/en/rest/markdown/markdown#render-a-markdown-document
        """
        headers = self._headers_with({"Accept": MediaTypes.TEXT_HTML.value})
        resp = self.client.post_body("/markdown", request, headers)
        html = read_body(resp)
        logger.debug("Rendered markdown into %d characters of HTML", len(html))
        return html

    def render_markdown_raw(
        self, text: str, mime: MarkdownRawMime = MarkdownRawMime.TEXT_PLAIN
    ) -> str:
        """
        Render a markdown document in raw mode (plain text body, no options).
        GitHub Docs:
        https://docs.github.com/en/rest/markdown/markdown#render-a-markdown-document-in-raw-mode
        """
        headers = self._headers_with(
            {"Accept": MediaTypes.TEXT_HTML.value, "Content-Type": mime.value}
        )
        resp = self.client.post_body("/markdown/raw", text, headers)
        return read_body(resp)

    # Meta
    def get_meta(self) -> Meta:
        """
        Get GitHub meta information (IP ranges of hooks, git, pages, ...).
        GitHub Docs:
        https://docs.github.com/en/rest/meta/meta#get-apiname-meta-information
        """
        return request_endpoint(self.client, "/meta", Meta)

    def get_zen(self) -> str:
        """Get a random sentence from the Zen of GitHub."""
        resp = self.client.get("/zen")
        return read_body(resp)

    # Rate limit
    def get_rate_limit(self) -> RateLimit:
        """
        Get the rate limit status for the authenticated user (or the caller IP).
        GitHub Docs:
        https://docs.github.com/en/rest/rate-limit/rate-limit#get-rate-limit-status-for-the-authenticated-user
        """
        return request_endpoint(self.client, "/rate_limit", RateLimit)

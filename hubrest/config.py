#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Configuration and global constants for hubrest
"""

import os
from enum import StrEnum

# Application information
APP_NAME = "hubrest"
APP_VERSION = "0.1.0"

# GitHub API configuration
# GitHub API base, override with Client.with_base_url for GitHub Enterprise
GITHUB_API_URL = "https://api.github.com"
DEFAULT_USER_AGENT = f"{APP_NAME}/{APP_VERSION}"

# Status codes the client answers with an ApiError
ERROR_STATUS_CODES = frozenset({400, 404, 422})
# Status codes the client follows with a GET to the Location header
REDIRECT_STATUS_CODES = frozenset({301, 307, 308})
PERMANENT_REDIRECT_STATUS_CODES = frozenset({301, 308})

# Default test repository to run the live UTs against
GITHUB_REPO_OWNER_TEST = os.getenv("GITHUB_REPO_OWNER_TEST", "octocat")
GITHUB_REPO_NAME_TEST = os.getenv("GITHUB_REPO_NAME_TEST", "Hello-World")

# Token from environment variable
GITHUB_TOKEN_DEFAULT = os.getenv("GITHUB_TOKEN") or os.getenv("GITHUB_CLI_API_TOKEN")


# Supported Media Types for GitHub API
class MediaTypes(StrEnum):
    """Media types sent in the Accept / Content-Type headers"""

    DEFAULT = "application/vnd.github.v3+json"
    RAW = "application/vnd.github.v3.raw"
    STAR = "application/vnd.github.v3.star+json"
    HTML = "application/vnd.github.v3.html"
    TEXT_HTML = "text/html"
    TEXT_PLAIN = "text/plain"
    TEXT_MARKDOWN = "text/x-markdown"


def get_github_token_default() -> str | None:
    """Get GitHub token from environment variables."""
    return GITHUB_TOKEN_DEFAULT

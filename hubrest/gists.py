#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Gists and gist comments endpoints.
"""

import logging

from pydantic import Field

from .base import EndpointGroup
from .models import Comment, GitHubModel, User
from .utils import build_endpoint, parse_response, request_endpoint

logger = logging.getLogger(__name__)


class GistFile(GitHubModel):
    filename: str | None = None
    size: int
    raw_url: str
    file_type: str | None = Field(default=None, alias="type")
    truncated: bool | None = None
    language: str | None = None
    content: str | None = None


class ChangeStatus(GitHubModel):
    deletions: int | None = None
    additions: int | None = None
    total: int | None = None


class GistCommit(GitHubModel):
    url: str
    version: str
    user: User | None = None
    change_status: ChangeStatus
    committed_at: str


class GistFork(GitHubModel):
    id: str
    url: str
    user: User | None = None
    created_at: str
    updated_at: str


class Gist(GitHubModel):
    id: str
    url: str
    forks_url: str
    commits_url: str
    description: str | None = None
    public: bool
    owner: User | None = None
    files: dict[str, GistFile]
    truncated: bool | None = None
    comments: int
    comments_url: str
    html_url: str
    git_pull_url: str
    git_push_url: str
    created_at: str
    updated_at: str
    forks: list[GistFork] | None = None
    history: list[GistCommit] | None = None


class GistFileContents(GitHubModel):
    """One file of a gist creation or edit; `filename` renames the file on edit."""

    content: str
    filename: str | None = None


class GistParam(GitHubModel):
    """Body of gist creation and editing"""

    description: str | None = None
    public: bool | None = None
    files: dict[str, GistFileContents]


class GistsAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/gists/gists
    """

    def list_user_gists(self, username: str, since: str | None = None) -> list[Gist]:
        """
        List public gists of a user.
        :param since: ISO 8601 timestamp, only gists updated after it
        """
        url = build_endpoint(f"/users/{username}/gists", {"since": since})
        return request_endpoint(self.client, url, list[Gist])

    def list_gists(self, since: str | None = None) -> list[Gist]:
        """List the authenticated user's gists, or public gists when unauthenticated."""
        url = build_endpoint("/gists", {"since": since})
        return request_endpoint(self.client, url, list[Gist])

    def list_public_gists(self, since: str | None = None) -> list[Gist]:
        url = build_endpoint("/gists/public", {"since": since})
        return request_endpoint(self.client, url, list[Gist])

    def list_starred_gists(self, since: str | None = None) -> list[Gist]:
        url = build_endpoint("/gists/starred", {"since": since})
        return request_endpoint(self.client, url, list[Gist])

    def get_gist(self, gist_id: str) -> Gist:
        return request_endpoint(self.client, f"/gists/{gist_id}", Gist)

    def get_gist_revision(self, gist_id: str, sha: str) -> Gist:
        return request_endpoint(self.client, f"/gists/{gist_id}/{sha}", Gist)

    def create_gist(self, gist: GistParam) -> Gist:
        """
        Create a gist.
        GitHub Docs:
        https://docs.github.com/en/rest/gists/gists#create-a-gist
        """
        resp = self.client.post_body("/gists", gist)
        created = parse_response(resp, Gist)
        logger.info("Created gist %s with %d file(s)", created.id, len(created.files))
        return created

    def edit_gist(self, gist_id: str, gist: GistParam) -> Gist:
        resp = self.client.patch_body(f"/gists/{gist_id}", gist)
        return parse_response(resp, Gist)

    def list_gist_commits(self, gist_id: str) -> list[GistCommit]:
        return request_endpoint(self.client, f"/gists/{gist_id}/commits", list[GistCommit])

    def star_gist(self, gist_id: str) -> None:
        self._empty("PUT", f"/gists/{gist_id}/star")

    def unstar_gist(self, gist_id: str) -> None:
        self._empty("DELETE", f"/gists/{gist_id}/star")

    def is_gist_starred(self, gist_id: str) -> bool:
        return self._boolean(f"/gists/{gist_id}/star")

    def fork_gist(self, gist_id: str) -> Gist:
        """Fork a gist, returns the new gist."""
        resp = self.client.post(f"/gists/{gist_id}/forks")
        return parse_response(resp, Gist)

    def list_gist_forks(self, gist_id: str) -> list[GistFork]:
        return request_endpoint(self.client, f"/gists/{gist_id}/forks", list[GistFork])

    def delete_gist(self, gist_id: str) -> None:
        self._empty("DELETE", f"/gists/{gist_id}")

    ## Comments
    def list_comments(self, gist_id: str) -> list[Comment]:
        """
        GitHub Docs:
        https://docs.github.com/en/rest/gists/comments#list-gist-comments
        """
        return request_endpoint(self.client, f"/gists/{gist_id}/comments", list[Comment])

    def get_comment(self, gist_id: str, comment_id: int) -> Comment:
        return request_endpoint(
            self.client, f"/gists/{gist_id}/comments/{comment_id}", Comment
        )

    def create_comment(self, gist_id: str, body: str) -> Comment:
        resp = self.client.post_body(f"/gists/{gist_id}/comments", {"body": body})
        return parse_response(resp, Comment)

    def edit_comment(self, gist_id: str, comment_id: int, body: str) -> Comment:
        resp = self.client.patch_body(
            f"/gists/{gist_id}/comments/{comment_id}", {"body": body}
        )
        return parse_response(resp, Comment)

    def delete_comment(self, gist_id: str, comment_id: int) -> None:
        self._empty("DELETE", f"/gists/{gist_id}/comments/{comment_id}")

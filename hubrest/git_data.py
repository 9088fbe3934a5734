#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Git database endpoints: blobs, commits, references, tags and trees.
"""

import logging
from enum import StrEnum

from pydantic import Field

from .base import EndpointGroup
from .models import GitHubModel
from .utils import build_endpoint, parse_response, request_endpoint

logger = logging.getLogger(__name__)


# Blobs
class BlobEncoding(StrEnum):
    BASE64 = "base64"
    UTF8 = "utf-8"


class Blob(GitHubModel):
    content: str
    encoding: str
    url: str
    sha: str
    size: int | None = None


class BlobCreated(GitHubModel):
    url: str
    sha: str


# Commits
class CommitUser(GitHubModel):
    """Author or committer; `date` is an ISO 8601 timestamp"""

    name: str
    email: str
    date: str | None = None


class GitObjectRef(GitHubModel):
    """SHA/URL pair pointing at a tree or a parent commit"""

    sha: str
    url: str | None = None


class GitCommit(GitHubModel):
    sha: str
    url: str
    author: CommitUser
    committer: CommitUser
    message: str
    tree: GitObjectRef
    parents: list[GitObjectRef]


class CommitParam(GitHubModel):
    """Body of POST /repos/{owner}/{repo}/git/commits"""

    message: str
    # SHA of the tree object this commit points to
    tree: str
    # SHAs of the parent commits
    parents: list[str]
    author: CommitUser | None = None
    committer: CommitUser | None = None


# References
class GitObject(GitHubModel):
    object_type: str = Field(alias="type")
    sha: str
    url: str


class Reference(GitHubModel):
    ref: str
    url: str
    object: GitObject


# Tags
class Tagger(GitHubModel):
    name: str
    email: str
    date: str


class Tag(GitHubModel):
    tag: str
    sha: str
    url: str
    message: str
    tagger: Tagger
    object: GitObject


class TagParam(GitHubModel):
    """Body of POST /repos/{owner}/{repo}/git/tags"""

    tag: str
    message: str
    # SHA of the object being tagged
    object: str
    # commit, tree or blob
    object_type: str = Field(alias="type")
    tagger: Tagger | None = None


# Trees
class TreeEntry(GitHubModel):
    path: str
    mode: str
    # blob, tree or commit
    entry_type: str = Field(alias="type")
    sha: str | None = None
    size: int | None = None
    url: str | None = None
    # Only used when creating a tree, instead of sha
    content: str | None = None


class Tree(GitHubModel):
    sha: str
    url: str
    tree: list[TreeEntry]
    truncated: bool


class TreeParam(GitHubModel):
    """Body of POST /repos/{owner}/{repo}/git/trees"""

    tree: list[TreeEntry]
    base_tree: str | None = None


class GitDataAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/git
    """

    ## Blobs
    def get_blob(self, owner: str, repo: str, sha: str) -> Blob:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/git/blobs/{sha}", Blob)

    def create_blob(
        self,
        owner: str,
        repo: str,
        content: str,
        encoding: BlobEncoding = BlobEncoding.UTF8,
    ) -> BlobCreated:
        resp = self.client.post_body(
            f"/repos/{owner}/{repo}/git/blobs",
            {"content": content, "encoding": encoding.value},
        )
        return parse_response(resp, BlobCreated)

    ## Commits
    def get_commit(self, owner: str, repo: str, sha: str) -> GitCommit:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/git/commits/{sha}", GitCommit
        )

    def create_commit(self, owner: str, repo: str, commit: CommitParam) -> GitCommit:
        resp = self.client.post_body(f"/repos/{owner}/{repo}/git/commits", commit)
        return parse_response(resp, GitCommit)

    ## References
    def get_reference(self, owner: str, repo: str, ref: str) -> Reference:
        """
        Get a single reference.
        :param ref: Reference without the `refs/` prefix e.g. `heads/main`, `tags/v1.0`
        """
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/git/refs/{ref}", Reference
        )

    def list_references(
        self, owner: str, repo: str, namespace: str | None = None
    ) -> list[Reference]:
        """
        List references, optionally only one namespace e.g. `heads` or `tags`.
        GitHub Docs:
        https://docs.github.com/en/rest/git/refs#list-matching-references
        """
        path = f"/repos/{owner}/{repo}/git/refs"
        if namespace:
            path = f"{path}/{namespace}"
        return request_endpoint(self.client, path, list[Reference])

    def create_reference(self, owner: str, repo: str, ref: str, sha: str) -> Reference:
        """
        Create a reference.
        :param ref: Fully qualified reference e.g. `refs/heads/feature`
        """
        resp = self.client.post_body(
            f"/repos/{owner}/{repo}/git/refs", {"ref": ref, "sha": sha}
        )
        return parse_response(resp, Reference)

    def update_reference(
        self, owner: str, repo: str, ref: str, sha: str, force: bool | None = None
    ) -> Reference:
        body: dict[str, object] = {"sha": sha}
        if force is not None:
            body["force"] = force
        resp = self.client.patch_body(f"/repos/{owner}/{repo}/git/refs/{ref}", body)
        return parse_response(resp, Reference)

    def delete_reference(self, owner: str, repo: str, ref: str) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/git/refs/{ref}")

    ## Tags
    def get_tag(self, owner: str, repo: str, sha: str) -> Tag:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/git/tags/{sha}", Tag)

    def create_tag(self, owner: str, repo: str, tag: TagParam) -> Tag:
        """Create an annotated tag object (the refs/tags reference is created separately)."""
        resp = self.client.post_body(f"/repos/{owner}/{repo}/git/tags", tag)
        return parse_response(resp, Tag)

    ## Trees
    def get_tree(self, owner: str, repo: str, sha: str, recursive: bool = False) -> Tree:
        url = build_endpoint(
            f"/repos/{owner}/{repo}/git/trees/{sha}",
            {"recursive": 1 if recursive else None},
        )
        tree = request_endpoint(self.client, url, Tree)
        if tree.truncated:
            logger.warning(
                "⚠️ Tree %s of %s/%s is truncated by GitHub, fetch sub-trees individually",
                sha,
                owner,
                repo,
            )
        return tree

    def create_tree(self, owner: str, repo: str, tree: TreeParam) -> Tree:
        resp = self.client.post_body(f"/repos/{owner}/{repo}/git/trees", tree)
        return parse_response(resp, Tree)

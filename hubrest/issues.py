#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Issues endpoints: issues, assignees, comments, events, labels and milestones.
"""

import logging
from enum import StrEnum

from .base import EndpointGroup
from .models import Comment, Direction, GitHubModel, Repository, User
from .utils import build_endpoint, parse_response, request_endpoint

logger = logging.getLogger(__name__)


# --------------------------------------------------------
# Query parameters
# --------------------------------------------------------
class IssueFilter(StrEnum):
    """Which issues to return from the cross-repository listings"""

    ASSIGNED = "assigned"
    CREATED = "created"
    MENTIONED = "mentioned"
    SUBSCRIBED = "subscribed"
    ALL = "all"


class IssueState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class IssueSort(StrEnum):
    CREATED = "created"
    UPDATED = "updated"
    COMMENTS = "comments"


class MilestoneSort(StrEnum):
    DUE_ON = "due_on"
    COMPLETENESS = "completeness"


class CommentSort(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


# Milestone / assignee filters of the repository issue listing also take "none" and "*"
NONE = "none"
ANY = "*"


# --------------------------------------------------------
# Models
# --------------------------------------------------------
class Label(GitHubModel):
    id: int
    url: str
    name: str
    color: str
    description: str | None = None
    default: bool


class Milestone(GitHubModel):
    url: str
    html_url: str
    labels_url: str
    id: int
    number: int
    state: str
    title: str
    description: str | None = None
    creator: User | None = None
    open_issues: int
    closed_issues: int
    created_at: str
    updated_at: str
    closed_at: str | None = None
    due_on: str | None = None


class PullRequestLinks(GitHubModel):
    url: str
    html_url: str
    diff_url: str
    patch_url: str


class Issue(GitHubModel):
    id: int
    url: str
    repository_url: str
    labels_url: str
    comments_url: str
    events_url: str
    html_url: str
    number: int
    state: str
    title: str
    body: str | None = None
    user: User
    labels: list[Label] = []
    assignee: User | None = None
    assignees: list[User] | None = None
    milestone: Milestone | None = None
    locked: bool
    comments: int
    pull_request: PullRequestLinks | None = None
    closed_at: str | None = None
    created_at: str
    updated_at: str
    repository: Repository | None = None
    closed_by: User | None = None


class IssueCreate(GitHubModel):
    """Body of issue creation.

    Assignees, milestone and labels are silently dropped by GitHub unless the
    caller has push access.
    """

    title: str
    body: str | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class IssueEdit(GitHubModel):
    """Body of issue editing; unset fields are left unchanged"""

    title: str | None = None
    body: str | None = None
    assignees: list[str] | None = None
    state: IssueState | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class IssueEvent(GitHubModel):
    id: int
    url: str
    actor: User | None = None
    event: str
    commit_id: str | None = None
    commit_url: str | None = None
    created_at: str
    # Only set by the repository-wide listing and the single event endpoint
    issue: Issue | None = None


class MilestoneParam(GitHubModel):
    """Body of milestone creation and update"""

    title: str | None = None
    state: IssueState | None = None
    description: str | None = None
    # ISO 8601 timestamp
    due_on: str | None = None


# --------------------------------------------------------
# Endpoint group
# --------------------------------------------------------
class IssuesAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/issues
    """

    def list_issues(
        self,
        org: str | None = None,
        user_only: bool = False,
        filter: IssueFilter | None = None,
        state: IssueState | None = None,
        labels: list[str] | None = None,
        sort: IssueSort | None = None,
        direction: Direction | None = None,
        since: str | None = None,
    ) -> list[Issue]:
        """
        List issues assigned to the authenticated user across repositories.
        `GET /issues` by default, `GET /user/issues` (owned and member repositories only)
        with `user_only`, `GET /orgs/{org}/issues` when `org` is given.
        """
        if org is not None:
            path = f"/orgs/{org}/issues"
        elif user_only:
            path = "/user/issues"
        else:
            path = "/issues"
        params = {
            "filter": filter,
            "state": state,
            "labels": labels or None,
            "sort": sort,
            "direction": direction,
            "since": since,
        }
        return request_endpoint(self.client, build_endpoint(path, params), list[Issue])

    def list_repo_issues(
        self,
        owner: str,
        repo: str,
        milestone: int | str | None = None,
        state: IssueState | None = None,
        assignee: str | None = None,
        creator: str | None = None,
        mentioned: str | None = None,
        labels: list[str] | None = None,
        sort: IssueSort | None = None,
        direction: Direction | None = None,
        since: str | None = None,
    ) -> list[Issue]:
        """
        List issues of a repository (pull requests included, as GitHub does).
        :param milestone: Milestone number, `ANY` ("*") or `NONE` ("none")
        :param assignee: Login, `ANY` ("*") or `NONE` ("none")
        :param since: ISO 8601 timestamp, only issues updated after it
        GitHub Docs:
        https://docs.github.com/en/rest/issues/issues#list-repository-issues
        """
        params = {
            "milestone": milestone,
            "state": state,
            "assignee": assignee,
            "creator": creator,
            "mentioned": mentioned,
            "labels": labels or None,
            "sort": sort,
            "direction": direction,
            "since": since,
        }
        url = build_endpoint(f"/repos/{owner}/{repo}/issues", params)
        return request_endpoint(self.client, url, list[Issue])

    def get_issue(self, owner: str, repo: str, number: int) -> Issue:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/issues/{number}", Issue)

    def create_issue(self, owner: str, repo: str, issue: IssueCreate) -> Issue:
        resp = self.client.post_body(f"/repos/{owner}/{repo}/issues", issue)
        created = parse_response(resp, Issue)
        logger.info("Created issue #%s in %s/%s", created.number, owner, repo)
        return created

    def edit_issue(self, owner: str, repo: str, number: int, issue: IssueEdit) -> Issue:
        resp = self.client.patch_body(f"/repos/{owner}/{repo}/issues/{number}", issue)
        return parse_response(resp, Issue)

    def lock_issue(self, owner: str, repo: str, number: int) -> None:
        self._empty("PUT", f"/repos/{owner}/{repo}/issues/{number}/lock")

    def unlock_issue(self, owner: str, repo: str, number: int) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/issues/{number}/lock")

    ## Assignees
    def list_assignees(self, owner: str, repo: str) -> list[User]:
        """List users that issues of the repository can be assigned to."""
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/assignees", list[User])

    def is_assignee(self, owner: str, repo: str, assignee: str) -> bool:
        return self._boolean(f"/repos/{owner}/{repo}/assignees/{assignee}")

    def add_assignees(
        self, owner: str, repo: str, number: int, assignees: list[str]
    ) -> Issue:
        resp = self.client.post_body(
            f"/repos/{owner}/{repo}/issues/{number}/assignees", {"assignees": assignees}
        )
        return parse_response(resp, Issue)

    def remove_assignees(
        self, owner: str, repo: str, number: int, assignees: list[str]
    ) -> Issue:
        resp = self.client.delete_body(
            f"/repos/{owner}/{repo}/issues/{number}/assignees", {"assignees": assignees}
        )
        return parse_response(resp, Issue)

    ## Comments
    def list_issue_comments(
        self, owner: str, repo: str, number: int, since: str | None = None
    ) -> list[Comment]:
        url = build_endpoint(
            f"/repos/{owner}/{repo}/issues/{number}/comments", {"since": since}
        )
        return request_endpoint(self.client, url, list[Comment])

    def list_repo_comments(
        self,
        owner: str,
        repo: str,
        sort: CommentSort | None = None,
        direction: Direction | None = None,
        since: str | None = None,
    ) -> list[Comment]:
        """
        List issue comments across a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/issues/comments#list-issue-comments-for-a-repository
        """
        url = build_endpoint(
            f"/repos/{owner}/{repo}/issues/comments",
            {"sort": sort, "direction": direction, "since": since},
        )
        return request_endpoint(self.client, url, list[Comment])

    def get_comment(self, owner: str, repo: str, comment_id: int) -> Comment:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/issues/comments/{comment_id}", Comment
        )

    def create_comment(self, owner: str, repo: str, number: int, body: str) -> Comment:
        resp = self.client.post_body(
            f"/repos/{owner}/{repo}/issues/{number}/comments", {"body": body}
        )
        return parse_response(resp, Comment)

    def edit_comment(self, owner: str, repo: str, comment_id: int, body: str) -> Comment:
        resp = self.client.patch_body(
            f"/repos/{owner}/{repo}/issues/comments/{comment_id}", {"body": body}
        )
        return parse_response(resp, Comment)

    def delete_comment(self, owner: str, repo: str, comment_id: int) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

    ## Events
    def list_issue_events(self, owner: str, repo: str, number: int) -> list[IssueEvent]:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/issues/{number}/events", list[IssueEvent]
        )

    def list_repo_issue_events(self, owner: str, repo: str) -> list[IssueEvent]:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/issues/events", list[IssueEvent]
        )

    def get_issue_event(self, owner: str, repo: str, event_id: int) -> IssueEvent:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/issues/events/{event_id}", IssueEvent
        )

    ## Labels
    def list_labels(self, owner: str, repo: str) -> list[Label]:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/labels", list[Label])

    def get_label(self, owner: str, repo: str, name: str) -> Label:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/labels/{name}", Label)

    def create_label(
        self,
        owner: str,
        repo: str,
        name: str,
        color: str,
        description: str | None = None,
    ) -> Label:
        """
        Create a label.
        :param color: Hexadecimal color code without the leading `#`
        """
        body = {"name": name, "color": color}
        if description is not None:
            body["description"] = description
        resp = self.client.post_body(f"/repos/{owner}/{repo}/labels", body)
        return parse_response(resp, Label)

    def update_label(
        self,
        owner: str,
        repo: str,
        name: str,
        new_name: str | None = None,
        color: str | None = None,
        description: str | None = None,
    ) -> Label:
        body = {"new_name": new_name, "color": color, "description": description}
        resp = self.client.patch_body(
            f"/repos/{owner}/{repo}/labels/{name}",
            {key: value for key, value in body.items() if value is not None},
        )
        return parse_response(resp, Label)

    def delete_label(self, owner: str, repo: str, name: str) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/labels/{name}")

    def list_issue_labels(self, owner: str, repo: str, number: int) -> list[Label]:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/issues/{number}/labels", list[Label]
        )

    def add_issue_labels(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> list[Label]:
        resp = self.client.post_body(
            f"/repos/{owner}/{repo}/issues/{number}/labels", {"labels": labels}
        )
        return parse_response(resp, list[Label])

    def remove_issue_label(
        self, owner: str, repo: str, number: int, name: str
    ) -> list[Label]:
        """Remove one label from an issue, returns the labels left."""
        resp = self.client.delete(f"/repos/{owner}/{repo}/issues/{number}/labels/{name}")
        return parse_response(resp, list[Label])

    def replace_issue_labels(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> list[Label]:
        resp = self.client.put_body(
            f"/repos/{owner}/{repo}/issues/{number}/labels", {"labels": labels}
        )
        return parse_response(resp, list[Label])

    def remove_all_issue_labels(self, owner: str, repo: str, number: int) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/issues/{number}/labels")

    def list_milestone_labels(self, owner: str, repo: str, number: int) -> list[Label]:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/milestones/{number}/labels", list[Label]
        )

    ## Milestones
    def list_milestones(
        self,
        owner: str,
        repo: str,
        state: IssueState | None = None,
        sort: MilestoneSort | None = None,
        direction: Direction | None = None,
    ) -> list[Milestone]:
        url = build_endpoint(
            f"/repos/{owner}/{repo}/milestones",
            {"state": state, "sort": sort, "direction": direction},
        )
        return request_endpoint(self.client, url, list[Milestone])

    def get_milestone(self, owner: str, repo: str, number: int) -> Milestone:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/milestones/{number}", Milestone
        )

    def create_milestone(
        self, owner: str, repo: str, milestone: MilestoneParam
    ) -> Milestone:
        if milestone.title is None:
            raise ValueError("A title is required to create a milestone")
        resp = self.client.post_body(f"/repos/{owner}/{repo}/milestones", milestone)
        return parse_response(resp, Milestone)

    def update_milestone(
        self, owner: str, repo: str, number: int, milestone: MilestoneParam
    ) -> Milestone:
        resp = self.client.patch_body(
            f"/repos/{owner}/{repo}/milestones/{number}", milestone
        )
        return parse_response(resp, Milestone)

    def delete_milestone(self, owner: str, repo: str, number: int) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/milestones/{number}")

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Activity endpoints: events, feeds, notifications, starring and watching.

Issue events (`/repos/{owner}/{repo}/issues/events`) live in issues.py.
"""

import logging
from enum import StrEnum
from typing import Any

from pydantic import Field

from .base import EndpointGroup
from .config import MediaTypes
from .models import Direction, GitHubModel, Repository, Subscription, User
from .utils import build_endpoint, parse_response, request_endpoint

logger = logging.getLogger(__name__)


# --------------------------------------------------------
# Models
# --------------------------------------------------------
class EventOrg(GitHubModel):
    id: int
    login: str
    gravatar_id: str | None = None
    avatar_url: str
    url: str


class EventRepo(GitHubModel):
    """Events carry a short repository record (id, name, url)"""

    id: int
    name: str
    url: str


class Event(GitHubModel):
    id: str
    event_type: str = Field(alias="type")
    public: bool
    payload: dict[str, Any]
    repo: EventRepo
    actor: User
    org: EventOrg | None = None
    created_at: str


class FeedLink(GitHubModel):
    href: str
    mime_type: str = Field(alias="type")


class FeedLinks(GitHubModel):
    timeline: FeedLink
    user: FeedLink
    current_user_public: FeedLink | None = None
    current_user: FeedLink | None = None
    current_user_actor: FeedLink | None = None
    current_user_organization: FeedLink | None = None
    current_user_organizations: list[FeedLink] | None = None


class Feeds(GitHubModel):
    timeline_url: str
    user_url: str
    current_user_public_url: str | None = None
    current_user_url: str | None = None
    current_user_actor_url: str | None = None
    current_user_organization_url: str | None = None
    current_user_organization_urls: list[str] | None = None
    links: FeedLinks = Field(alias="_links")


class NotificationSubject(GitHubModel):
    title: str
    url: str | None = None
    latest_comment_url: str | None = None
    subject_type: str = Field(alias="type")


class Notification(GitHubModel):
    id: str
    repository: Repository
    subject: NotificationSubject
    reason: str | None = None
    unread: bool
    updated_at: str
    last_read_at: str | None = None
    url: str


class Stargazer(GitHubModel):
    """Stargazer with the star+json media type"""

    starred_at: str
    user: User


class StarredRepository(GitHubModel):
    """Starred repository with the star+json media type"""

    starred_at: str
    repo: Repository


class StarSort(StrEnum):
    # When the repository was starred
    CREATED = "created"
    # When the repository was last pushed to
    UPDATED = "updated"


# --------------------------------------------------------
# Endpoint groups
# --------------------------------------------------------
class EventsAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/activity/events
    """

    def list_public_events(self) -> list[Event]:
        return request_endpoint(self.client, "/events", list[Event])

    def list_repo_events(self, owner: str, repo: str) -> list[Event]:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/events", list[Event])

    def list_network_events(self, owner: str, repo: str) -> list[Event]:
        """List public events for a network of repositories."""
        return request_endpoint(self.client, f"/networks/{owner}/{repo}/events", list[Event])

    def list_org_events(self, org: str) -> list[Event]:
        return request_endpoint(self.client, f"/orgs/{org}/events", list[Event])

    def list_received_events(self, username: str) -> list[Event]:
        """Events received by a user; private ones too when authenticated as that user."""
        return request_endpoint(
            self.client, f"/users/{username}/received_events", list[Event]
        )

    def list_public_received_events(self, username: str) -> list[Event]:
        return request_endpoint(
            self.client, f"/users/{username}/received_events/public", list[Event]
        )

    def list_user_events(self, username: str) -> list[Event]:
        """Events performed by a user; private ones too when authenticated as that user."""
        return request_endpoint(self.client, f"/users/{username}/events", list[Event])

    def list_public_user_events(self, username: str) -> list[Event]:
        return request_endpoint(
            self.client, f"/users/{username}/events/public", list[Event]
        )

    def list_user_org_events(self, username: str, org: str) -> list[Event]:
        """Organization dashboard events, must be authenticated as `username`."""
        return request_endpoint(
            self.client, f"/users/{username}/events/orgs/{org}", list[Event]
        )


class FeedsAPI(EndpointGroup):
    def get_feeds(self) -> Feeds:
        """
        List the Atom feeds available to the caller.
        GitHub Docs:
        https://docs.github.com/en/rest/activity/feeds#get-feeds
        """
        return request_endpoint(self.client, "/feeds", Feeds)


class NotificationsAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/activity/notifications
    """

    def list_notifications(
        self,
        all: bool | None = None,
        participating: bool | None = None,
        since: str | None = None,
        before: str | None = None,
    ) -> list[Notification]:
        """
        List notifications for the authenticated user.
        :param all: Also show notifications marked as read
        :param participating: Only notifications where the user is directly participating or mentioned
        :param since: ISO 8601 timestamp, only notifications updated after it
        :param before: ISO 8601 timestamp, only notifications updated before it
        """
        params = {
            "all": all,
            "participating": participating,
            "since": since,
            "before": before,
        }
        return request_endpoint(
            self.client, build_endpoint("/notifications", params), list[Notification]
        )

    def list_repo_notifications(
        self,
        owner: str,
        repo: str,
        all: bool | None = None,
        participating: bool | None = None,
        since: str | None = None,
        before: str | None = None,
    ) -> list[Notification]:
        params = {
            "all": all,
            "participating": participating,
            "since": since,
            "before": before,
        }
        url = build_endpoint(f"/repos/{owner}/{repo}/notifications", params)
        return request_endpoint(self.client, url, list[Notification])

    def mark_as_read(self, last_read_at: str) -> None:
        """Mark every notification updated before `last_read_at` as read."""
        url = build_endpoint("/notifications", {"last_read_at": last_read_at})
        self._empty("PUT", url)

    def mark_repo_as_read(self, owner: str, repo: str, last_read_at: str) -> None:
        url = build_endpoint(
            f"/repos/{owner}/{repo}/notifications", {"last_read_at": last_read_at}
        )
        self._empty("PUT", url)

    def get_thread(self, thread_id: str) -> Notification:
        return request_endpoint(
            self.client, f"/notifications/threads/{thread_id}", Notification
        )

    def mark_thread_as_read(self, thread_id: str) -> None:
        self._empty("PATCH", f"/notifications/threads/{thread_id}")

    def get_thread_subscription(self, thread_id: str) -> Subscription:
        return request_endpoint(
            self.client, f"/notifications/threads/{thread_id}/subscription", Subscription
        )

    def set_thread_subscription(
        self, thread_id: str, subscribed: bool, ignored: bool
    ) -> Subscription:
        """
        Subscribe to (or ignore) a notification thread.
        GitHub Docs:
        https://docs.github.com/en/rest/activity/notifications#set-a-thread-subscription
        """
        url = build_endpoint(
            f"/notifications/threads/{thread_id}/subscription",
            {"subscribed": subscribed, "ignored": ignored},
        )
        resp = self.client.put(url)
        return parse_response(resp, Subscription)

    def delete_thread_subscription(self, thread_id: str) -> None:
        self._empty("DELETE", f"/notifications/threads/{thread_id}/subscription")


class StarringAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/activity/starring
    """

    def _star_headers(self) -> dict[str, str]:
        return self._headers_with({"Accept": MediaTypes.STAR.value})

    @staticmethod
    def _starred_endpoint(
        username: str | None, sort: StarSort | None, direction: Direction | None
    ) -> str:
        path = f"/users/{username}/starred" if username else "/user/starred"
        return build_endpoint(path, {"sort": sort, "direction": direction})

    def list_stargazers(self, owner: str, repo: str) -> list[User]:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/stargazers", list[User])

    def list_stargazers_with_timestamps(self, owner: str, repo: str) -> list[Stargazer]:
        """List stargazers along with when they starred the repository."""
        return request_endpoint(
            self.client,
            f"/repos/{owner}/{repo}/stargazers",
            list[Stargazer],
            self._star_headers(),
        )

    def list_starred(
        self,
        username: str | None = None,
        sort: StarSort | None = None,
        direction: Direction | None = None,
    ) -> list[Repository]:
        """
        List repositories starred by `username`, or by the authenticated user when omitted.
        """
        url = self._starred_endpoint(username, sort, direction)
        return request_endpoint(self.client, url, list[Repository])

    def list_starred_with_timestamps(
        self,
        username: str | None = None,
        sort: StarSort | None = None,
        direction: Direction | None = None,
    ) -> list[StarredRepository]:
        url = self._starred_endpoint(username, sort, direction)
        return request_endpoint(
            self.client, url, list[StarredRepository], self._star_headers()
        )

    def is_starred(self, owner: str, repo: str) -> bool:
        """Check if the authenticated user starred a repository."""
        return self._boolean(f"/user/starred/{owner}/{repo}")

    def star(self, owner: str, repo: str) -> None:
        self._empty("PUT", f"/user/starred/{owner}/{repo}")

    def unstar(self, owner: str, repo: str) -> None:
        self._empty("DELETE", f"/user/starred/{owner}/{repo}")


class WatchingAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/activity/watching
    """

    def list_watchers(self, owner: str, repo: str) -> list[User]:
        return request_endpoint(self.client, f"/repos/{owner}/{repo}/subscribers", list[User])

    def list_watched(self, username: str | None = None) -> list[Repository]:
        """List repositories watched by `username`, or by the authenticated user when omitted."""
        path = f"/users/{username}/subscriptions" if username else "/user/subscriptions"
        return request_endpoint(self.client, path, list[Repository])

    def get_repo_subscription(self, owner: str, repo: str) -> Subscription:
        return request_endpoint(
            self.client, f"/repos/{owner}/{repo}/subscription", Subscription
        )

    def set_repo_subscription(
        self, owner: str, repo: str, subscribed: bool, ignored: bool
    ) -> Subscription:
        """
        Watch (subscribed) or ignore (ignored) a repository.
        GitHub Docs:
        https://docs.github.com/en/rest/activity/watching#set-a-repository-subscription
        """
        resp = self.client.put_body(
            f"/repos/{owner}/{repo}/subscription",
            {"subscribed": subscribed, "ignored": ignored},
        )
        return parse_response(resp, Subscription)

    def delete_repo_subscription(self, owner: str, repo: str) -> None:
        self._empty("DELETE", f"/repos/{owner}/{repo}/subscription")

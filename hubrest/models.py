"""
Response models shared across many GitHub API resource groups.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """Base for response models: unknown keys are ignored, aliases and names both accepted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class Direction(StrEnum):
    """Sorting direction query parameter"""

    ASCENDING = "asc"
    DESCENDING = "desc"


class Permissions(GitHubModel):
    admin: bool
    push: bool
    pull: bool


class User(GitHubModel):
    """Sub-component of many responses and the response type of some endpoints"""

    login: str
    id: int
    avatar_url: str
    gravatar_id: str | None = None
    url: str
    html_url: str | None = None
    followers_url: str | None = None
    following_url: str | None = None
    gists_url: str | None = None
    starred_url: str | None = None
    subscriptions_url: str | None = None
    organizations_url: str | None = None
    repos_url: str | None = None
    events_url: str | None = None
    received_events_url: str | None = None
    user_type: str | None = Field(default=None, alias="type")
    site_admin: bool | None = None


class Repository(GitHubModel):
    id: int
    name: str
    url: str
    owner: User | None = None
    full_name: str | None = None
    description: str | None = None
    private: bool | None = None
    fork: bool | None = None
    html_url: str | None = None
    archive_url: str | None = None
    assignees_url: str | None = None
    blobs_url: str | None = None
    branches_url: str | None = None
    clone_url: str | None = None
    collaborators_url: str | None = None
    comments_url: str | None = None
    commits_url: str | None = None
    compare_url: str | None = None
    contents_url: str | None = None
    contributors_url: str | None = None
    deployments_url: str | None = None
    downloads_url: str | None = None
    events_url: str | None = None
    forks_url: str | None = None
    git_commits_url: str | None = None
    git_refs_url: str | None = None
    git_tags_url: str | None = None
    git_url: str | None = None
    hooks_url: str | None = None
    issue_comment_url: str | None = None
    issue_events_url: str | None = None
    issues_url: str | None = None
    keys_url: str | None = None
    labels_url: str | None = None
    languages_url: str | None = None
    merges_url: str | None = None
    milestones_url: str | None = None
    mirror_url: str | None = None
    notifications_url: str | None = None
    pulls_url: str | None = None
    releases_url: str | None = None
    ssh_url: str | None = None
    stargazers_url: str | None = None
    statuses_url: str | None = None
    subscribers_url: str | None = None
    subscription_url: str | None = None
    svn_url: str | None = None
    tags_url: str | None = None
    teams_url: str | None = None
    trees_url: str | None = None
    homepage: str | None = None
    language: str | None = None
    forks_count: int | None = None
    stargazers_count: int | None = None
    watchers_count: int | None = None
    size: int | None = None
    default_branch: str | None = None
    open_issues_count: int | None = None
    has_issues: bool | None = None
    has_wiki: bool | None = None
    has_pages: bool | None = None
    has_downloads: bool | None = None
    pushed_at: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    permissions: Permissions | None = None


class Comment(GitHubModel):
    """Comment on an issue or a gist"""

    id: int
    url: str
    html_url: str | None = None
    body: str
    user: User
    created_at: str
    updated_at: str


class Subscription(GitHubModel):
    """Returned by the notification thread and repository watching endpoints"""

    subscribed: bool
    ignored: bool
    reason: str | None = None
    created_at: str | None = None
    url: str
    # Set by the notifications endpoints
    thread_url: str | None = None
    # Set by the watching endpoints
    repository_url: str | None = None

#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import json

import pytest

from conftest import StubSession
from hubrest.client import Client
from hubrest.issues import (
    ANY,
    NONE,
    IssueCreate,
    IssueEdit,
    IssueFilter,
    IssuesAPI,
    IssueSort,
    IssueState,
    MilestoneParam,
    MilestoneSort,
)
from hubrest.models import Direction

API = "https://api.github.com"
REPO = f"{API}/repos/octocat/Hello-World"


@pytest.fixture
def issues(client: Client) -> IssuesAPI:
    return IssuesAPI(client)


@pytest.fixture
def label_json() -> dict:
    return {"id": 208045946, "url": f"{REPO}/labels/bug", "name": "bug", "color": "f29513", "default": True}


@pytest.fixture
def milestone_json(user_json: dict) -> dict:
    return {
        "url": f"{REPO}/milestones/1",
        "html_url": "https://github.com/octocat/Hello-World/milestones/v1.0",
        "labels_url": f"{REPO}/milestones/1/labels",
        "id": 1002604,
        "number": 1,
        "state": "open",
        "title": "v1.0",
        "description": "Tracking milestone for version 1.0",
        "creator": user_json,
        "open_issues": 4,
        "closed_issues": 8,
        "created_at": "2011-04-10T20:09:31Z",
        "updated_at": "2014-03-03T18:58:10Z",
        "closed_at": None,
        "due_on": "2012-10-09T23:39:01Z",
    }


@pytest.fixture
def issue_json(user_json: dict, label_json: dict, milestone_json: dict) -> dict:
    return {
        "id": 1,
        "url": f"{REPO}/issues/1347",
        "repository_url": REPO,
        "labels_url": f"{REPO}/issues/1347/labels{{/name}}",
        "comments_url": f"{REPO}/issues/1347/comments",
        "events_url": f"{REPO}/issues/1347/events",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347",
        "number": 1347,
        "state": "open",
        "title": "Found a bug",
        "body": "I'm having a problem with this.",
        "user": user_json,
        "labels": [label_json],
        "assignee": user_json,
        "assignees": [user_json],
        "milestone": milestone_json,
        "locked": False,
        "comments": 0,
        "pull_request": {
            "url": f"{REPO}/pulls/1347",
            "html_url": "https://github.com/octocat/Hello-World/pull/1347",
            "diff_url": "https://github.com/octocat/Hello-World/pull/1347.diff",
            "patch_url": "https://github.com/octocat/Hello-World/pull/1347.patch",
        },
        "closed_at": None,
        "created_at": "2011-04-22T13:33:48Z",
        "updated_at": "2011-04-22T13:33:48Z",
    }


@pytest.fixture
def comment_json(user_json: dict) -> dict:
    return {
        "id": 1,
        "url": f"{REPO}/issues/comments/1",
        "html_url": "https://github.com/octocat/Hello-World/issues/1347#issuecomment-1",
        "body": "Me too",
        "user": user_json,
        "created_at": "2011-04-14T16:00:49Z",
        "updated_at": "2011-04-14T16:00:49Z",
    }


# Issues
@pytest.mark.parametrize(
    "kwargs, path",
    [({}, "/issues"), ({"user_only": True}, "/user/issues"), ({"org": "github"}, "/orgs/github/issues")],
)
def test_list_issues_scopes(issues: IssuesAPI, session: StubSession, make_response, issue_json: dict, kwargs, path):
    session.enqueue(make_response(200, [issue_json]))
    result = issues.list_issues(**kwargs)
    assert session.calls[0]["url"] == API + path
    assert result[0].pull_request.diff_url.endswith(".diff")


def test_list_issues_filters(issues: IssuesAPI, session: StubSession, make_response):
    session.enqueue(make_response(200, []))
    issues.list_issues(
        filter=IssueFilter.MENTIONED,
        state=IssueState.ALL,
        labels=["bug", "ui"],
        sort=IssueSort.COMMENTS,
        direction=Direction.ASCENDING,
    )
    assert session.calls[0]["url"] == (
        f"{API}/issues?filter=mentioned&state=all&labels=bug%2Cui&sort=comments&direction=asc"
    )


def test_list_repo_issues_special_values(issues: IssuesAPI, session: StubSession, make_response, issue_json: dict):
    session.enqueue(make_response(200, [issue_json]), make_response(200, []))
    result = issues.list_repo_issues("octocat", "Hello-World", milestone=ANY, assignee=NONE)
    issues.list_repo_issues("octocat", "Hello-World", milestone=1, creator="octocat", mentioned="hubot")
    assert session.calls[0]["url"] == f"{REPO}/issues?milestone=%2A&assignee=none"
    assert session.calls[1]["url"] == f"{REPO}/issues?milestone=1&creator=octocat&mentioned=hubot"
    assert result[0].milestone.title == "v1.0"
    assert result[0].labels[0].default is True


def test_create_issue(issues: IssuesAPI, session: StubSession, make_response, issue_json: dict):
    session.enqueue(make_response(201, issue_json))
    created = issues.create_issue(
        "octocat", "Hello-World", IssueCreate(title="Found a bug", labels=["bug"])
    )
    assert created.number == 1347
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == f"{REPO}/issues"
    assert json.loads(session.calls[0]["data"]) == {"title": "Found a bug", "labels": ["bug"]}


def test_edit_issue_only_sends_set_fields(issues: IssuesAPI, session: StubSession, make_response, issue_json: dict):
    session.enqueue(make_response(200, issue_json))
    issues.edit_issue("octocat", "Hello-World", 1347, IssueEdit(state=IssueState.CLOSED))
    assert session.calls[0]["method"] == "PATCH"
    assert json.loads(session.calls[0]["data"]) == {"state": "closed"}


def test_lock_unlock(issues: IssuesAPI, session: StubSession, make_response):
    session.enqueue(make_response(204), make_response(204))
    issues.lock_issue("octocat", "Hello-World", 1347)
    issues.unlock_issue("octocat", "Hello-World", 1347)
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("PUT", f"{REPO}/issues/1347/lock"),
        ("DELETE", f"{REPO}/issues/1347/lock"),
    ]


# Assignees
def test_assignees(issues: IssuesAPI, session: StubSession, make_response, issue_json: dict, user_json: dict):
    session.enqueue(
        make_response(200, [user_json]),
        make_response(204),
        make_response(404, {"message": "Not Found"}),
        make_response(201, issue_json),
        make_response(200, issue_json),
    )
    assert issues.list_assignees("octocat", "Hello-World")[0].login == "octocat"
    assert issues.is_assignee("octocat", "Hello-World", "octocat") is True
    assert issues.is_assignee("octocat", "Hello-World", "nobody") is False
    issues.add_assignees("octocat", "Hello-World", 1347, ["hubot"])
    issues.remove_assignees("octocat", "Hello-World", 1347, ["hubot"])
    assert session.calls[3]["method"] == "POST"
    assert session.calls[4]["method"] == "DELETE"
    assert json.loads(session.calls[4]["data"]) == {"assignees": ["hubot"]}


# Comments
def test_comments(issues: IssuesAPI, session: StubSession, make_response, comment_json: dict):
    session.enqueue(
        make_response(200, [comment_json]),
        make_response(200, [comment_json]),
        make_response(201, comment_json),
        make_response(200, comment_json),
        make_response(204),
    )
    issues.list_issue_comments("octocat", "Hello-World", 1347, since="2011-04-14T16:00:49Z")
    issues.list_repo_comments("octocat", "Hello-World", direction=Direction.DESCENDING)
    issues.create_comment("octocat", "Hello-World", 1347, "Me too")
    issues.edit_comment("octocat", "Hello-World", 1, "Me too!")
    issues.delete_comment("octocat", "Hello-World", 1)
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("GET", f"{REPO}/issues/1347/comments?since=2011-04-14T16%3A00%3A49Z"),
        ("GET", f"{REPO}/issues/comments?direction=desc"),
        ("POST", f"{REPO}/issues/1347/comments"),
        ("PATCH", f"{REPO}/issues/comments/1"),
        ("DELETE", f"{REPO}/issues/comments/1"),
    ]


# Events
def test_issue_events(issues: IssuesAPI, session: StubSession, make_response, user_json: dict, issue_json: dict):
    event = {
        "id": 6430295168,
        "url": f"{REPO}/issues/events/6430295168",
        "actor": user_json,
        "event": "closed",
        "commit_id": None,
        "commit_url": None,
        "created_at": "2022-04-13T20:49:34Z",
    }
    session.enqueue(make_response(200, [event]), make_response(200, event | {"issue": issue_json}))
    listed = issues.list_issue_events("octocat", "Hello-World", 1347)
    single = issues.get_issue_event("octocat", "Hello-World", 6430295168)
    assert listed[0].issue is None
    assert single.issue.number == 1347
    assert session.calls[1]["url"] == f"{REPO}/issues/events/6430295168"


# Labels
def test_labels(issues: IssuesAPI, session: StubSession, make_response, label_json: dict):
    session.enqueue(
        make_response(201, label_json),
        make_response(200, label_json),
        make_response(200, [label_json]),
        make_response(200, []),
        make_response(200, [label_json]),
        make_response(204),
        make_response(204),
    )
    issues.create_label("octocat", "Hello-World", "bug", "f29513")
    issues.update_label("octocat", "Hello-World", "bug", color="b01f26")
    issues.add_issue_labels("octocat", "Hello-World", 1347, ["bug"])
    assert issues.remove_issue_label("octocat", "Hello-World", 1347, "bug") == []
    issues.replace_issue_labels("octocat", "Hello-World", 1347, ["bug"])
    issues.remove_all_issue_labels("octocat", "Hello-World", 1347)
    issues.delete_label("octocat", "Hello-World", "bug")
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("POST", f"{REPO}/labels"),
        ("PATCH", f"{REPO}/labels/bug"),
        ("POST", f"{REPO}/issues/1347/labels"),
        ("DELETE", f"{REPO}/issues/1347/labels/bug"),
        ("PUT", f"{REPO}/issues/1347/labels"),
        ("DELETE", f"{REPO}/issues/1347/labels"),
        ("DELETE", f"{REPO}/labels/bug"),
    ]
    assert json.loads(session.calls[0]["data"]) == {"name": "bug", "color": "f29513"}
    assert json.loads(session.calls[1]["data"]) == {"color": "b01f26"}


def test_list_milestone_labels(issues: IssuesAPI, session: StubSession, make_response, label_json: dict):
    session.enqueue(make_response(200, [label_json]))
    labels = issues.list_milestone_labels("octocat", "Hello-World", 1)
    assert labels[0].color == "f29513"
    assert session.calls[0]["url"] == f"{REPO}/milestones/1/labels"


# Milestones
def test_milestones(issues: IssuesAPI, session: StubSession, make_response, milestone_json: dict):
    session.enqueue(
        make_response(200, [milestone_json]),
        make_response(201, milestone_json),
        make_response(200, milestone_json),
        make_response(204),
    )
    listed = issues.list_milestones(
        "octocat", "Hello-World", state=IssueState.OPEN, sort=MilestoneSort.COMPLETENESS
    )
    issues.create_milestone("octocat", "Hello-World", MilestoneParam(title="v1.0", due_on="2012-10-09T23:39:01Z"))
    issues.update_milestone("octocat", "Hello-World", 1, MilestoneParam(state=IssueState.CLOSED))
    issues.delete_milestone("octocat", "Hello-World", 1)
    assert listed[0].open_issues == 4
    assert session.calls[0]["url"] == f"{REPO}/milestones?state=open&sort=completeness"
    assert json.loads(session.calls[1]["data"]) == {"title": "v1.0", "due_on": "2012-10-09T23:39:01Z"}
    assert json.loads(session.calls[2]["data"]) == {"state": "closed"}
    assert session.calls[3]["method"] == "DELETE"


def test_create_milestone_requires_title(issues: IssuesAPI, session: StubSession):
    with pytest.raises(ValueError):
        issues.create_milestone("octocat", "Hello-World", MilestoneParam(description="no title"))
    assert session.calls == []

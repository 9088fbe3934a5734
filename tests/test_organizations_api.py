#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import json

import pytest

from conftest import StubSession
from hubrest.client import Client
from hubrest.organizations import (
    MemberFilter,
    MemberRole,
    MembershipRole,
    MembershipState,
    OrganizationEditParam,
    OrganizationsAPI,
)

API = "https://api.github.com"


@pytest.fixture
def orgs(client: Client) -> OrganizationsAPI:
    return OrganizationsAPI(client)


@pytest.fixture
def org_json() -> dict:
    return {
        "login": "github",
        "id": 1,
        "url": f"{API}/orgs/github",
        "repos_url": f"{API}/orgs/github/repos",
        "avatar_url": "https://github.com/images/error/octocat_happy.gif",
        "description": "A great organization",
        "name": "github",
        "public_repos": 2,
        "type": "Organization",
        "plan": {"name": "Medium", "space": 400, "private_repos": 20},
    }


@pytest.fixture
def membership_json(org_json: dict, user_json: dict) -> dict:
    return {
        "url": f"{API}/orgs/github/memberships/octocat",
        "state": "pending",
        "role": "admin",
        "organization_url": f"{API}/orgs/github",
        "organization": org_json,
        "user": user_json,
    }


@pytest.mark.parametrize(
    "method, args, path",
    [
        ("list_own_orgs", (), "/user/orgs"),
        ("list_all_orgs", (), "/organizations"),
        ("list_all_orgs", (135,), "/organizations?since=135"),
        ("list_user_orgs", ("octocat",), "/users/octocat/orgs"),
    ],
)
def test_org_listings(orgs: OrganizationsAPI, session: StubSession, make_response, org_json: dict, method, args, path):
    session.enqueue(make_response(200, [{"login": "github", "id": 1, "url": f"{API}/orgs/github"}]))
    result = getattr(orgs, method)(*args)
    assert session.calls[0]["url"] == API + path
    assert result[0].login == "github"
    assert result[0].plan is None


def test_get_and_edit_org(orgs: OrganizationsAPI, session: StubSession, make_response, org_json: dict):
    session.enqueue(make_response(200, org_json), make_response(200, org_json))
    org = orgs.get_org("github")
    assert org.org_type == "Organization"
    assert org.plan.private_repos == 20
    orgs.edit_org("github", OrganizationEditParam(billing_email="mona@github.com", location="San Francisco"))
    assert session.calls[1]["method"] == "PATCH"
    assert json.loads(session.calls[1]["data"]) == {
        "billing_email": "mona@github.com",
        "location": "San Francisco",
    }


def test_list_members_query(orgs: OrganizationsAPI, session: StubSession, make_response, user_json: dict):
    session.enqueue(make_response(200, [user_json]))
    members = orgs.list_members("github", filter=MemberFilter.TWO_FA_DISABLED, role=MemberRole.ADMIN)
    assert members[0].login == "octocat"
    assert session.calls[0]["url"] == f"{API}/orgs/github/members?filter=2fa_disabled&role=admin"


def test_membership_checks(orgs: OrganizationsAPI, session: StubSession, make_response):
    session.enqueue(
        make_response(204),
        make_response(302, headers={"Location": f"{API}/orgs/github/public_members/octocat"}),
        make_response(404, {"message": "Not Found"}),
    )
    assert orgs.is_member("github", "octocat") is True
    assert orgs.is_member("github", "octocat") is False
    assert orgs.is_public_member("github", "octocat") is False
    assert len(session.calls) == 3


def test_member_updates(orgs: OrganizationsAPI, session: StubSession, make_response):
    session.enqueue(*[make_response(204) for _ in range(4)])
    orgs.remove_member("github", "octocat")
    orgs.publicize_membership("github", "octocat")
    orgs.conceal_membership("github", "octocat")
    orgs.remove_membership("github", "octocat")
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("DELETE", f"{API}/orgs/github/members/octocat"),
        ("PUT", f"{API}/orgs/github/public_members/octocat"),
        ("DELETE", f"{API}/orgs/github/public_members/octocat"),
        ("DELETE", f"{API}/orgs/github/memberships/octocat"),
    ]


def test_set_membership(orgs: OrganizationsAPI, session: StubSession, make_response, membership_json: dict):
    session.enqueue(make_response(200, membership_json))
    membership = orgs.set_membership("github", "octocat", MembershipRole.ADMIN)
    assert membership.state == MembershipState.PENDING
    assert membership.organization.login == "github"
    assert session.calls[0]["method"] == "PUT"
    assert json.loads(session.calls[0]["data"]) == {"role": "admin"}


def test_own_memberships(orgs: OrganizationsAPI, session: StubSession, make_response, membership_json: dict):
    active = membership_json | {"state": "active"}
    session.enqueue(
        make_response(200, [membership_json]),
        make_response(200, membership_json),
        make_response(200, active),
    )
    orgs.list_own_memberships(MembershipState.PENDING)
    orgs.get_own_membership("github")
    result = orgs.activate_own_membership("github")
    assert result.state == MembershipState.ACTIVE
    assert [(c["method"], c["url"]) for c in session.calls] == [
        ("GET", f"{API}/user/memberships/orgs?state=pending"),
        ("GET", f"{API}/user/memberships/orgs/github"),
        ("PATCH", f"{API}/user/memberships/orgs/github"),
    ]
    assert json.loads(session.calls[2]["data"]) == {"state": "active"}

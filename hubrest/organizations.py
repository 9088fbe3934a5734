#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# Requires-Python: >=3.11
"""
Organizations and organization members endpoints.
"""

import logging
from enum import StrEnum

from pydantic import Field

from .base import EndpointGroup
from .models import GitHubModel, User
from .utils import build_endpoint, parse_response, request_endpoint

logger = logging.getLogger(__name__)


class MemberFilter(StrEnum):
    # Members without two-factor authentication, owners only
    TWO_FA_DISABLED = "2fa_disabled"
    ALL = "all"


class MemberRole(StrEnum):
    """Role filter of the member listing"""

    ALL = "all"
    ADMIN = "admin"
    MEMBER = "member"


class MembershipRole(StrEnum):
    """Role given when adding or updating a membership"""

    ADMIN = "admin"
    MEMBER = "member"


class MembershipState(StrEnum):
    ACTIVE = "active"
    PENDING = "pending"


class Plan(GitHubModel):
    name: str
    space: int
    private_repos: int


class Organization(GitHubModel):
    """
    Organization as returned by GET /orgs/{org}.
    The listings only carry login, id, url, the *_url links, avatar_url and description.
    """

    login: str
    id: int
    url: str
    repos_url: str | None = None
    events_url: str | None = None
    hooks_url: str | None = None
    issues_url: str | None = None
    members_url: str | None = None
    public_members_url: str | None = None
    avatar_url: str | None = None
    description: str | None = None
    name: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    public_repos: int | None = None
    public_gists: int | None = None
    followers: int | None = None
    following: int | None = None
    html_url: str | None = None
    created_at: str | None = None
    org_type: str | None = Field(default=None, alias="type")
    # Only visible to organization owners
    total_private_repos: int | None = None
    owned_private_repos: int | None = None
    private_gists: int | None = None
    disk_usage: int | None = None
    collaborators: int | None = None
    billing_email: str | None = None
    plan: Plan | None = None


class OrganizationEditParam(GitHubModel):
    """Body of PATCH /orgs/{org}; unset fields are left unchanged"""

    billing_email: str | None = None
    company: str | None = None
    email: str | None = None
    location: str | None = None
    name: str | None = None
    description: str | None = None


class OrgMembership(GitHubModel):
    url: str
    state: MembershipState
    role: str
    organization_url: str
    organization: Organization
    user: User | None = None


class OrganizationsAPI(EndpointGroup):
    """
    GitHub Docs:
    https://docs.github.com/en/rest/orgs
    """

    def list_own_orgs(self) -> list[Organization]:
        """List organizations of the authenticated user."""
        return request_endpoint(self.client, "/user/orgs", list[Organization])

    def list_all_orgs(self, since: int | None = None) -> list[Organization]:
        """
        List all organizations in order of creation.
        :param since: Only organizations with an ID greater than this one
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/orgs#list-organizations
        """
        url = build_endpoint("/organizations", {"since": since})
        return request_endpoint(self.client, url, list[Organization])

    def list_user_orgs(self, username: str) -> list[Organization]:
        """List public organization memberships of a user."""
        return request_endpoint(self.client, f"/users/{username}/orgs", list[Organization])

    def get_org(self, org: str) -> Organization:
        return request_endpoint(self.client, f"/orgs/{org}", Organization)

    def edit_org(self, org: str, param: OrganizationEditParam) -> Organization:
        resp = self.client.patch_body(f"/orgs/{org}", param)
        return parse_response(resp, Organization)

    ## Members
    def list_members(
        self,
        org: str,
        filter: MemberFilter | None = None,
        role: MemberRole | None = None,
    ) -> list[User]:
        """
        List members of an organization. Concealed members are included only
        when the authenticated user is a member too.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members#list-organization-members
        """
        url = build_endpoint(f"/orgs/{org}/members", {"filter": filter, "role": role})
        return request_endpoint(self.client, url, list[User])

    def is_member(self, org: str, username: str) -> bool:
        """
        Check organization membership.
        GitHub answers 302 when the requester is not a member of `org` itself;
        302 is not followed by the client, so it reads as False here.
        """
        return self._boolean(f"/orgs/{org}/members/{username}")

    def remove_member(self, org: str, username: str) -> None:
        self._empty("DELETE", f"/orgs/{org}/members/{username}")
        logger.info("Removed %s from organization %s", username, org)

    def list_public_members(self, org: str) -> list[User]:
        return request_endpoint(self.client, f"/orgs/{org}/public_members", list[User])

    def is_public_member(self, org: str, username: str) -> bool:
        return self._boolean(f"/orgs/{org}/public_members/{username}")

    def publicize_membership(self, org: str, username: str) -> None:
        self._empty("PUT", f"/orgs/{org}/public_members/{username}")

    def conceal_membership(self, org: str, username: str) -> None:
        self._empty("DELETE", f"/orgs/{org}/public_members/{username}")

    ## Memberships
    def get_membership(self, org: str, username: str) -> OrgMembership:
        return request_endpoint(
            self.client, f"/orgs/{org}/memberships/{username}", OrgMembership
        )

    def set_membership(
        self, org: str, username: str, role: MembershipRole = MembershipRole.MEMBER
    ) -> OrgMembership:
        """
        Add a member (invitation, state `pending`) or update the role of an existing one.
        GitHub Docs:
        https://docs.github.com/en/rest/orgs/members#set-organization-membership-for-a-user
        """
        resp = self.client.put_body(
            f"/orgs/{org}/memberships/{username}", {"role": role.value}
        )
        return parse_response(resp, OrgMembership)

    def remove_membership(self, org: str, username: str) -> None:
        self._empty("DELETE", f"/orgs/{org}/memberships/{username}")

    def list_own_memberships(
        self, state: MembershipState | None = None
    ) -> list[OrgMembership]:
        url = build_endpoint("/user/memberships/orgs", {"state": state})
        return request_endpoint(self.client, url, list[OrgMembership])

    def get_own_membership(self, org: str) -> OrgMembership:
        return request_endpoint(
            self.client, f"/user/memberships/orgs/{org}", OrgMembership
        )

    def activate_own_membership(self, org: str) -> OrgMembership:
        """Accept a pending invitation to an organization."""
        resp = self.client.patch_body(
            f"/user/memberships/orgs/{org}", {"state": MembershipState.ACTIVE.value}
        )
        return parse_response(resp, OrgMembership)

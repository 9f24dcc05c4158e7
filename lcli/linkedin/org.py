"""Organization endpoints and organization statistics."""

from __future__ import annotations

from typing import Any, Mapping

from lcli.linkedin.base import (
    Doer,
    _error_context,
    _int_of,
    _list,
    _object,
    _query_escape,
    _str_of,
    check_error,
    decode_json,
)
from lcli.model import NotFoundError, Organization, OrgFollowerStats, OrgPageStats


def _to_org(raw: Mapping[str, Any]) -> Organization:
    return Organization(
        id=_int_of(raw, "id"),
        name=_str_of(raw, "localizedName"),
        vanity_name=_str_of(raw, "vanityName"),
        description=_str_of(raw, "localizedDescription"),
        logo_url=_str_of(raw, "logoV2"),
        website=_str_of(raw, "localizedWebsite"),
        follower_count=_int_of(raw, "followerCount"),
    )


def _segments(value: Any) -> dict[str, int]:
    counts: dict[str, int] = {}
    for item in _list(value):
        segment = _object(item)
        counts[_str_of(segment, "segment")] = _int_of(segment, "followerCounts")
    return counts


def _to_follower_stats(raw: Mapping[str, Any]) -> OrgFollowerStats:
    organic = _int_of(raw, "organicFollowerCount")
    paid = _int_of(raw, "paidFollowerCount")
    return OrgFollowerStats(
        organic_count=organic,
        paid_count=paid,
        total_count=organic + paid,
        by_function=_segments(raw.get("followerCountsByFunction")),
        by_seniority=_segments(raw.get("followerCountsBySeniority")),
    )


def _to_page_stats(raw: Mapping[str, Any]) -> OrgPageStats:
    return OrgPageStats(
        views=_int_of(raw, "views"),
        unique_visitors=_int_of(raw, "uniqueVisitors"),
        clicks=_int_of(raw, "clicks"),
        period=_str_of(raw, "timeRange"),
    )


class OrgService:
    """Access to LinkedIn organization endpoints."""

    def __init__(self, doer: Doer) -> None:
        self._doer = doer

    def get(self, org_id: int) -> Organization:
        """An organization by its numeric ID."""
        with _error_context(f"get org {org_id}"):
            resp = self._doer.do("GET", f"/organizations/{int(org_id)}", None)
            check_error(resp)
            return _to_org(_object(decode_json(resp)))

    def get_by_vanity(self, vanity_name: str) -> Organization:
        """An organization by its vanity name (URL slug)."""
        path = f"/organizations?q=vanityName&vanityName={_query_escape(vanity_name)}"
        prefix = f"get org by vanity {vanity_name}"
        with _error_context(prefix):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            elements = _list(_object(decode_json(resp)).get("elements"))
            if not elements:
                raise NotFoundError(f"{prefix}: not found")
            return _to_org(_object(elements[0]))

    def follower_stats(self, org_urn: str) -> OrgFollowerStats:
        """Follower statistics for an organization."""
        path = (
            "/organizationalEntityFollowerStatistics?q=organizationalEntity&organizationalEntity="
            + _query_escape(org_urn)
        )
        with _error_context(f"follower stats for {org_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            elements = _list(_object(decode_json(resp)).get("elements"))
            if not elements:
                return OrgFollowerStats()
            return _to_follower_stats(_object(elements[0]))

    def page_stats(self, org_urn: str) -> OrgPageStats:
        """Page view statistics for an organization."""
        path = "/organizationPageStatistics?q=organization&organization=" + _query_escape(org_urn)
        with _error_context(f"page stats for {org_urn}"):
            resp = self._doer.do("GET", path, None)
            check_error(resp)
            elements = _list(_object(decode_json(resp)).get("elements"))
            if not elements:
                return OrgPageStats()
            return _to_page_stats(_object(elements[0]))